from datetime import date

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query
from fastapi.responses import PlainTextResponse
from fastapi.responses import Response

from codechef_card.api.schemas.card import CardHeatmapResponse
from codechef_card.render.svg import render_card
from codechef_card.services.card_service import build_profile_card
from codechef_card.settings import Settings


router = APIRouter()

MISSING_USER_MESSAGE = "Missing ?user=username"


def get_settings() -> Settings:
    return Settings()


def get_today() -> date:
    """Return the local calendar day the heatmap ends at."""

    return date.today()


def _missing_user_response() -> PlainTextResponse:
    return PlainTextResponse(MISSING_USER_MESSAGE, status_code=400)


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.get("/api/codechef", response_model=None)
def get_codechef_card(
    user: str | None = Query(default=None),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Return the profile card and activity heatmap as an SVG image."""

    username = (user or "").strip()
    if not username:
        return _missing_user_response()

    card = build_profile_card(username=username, today=today, settings=settings)
    return Response(
        content=render_card(card),
        media_type="image/svg+xml",
        headers={"Cache-Control": settings.cache_control},
    )


@router.get("/api/codechef/heatmap", response_model=None)
def get_codechef_heatmap(
    user: str | None = Query(default=None),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_settings),
) -> CardHeatmapResponse | PlainTextResponse:
    """Return the same card data as JSON, with every cell's geometry."""

    username = (user or "").strip()
    if not username:
        return _missing_user_response()

    card = build_profile_card(username=username, today=today, settings=settings)
    return CardHeatmapResponse.from_card(card)

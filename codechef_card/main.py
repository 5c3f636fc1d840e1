from fastapi import FastAPI

from codechef_card.api.routes.card import router
from codechef_card.core.observability import init_logging
from codechef_card.core.observability import init_sentry
from codechef_card.settings import Settings


def create_app() -> FastAPI:
    """Build the FastAPI application with logging and Sentry configured."""

    settings = Settings()
    init_logging(settings)
    init_sentry(settings)

    application = FastAPI(title="CodeChef Card")
    application.include_router(router)
    return application


app = create_app()

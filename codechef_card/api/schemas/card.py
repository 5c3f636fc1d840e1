from datetime import date
from typing import Literal

from pydantic import BaseModel

from codechef_card.models import ProfileCard
from codechef_card.models import ProfileFields


class HeatmapCellResponse(BaseModel):
    """Single positioned cell in the heatmap response."""

    date: date
    count: int
    x: int
    y: int
    width: int
    height: int
    color: str


class CardHeatmapResponse(BaseModel):
    """JSON rendition of a profile card and its heatmap layout."""

    username: str
    activity_source: Literal["scraped", "fallback"]
    profile: ProfileFields
    total: int
    width: int
    height: int
    cells: list[HeatmapCellResponse]

    @classmethod
    def from_card(cls, card: ProfileCard) -> "CardHeatmapResponse":
        return cls(
            username=card.username,
            activity_source=card.activity_source,
            profile=card.profile,
            total=card.total,
            width=card.layout.width,
            height=card.layout.height,
            cells=[
                HeatmapCellResponse(
                    date=cell.day,
                    count=cell.count,
                    x=cell.x,
                    y=cell.y,
                    width=cell.width,
                    height=cell.height,
                    color=cell.color,
                )
                for cell in card.layout.cells
            ],
        )

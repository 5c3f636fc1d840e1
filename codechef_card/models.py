from collections.abc import Mapping
from datetime import date
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict


ActivityMap = Mapping[date, int]

UNAVAILABLE = "N/A"


class ProfileFields(BaseModel):
    """Scraped profile numbers, each a digit string or the `N/A` sentinel."""

    model_config = ConfigDict(frozen=True)

    rating: str = UNAVAILABLE
    highest_rating: str = UNAVAILABLE
    global_rank: str = UNAVAILABLE
    country_rank: str = UNAVAILABLE


class HeatmapCell(BaseModel):
    """One positioned and colored heatmap square."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    width: int
    height: int
    color: str
    day: date
    count: int


class HeatmapLayout(BaseModel):
    """Column-major heatmap cells plus the canvas they fit in."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    cells: tuple[HeatmapCell, ...]


class ProfileCard(BaseModel):
    """Everything needed to render one profile image."""

    model_config = ConfigDict(frozen=True)

    username: str
    profile: ProfileFields
    layout: HeatmapLayout
    activity_source: Literal["scraped", "fallback"]
    total: int

from datetime import date
from datetime import timedelta
from typing import NamedTuple

from codechef_card.models import ActivityMap
from codechef_card.models import HeatmapCell
from codechef_card.models import HeatmapLayout


GRID_DAYS = 364
GRID_ROWS = 7
GRID_COLS = 52
CELL_SIZE = 12
CELL_GAP = 4
GRID_MARGIN = 5


class ColorTier(NamedTuple):
    lower: int
    upper: int | None
    color: str


# Ranges partition the non-negative integers; `upper` is inclusive.
COLOR_TIERS: tuple[ColorTier, ...] = (
    ColorTier(0, 0, "#0e172a"),
    ColorTier(1, 1, "#38bdf8"),
    ColorTier(2, 3, "#22c55e"),
    ColorTier(4, 6, "#facc15"),
    ColorTier(7, 10, "#fb923c"),
    ColorTier(11, None, "#ef4444"),
)


def tier_for_count(count: int) -> int:
    """Map a daily activity count to a tier index in range 0..5."""

    if count <= 0:
        return 0
    for index, tier in enumerate(COLOR_TIERS):
        if tier.upper is None or count <= tier.upper:
            return index
    return len(COLOR_TIERS) - 1


def color_for_count(count: int) -> str:
    return COLOR_TIERS[tier_for_count(count)].color


def build_day_grid(today: date, days: int = GRID_DAYS) -> list[date]:
    """Return `days` consecutive dates ending at `today`, oldest first."""

    first_day = today - timedelta(days=days - 1)
    return [first_day + timedelta(days=offset) for offset in range(days)]


def total_count(activity: ActivityMap, today: date) -> int:
    return sum(activity.get(day, 0) for day in build_day_grid(today))


def layout_heatmap(
    activity: ActivityMap,
    today: date,
    *,
    cell: int = CELL_SIZE,
    gap: int = CELL_GAP,
    margin: int = GRID_MARGIN,
    cols: int = GRID_COLS,
    rows: int = GRID_ROWS,
) -> HeatmapLayout:
    """Lay out the activity of the last `cols * rows` days as a grid.

    Days fill the grid column by column, oldest first, so day index `i`
    lands at column `i // rows` and row `i % rows`. Days missing from
    `activity` count as zero.
    """

    stride = cell + gap
    cells: list[HeatmapCell] = []
    for index, day in enumerate(build_day_grid(today, days=cols * rows)):
        col, row = divmod(index, rows)
        count = activity.get(day, 0)
        cells.append(
            HeatmapCell(
                x=col * stride + margin,
                y=row * stride + margin,
                width=cell,
                height=cell,
                color=color_for_count(count),
                day=day,
                count=count,
            )
        )

    return HeatmapLayout(
        width=cols * stride + margin,
        height=rows * stride + margin,
        cells=tuple(cells),
    )

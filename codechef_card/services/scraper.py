import re
from datetime import date
from types import MappingProxyType

from codechef_card.models import ActivityMap
from codechef_card.models import ProfileFields
from codechef_card.models import UNAVAILABLE


RATING_PATTERN = re.compile(r'rating-number">(\d+)')
HIGHEST_RATING_PATTERN = re.compile(r'highest-rating">.*?(\d+)')
GLOBAL_RANK_PATTERN = re.compile(r"Global Rank[\s\S]*?(\d+)", re.IGNORECASE)
COUNTRY_RANK_PATTERN = re.compile(r"Country Rank[\s\S]*?(\d+)", re.IGNORECASE)
ACTIVITY_DATE_PATTERN = re.compile(r"\b(20\d{2}-\d{2}-\d{2})\b")

DEFAULT_MIN_ACTIVE_DAYS = 5


def _first_group(pattern: re.Pattern[str], html: str) -> str:
    match = pattern.search(html)
    return match.group(1) if match else UNAVAILABLE


def parse_profile(html: str) -> ProfileFields:
    """Pull rating and rank numbers out of a profile page, best effort."""

    return ProfileFields(
        rating=_first_group(RATING_PATTERN, html),
        highest_rating=_first_group(HIGHEST_RATING_PATTERN, html),
        global_rank=_first_group(GLOBAL_RANK_PATTERN, html),
        country_rank=_first_group(COUNTRY_RANK_PATTERN, html),
    )


def parse_activity(
    html: str, min_active_days: int = DEFAULT_MIN_ACTIVE_DAYS
) -> ActivityMap | None:
    """Count ISO dates mentioned in the page, one per occurrence.

    Returns None when fewer than `min_active_days` distinct days are found,
    which callers treat as a failed scrape.
    """

    counts: dict[date, int] = {}
    for raw_day in ACTIVITY_DATE_PATTERN.findall(html):
        try:
            parsed_day = date.fromisoformat(raw_day)
        except ValueError:
            continue
        counts[parsed_day] = counts.get(parsed_day, 0) + 1

    if len(counts) < min_active_days:
        return None
    return MappingProxyType(counts)

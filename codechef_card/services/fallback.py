"""Deterministic stand-in activity for users whose page cannot be scraped.

The generated map only has to look plausible and stay identical across
requests for the same user and day, because the image is cached and embedded
in READMEs. It is not suitable for anything security related.
"""

from collections.abc import Iterator
from datetime import date
from math import floor
from types import MappingProxyType

from codechef_card.models import ActivityMap
from codechef_card.services.heatmap_service import build_day_grid


MASK_32 = 0xFFFFFFFF
FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
STEP_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK_32


def seed_from_username(username: str) -> int:
    """Hash every character of `username` into a 32-bit seed (FNV-1a)."""

    h = FNV_OFFSET_BASIS
    for char in username:
        h = _imul(h ^ ord(char), FNV_PRIME)
    return h


def seeded_random(seed: int) -> Iterator[float]:
    """Yield an endless stream of floats in [0, 1) from a 32-bit seed."""

    state = seed & MASK_32
    while True:
        state = (state + STEP_INCREMENT) & MASK_32
        t = _imul(state ^ (state >> 15), 1 | state)
        t ^= (t + _imul(t ^ (t >> 7), 61 | t)) & MASK_32
        yield ((t ^ (t >> 14)) & MASK_32) / 4294967296


def generate_fallback_activity(
    username: str, today: date, *, max_count: int = 9
) -> ActivityMap:
    """Build a reproducible activity map for the 364 days ending at `today`.

    Each day, oldest first, takes one draw scaled to `0..max_count`. Zero
    days are left out of the map.
    """

    if not username:
        raise ValueError("username cannot be empty")
    if max_count < 0:
        raise ValueError("max_count must be non-negative")

    draws = seeded_random(seed_from_username(username))
    activity: dict[date, int] = {}
    for day in build_day_grid(today):
        count = floor(next(draws) * (max_count + 1))
        if count > 0:
            activity[day] = count

    return MappingProxyType(activity)

from datetime import date

from codechef_card.services.scraper import parse_activity
from codechef_card.services.scraper import parse_profile


PROFILE_HTML = """
<div class="rating-header">
  <div class="rating-number">1874</div>
  <small>(Highest Rating <span class="highest-rating">Max 2011</span>)</small>
</div>
<ul class="inline-list">
  <li><a href="/ratings/all"><strong>Global Rank</strong></a>
      <strong>4210</strong></li>
  <li><a href="/ratings/all?filterBy=Country"><strong>Country Rank</strong></a>
      <strong>1337</strong></li>
</ul>
"""


def test_parse_profile_extracts_all_fields() -> None:
    profile = parse_profile(PROFILE_HTML)

    assert profile.rating == "1874"
    assert profile.highest_rating == "2011"
    assert profile.global_rank == "4210"
    assert profile.country_rank == "1337"


def test_parse_profile_marks_missing_fields_unavailable() -> None:
    profile = parse_profile('<div class="rating-number">1500</div>')

    assert profile.rating == "1500"
    assert profile.highest_rating == "N/A"
    assert profile.global_rank == "N/A"
    assert profile.country_rank == "N/A"


def test_parse_activity_counts_each_date_occurrence() -> None:
    html = " ".join(
        [
            "2026-02-01",
            "2026-02-01",
            "2026-02-02",
            "2026-02-03",
            "2026-02-04",
            "2026-02-05",
        ]
    )

    activity = parse_activity(html)

    assert activity is not None
    assert activity[date(2026, 2, 1)] == 2
    assert activity[date(2026, 2, 5)] == 1
    assert len(activity) == 5


def test_parse_activity_returns_none_when_too_sparse() -> None:
    html = "submitted 2026-02-01, 2026-02-02 and 2026-02-03"

    assert parse_activity(html) is None
    assert parse_activity(html, min_active_days=3) is not None


def test_parse_activity_skips_impossible_dates() -> None:
    html = "2026-13-40 2026-02-30 2026-01-01 2026-01-02"

    activity = parse_activity(html, min_active_days=1)

    assert activity is not None
    assert set(activity) == {date(2026, 1, 1), date(2026, 1, 2)}


def test_parse_activity_ignores_dates_embedded_in_longer_numbers() -> None:
    assert parse_activity("x12026-01-01 2026-01-011", min_active_days=1) is None

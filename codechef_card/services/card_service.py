import logging
from datetime import date

from codechef_card.clients.codechef_client import UpstreamUnavailableError
from codechef_card.clients.codechef_client import fetch_profile_page
from codechef_card.models import ProfileCard
from codechef_card.models import ProfileFields
from codechef_card.services.fallback import generate_fallback_activity
from codechef_card.services.heatmap_service import layout_heatmap
from codechef_card.services.heatmap_service import total_count
from codechef_card.services.scraper import parse_activity
from codechef_card.services.scraper import parse_profile
from codechef_card.settings import Settings


logger = logging.getLogger(__name__)


def fetch_profile_html(username: str, settings: Settings) -> str | None:
    """Return the profile page HTML, or None when it cannot be fetched."""

    try:
        page = fetch_profile_page(
            username=username,
            url_template=settings.codechef_profile_url,
            timeout=settings.fetch_timeout_seconds,
            user_agent=settings.user_agent,
        )
    except UpstreamUnavailableError as exc:
        logger.warning("Profile page unavailable for %s: %s", username, exc)
        return None

    return page.text


def build_profile_card(username: str, today: date, settings: Settings) -> ProfileCard:
    """Collect profile fields and a heatmap layout for one user.

    Never fails on upstream problems: missing HTML yields `N/A` fields and
    synthetic activity.
    """

    html = fetch_profile_html(username, settings)

    profile = parse_profile(html) if html is not None else ProfileFields()
    activity = (
        parse_activity(html, min_active_days=settings.min_active_days)
        if html is not None
        else None
    )

    activity_source = "scraped"
    if activity is None:
        logger.info("Using fallback activity for %s", username)
        activity_source = "fallback"
        activity = generate_fallback_activity(
            username, today, max_count=settings.fallback_max_count
        )

    return ProfileCard(
        username=username,
        profile=profile,
        layout=layout_heatmap(activity, today),
        activity_source=activity_source,
        total=total_count(activity, today),
    )

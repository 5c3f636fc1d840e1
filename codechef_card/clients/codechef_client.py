from dataclasses import dataclass
from urllib.parse import quote

import httpx


class UpstreamUnavailableError(Exception):
    """Raised when the CodeChef profile page cannot be retrieved."""


@dataclass(frozen=True)
class ProfilePage:
    status_code: int
    text: str


def build_profile_url(username: str, url_template: str) -> str:
    return url_template.format(username=quote(username, safe=""))


def fetch_profile_page(
    username: str,
    url_template: str,
    timeout: float,
    user_agent: str = "codechef-card",
) -> ProfilePage:
    """Fetch the public CodeChef profile HTML for a user.

    Raises:
        UpstreamUnavailableError: On timeout, network failure or a non-2xx
            response status.
    """

    url = build_profile_url(username, url_template)
    try:
        response = httpx.get(
            url,
            headers={"User-Agent": user_agent, "Accept": "text/html"},
            timeout=timeout,
            follow_redirects=True,
        )
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise UpstreamUnavailableError(f"fetching {url} failed: {exc}") from exc

    return ProfilePage(status_code=response.status_code, text=response.text)

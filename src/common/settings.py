"""Per-scenario settings snapshot built from the environment."""

from dataclasses import dataclass

from common.env import env


def join_url(base_url: str, route: str) -> str:
    """Join a base URL and a relative route with exactly one slash.

    Example:
        >>> join_url("https://en.wikipedia.org/", "/w/api.php")
        'https://en.wikipedia.org/w/api.php'
    """
    return f"{base_url.rstrip('/')}/{route.lstrip('/')}"


@dataclass(frozen=True)
class Settings:
    """Configuration consumed by a single check context.

    The API URL and every page URL derive from one shared base URL.
    """

    base_url: str
    api_route: str
    page_title: str
    section_heading: str
    browser_type: str = "chromium"
    headless: bool = True
    element_timeout_ms: int = 10_000
    http_timeout_seconds: int = 30
    user_agent: str = "wiki-parity/1.0 (automation test suite)"

    @classmethod
    def from_env(cls) -> "Settings":
        """Snapshot the current environment."""
        return cls(
            base_url=env.wiki_base_url(),
            api_route=env.wiki_api_route(),
            page_title=env.wiki_page_title(),
            section_heading=env.wiki_section_heading(),
            browser_type=env.browser_type(),
            headless=env.browser_headless(),
            element_timeout_ms=env.element_timeout_ms(),
            http_timeout_seconds=env.http_timeout_seconds(),
            user_agent=env.user_agent(),
        )

    @property
    def api_url(self) -> str:
        return join_url(self.base_url, self.api_route)

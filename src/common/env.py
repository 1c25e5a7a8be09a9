"""Environment configuration interface for wiki-parity.

All environment variable access goes through this module. Values may also
come from a .env file in the working directory.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def wiki_base_url() -> str:
        """Get the shared Wikipedia base URL.

        Returns:
            Base URL, defaults to 'https://en.wikipedia.org/'
        """
        return os.getenv("WIKI_BASE_URL", "https://en.wikipedia.org/")

    @staticmethod
    def wiki_api_route() -> str:
        """Get the MediaWiki API route relative to the base URL.

        Returns:
            API route, defaults to 'w/api.php'
        """
        return os.getenv("WIKI_API_ROUTE", "w/api.php")

    @staticmethod
    def wiki_page_title() -> str:
        """Get the title of the article under test.

        Returns:
            Page title, defaults to 'Playwright_(software)'
        """
        return os.getenv("WIKI_PAGE_TITLE", "Playwright_(software)")

    @staticmethod
    def wiki_section_heading() -> str:
        """Get the heading of the section compared between UI and API.

        Returns:
            Section heading, defaults to 'Debugging features'
        """
        return os.getenv("WIKI_SECTION_HEADING", "Debugging features")

    @staticmethod
    def browser_type() -> str:
        """Get the Playwright browser type (chromium, firefox or webkit).

        Returns:
            Browser type, defaults to 'chromium'
        """
        return os.getenv("BROWSER_TYPE", "chromium").lower()

    @staticmethod
    def browser_headless() -> bool:
        """Get whether the browser runs headless.

        Returns:
            True unless BROWSER_HEADLESS is set to a false-like value
        """
        return os.getenv("BROWSER_HEADLESS", "true").strip().lower() in _TRUTHY

    @staticmethod
    def element_timeout_ms() -> int:
        """Get the bounded wait for UI elements.

        Returns:
            Timeout in milliseconds, defaults to 10000
        """
        return int(os.getenv("ELEMENT_TIMEOUT_MS", "10000"))

    @staticmethod
    def http_timeout_seconds() -> int:
        """Get the MediaWiki API request timeout.

        Returns:
            Timeout in seconds, defaults to 30
        """
        return int(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))

    @staticmethod
    def user_agent() -> str:
        """Get the User-Agent sent to the MediaWiki API.

        Returns:
            User-Agent string
        """
        return os.getenv("WIKI_USER_AGENT", "wiki-parity/1.0 (automation test suite)")


# Singleton instance for convenient access
env = Environment()

"""Per-scenario context: one browser page and one API client."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from playwright.async_api import Page, async_playwright

from clients.mediawiki import MediaWikiClient
from common.logger import get_logger
from common.settings import Settings

from .navigator import PageNavigator

logger = get_logger(__name__)

BROWSER_TYPES = ("chromium", "firefox", "webkit")


@dataclass
class CheckContext:
    """Everything a check needs, passed explicitly to each component."""

    settings: Settings
    page: Page
    navigator: PageNavigator
    api: MediaWikiClient


def build_api_client(settings: Settings) -> MediaWikiClient:
    return MediaWikiClient(
        settings.api_url,
        user_agent=settings.user_agent,
        timeout=settings.http_timeout_seconds,
    )


@asynccontextmanager
async def open_context(settings: Settings | None = None) -> AsyncIterator[CheckContext]:
    """Launch a browser page and an API client, closing both on exit.

    Example:
        async with open_context() as ctx:
            view = await ctx.navigator.navigate_to(PLAYWRIGHT_ARTICLE)
    """
    settings = settings or Settings.from_env()
    if settings.browser_type not in BROWSER_TYPES:
        raise ValueError(
            f"Unsupported browser type '{settings.browser_type}' (expected one of {', '.join(BROWSER_TYPES)})"
        )

    api = build_api_client(settings)
    try:
        async with async_playwright() as playwright:
            launcher = getattr(playwright, settings.browser_type)
            logger.debug(f"Launching {settings.browser_type} (headless={settings.headless})")
            browser = await launcher.launch(headless=settings.headless)
            try:
                browser_context = await browser.new_context()
                try:
                    page = await browser_context.new_page()
                    navigator = PageNavigator(page, settings.base_url, settings.element_timeout_ms)
                    yield CheckContext(settings=settings, page=page, navigator=navigator, api=api)
                finally:
                    await browser_context.close()
            finally:
                await browser.close()
    finally:
        api.close()

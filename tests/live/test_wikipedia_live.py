"""End-to-end checks against live Wikipedia.

These need network access and installed Playwright browsers
(`playwright install chromium`), so they only run with RUN_LIVE_CHECKS=1.
"""

import asyncio
import os

import pytest

from browser.session import open_context
from checks.runner import run_catalogue_check, run_section_check, run_theme_check
from clients.base import SectionNotFound
from clients.mediawiki import MediaWikiClient
from common.settings import Settings

pytestmark = pytest.mark.skipif(
    os.getenv("RUN_LIVE_CHECKS") != "1", reason="set RUN_LIVE_CHECKS=1 to run live checks"
)


@pytest.fixture
def settings():
    return Settings.from_env()


def test_debugging_features_unique_word_count_matches(settings):
    """UI and API renderings of the section have the same unique word count."""

    async def scenario():
        async with open_context(settings) as ctx:
            return await run_section_check(ctx)

    result = asyncio.run(scenario())

    assert result.count_a > 0
    assert result.equal, result.describe("UI", "API")


def test_development_tools_catalogue_extracted(settings):
    """The development tools table yields link entries."""

    async def scenario():
        async with open_context(settings) as ctx:
            return await run_catalogue_check(ctx)

    report = asyncio.run(scenario())

    assert report.entries, "Microsoft development tools table should contain entries"
    assert report.links
    non_links = "\n".join(f"  - {e.text}" for e in report.non_links)
    assert report.all_links, f"Entries that are not links:\n{non_links}"


def test_dark_theme_applied(settings):
    """Selecting Dark in the appearance menu puts the night class on <html>."""

    async def scenario():
        async with open_context(settings) as ctx:
            return await run_theme_check(ctx, "dark")

    assert asyncio.run(scenario()) is True


def test_unknown_section_heading(settings):
    client = MediaWikiClient(settings.api_url, user_agent=settings.user_agent)
    try:
        with pytest.raises(SectionNotFound):
            client.find_section_index(settings.page_title, "No such section heading")
    finally:
        client.close()

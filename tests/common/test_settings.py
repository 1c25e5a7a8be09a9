"""Tests for the per-scenario settings snapshot."""

import dataclasses

import pytest

from common.settings import Settings, join_url


@pytest.mark.parametrize(
    "base, route",
    [
        ("https://en.wikipedia.org/", "w/api.php"),
        ("https://en.wikipedia.org", "/w/api.php"),
        ("https://en.wikipedia.org//", "//w/api.php"),
    ],
)
def test_join_url_single_slash(base, route):
    assert join_url(base, route) == "https://en.wikipedia.org/w/api.php"


def test_from_env(monkeypatch):
    """Test the snapshot reads every setting from the environment."""
    monkeypatch.setenv("WIKI_BASE_URL", "https://de.wikipedia.org/")
    monkeypatch.setenv("WIKI_API_ROUTE", "w/api.php")
    monkeypatch.setenv("WIKI_PAGE_TITLE", "Playwright_(Software)")
    monkeypatch.setenv("WIKI_SECTION_HEADING", "Funktionen")
    monkeypatch.setenv("BROWSER_TYPE", "webkit")
    monkeypatch.setenv("BROWSER_HEADLESS", "false")
    monkeypatch.setenv("ELEMENT_TIMEOUT_MS", "5000")

    settings = Settings.from_env()

    assert settings.api_url == "https://de.wikipedia.org/w/api.php"
    assert settings.page_title == "Playwright_(Software)"
    assert settings.section_heading == "Funktionen"
    assert settings.browser_type == "webkit"
    assert settings.headless is False
    assert settings.element_timeout_ms == 5000


def test_settings_are_frozen():
    settings = Settings(
        base_url="https://en.wikipedia.org/",
        api_route="w/api.php",
        page_title="P",
        section_heading="H",
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.headless = False

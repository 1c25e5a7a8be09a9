"""View protocol and exceptions for browser-driven checks."""

from typing import Protocol

from playwright.async_api import Page


class ContentView(Protocol):
    """A wrapper around a page that exposes its content-query handle."""

    page: Page


class BrowserCheckError(Exception):
    """Base exception for browser-side check errors."""

    pass


class InvalidPreference(BrowserCheckError):
    """Theme name is not one of dark, light or automatic."""

    def __init__(self, value: str | None):
        self.value = value
        super().__init__(f"Theme must be one of: dark, light, automatic. Got: '{value}'")


class ElementNotReady(BrowserCheckError):
    """A bounded wait for an element expired."""

    def __init__(self, selector: str, state: str, timeout_ms: int):
        self.selector = selector
        self.state = state
        self.timeout_ms = timeout_ms
        super().__init__(f"Element '{selector}' not {state} within {timeout_ms} ms")


class ThemeTransitionError(BrowserCheckError):
    """A theme selector step was called out of order."""

    pass


class UnknownView(BrowserCheckError, KeyError):
    """No route or view is registered for the identifier."""

    def __init__(self, view_id: str):
        self.view_id = view_id
        super().__init__(f"No view registered for '{view_id}'")

    def __str__(self) -> str:
        return self.args[0]

"""Shared fixtures: in-memory stand-ins for Playwright pages and locators."""

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError


class FakeLocator:
    """Records interactions and answers queries from its FakePage's tables.

    Chained locators are keyed by their selectors joined with ' >> '.
    """

    def __init__(self, page, selector):
        self.page = page
        self.selector = selector

    def locator(self, selector):
        return FakeLocator(self.page, f"{self.selector} >> {selector}")

    @property
    def first(self):
        return self

    async def count(self):
        if self.selector in self.page.counts:
            return self.page.counts[self.selector]
        known = self.page.inner_texts.keys() | self.page.text_lists.keys()
        return 1 if self.selector in known else 0

    async def inner_text(self, timeout=None):
        self.page.actions.append(("inner_text", self.selector))
        if self.selector in self.page.never_ready:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded reading {self.selector}")
        return self.page.inner_texts[self.selector]

    async def all_text_contents(self):
        return list(self.page.text_lists.get(self.selector, []))

    async def all_inner_texts(self):
        return list(self.page.text_lists.get(self.selector, []))

    async def wait_for(self, state=None, timeout=None):
        self.page.actions.append(("wait_for", self.selector, state, timeout))
        if self.selector in self.page.never_ready:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.selector}")

    async def click(self, **kwargs):
        self.page.actions.append(("click", self.selector, kwargs))
        self.page.clicked(self.selector)


class FakePage:
    """Minimal async page double.

    Args:
        inner_texts: selector -> inner text
        text_lists: selector -> list of texts (all_text_contents / all_inner_texts)
        counts: selector -> explicit match count
        never_ready: selectors whose wait_for or inner_text times out
        root_classes: classes on <html>
        on_click: selector -> classes added to <html> when clicked
    """

    def __init__(
        self,
        inner_texts=None,
        text_lists=None,
        counts=None,
        never_ready=(),
        root_classes=(),
        on_click=None,
    ):
        self.inner_texts = dict(inner_texts or {})
        self.text_lists = dict(text_lists or {})
        self.counts = dict(counts or {})
        self.never_ready = set(never_ready)
        self.root_classes = set(root_classes)
        self.on_click = dict(on_click or {})
        self.actions = []

    def locator(self, selector):
        return FakeLocator(self, selector)

    def clicked(self, selector):
        self.root_classes.update(self.on_click.get(selector, ()))

    async def evaluate(self, expression, arg=None):
        self.actions.append(("evaluate", arg))
        return arg in self.root_classes

    async def goto(self, url):
        self.actions.append(("goto", url))


@pytest.fixture
def fake_page_factory():
    """Build FakePage instances with the given tables."""
    return FakePage

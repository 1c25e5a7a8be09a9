"""Page views over a rendered wiki article."""

from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from rich.markup import escape

from common.constants import DEFAULT_TIMEOUT_MS, DEV_TOOLS_TABLE_SELECTOR
from common.logger import get_logger
from extract.catalogue import extract_catalogue_entries
from extract.models import CatalogueEntry
from normalize.text import clean_section_text

from .base import ElementNotReady
from .theme import ThemeSelector

logger = get_logger(__name__)

# Relative to the heading's <div class="mw-heading"> container
SECTION_SIBLING_XPATHS = (
    "xpath=following-sibling::p[1]",
    "xpath=following-sibling::ul[1]",
)
TABLE_LINKS_SELECTOR = "td a"
TABLE_CELLS_SELECTOR = "td"


def heading_anchor(heading: str) -> str:
    """Anchor id MediaWiki gives a heading ("Debugging features" -> "Debugging_features")."""
    return heading.strip().replace(" ", "_")


def heading_selector(heading: str) -> str:
    """Attribute selector for a heading's anchor, with quotes and backslashes escaped."""
    anchor = heading_anchor(heading).replace("\\", "\\\\").replace("'", "\\'")
    return f"[id='{anchor}']"


class ArticlePage:
    """Content queries against a rendered article."""

    def __init__(self, page: Page, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.page = page
        self.timeout_ms = timeout_ms

    async def _sibling_text(self, container: Locator, xpath: str) -> str:
        sibling = container.locator(xpath)
        if await sibling.count() == 0:
            return ""
        try:
            return await sibling.inner_text(timeout=self.timeout_ms)
        except PlaywrightTimeoutError as e:
            raise ElementNotReady(xpath, "readable", self.timeout_ms) from e

    async def section_text(self, heading: str) -> str:
        """Read a section's first paragraph and list as cleaned text.

        Args:
            heading: Section heading, e.g. 'Debugging features'

        Returns:
            Cleaned text of the paragraph and list following the heading
        """
        container = self.page.locator(heading_selector(heading)).locator("..")
        parts = [await self._sibling_text(container, xpath) for xpath in SECTION_SIBLING_XPATHS]
        raw = " ".join(parts)
        logger.debug(f"Read {len(raw)} characters under heading '{heading}'")
        return clean_section_text(raw)

    async def catalogue_texts(
        self, table_selector: str = DEV_TOOLS_TABLE_SELECTOR
    ) -> tuple[list[str], list[str]]:
        """Read link texts and cell texts from a catalogue table.

        Returns:
            (link_texts, cell_texts), both empty if the table is not on the page
        """
        table = self.page.locator(table_selector)
        if await table.count() == 0:
            logger.warning(f"No table matches {escape(table_selector)}")
            return [], []

        table = table.first
        link_texts = await table.locator(TABLE_LINKS_SELECTOR).all_text_contents()
        cell_texts = await table.locator(TABLE_CELLS_SELECTOR).all_inner_texts()
        logger.debug(f"Table has {len(link_texts)} links in {len(cell_texts)} cells")
        return link_texts, cell_texts

    async def catalogue_entries(
        self, table_selector: str = DEV_TOOLS_TABLE_SELECTOR
    ) -> list[CatalogueEntry]:
        """Extract classified catalogue entries from a table."""
        link_texts, cell_texts = await self.catalogue_texts(table_selector)
        return extract_catalogue_entries(link_texts, cell_texts)

    def theme_selector(self) -> ThemeSelector:
        """A fresh theme state machine for this page."""
        return ThemeSelector(self.page, timeout_ms=self.timeout_ms)

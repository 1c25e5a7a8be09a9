"""The three UI/API parity checks against the Playwright article."""

from browser.pages import ArticlePage
from browser.session import CheckContext
from browser.theme import ThemePreference
from common.constants import DEV_TOOLS_TABLE_SELECTOR, PLAYWRIGHT_ARTICLE
from common.logger import get_logger
from compare.equivalence import EquivalenceResult, check_equivalent_unique_word_counts
from extract.models import CatalogueReport

logger = get_logger(__name__)

CATALOGUE_TITLE = "MICROSOFT DEVELOPMENT TOOLS"


async def _open_article(ctx: CheckContext) -> ArticlePage:
    return await ctx.navigator.navigate_to(PLAYWRIGHT_ARTICLE)


async def run_section_check(ctx: CheckContext) -> EquivalenceResult:
    """Compare the unique word counts of a section as rendered and via the API.

    Raises:
        SectionNotFound: If the API has no section with the configured heading
        MalformedResponse: If the API response lacks sections or text
        ApiRequestError: If the API request fails
    """
    heading = ctx.settings.section_heading
    article = await _open_article(ctx)
    ui_text = await article.section_text(heading)
    api_text = ctx.api.get_section_text(ctx.settings.page_title, heading)

    result = check_equivalent_unique_word_counts(ui_text, api_text)
    logger.info(f"'{heading}': {result.describe('UI', 'API')}")
    return result


async def run_catalogue_check(
    ctx: CheckContext, table_selector: str = DEV_TOOLS_TABLE_SELECTOR
) -> CatalogueReport:
    """Extract the development tools catalogue and classify its entries."""
    article = await _open_article(ctx)
    entries = await article.catalogue_entries(table_selector)
    report = CatalogueReport(title=CATALOGUE_TITLE, entries=entries)
    logger.info(
        f"Catalogue: {len(entries)} entries, {len(report.links)} links, "
        f"{len(report.non_links)} not links"
    )
    return report


async def run_theme_check(ctx: CheckContext, preference: str | ThemePreference = "dark") -> bool:
    """Select a theme through the appearance menu and verify it applied.

    Raises:
        InvalidPreference: If the name is not dark, light or automatic
        ElementNotReady: If the menu elements are not ready in time
    """
    article = await _open_article(ctx)
    selector = article.theme_selector()
    chosen = await selector.set_theme(preference)
    applied = await selector.is_preference_applied(chosen)
    logger.info(f"Theme {chosen.name.lower()} applied: {applied}")
    return applied

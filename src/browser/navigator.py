"""Navigation to registered views by identifier."""

from collections.abc import Callable

from playwright.async_api import Page

from common.constants import PLAYWRIGHT_ARTICLE, ROUTES
from common.logger import get_logger
from common.settings import join_url

from .base import ContentView, UnknownView
from .pages import ArticlePage

logger = get_logger(__name__)

ViewFactory = Callable[[Page, int], ContentView]

VIEWS: dict[str, ViewFactory] = {
    PLAYWRIGHT_ARTICLE: lambda page, timeout_ms: ArticlePage(page, timeout_ms=timeout_ms),
}


class PageNavigator:
    """Opens views on one browser page.

    Routes and view factories are looked up in explicit tables keyed by the
    view identifier.
    """

    def __init__(
        self,
        page: Page,
        base_url: str,
        timeout_ms: int,
        routes: dict[str, str] | None = None,
        views: dict[str, ViewFactory] | None = None,
    ):
        self.page = page
        self.base_url = base_url
        self.timeout_ms = timeout_ms
        self.routes = ROUTES if routes is None else routes
        self.views = VIEWS if views is None else views

    def url_for(self, view_id: str) -> str:
        """Full URL of a view.

        Raises:
            UnknownView: If no route is registered for the identifier
        """
        try:
            route = self.routes[view_id]
        except KeyError:
            raise UnknownView(view_id) from None
        return join_url(self.base_url, route)

    async def navigate_to(self, view_id: str) -> ContentView:
        """Load a view's URL and return its wrapper.

        Raises:
            UnknownView: If the identifier has no route or no view factory
        """
        url = self.url_for(view_id)
        factory = self.views.get(view_id)
        if factory is None:
            raise UnknownView(view_id)

        logger.debug(f"Navigating to {url}")
        await self.page.goto(url)
        return factory(self.page, self.timeout_ms)

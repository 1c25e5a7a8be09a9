"""Color theme selection through the Vector skin's appearance menu.

Selecting a theme takes three steps: open the appearance sidebar, wait for
the theme panel, click the radio for the wanted value. Whether the choice
took effect is checked separately on the root element's class list, since
a click can land without the skin applying anything.
"""

from enum import Enum

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from common.constants import DEFAULT_TIMEOUT_MS
from common.logger import get_logger

from .base import ElementNotReady, InvalidPreference, ThemeTransitionError

logger = get_logger(__name__)

APPEARANCE_TOGGLE_SELECTOR = "#vector-appearance-dropdown-checkbox"
THEME_PANEL_SELECTOR = "#skin-client-prefs-skin-theme"
THEME_RADIO_SELECTOR = "input[name='skin-client-pref-skin-theme-group'][value='{value}']"
THEME_CLASS_PREFIX = "skin-theme-clientpref-"


class ThemePreference(Enum):
    """User-facing theme names mapped to radio input values."""

    DARK = "night"
    LIGHT = "day"
    AUTOMATIC = "os"

    @property
    def ui_value(self) -> str:
        return self.value

    @property
    def applied_class(self) -> str:
        """Class the skin puts on <html> once this theme is active."""
        return f"{THEME_CLASS_PREFIX}{self.value}"


class ThemeState(Enum):
    CLOSED = "closed"
    SIDEBAR_OPEN = "sidebar_open"
    PANEL_VISIBLE = "panel_visible"
    SELECTED = "selected"


def parse_preference(name: str | ThemePreference | None) -> ThemePreference:
    """Translate a theme name ("dark", " Light ", ...) to a preference.

    Raises:
        InvalidPreference: If the name is not dark, light or automatic
    """
    if isinstance(name, ThemePreference):
        return name
    if name is None or not name.strip():
        raise InvalidPreference(name)
    try:
        return ThemePreference[name.strip().upper()]
    except KeyError:
        raise InvalidPreference(name) from None


class ThemeSelector:
    """Drives the theme menu of one page, one step at a time."""

    def __init__(self, page: Page, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.page = page
        self.timeout_ms = timeout_ms
        self.state = ThemeState.CLOSED

    def _require(self, expected: ThemeState, action: str) -> None:
        if self.state is not expected:
            raise ThemeTransitionError(
                f"Cannot {action} in state '{self.state.value}' (expected '{expected.value}')"
            )

    async def _wait_for(self, selector: str, state: str):
        locator = self.page.locator(selector)
        logger.debug(f"Waiting up to {self.timeout_ms} ms for {selector} to be {state}")
        try:
            await locator.wait_for(state=state, timeout=self.timeout_ms)
        except PlaywrightTimeoutError as e:
            raise ElementNotReady(selector, state, self.timeout_ms) from e
        return locator

    async def open_sidebar(self) -> None:
        """Open the appearance sidebar once its toggle is attached.

        Raises:
            ElementNotReady: If the toggle does not attach in time
        """
        self._require(ThemeState.CLOSED, "open the sidebar")
        toggle = await self._wait_for(APPEARANCE_TOGGLE_SELECTOR, "attached")
        # The checkbox is visually hidden behind its label
        await toggle.click(force=True)
        self.state = ThemeState.SIDEBAR_OPEN

    async def wait_for_panel(self) -> None:
        """Wait for the theme panel to become visible.

        Raises:
            ElementNotReady: If the panel does not show in time
        """
        self._require(ThemeState.SIDEBAR_OPEN, "wait for the theme panel")
        await self._wait_for(THEME_PANEL_SELECTOR, "visible")
        self.state = ThemeState.PANEL_VISIBLE

    async def select(self, preference: str | ThemePreference) -> ThemePreference:
        """Click the radio for a preference in the visible panel."""
        parsed = parse_preference(preference)
        self._require(ThemeState.PANEL_VISIBLE, "select a theme")
        radio = self.page.locator(THEME_PANEL_SELECTOR).locator(
            THEME_RADIO_SELECTOR.format(value=parsed.ui_value)
        )
        await radio.click()
        self.state = ThemeState.SELECTED
        logger.debug(f"Selected theme {parsed.name.lower()} ({parsed.ui_value})")
        return parsed

    async def set_theme(self, preference: str | ThemePreference) -> ThemePreference:
        """Open the menu and select a theme.

        The name is validated before anything on the page is touched.

        Raises:
            InvalidPreference: If the name is not dark, light or automatic
            ElementNotReady: If the toggle or panel is not ready in time
        """
        parsed = parse_preference(preference)
        await self.open_sidebar()
        await self.wait_for_panel()
        return await self.select(parsed)

    async def is_preference_applied(self, preference: str | ThemePreference = ThemePreference.DARK) -> bool:
        """Check whether <html> carries the class of the given theme."""
        parsed = parse_preference(preference)
        return bool(
            await self.page.evaluate(
                "(name) => document.documentElement.classList.contains(name)",
                parsed.applied_class,
            )
        )

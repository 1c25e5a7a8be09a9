"""Shared constants for the wiki-parity checks.

For environment-based configuration (base URL, timeouts, etc.), use the env module:
    from common.env import env
    base_url = env.wiki_base_url()
"""

# View identifiers
PLAYWRIGHT_ARTICLE = "playwright_article"

# Route of each view relative to the wiki base URL
ROUTES: dict[str, str] = {
    PLAYWRIGHT_ARTICLE: "wiki/Playwright_(software)",
}

# Catalogue table in the "Microsoft development tools" navbox
DEV_TOOLS_TABLE_SELECTOR = "table:has([id^='Microsoft_development_tools'])"

# Default bounded wait for UI elements
DEFAULT_TIMEOUT_MS = 10_000

"""MediaWiki parse API client for section text extraction."""

from dataclasses import dataclass
from typing import Any

import requests

from common.logger import get_logger
from normalize.text import clean_section_text, strip_html

from .base import ApiRequestError, MalformedResponse, SectionNotFound

logger = get_logger(__name__)


@dataclass(frozen=True)
class Section:
    """One entry of a page's section listing."""

    index: int
    line: str


class MediaWikiClient:
    """Client for the MediaWiki action=parse endpoint.

    Two calls locate and fetch a section: prop=sections lists the page's
    headings with their indexes, prop=text returns the rendered HTML of one
    section by index.

    API Documentation: https://www.mediawiki.org/wiki/API:Parsing_wikitext
    """

    DEFAULT_TIMEOUT = 30  # seconds

    def __init__(
        self,
        api_url: str,
        user_agent: str = "wiki-parity/1.0 (automation test suite)",
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        """Initialize MediaWiki client.

        Args:
            api_url: Full URL of api.php (e.g. https://en.wikipedia.org/w/api.php)
            user_agent: User-Agent header, required by Wikipedia
            timeout: Per-request timeout in seconds
            session: Optional pre-built session (a new one is created otherwise)
        """
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})

    def close(self) -> None:
        self.session.close()

    def _parse(self, page_title: str, **params: Any) -> dict[str, Any]:
        """Call action=parse and return the "parse" object of the JSON body.

        Raises:
            ApiRequestError: If the request fails or the body is not JSON
            MalformedResponse: If the body or its "parse" member is not an object
        """
        query = {"action": "parse", "page": page_title, "format": "json", "origin": "*", **params}
        try:
            logger.debug(f"GET {self.api_url} {query}")
            response = self.session.get(self.api_url, params=query, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            raise ApiRequestError(f"MediaWiki API timeout for page '{page_title}'") from e
        except requests.exceptions.RequestException as e:
            raise ApiRequestError(f"MediaWiki API error for page '{page_title}': {e}") from e
        except ValueError as e:
            raise ApiRequestError(f"MediaWiki API returned invalid JSON for page '{page_title}'") from e

        parse = data.get("parse") if isinstance(data, dict) else None
        if not isinstance(parse, dict):
            raise MalformedResponse(f"MediaWiki API response for '{page_title}' has no parse object")
        return parse

    def get_sections(self, page_title: str) -> list[Section]:
        """List the sections of a page.

        Raises:
            MalformedResponse: If the response has no parse.sections array
        """
        sections = self._parse(page_title, prop="sections").get("sections")
        if not isinstance(sections, list):
            raise MalformedResponse(f"MediaWiki API did not return sections for '{page_title}'")

        result = []
        for raw in sections:
            try:
                result.append(Section(index=int(raw["index"]), line=str(raw.get("line", ""))))
            except (KeyError, TypeError, ValueError) as e:
                raise MalformedResponse(f"Malformed section entry for '{page_title}': {raw!r}") from e
        return result

    def find_section_index(self, page_title: str, heading: str) -> int:
        """Find the index of the section whose heading matches (case-insensitive).

        Raises:
            SectionNotFound: If no section has that heading
            MalformedResponse: If the section listing is missing
        """
        target = heading.strip().lower()
        for section in self.get_sections(page_title):
            if section.line.strip().lower() == target:
                logger.debug(f"Section '{heading}' has index {section.index}")
                return section.index
        raise SectionNotFound(page_title, heading)

    def get_section_html(self, page_title: str, index: int) -> str:
        """Fetch the rendered HTML of one section.

        Raises:
            MalformedResponse: If the response has no parse.text["*"] payload
        """
        text = self._parse(page_title, section=index, prop="text").get("text")
        html = text.get("*") if isinstance(text, dict) else None
        if not isinstance(html, str):
            raise MalformedResponse(f"MediaWiki API did not return text for section {index} of '{page_title}'")
        return html

    def get_section_text(self, page_title: str, heading: str) -> str:
        """Get a section's body as cleaned plain text.

        The heading label, edit markers and everything from the first
        citation marker on are removed.

        Args:
            page_title: Page title as used in URLs (e.g. 'Playwright_(software)')
            heading: Section heading (e.g. 'Debugging features')

        Returns:
            Cleaned section text
        """
        index = self.find_section_index(page_title, heading)
        html = self.get_section_html(page_title, index)
        return clean_section_text(strip_html(html), heading)

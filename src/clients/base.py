"""Exceptions raised by the MediaWiki API client."""


class MediaWikiError(Exception):
    """Base exception for MediaWiki API errors."""

    pass


class ApiRequestError(MediaWikiError):
    """API request failed (timeout, connection error, HTTP error status)."""

    pass


class MalformedResponse(MediaWikiError):
    """API response is missing expected fields."""

    pass


class SectionNotFound(MediaWikiError):
    """No section with the requested heading exists on the page."""

    def __init__(self, page_title: str, heading: str):
        self.page_title = page_title
        self.heading = heading
        super().__init__(f"Section '{heading}' not found on page '{page_title}'")

"""Text cleaning and word normalization for cross-source comparison.

Rendered wiki pages and the MediaWiki parse API decorate the same prose
differently: "[edit]" links, footnote markers such as "[1]" or "&#91;1&#93;",
HTML entities, and an inline copy of the section heading. The helpers here
reduce both renderings to comparable plain text and then to word sequences.
"""

import re

# "[edit]", "[ edit ]", "[Edit]"
EDIT_MARKER_PATTERN = re.compile(r"\[\s*edit\s*\]", re.IGNORECASE)

# "[1]" or its entity-escaped form "&#91;1&#93;"
CITATION_MARKER_PATTERN = re.compile(r"(\[|&#91;)\s*\d+\s*(\]|&#93;)")

# "&nbsp;", "&#91;", "&amp;" ...
HTML_ENTITY_PATTERN = re.compile(r"&[#\w]+;")

HTML_TAG_PATTERN = re.compile(r"<[^>]+>")
WHITESPACE_PATTERN = re.compile(r"\s+")
WORD_SPLIT_PATTERN = re.compile(r"\W+")


def _collapse_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def clean_section_text(raw: str | None, heading_to_remove: str | None = None) -> str:
    """Clean a section's raw text for comparison.

    Removes the inline heading label (if given) and edit markers, truncates
    at the first citation marker, replaces HTML entities with spaces and
    normalizes whitespace.

    Args:
        raw: Raw section text from the page or the API
        heading_to_remove: Section title to strip, matched case-insensitively

    Returns:
        Cleaned text, or an empty string for blank input

    Example:
        >>> clean_section_text("Debugging features[edit] Foo bar.[1] Cite", "Debugging features")
        'Foo bar.'
    """
    if raw is None or not raw.strip():
        return ""

    cleaned = raw

    if heading_to_remove:
        cleaned = re.sub(re.escape(heading_to_remove), " ", cleaned, flags=re.IGNORECASE)

    cleaned = EDIT_MARKER_PATTERN.sub(" ", cleaned)

    # Footnotes and everything after them differ between renderings
    citation = CITATION_MARKER_PATTERN.search(cleaned)
    if citation:
        cleaned = cleaned[: citation.start()]

    cleaned = HTML_ENTITY_PATTERN.sub(" ", cleaned)

    return _collapse_whitespace(cleaned)


def strip_html(html: str | None) -> str:
    """Replace every HTML tag with a space and normalize whitespace.

    Example:
        >>> strip_html("<p>Trace <b>viewer</b></p>")
        'Trace viewer'
    """
    if html is None or not html.strip():
        return ""
    return _collapse_whitespace(HTML_TAG_PATTERN.sub(" ", html))


def normalize_to_words(text: str | None) -> list[str]:
    """Lowercase text and split it into words on non-word characters.

    Duplicates are kept in the order they occur.

    Example:
        >>> normalize_to_words("The Fox, the fox!")
        ['the', 'fox', 'the', 'fox']
    """
    if text is None or not text.strip():
        return []
    return [word for word in WORD_SPLIT_PATTERN.split(text.strip().lower()) if word]


def count_unique_words(text: str | None) -> int:
    """Count distinct words after normalization."""
    return len(set(normalize_to_words(text)))

"""Catalogue entry extraction from navbox-style tables.

A catalogue table lists item names per cell, separated by middle dots or
bullets. Some names are hyperlinks and some are plain text. Link texts and
full cell texts are read separately from the table, and plain-text names are
whatever remains in the cells once everything that matches a link is removed.
"""

from collections.abc import Iterable

from common.logger import get_logger

from .models import CatalogueEntry

logger = get_logger(__name__)

SEPARATOR_GLYPHS = frozenset({"·", "•"})
CELL_SPLIT_CHARS = ("·", "•", "\n", "\r")

# Navbox boilerplate ("v · t · e" view/talk/edit links, footer labels)
SKIP_TEXTS = frozenset({"v", "t", "e", "category", "show", "hide"})


def is_valid_entry_text(text: str | None) -> bool:
    """Check whether a trimmed fragment can be a catalogue entry name.

    Single characters, separator glyphs and navbox boilerplate are rejected.
    """
    if text is None or not text.strip():
        return False
    if len(text) <= 1 or text in SEPARATOR_GLYPHS:
        return False
    return text.lower() not in SKIP_TEXTS


def split_cell_text(cell_text: str) -> list[str]:
    """Split a cell's text on separator characters, dropping empty fragments."""
    normalized = cell_text
    for char in CELL_SPLIT_CHARS[1:]:
        normalized = normalized.replace(char, CELL_SPLIT_CHARS[0])
    return [part.strip() for part in normalized.split(CELL_SPLIT_CHARS[0]) if part.strip()]


def matches_link_text(fragment: str, link_texts: Iterable[str]) -> bool:
    """Check whether a fragment is already covered by a link.

    Matches on case-insensitive equality or containment in either direction,
    so partial and nested renderings of a linked name are suppressed. This
    is a heuristic: distinct names sharing a substring are merged too.
    """
    needle = fragment.lower()
    for link_text in link_texts:
        candidate = link_text.lower()
        if candidate == needle or needle in candidate or candidate in needle:
            return True
    return False


def deduplicate_entries(entries: Iterable[CatalogueEntry]) -> list[CatalogueEntry]:
    """Keep the first entry for each case-insensitive text."""
    seen: set[str] = set()
    unique = []
    for entry in entries:
        key = entry.text.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(entry)
    return unique


def extract_catalogue_entries(
    link_texts: Iterable[str] | None,
    cell_texts: Iterable[str] | None,
) -> list[CatalogueEntry]:
    """Build the classified, deduplicated entry list for one table.

    Args:
        link_texts: Text of every anchor inside the table's data cells
        cell_texts: Full inner text of every data cell of the same table

    Returns:
        Link entries first, then plain-text entries, unique by
        case-insensitive text. Empty when both inputs are empty or None.

    Example:
        >>> extract_catalogue_entries(["Visual Studio"], ["Visual Studio · GDB"])
        [CatalogueEntry(text='Visual Studio', is_link=True), CatalogueEntry(text='GDB', is_link=False)]
    """
    link_entries = []
    for raw in link_texts or []:
        text = (raw or "").strip()
        if is_valid_entry_text(text):
            link_entries.append(CatalogueEntry(text=text, is_link=True))

    # Case-insensitive set of link names
    known_links = list({entry.text.lower(): entry.text for entry in link_entries}.values())

    plain_entries = []
    for cell_text in cell_texts or []:
        for fragment in split_cell_text(cell_text or ""):
            if not is_valid_entry_text(fragment):
                continue
            if matches_link_text(fragment, known_links):
                continue
            plain_entries.append(CatalogueEntry(text=fragment, is_link=False))

    entries = deduplicate_entries(link_entries + plain_entries)
    logger.debug(
        f"Extracted {len(entries)} catalogue entries "
        f"({len(link_entries)} link texts, {len(plain_entries)} plain fragments)"
    )
    return entries

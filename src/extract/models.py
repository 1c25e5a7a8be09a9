"""Data models for catalogue extraction."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogueEntry:
    """One named item from a catalogue table."""

    text: str
    is_link: bool  # rendered as a hyperlink in the table


@dataclass
class CatalogueReport:
    """Entries extracted from one table, split by classification."""

    title: str
    entries: list[CatalogueEntry]

    @property
    def links(self) -> list[CatalogueEntry]:
        return [e for e in self.entries if e.is_link]

    @property
    def non_links(self) -> list[CatalogueEntry]:
        return [e for e in self.entries if not e.is_link]

    @property
    def all_links(self) -> bool:
        """Check that the table had entries and every one is a link."""
        return bool(self.entries) and not self.non_links

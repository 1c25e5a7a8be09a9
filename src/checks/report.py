"""Console reports for check results."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from common.logger import console as default_console
from extract.models import CatalogueReport

TEXT_COLUMN_WIDTH = 48


def truncate(value: str, max_length: int = TEXT_COLUMN_WIDTH) -> str:
    """Shorten a value to max_length, marking the cut with '...'."""
    if len(value) <= max_length:
        return value
    return value[: max_length - 3] + "..."


def build_catalogue_table(report: CatalogueReport) -> Table:
    """Build a rich table listing every entry with its link status."""
    table = Table(
        title=report.title,
        caption=(
            f"Total: {len(report.entries)}  "
            f"Links: {len(report.links)}  "
            f"Not links: {len(report.non_links)}"
        ),
    )
    table.add_column("Status", no_wrap=True)
    table.add_column("Entry", max_width=TEXT_COLUMN_WIDTH)

    for entry in report.entries:
        if entry.is_link:
            status = Text("[LINK]", style="green")
        else:
            status = Text("[NOT LINK]", style="red")
        table.add_row(status, Text(truncate(entry.text)))
    return table


def print_catalogue_report(report: CatalogueReport, console: Console | None = None) -> None:
    (console or default_console).print(build_catalogue_table(report))


def print_non_link_entries(report: CatalogueReport, console: Console | None = None) -> None:
    """Print only the entries that are not links."""
    console = console or default_console
    if not report.non_links:
        console.print("All catalogue entries are links.")
        return

    console.print("Catalogue entries that are NOT links:")
    for entry in report.non_links:
        console.print(f"  - {entry.text}", markup=False)

"""CLI for running the UI/API parity checks."""

import argparse
import asyncio
import sys
from dataclasses import replace

from browser.base import BrowserCheckError, InvalidPreference
from browser.session import CheckContext, open_context
from browser.theme import parse_preference
from clients.base import MediaWikiError
from common.logger import error, setup_logging, success
from common.settings import Settings

from .report import print_catalogue_report, print_non_link_entries
from .runner import run_catalogue_check, run_section_check, run_theme_check


async def check_section(ctx: CheckContext, args) -> bool:
    """Section text must have the same unique word count in UI and API."""
    result = await run_section_check(ctx)
    message = result.describe("UI", "API")
    if result.equal:
        success(message)
    else:
        error(message)
    return result.equal


async def check_catalogue(ctx: CheckContext, args) -> bool:
    """Every catalogue entry must be a link."""
    report = await run_catalogue_check(ctx)
    print_catalogue_report(report)
    if not report.entries:
        error("Catalogue table has no entries")
        return False
    print_non_link_entries(report)
    if report.all_links:
        success("All catalogue entries are links")
    else:
        error(f"{len(report.non_links)} catalogue entries are not links")
    return report.all_links


async def check_theme(ctx: CheckContext, args) -> bool:
    """Selected theme must be applied to the page."""
    applied = await run_theme_check(ctx, args.preference)
    if applied:
        success(f"Theme '{args.preference}' applied")
    else:
        error(f"Theme '{args.preference}' was selected but not applied")
    return applied


CHECKS = {
    "section": [check_section],
    "catalogue": [check_catalogue],
    "theme": [check_theme],
    "all": [check_section, check_catalogue, check_theme],
}


async def run_checks(args, settings: Settings) -> int:
    """Run the checks selected on the command line.

    Returns:
        Exit code (0 if every check passed)
    """
    if check_theme in CHECKS[args.command]:
        try:
            parse_preference(args.preference)
        except InvalidPreference as e:
            error(str(e))
            return 1

    passed = True
    async with open_context(settings) as ctx:
        for check in CHECKS[args.command]:
            try:
                passed = await check(ctx, args) and passed
            except (MediaWikiError, BrowserCheckError) as e:
                error(f"{check.__name__}: {e}")
                passed = False
    return 0 if passed else 1


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="wiki-parity",
        description="Check that a wiki article agrees between the rendered page and the MediaWiki API",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")

    subparsers = parser.add_subparsers(dest="command", help="Check to run")

    subparsers.add_parser(
        "section",
        help="Compare section unique word counts between UI and API",
    )
    subparsers.add_parser(
        "catalogue",
        help="Check that every development tools entry is a link",
    )
    for name, help_text in (
        ("theme", "Select a color theme and verify it applied"),
        ("all", "Run every check"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--preference",
            default="dark",
            help="Theme to select: dark, light or automatic (default: dark)",
        )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(level=args.log_level)

    settings = Settings.from_env()
    if args.headed:
        settings = replace(settings, headless=False)

    sys.exit(asyncio.run(run_checks(args, settings)))


if __name__ == "__main__":
    main()

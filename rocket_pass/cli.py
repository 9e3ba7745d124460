#!/usr/bin/env python3
"""
CLI for the Rocket Pass rewards updater.

Usage:
    # Search the wiki for the default season and update the rewards file
    rocket-pass-update

    # Another season, custom output
    rocket-pass-update --season 22 -o data/rocket-pass.json

    # Known page, print the catalog without writing
    rocket-pass-update --url https://rocketleague.fandom.com/wiki/... --dry-run --show
"""

import argparse
import sys

from rich.console import Console
from rich.table import Table

from .config import UpdaterConfig
from .errors import RewardsUpdateError
from .logger import logger, configure
from .updater import RewardsUpdater


def print_catalog(items, console=None):
    """Render the catalog as a table."""
    console = console or Console()
    table = Table(title=f"Rocket Pass Rewards ({len(items)} items)")

    table.add_column("Tier", justify="right", style="cyan")
    table.add_column("Track", justify="center")
    table.add_column("Name")
    table.add_column("Image", overflow="fold")

    for item in items:
        table.add_row(
            str(item.tier),
            "Free" if item.is_free else "Premium",
            item.name,
            item.image_url or "-",
        )

    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Update Rocket Pass rewards from the fandom wiki")
    parser.add_argument("--season", type=int, help="Rocket League season number")
    parser.add_argument("-o", "--output", dest="output_path", help="Rewards JSON file")
    parser.add_argument("--url", dest="wiki_url", help="Wiki page URL (skips the search)")
    parser.add_argument("--dry-run", action="store_true", help="Build the catalog without writing it")
    parser.add_argument("--show", action="store_true", help="Print the extracted catalog")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure(args.verbose)

    config = UpdaterConfig.from_env(
        season=args.season,
        output_path=args.output_path,
        wiki_url=args.wiki_url,
        dry_run=args.dry_run or None,
    )
    logger.debug(f"Config: {config.to_dict()}")

    try:
        outcome = RewardsUpdater(config).run()
    except RewardsUpdateError as e:
        logger.error(f"Error updating rewards: {e}")
        return 1

    if args.show and outcome.catalog.found:
        print_catalog(outcome.catalog.items)

    return 0


if __name__ == "__main__":
    sys.exit(main())

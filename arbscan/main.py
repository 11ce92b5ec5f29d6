"""Command-line entrypoint.

Sports Betting Arbitrage Scanner

ADVISORY-ONLY: This system does not place bets.
"""

import argparse
import asyncio
import sys

from loguru import logger
from pydantic import ValidationError
from rich.console import Console

from .config import load_settings
from .core.errors import ArbScanError
from .engine import format_opportunities_table, generate_disclaimer, make_reporter, run_scan
from .utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arbscan",
        description="Detect arbitrage opportunities across bookmaker odds.",
    )
    parser.add_argument("--bookmakers", type=int, dest="num_bookmakers", help="Number of bookmakers")
    parser.add_argument("--games", type=int, dest="games_per_bookmaker", help="Games per bookmaker")
    parser.add_argument("--total-bet", type=float, dest="total_bet", help="Total amount to stake per event")
    parser.add_argument("--seed", type=int, help="Seed for data generation")
    parser.add_argument("--snapshot", dest="snapshot_path", help="Path of the JSON snapshot")
    parser.add_argument("--reporter", choices=["log", "console", "json"], help="Where to report opportunities")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a single scan. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(**vars(args))
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2

    setup_logging(settings.log_level)
    console = Console()

    if settings.reporter == "console":
        console.print(generate_disclaimer(), style="dim")

    try:
        result = asyncio.run(run_scan(settings, make_reporter(settings.reporter)))
    except ArbScanError as e:
        logger.error(f"Scan failed: {e}")
        return 1

    if settings.reporter == "console":
        console.print(format_opportunities_table(result.opportunities))

    logger.info(
        f"{len(result.opportunities)} opportunities in {result.events_scanned} events "
        f"({result.events_skipped} skipped)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Scan orchestrator.

Runs one batch pass: ingest bookmakers, aggregate best odds, detect
arbitrage, report the opportunities.
"""

from datetime import datetime

from loguru import logger

from ..config import AppSettings
from ..core.models import Bookmaker, ScanResult
from ..ingestion import load_or_generate, normalize_bookmakers
from ..utils.time import Timer
from .aggregator import find_best_odds, find_best_sources
from .arbitrage import find_arbitrage_opportunities
from .reporting import ReportSink, report_opportunities


class ArbitrageScanner:
    """
    Detects arbitrage opportunities over a bookmaker collection.

    Holds configuration only; every scan builds its best-odds map fresh.
    """

    def __init__(self, total_bet: float, sink: ReportSink | None = None):
        if total_bet <= 0:
            raise ValueError(f"Total bet must be > 0, got {total_bet}")
        self.total_bet = total_bet
        self.sink = sink

    def scan(self, bookmakers: list[Bookmaker]) -> ScanResult:
        """
        Perform a single scan pass.

        1. Drop unusable quotes
        2. Build best odds per event
        3. Detect arbitrage and size stakes
        4. Report opportunities
        """
        timer = Timer().start()

        bookmakers, dropped = normalize_bookmakers(bookmakers)
        if dropped:
            logger.warning(f"Dropped {dropped} games with unusable odds")

        best_odds = find_best_odds(bookmakers)
        sources = find_best_sources(bookmakers)
        logger.info(f"Aggregated best odds for {len(best_odds)} events from {len(bookmakers)} bookmakers")

        opportunities, skipped = find_arbitrage_opportunities(best_odds, self.total_bet, sources)

        if self.sink is not None:
            report_opportunities(opportunities, self.sink)

        timer.stop()

        result = ScanResult(
            opportunities=opportunities,
            bookmakers_scanned=len(bookmakers),
            events_scanned=len(best_odds),
            events_skipped=skipped,
            scan_duration_ms=timer.elapsed_ms,
            timestamp=datetime.utcnow(),
        )

        logger.info(
            f"Scan complete: {result.events_scanned} events, "
            f"{len(result.opportunities)} opportunities, "
            f"{result.scan_duration_ms:.0f}ms"
        )
        return result


async def run_scan(settings: AppSettings, sink: ReportSink | None = None) -> ScanResult:
    """Load or generate bookmakers per settings and scan them once."""
    bookmakers = await load_or_generate(settings)
    scanner = ArbitrageScanner(settings.total_bet, sink)
    return scanner.scan(bookmakers)

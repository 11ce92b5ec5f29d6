"""Human-readable reporting of arbitrage opportunities.

Every report carries at least:
- Event id
- Best win/draw/lose odds
- Stake per outcome
- Guaranteed profit

All amounts and odds are shown to two decimal places.
"""

import json
import sys
from typing import Iterable, Protocol, TextIO

from loguru import logger
from rich.console import Console
from rich.panel import Panel

from ..core.models import ArbitrageOpportunity


def format_opportunity(opp: ArbitrageOpportunity) -> str:
    """
    Format an opportunity as human-readable text.

    Example output:
    ```
    Arbitrage opportunity found for game 0f8c...
    Odds: Win: 2.50, Draw: 4.00, Lose: 5.00
    Stakes: Win: 47.06, Draw: 29.41, Lose: 23.53
    Guaranteed profit: 17.65
    ```
    """
    odds, stakes = opp.odds, opp.stakes
    lines = [
        f"Arbitrage opportunity found for game {opp.event_id}",
        f"Odds: Win: {odds.win:.2f}, Draw: {odds.draw:.2f}, Lose: {odds.lose:.2f}",
        f"Stakes: Win: {stakes.win:.2f}, Draw: {stakes.draw:.2f}, Lose: {stakes.lose:.2f}",
        f"Guaranteed profit: {opp.guaranteed_profit:.2f}",
    ]

    if opp.sources:
        legs = ", ".join(f"{k.title()}: {v}" for k, v in opp.sources.items())
        lines.append(f"Bookmakers: {legs}")

    return "\n".join(lines)


def format_opportunity_short(opp: ArbitrageOpportunity) -> str:
    """
    Format opportunity as single-line summary.

    Example: "ARB +17.65% | 0f8c... | 2.50/4.00/5.00"
    """
    odds = opp.odds
    return (
        f"ARB +{opp.profit_pct:.2f}% | {opp.event_id} | "
        f"{odds.win:.2f}/{odds.draw:.2f}/{odds.lose:.2f}"
    )


def format_opportunity_json(opp: ArbitrageOpportunity) -> dict:
    """
    Format opportunity as JSON-serializable dict.

    Money and odds are rounded to two decimals; the arbitrage
    percentage is kept at full precision.
    """
    return {
        "event_id": opp.event_id,
        "odds": {
            "win": round(opp.odds.win, 2),
            "draw": round(opp.odds.draw, 2),
            "lose": round(opp.odds.lose, 2),
        },
        "arbitrage_percentage": opp.arbitrage_percentage,
        "total_bet": round(opp.total_bet, 2),
        "stakes": {
            "win": round(opp.stakes.win, 2),
            "draw": round(opp.stakes.draw, 2),
            "lose": round(opp.stakes.lose, 2),
        },
        "guaranteed_payout": round(opp.guaranteed_payout, 2),
        "guaranteed_profit": round(opp.guaranteed_profit, 2),
        "profit_pct": round(opp.profit_pct, 4),
        "sources": opp.sources,
        "detected_at": opp.detected_at.isoformat(),
    }


def format_opportunities_table(opportunities: list[ArbitrageOpportunity], limit: int = 20) -> str:
    """
    Format multiple opportunities as ASCII table.

    For CLI output.
    """
    if not opportunities:
        return "No opportunities found."

    lines = []
    header = f"{'Profit':<9} {'Event':<38} {'Win':>6} {'Draw':>6} {'Lose':>6} {'Payout':>9}"
    lines.append(header)
    lines.append("-" * len(header))

    for opp in opportunities[:limit]:
        event = opp.event_id[:36] + ".." if len(opp.event_id) > 38 else opp.event_id
        line = (
            f"{opp.profit_pct:>7.2f}%  {event:<38} "
            f"{opp.odds.win:>6.2f} {opp.odds.draw:>6.2f} {opp.odds.lose:>6.2f} "
            f"{opp.guaranteed_payout:>9.2f}"
        )
        lines.append(line)

    if len(opportunities) > limit:
        lines.append(f"... and {len(opportunities) - limit} more")

    return "\n".join(lines)


def generate_disclaimer() -> str:
    """
    Generate advisory disclaimer text.

    Shown with every console run.
    """
    return """
DISCLAIMER: This is advisory information only. No bets are placed automatically.
Best odds are combined per outcome across bookmakers, so a combination may not
be offered by any single bookmaker. Always verify current odds before placing
any bets. Gamble responsibly.
""".strip()


class ReportSink(Protocol):
    """Receives detected opportunities one at a time."""

    def emit(self, opp: ArbitrageOpportunity) -> None:
        ...


class LogReporter:
    """Write each opportunity to the log."""

    def emit(self, opp: ArbitrageOpportunity) -> None:
        stakes = opp.stakes
        logger.success(
            f"{format_opportunity_short(opp)} | "
            f"stakes {stakes.win:.2f}/{stakes.draw:.2f}/{stakes.lose:.2f} | "
            f"profit {opp.guaranteed_profit:.2f}"
        )


class ConsoleReporter:
    """Render each opportunity as a rich panel."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def emit(self, opp: ArbitrageOpportunity) -> None:
        self.console.print(
            Panel(
                format_opportunity(opp),
                title=f"ARB +{opp.profit_pct:.2f}%",
                border_style="green",
            )
        )


class JsonReporter:
    """Write one JSON object per line to a text stream."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def emit(self, opp: ArbitrageOpportunity) -> None:
        self.stream.write(json.dumps(format_opportunity_json(opp)) + "\n")


def make_reporter(kind: str, stream: TextIO | None = None) -> ReportSink:
    """Build a reporter by name: "log", "console" or "json"."""
    if kind == "log":
        return LogReporter()
    if kind == "console":
        return ConsoleReporter()
    if kind == "json":
        return JsonReporter(stream or sys.stdout)
    raise ValueError(f"Unknown reporter: {kind}")


def report_opportunities(
    opportunities: Iterable[ArbitrageOpportunity],
    sink: ReportSink,
) -> int:
    """Emit every opportunity to the sink. Returns the number emitted."""
    count = 0
    for opp in opportunities:
        sink.emit(opp)
        count += 1
    return count

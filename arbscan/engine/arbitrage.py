"""Arbitrage opportunity detection.

Evaluates the best-odds combination of every event and sizes stakes
for the ones that lock in a guaranteed profit.

Arbitrage Condition: 1/win + 1/draw + 1/lose < 1
"""

from loguru import logger

from ..core.errors import InvalidOdds
from ..core.math import detect_arbitrage
from ..core.models import ArbitrageOpportunity, OutcomeOdds
from ..core.sizing import calculate_stakes
from ..config import DEFAULT_TOTAL_BET


def evaluate_event(
    event_id: str,
    odds: OutcomeOdds,
    total_bet: float = DEFAULT_TOTAL_BET,
    sources: dict[str, str] | None = None,
) -> ArbitrageOpportunity | None:
    """
    Evaluate a single event's best odds.

    Args:
        event_id: Event identifier
        odds: Best-odds combination for the event
        total_bet: Total stake for calculations
        sources: Optional outcome -> bookmaker name for reporting

    Returns:
        The opportunity, or None if the odds are not an arbitrage

    Raises:
        InvalidOdds: if any price is zero, negative or not finite
    """
    arb_result = detect_arbitrage(odds)
    if not arb_result.is_arbitrage:
        return None

    sizing = calculate_stakes(odds, total_bet)

    return ArbitrageOpportunity(
        event_id=event_id,
        odds=odds,
        arbitrage_percentage=arb_result.arbitrage_percentage,
        total_bet=total_bet,
        stakes=sizing.stakes,
        guaranteed_payout=sizing.guaranteed_payout,
        guaranteed_profit=sizing.guaranteed_profit,
        profit_pct=sizing.profit_pct,
        sources=sources or {},
    )


def find_arbitrage_opportunities(
    best_odds: dict[str, OutcomeOdds],
    total_bet: float = DEFAULT_TOTAL_BET,
    sources: dict[str, dict[str, str]] | None = None,
) -> tuple[list[ArbitrageOpportunity], int]:
    """
    Find arbitrage opportunities across all events.

    Events are independent: one with unusable odds is logged and
    skipped without stopping the rest.

    Args:
        best_odds: Best-odds map from the aggregator
        total_bet: Total stake for calculations
        sources: Optional per-event leg sources from the aggregator

    Returns:
        Tuple of (opportunities sorted by profit descending, skipped count)
    """
    if total_bet <= 0:
        raise ValueError(f"Total bet must be > 0, got {total_bet}")

    sources = sources or {}
    opportunities = []
    skipped = 0

    for event_id, odds in best_odds.items():
        try:
            opp = evaluate_event(event_id, odds, total_bet, sources.get(event_id))
        except InvalidOdds as e:
            logger.warning(f"Skipping event {event_id}: {e}")
            skipped += 1
            continue

        if opp is not None:
            opportunities.append(opp)

    opportunities.sort(key=lambda x: x.profit_pct, reverse=True)
    return opportunities, skipped

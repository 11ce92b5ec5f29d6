"""Core mathematical functions for 1X2 arbitrage detection.

All functions are pure and have no side effects.

Key Formulas:
- Implied Probability: P = 1 / decimal_odds
- Arbitrage Percentage: A = 1/win + 1/draw + 1/lose
- Arbitrage Condition: A < 1
- Arbitrage Profit %: (1 / A - 1) * 100
"""

import math
from typing import NamedTuple

from .errors import InvalidOdds
from .models import OutcomeOdds


class ArbitrageResult(NamedTuple):
    """Result of arbitrage detection."""
    is_arbitrage: bool
    arbitrage_percentage: float
    profit_pct: float
    margin: float  # How much below 1 (negative when there is no arb)


def truncate_to_cents(value: float) -> float:
    """
    Truncate a value toward zero to two decimal places.

    Not nearest or banker's rounding:
        2.999 → 2.99
        1.005 → 1.0
    """
    return math.trunc(value * 100) / 100


def validate_odds(odds: OutcomeOdds) -> OutcomeOdds:
    """
    Check that every price is a finite number greater than zero.

    Raises:
        InvalidOdds: if any of win/draw/lose is unusable
    """
    for field, price in zip(("win", "draw", "lose"), odds.as_tuple()):
        if not math.isfinite(price) or price <= 0:
            raise InvalidOdds(f"{field} price must be finite and > 0, got {price}", odds)
    return odds


def calculate_implied_probability(decimal_odds: float) -> float:
    """
    Calculate implied probability from decimal odds.

    Formula: P = 1 / decimal_odds

    Examples:
        2.00 → 0.50 (50%)
        4.00 → 0.25 (25%)
    """
    if not math.isfinite(decimal_odds) or decimal_odds <= 0:
        raise InvalidOdds(f"Decimal odds must be finite and > 0, got {decimal_odds}")
    return 1.0 / decimal_odds


def calculate_arbitrage_percentage(odds: OutcomeOdds) -> float:
    """
    Sum of implied probabilities of the three outcomes.

    This is the fraction of a unit stake needed to guarantee a unit
    return. Below 1 the market is inefficient and a profit is lockable.
    """
    validate_odds(odds)
    return sum(calculate_implied_probability(price) for price in odds.as_tuple())


def detect_arbitrage(odds: OutcomeOdds) -> ArbitrageResult:
    """
    Detect whether a win/draw/lose combination is an arbitrage.

    Args:
        odds: Best available prices for the event

    Returns:
        ArbitrageResult with detection results

    Raises:
        InvalidOdds: if any price is zero, negative or not finite
    """
    percentage = calculate_arbitrage_percentage(odds)
    is_arb = percentage < 1.0
    margin = 1.0 - percentage
    profit_pct = (1.0 / percentage - 1.0) * 100 if is_arb else 0.0

    return ArbitrageResult(
        is_arbitrage=is_arb,
        arbitrage_percentage=percentage,
        profit_pct=profit_pct,
        margin=margin,
    )

"""Stake sizing calculations for arbitrage opportunities.

Key Formulas:
    A = 1/win + 1/draw + 1/lose
    P = total_bet / A                (guaranteed payout)
    stake_o = P / price_o

    Guaranteed Payout = stake_win * win = stake_draw * draw = stake_lose * lose
    Guaranteed Profit = P - (stake_win + stake_draw + stake_lose)

All results must be finite; overflow is reported as InvalidOdds.
"""

import math
from typing import NamedTuple

from .errors import InvalidOdds
from .math import calculate_arbitrage_percentage
from .models import OutcomeOdds, Stakes


class StakeSizing(NamedTuple):
    """Result of stake sizing calculation."""
    stakes: Stakes               # Stake for each outcome
    total_stake: float           # Total capital required
    guaranteed_payout: float     # Payout regardless of outcome
    guaranteed_profit: float     # Payout minus total stake
    profit_pct: float            # Profit as percentage of total stake


def calculate_stakes(odds: OutcomeOdds, total_bet: float) -> StakeSizing:
    """
    Split a total bet across win/draw/lose so every outcome pays the same.

    Values are left unrounded; round only when presenting them.

    Args:
        odds: Prices already confirmed to have arbitrage percentage < 1
        total_bet: Total amount to commit, must be positive

    Returns:
        StakeSizing with stakes and profit calculations

    Raises:
        InvalidOdds: if any price is zero, negative or not finite, or the
            sizing overflows to a non-finite value
        ValueError: if total_bet is not positive
    """
    if total_bet <= 0:
        raise ValueError(f"Total bet must be > 0, got {total_bet}")

    percentage = calculate_arbitrage_percentage(odds)
    payout = total_bet / percentage

    stakes = Stakes(
        win=payout / odds.win,
        draw=payout / odds.draw,
        lose=payout / odds.lose,
    )
    total_stake = stakes.total
    guaranteed_profit = payout - total_stake
    profit_pct = guaranteed_profit / total_stake * 100 if total_stake > 0 else 0.0

    # Extreme prices can overflow the payout even when each price is finite
    if not all(math.isfinite(v) for v in (payout, *stakes.as_tuple(), guaranteed_profit, profit_pct)):
        raise InvalidOdds(f"Stake sizing overflowed for odds {odds.as_tuple()}", odds)

    return StakeSizing(
        stakes=stakes,
        total_stake=total_stake,
        guaranteed_payout=payout,
        guaranteed_profit=guaranteed_profit,
        profit_pct=profit_pct,
    )


def calculate_payouts(stakes: Stakes, odds: OutcomeOdds) -> dict[str, float]:
    """Payout for each outcome if it occurs."""
    return {
        "win": stakes.win * odds.win,
        "draw": stakes.draw * odds.draw,
        "lose": stakes.lose * odds.lose,
    }

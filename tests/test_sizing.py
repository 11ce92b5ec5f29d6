"""Tests for stake sizing."""

import math
import random

import pytest

from arbscan.core.errors import InvalidOdds
from arbscan.core.math import calculate_arbitrage_percentage
from arbscan.core.models import OutcomeOdds, Stakes
from arbscan.core.sizing import calculate_payouts, calculate_stakes


class TestCalculateStakes:

    def test_stakes_for_known_odds(self, arb_odds):
        sizing = calculate_stakes(arb_odds, 100.0)
        payout = 100.0 / 0.85

        assert sizing.guaranteed_payout == pytest.approx(payout)
        assert sizing.stakes.win == pytest.approx(payout / 2.5)
        assert sizing.stakes.draw == pytest.approx(payout / 4.0)
        assert sizing.stakes.lose == pytest.approx(payout / 5.0)
        assert sizing.total_stake == pytest.approx(100.0)
        assert sizing.guaranteed_profit == pytest.approx(payout - 100.0)
        assert sizing.profit_pct == pytest.approx((payout - 100.0))

    def test_stakes_scale_with_total_bet(self, arb_odds):
        small = calculate_stakes(arb_odds, 100.0)
        large = calculate_stakes(arb_odds, 250.0)
        assert large.stakes.win == pytest.approx(small.stakes.win * 2.5)
        assert large.guaranteed_profit == pytest.approx(small.guaranteed_profit * 2.5)

    def test_payouts_equal_across_outcomes(self):
        rng = random.Random(7)
        checked = 0

        while checked < 200:
            odds = OutcomeOdds(
                win=rng.uniform(1.01, 10.0),
                draw=rng.uniform(1.01, 10.0),
                lose=rng.uniform(1.01, 10.0),
            )
            if calculate_arbitrage_percentage(odds) >= 1:
                continue

            total_bet = rng.uniform(1.0, 10000.0)
            sizing = calculate_stakes(odds, total_bet)
            payouts = calculate_payouts(sizing.stakes, odds)

            for payout in payouts.values():
                assert math.isclose(payout, sizing.guaranteed_payout, rel_tol=1e-9)
            checked += 1

    def test_rejects_zero_price(self):
        with pytest.raises(InvalidOdds):
            calculate_stakes(OutcomeOdds(win=0.0, draw=3.0, lose=4.0), 100.0)

    @pytest.mark.parametrize("total_bet", [0.0, -10.0])
    def test_rejects_non_positive_total_bet(self, arb_odds, total_bet):
        with pytest.raises(ValueError):
            calculate_stakes(arb_odds, total_bet)

    def test_rejects_overflowing_odds(self):
        odds = OutcomeOdds(win=1e308, draw=1e308, lose=1e308)
        with pytest.raises(InvalidOdds) as exc_info:
            calculate_stakes(odds, 100.0)
        assert exc_info.value.odds is odds

    def test_large_but_representable_odds(self):
        sizing = calculate_stakes(OutcomeOdds(win=1e6, draw=1e6, lose=1e6), 100.0)
        for value in (*sizing.stakes.as_tuple(), sizing.guaranteed_payout, sizing.guaranteed_profit):
            assert math.isfinite(value)


class TestCalculatePayouts:

    def test_payouts_for_arbitrary_stakes(self, arb_odds):
        stakes = Stakes(win=10.0, draw=0.0, lose=2.0)
        assert calculate_payouts(stakes, arb_odds) == {"win": 25.0, "draw": 0.0, "lose": 10.0}

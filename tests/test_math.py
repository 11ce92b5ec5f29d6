"""Tests for arbitrage math."""

import math

import pytest

from arbscan.core.errors import InvalidOdds
from arbscan.core.math import (
    calculate_arbitrage_percentage,
    calculate_implied_probability,
    detect_arbitrage,
    truncate_to_cents,
    validate_odds,
)
from arbscan.core.models import OutcomeOdds


class TestTruncateToCents:
    """Prices are truncated, never rounded up."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (2.999, 2.99),
            (1.005, 1.0),
            (3.0, 3.0),
            (2.5, 2.5),
            (4.567, 4.56),
        ],
    )
    def test_truncates_toward_zero(self, value, expected):
        assert truncate_to_cents(value) == expected

    def test_negative_truncates_toward_zero(self):
        assert truncate_to_cents(-1.239) == -1.23


class TestArbitragePercentage:

    def test_sum_of_reciprocals(self, arb_odds):
        assert calculate_arbitrage_percentage(arb_odds) == pytest.approx(0.85)

    def test_implied_probability(self):
        assert calculate_implied_probability(4.0) == 0.25

    def test_flags_arbitrage_below_one(self, arb_odds):
        result = detect_arbitrage(arb_odds)
        assert result.is_arbitrage
        assert result.arbitrage_percentage == pytest.approx(0.85)
        assert result.margin == pytest.approx(0.15)
        assert result.profit_pct == pytest.approx((1 / 0.85 - 1) * 100)

    def test_no_arbitrage_at_or_above_one(self, no_arb_odds):
        result = detect_arbitrage(no_arb_odds)
        assert not result.is_arbitrage
        assert result.arbitrage_percentage == pytest.approx(1.5)
        assert result.profit_pct == 0.0
        assert result.margin < 0

    def test_exactly_one_is_not_arbitrage(self):
        result = detect_arbitrage(OutcomeOdds(win=2.0, draw=4.0, lose=4.0))
        assert result.arbitrage_percentage == pytest.approx(1.0)
        assert not result.is_arbitrage


class TestInvalidOdds:

    @pytest.mark.parametrize(
        "odds",
        [
            OutcomeOdds(win=0.0, draw=3.0, lose=4.0),
            OutcomeOdds(win=2.0, draw=0.0, lose=4.0),
            OutcomeOdds(win=2.0, draw=3.0, lose=-1.0),
            OutcomeOdds(win=math.inf, draw=3.0, lose=4.0),
            OutcomeOdds(win=2.0, draw=math.nan, lose=4.0),
        ],
    )
    def test_rejects_unusable_prices(self, odds):
        with pytest.raises(InvalidOdds) as exc_info:
            calculate_arbitrage_percentage(odds)
        assert exc_info.value.odds is odds

    def test_invalid_odds_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_odds(OutcomeOdds(win=0.0, draw=3.0, lose=4.0))

    def test_valid_odds_pass_through(self, arb_odds):
        assert validate_odds(arb_odds) is arb_odds

    def test_implied_probability_rejects_zero(self):
        with pytest.raises(InvalidOdds):
            calculate_implied_probability(0.0)

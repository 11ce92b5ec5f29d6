from .models import OutcomeOdds, Game, Bookmaker, Stakes, ArbitrageOpportunity, ScanResult
from .errors import ArbScanError, InvalidOdds, IngestionFailure, PersistenceFailure
from .math import (
    truncate_to_cents,
    validate_odds,
    calculate_implied_probability,
    calculate_arbitrage_percentage,
    detect_arbitrage,
)
from .sizing import calculate_stakes, calculate_payouts

__all__ = [
    "OutcomeOdds",
    "Game",
    "Bookmaker",
    "Stakes",
    "ArbitrageOpportunity",
    "ScanResult",
    "ArbScanError",
    "InvalidOdds",
    "IngestionFailure",
    "PersistenceFailure",
    "truncate_to_cents",
    "validate_odds",
    "calculate_implied_probability",
    "calculate_arbitrage_percentage",
    "detect_arbitrage",
    "calculate_stakes",
    "calculate_payouts",
]

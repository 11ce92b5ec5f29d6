"""Error kinds raised by the arbitrage scanner."""


class ArbScanError(Exception):
    """Base exception for all scanner errors."""

    pass


class InvalidOdds(ArbScanError, ValueError):
    """Raised when a price is zero, negative or not a finite number."""

    def __init__(self, message: str, odds=None):
        super().__init__(message)
        self.odds = odds


class IngestionFailure(ArbScanError):
    """Raised when bookmaker data could not be generated or loaded."""

    pass


class PersistenceFailure(ArbScanError):
    """Raised when the bookmaker snapshot could not be read or written."""

    pass

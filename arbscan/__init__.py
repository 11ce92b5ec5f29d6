"""Sports betting arbitrage scanner."""

__version__ = "1.0.0"

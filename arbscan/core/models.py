from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class OutcomeOdds(BaseModel):
    """Decimal prices for the three outcomes of an event.

    Any float is accepted here so malformed snapshots can still be loaded;
    usability is checked by `core.math.validate_odds`.
    """
    model_config = ConfigDict(frozen=True)

    win: float
    draw: float
    lose: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.win, self.draw, self.lose)


class Game(BaseModel):
    """A single event as quoted by one bookmaker."""
    model_config = ConfigDict(frozen=True)

    id: str
    team_a: str
    team_b: str
    odds: OutcomeOdds
    event_at: datetime


class Bookmaker(BaseModel):
    """A bookmaker and the games it quotes."""
    model_config = ConfigDict(frozen=True)

    name: str
    games: list[Game] = Field(default_factory=list)


class Stakes(BaseModel):
    """Amount to wager on each outcome."""
    model_config = ConfigDict(frozen=True)

    win: float
    draw: float
    lose: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.win, self.draw, self.lose)

    @property
    def total(self) -> float:
        return self.win + self.draw + self.lose


class ArbitrageOpportunity(BaseModel):
    """Detected arbitrage on the best-odds combination of one event."""
    model_config = ConfigDict(frozen=True)

    event_id: str
    odds: OutcomeOdds
    arbitrage_percentage: float
    total_bet: float
    stakes: Stakes
    guaranteed_payout: float
    guaranteed_profit: float
    profit_pct: float
    sources: dict[str, str] = Field(default_factory=dict)  # outcome -> bookmaker
    detected_at: datetime = Field(default_factory=datetime.utcnow)


class ScanResult(BaseModel):
    """Result of a scan pass."""
    opportunities: list[ArbitrageOpportunity]
    bookmakers_scanned: int
    events_scanned: int
    events_skipped: int = 0
    scan_duration_ms: float
    timestamp: datetime = Field(default_factory=datetime.utcnow)

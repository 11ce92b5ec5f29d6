"""Scanner configuration.

Defaults live as module constants; `AppSettings` lets any of them be
overridden from ARBSCAN_* environment variables, a .env file or the CLI.
"""

import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Data set size
DEFAULT_NUM_BOOKMAKERS = 100
DEFAULT_GAMES_PER_BOOKMAKER = 10000

# Stake sizing
DEFAULT_TOTAL_BET = 100.0

# Snapshot persistence
DEFAULT_SNAPSHOT_PATH = "bookmakers.json"

# Generated price ranges: (low, width) -> low + random() * width
WIN_ODDS_RANGE = (1.0, 2.0)
DRAW_ODDS_RANGE = (2.0, 3.0)
LOSE_ODDS_RANGE = (2.0, 4.0)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    num_bookmakers: int = Field(
        DEFAULT_NUM_BOOKMAKERS, ge=1, description="Number of bookmakers to generate."
    )
    games_per_bookmaker: int = Field(
        DEFAULT_GAMES_PER_BOOKMAKER, ge=1, description="Games quoted by each bookmaker."
    )
    total_bet: float = Field(
        DEFAULT_TOTAL_BET, gt=0, description="Total amount split across the three outcomes."
    )
    seed: Optional[int] = Field(
        None, description="Seed for data generation. None draws a fresh one."
    )
    shared_event_pool: Optional[int] = Field(
        None,
        ge=1,
        description="If set, bookmakers quote games drawn from a common pool of this size.",
    )
    snapshot_path: Path = Field(
        Path(DEFAULT_SNAPSHOT_PATH), description="JSON snapshot of generated bookmakers."
    )
    reporter: Literal["log", "console", "json"] = Field(
        "console", description="Where detected opportunities are reported."
    )
    log_level: str = Field("INFO", description="Loguru level name.")

    model_config = SettingsConfigDict(
        env_prefix="ARBSCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            logging.warning(f"Invalid log level '{value}'. Using INFO.")
            return "INFO"
        return level


def load_settings(**overrides) -> AppSettings:
    """Load settings, letting explicit keyword overrides win over the environment.

    None-valued overrides are ignored so unset CLI flags fall through.
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    return AppSettings(**values)

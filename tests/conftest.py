"""Shared fixtures for scanner tests."""

from datetime import datetime

import pytest
from loguru import logger

from arbscan.core.models import Bookmaker, Game, OutcomeOdds

EVENT_AT = datetime(2025, 3, 1, 18, 30)


def make_game(event_id: str, win: float, draw: float, lose: float) -> Game:
    return Game(
        id=event_id,
        team_a="home",
        team_b="away",
        odds=OutcomeOdds(win=win, draw=draw, lose=lose),
        event_at=EVENT_AT,
    )


@pytest.fixture
def arb_odds():
    """Odds with 1/2.5 + 1/4 + 1/5 = 0.85."""
    return OutcomeOdds(win=2.5, draw=4.0, lose=5.0)


@pytest.fixture
def no_arb_odds():
    """Odds with 1/1.5 + 1/2 + 1/3 = 1.5."""
    return OutcomeOdds(win=1.5, draw=2.0, lose=3.0)


@pytest.fixture
def bookmakers():
    """Two bookmakers sharing one event, each with one event of their own."""
    return [
        Bookmaker(
            name="alpha.com",
            games=[
                make_game("shared", 2.10, 3.00, 4.00),
                make_game("alpha-only", 1.80, 3.20, 4.10),
            ],
        ),
        Bookmaker(
            name="beta.com",
            games=[
                make_game("shared", 1.90, 3.50, 4.20),
                make_game("beta-only", 2.50, 4.00, 5.00),
            ],
        ),
    ]


@pytest.fixture
def log_messages():
    """Collect loguru messages at WARNING and above."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)

"""Synthetic bookmaker data.

Each bookmaker's quote set is produced by its own worker with its own
seeded Faker instance, so output depends only on the master seed and not
on how the workers are scheduled.
"""

import asyncio
import random
from datetime import datetime, timedelta
from typing import NamedTuple

from faker import Faker
from loguru import logger

from ..core.math import truncate_to_cents
from ..core.models import Bookmaker, Game, OutcomeOdds
from ..config import DRAW_ODDS_RANGE, LOSE_ODDS_RANGE, WIN_ODDS_RANGE

# Event times are spread over this window around the anchor time
EVENT_WINDOW = timedelta(days=365)


class EventInfo(NamedTuple):
    """Identity of an event, shared by every bookmaker quoting it."""
    id: str
    team_a: str
    team_b: str
    event_at: datetime


def generate_odds(rng: random.Random) -> OutcomeOdds:
    """
    Draw random win/draw/lose prices, truncated to two decimals.

    Ranges: win [1, 3), draw [2, 5), lose [2, 6)
    """
    def draw(bounds: tuple[float, float]) -> float:
        low, width = bounds
        return truncate_to_cents(rng.random() * width + low)

    return OutcomeOdds(
        win=draw(WIN_ODDS_RANGE),
        draw=draw(DRAW_ODDS_RANGE),
        lose=draw(LOSE_ODDS_RANGE),
    )


def generate_event(fake: Faker, anchor: datetime) -> EventInfo:
    """Generate a fake event identity within the window around anchor."""
    return EventInfo(
        id=fake.uuid4(),
        team_a=fake.word(),
        team_b=fake.word(),
        event_at=fake.date_time_between_dates(
            datetime_start=anchor - EVENT_WINDOW,
            datetime_end=anchor + EVENT_WINDOW,
        ),
    )


def generate_event_pool(seed: int, size: int, anchor: datetime) -> list[EventInfo]:
    """Generate a pool of events that several bookmakers can quote."""
    fake = Faker()
    fake.seed_instance(seed)
    return [generate_event(fake, anchor) for _ in range(size)]


def generate_games(
    fake: Faker,
    num_games: int,
    anchor: datetime,
    event_pool: list[EventInfo] | None = None,
) -> list[Game]:
    """
    Generate a list of fake games with random odds.

    Args:
        fake: Seeded Faker instance; its random source also drives the odds
        num_games: Number of games to generate
        anchor: Centre of the event time window
        event_pool: If given, games are drawn from it without repetition
            (at most len(event_pool) games)
    """
    rng = fake.random

    if event_pool is not None:
        events = rng.sample(event_pool, min(num_games, len(event_pool)))
    else:
        events = [generate_event(fake, anchor) for _ in range(num_games)]

    return [
        Game(
            id=event.id,
            team_a=event.team_a,
            team_b=event.team_b,
            odds=generate_odds(rng),
            event_at=event.event_at,
        )
        for event in events
    ]


def generate_bookmaker(
    seed: int,
    num_games: int,
    anchor: datetime,
    event_pool: list[EventInfo] | None = None,
) -> Bookmaker:
    """Generate one bookmaker from its own seed."""
    fake = Faker()
    fake.seed_instance(seed)
    return Bookmaker(
        name=fake.domain_name(),
        games=generate_games(fake, num_games, anchor, event_pool),
    )


async def generate_bookmakers(
    num_bookmakers: int,
    games_per_bookmaker: int,
    seed: int | None = None,
    shared_event_pool: int | None = None,
    anchor: datetime | None = None,
) -> list[Bookmaker]:
    """
    Generate bookmakers concurrently, one worker per bookmaker.

    All workers are joined before returning.

    Args:
        num_bookmakers: Number of bookmakers to generate
        games_per_bookmaker: Games quoted by each bookmaker
        seed: Master seed. None draws a fresh one from the OS.
        shared_event_pool: If set, games come from a common pool of this
            many events so quotes overlap across bookmakers
        anchor: Centre of the event time window. Defaults to now.

    Returns:
        List of generated bookmakers
    """
    if num_bookmakers < 1 or games_per_bookmaker < 1:
        raise ValueError(
            f"Need at least one bookmaker and one game, got "
            f"{num_bookmakers} bookmakers x {games_per_bookmaker} games"
        )

    if seed is None:
        seed = random.SystemRandom().getrandbits(64)
    if anchor is None:
        anchor = datetime.utcnow().replace(microsecond=0)

    master = random.Random(seed)
    event_pool = None
    if shared_event_pool is not None:
        event_pool = generate_event_pool(master.getrandbits(64), shared_event_pool, anchor)

    seeds = [master.getrandbits(64) for _ in range(num_bookmakers)]

    logger.info(
        f"Generating {num_bookmakers} bookmakers x {games_per_bookmaker} games "
        f"(seed={seed}, shared_event_pool={shared_event_pool})"
    )

    bookmakers = await asyncio.gather(*(
        asyncio.to_thread(generate_bookmaker, s, games_per_bookmaker, anchor, event_pool)
        for s in seeds
    ))

    return list(bookmakers)

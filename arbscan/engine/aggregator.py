"""Best-odds aggregation across bookmakers.

For each event, keeps the highest price offered by any bookmaker,
independently for win, draw and lose. The resulting combination may mix
legs from different bookmakers and need not match any single quote.
"""

from typing import Iterable

from ..core.errors import InvalidOdds
from ..core.math import validate_odds
from ..core.models import Bookmaker, Game, OutcomeOdds

OUTCOMES = ("win", "draw", "lose")


def _usable(game: Game) -> bool:
    try:
        validate_odds(game.odds)
    except InvalidOdds:
        return False
    return True


def find_best_odds(bookmakers: Iterable[Bookmaker]) -> dict[str, OutcomeOdds]:
    """
    Build the best-odds map for every event quoted by any bookmaker.

    An event quoted by a single bookmaker keeps that bookmaker's odds.
    Quotes with a zero, negative or non-finite price are ignored, so an
    event only appears if at least one usable quote exists.

    Args:
        bookmakers: Bookmakers with their quoted games (read-only)

    Returns:
        Mapping of event id -> per-field maximum odds
    """
    best_odds: dict[str, OutcomeOdds] = {}

    for bookmaker in bookmakers:
        for game in bookmaker.games:
            if not _usable(game):
                continue
            current = best_odds.get(game.id)
            if current is None:
                best_odds[game.id] = game.odds
                continue

            best_odds[game.id] = OutcomeOdds(
                win=max(current.win, game.odds.win),
                draw=max(current.draw, game.odds.draw),
                lose=max(current.lose, game.odds.lose),
            )

    return best_odds


def find_best_sources(bookmakers: Iterable[Bookmaker]) -> dict[str, dict[str, str]]:
    """
    Find which bookmaker supplies each leg of the best-odds combination.

    On ties the first bookmaker to quote the maximum is kept. Unusable
    quotes are ignored as in `find_best_odds`.

    Returns:
        Mapping of event id -> {outcome: bookmaker name}
    """
    best: dict[str, dict[str, tuple[float, str]]] = {}

    for bookmaker in bookmakers:
        for game in bookmaker.games:
            if not _usable(game):
                continue
            legs = best.setdefault(game.id, {})
            for outcome in OUTCOMES:
                price = getattr(game.odds, outcome)
                if outcome not in legs or price > legs[outcome][0]:
                    legs[outcome] = (price, bookmaker.name)

    return {
        event_id: {outcome: name for outcome, (_, name) in legs.items()}
        for event_id, legs in best.items()
    }

"""Quote ingestion.

Produces the engine's working set: bookmakers loaded from a snapshot or
freshly generated, with unusable quotes dropped.
"""

from loguru import logger

from ..config import AppSettings
from ..core.errors import IngestionFailure, InvalidOdds
from ..core.math import validate_odds
from ..core.models import Bookmaker
from .generator import generate_bookmakers
from .snapshot import load_bookmakers, save_bookmakers


def normalize_bookmakers(bookmakers: list[Bookmaker]) -> tuple[list[Bookmaker], int]:
    """
    Drop games whose odds cannot be used in arbitrage math.

    Returns:
        Tuple of (cleaned bookmakers, number of games dropped)
    """
    cleaned = []
    dropped = 0

    for bookmaker in bookmakers:
        games = []
        for game in bookmaker.games:
            try:
                validate_odds(game.odds)
            except InvalidOdds as e:
                logger.warning(f"Dropping game {game.id} from {bookmaker.name}: {e}")
                dropped += 1
                continue
            games.append(game)

        if len(games) == len(bookmaker.games):
            cleaned.append(bookmaker)
        else:
            cleaned.append(bookmaker.model_copy(update={"games": games}))

    return cleaned, dropped


async def load_or_generate(settings: AppSettings) -> list[Bookmaker]:
    """
    Load bookmakers from the snapshot, or generate and save them.

    Raises:
        PersistenceFailure: if the snapshot cannot be read or written
        IngestionFailure: if no bookmaker data could be produced
    """
    path = settings.snapshot_path

    if path.exists():
        bookmakers = load_bookmakers(path)
    else:
        try:
            bookmakers = await generate_bookmakers(
                settings.num_bookmakers,
                settings.games_per_bookmaker,
                seed=settings.seed,
                shared_event_pool=settings.shared_event_pool,
            )
        except ValueError as e:
            raise IngestionFailure(f"Failed to generate bookmakers: {e}") from e
        save_bookmakers(bookmakers, path)

    if not bookmakers:
        raise IngestionFailure(f"No bookmakers available from {path}")

    return bookmakers

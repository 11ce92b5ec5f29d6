"""JSON snapshot of the bookmaker collection.

Makes a generation run reproducible across invocations. Layout:

    [
      {
        "name": "example.com",
        "games": [
          {"id": "...", "team_a": "...", "team_b": "...",
           "odds": {"win": 2.1, "draw": 3.4, "lose": 4.05},
           "event_at": "2025-03-01T18:30:00"}
        ]
      }
    ]
"""

from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from ..core.errors import PersistenceFailure
from ..core.models import Bookmaker

_bookmakers_adapter = TypeAdapter(list[Bookmaker])


def save_bookmakers(bookmakers: list[Bookmaker], path: str | Path) -> None:
    """Write bookmakers to a JSON file, replacing any existing one."""
    path = Path(path)
    try:
        data = _bookmakers_adapter.dump_json(bookmakers, indent=2)
        path.write_bytes(data)
    except OSError as e:
        raise PersistenceFailure(f"Failed to write snapshot {path}: {e}") from e

    logger.info(f"Saved {len(bookmakers)} bookmakers to {path}")


def load_bookmakers(path: str | Path) -> list[Bookmaker]:
    """Read bookmakers from a JSON file written by `save_bookmakers`."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise PersistenceFailure(f"Failed to read snapshot {path}: {e}") from e

    try:
        bookmakers = _bookmakers_adapter.validate_json(data)
    except ValidationError as e:
        raise PersistenceFailure(f"Malformed snapshot {path}: {e}") from e

    logger.info(f"Loaded {len(bookmakers)} bookmakers from {path}")
    return bookmakers

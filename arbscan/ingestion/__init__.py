from .generator import EventInfo, generate_odds, generate_games, generate_bookmaker, generate_bookmakers
from .snapshot import save_bookmakers, load_bookmakers
from .adapter import normalize_bookmakers, load_or_generate

__all__ = [
    "EventInfo",
    "generate_odds",
    "generate_games",
    "generate_bookmaker",
    "generate_bookmakers",
    "save_bookmakers",
    "load_bookmakers",
    "normalize_bookmakers",
    "load_or_generate",
]

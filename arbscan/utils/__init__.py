from .logging import setup_logging, InterceptHandler
from .time import Timer

__all__ = [
    "setup_logging",
    "InterceptHandler",
    "Timer",
]

"""Utilities module for chainhash."""

from chainhash.utils.logging import get_logger
from chainhash.utils.seeds import seed_everything
from chainhash.utils.timing import Timer, timer

__all__ = [
    "get_logger",
    "seed_everything",
    "Timer",
    "timer",
]

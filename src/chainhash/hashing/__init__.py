"""Hashing modules for chainhash."""

from .base import HashFunction
from .length_initial import LengthInitialHash
from .polynomial import PolynomialHash
from .registry import HASH_FUNCTIONS, get_hash_function
from .diagnostics import (
    empty_fraction,
    estimate_q2,
    gini_of_load,
    max_load,
    occupancy_summary,
)

__all__ = [
    "HashFunction",
    "PolynomialHash",
    "LengthInitialHash",
    "HASH_FUNCTIONS",
    "get_hash_function",
    "occupancy_summary",
    "max_load",
    "empty_fraction",
    "gini_of_load",
    "estimate_q2",
]

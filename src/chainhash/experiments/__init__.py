"""Experiments module for chainhash."""

from . import exp01_hash_comparison
from . import exp02_resize_trace

__all__ = [
    "exp01_hash_comparison",
    "exp02_resize_trace",
]

"""Seed management for determinism."""

import random

import numpy as np


def seed_everything(seed: int) -> None:
    """Set all random seeds for deterministic behavior.

    Sets seeds for Python random and NumPy. Experiments draw their keys
    from local generators (see ``make_rng``); this only pins global state
    for code that still reaches for it.

    Args:
        seed: Random seed value (should be non-negative integer)
    """
    # Python random
    random.seed(seed)

    # NumPy
    np.random.seed(seed)

"""Diagnostic functions for bucket distribution analysis.

All functions take per-bucket key counts, as returned by
``ChainedHashTable.bucket_counts()``.
"""

from typing import Dict, Sequence

import numpy as np


def max_load(counts: Sequence[int]) -> int:
    """
    Compute maximum load (number of keys in the most loaded bucket).

    Args:
        counts: Keys per bucket

    Returns:
        Maximum load value (0 for no buckets)
    """
    loads = np.asarray(counts, dtype=np.int64)
    if loads.size == 0:
        return 0
    return int(loads.max())


def empty_fraction(counts: Sequence[int]) -> float:
    """Fraction of buckets holding no key."""
    loads = np.asarray(counts, dtype=np.int64)
    if loads.size == 0:
        return 0.0
    return float(np.mean(loads == 0))


def gini_of_load(counts: Sequence[int]) -> float:
    """
    Compute Gini coefficient of the non-empty bucket loads.

    Measures inequality among occupied buckets (0 = uniform).

    Args:
        counts: Keys per bucket

    Returns:
        Gini coefficient (0 to 1)
    """
    loads = np.asarray(counts, dtype=np.float64)
    loads = loads[loads > 0]  # Only non-zero loads

    if len(loads) == 0:
        return 0.0

    sorted_loads = np.sort(loads)
    n = len(sorted_loads)
    cumsum = np.cumsum(sorted_loads)
    gini = (2 * np.sum((np.arange(1, n + 1)) * sorted_loads)) / (n * cumsum[-1]) - (
        n + 1
    ) / n

    return float(gini)


def estimate_q2(counts: Sequence[int]) -> float:
    """
    Estimate sum of squared bucket probabilities.

    Computes sum_i (c_i / total)^2. For a uniform spread over C buckets this
    tends to 1/C; it reaches 1 when every key shares one bucket.

    Args:
        counts: Keys per bucket

    Returns:
        Estimated q^2 value
    """
    loads = np.asarray(counts, dtype=np.float64)
    total = loads.sum()

    if total == 0:
        return 0.0

    probs = loads / total
    return float(np.sum(probs ** 2))


def occupancy_summary(counts: Sequence[int], topk: int = 5) -> Dict:
    """
    Compute compact occupancy summary.

    Args:
        counts: Keys per bucket
        topk: Number of most loaded buckets to report

    Returns:
        Dictionary with:
        - total_keys: int
        - buckets_used: int
        - mean_load: float
        - std_load: float
        - max_load: int
        - empty_fraction: float
        - top_buckets: List[Tuple[int, int]] of (bucket, load) pairs
        - q2_estimate: float
        - gini: float
    """
    loads = np.asarray(counts, dtype=np.int64)
    total_keys = int(loads.sum()) if loads.size else 0

    if total_keys == 0:
        return {
            "total_keys": 0,
            "buckets_used": 0,
            "mean_load": 0.0,
            "std_load": 0.0,
            "max_load": 0,
            "empty_fraction": 1.0 if loads.size else 0.0,
            "top_buckets": [],
            "q2_estimate": 0.0,
            "gini": 0.0,
        }

    # Stable sort keeps lower bucket indices first among equal loads
    order = np.argsort(-loads, kind="stable")[:topk]
    top_buckets = [(int(b), int(loads[b])) for b in order if loads[b] > 0]

    return {
        "total_keys": total_keys,
        "buckets_used": int(np.sum(loads > 0)),
        "mean_load": float(loads.mean()),
        "std_load": float(loads.std()),
        "max_load": int(loads.max()),
        "empty_fraction": empty_fraction(loads),
        "top_buckets": top_buckets,
        "q2_estimate": estimate_q2(loads),
        "gini": gini_of_load(loads),
    }

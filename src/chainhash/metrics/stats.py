"""Statistical utilities for experiments."""

import numpy as np
from typing import Sequence, Dict, Any, Tuple
from collections import defaultdict


def mean_ci95(values: Sequence[float]) -> Tuple[float, float, float, float]:
    """Compute mean and 95% confidence interval using normal approximation.

    Uses z=1.96 for all sample sizes.

    Args:
        values: Array of float values

    Returns:
        (mean, ci_low, ci_high, std)
    """
    if len(values) == 0:
        return (0.0, 0.0, 0.0, 0.0)

    arr = np.array(values, dtype=np.float64)
    n = len(arr)
    mean = float(np.mean(arr))

    if n == 1:
        return (mean, mean, mean, 0.0)

    std = float(np.std(arr, ddof=1))  # Sample standard deviation
    se = std / np.sqrt(n)  # Standard error
    z = 1.96
    margin = z * se

    return (mean, mean - margin, mean + margin, std)


def group_label(groupby_keys: Sequence[str], values: Sequence[Any]) -> str:
    """Format a group as ``"key=value,key=value"`` for JSON-safe keys."""
    return ",".join(f"{k}={v}" for k, v in zip(groupby_keys, values))


def summarize_groups(
    raw_rows: list[Dict[str, Any]],
    groupby_keys: list[str],
    metric_keys: list[str]
) -> Dict[str, Dict[str, Dict[str, float]]]:
    """Summarize metrics grouped by specified keys.

    Groups raw trial data by specified keys and computes mean/CI/std for each
    metric within each group.

    Args:
        raw_rows: List of trial dictionaries
        groupby_keys: Keys to group by (e.g., ["hash_function", "N"])
        metric_keys: Metric keys to summarize (e.g., ["collisions", "max_load"])

    Returns:
        Dictionary keyed by group label (e.g., "hash_function=polynomial,N=500")
        with nested dict: {metric_name: {mean, ci95_low, ci95_high, std}}
    """
    groups = defaultdict(list)
    for row in raw_rows:
        group_key = tuple(row[k] for k in groupby_keys)
        groups[group_key].append(row)

    result = {}
    for group_key, group_rows in groups.items():
        summaries = {}
        for metric_key in metric_keys:
            values = [row[metric_key] for row in group_rows if metric_key in row]
            if values:
                mean, ci_low, ci_high, std = mean_ci95(values)
                summaries[metric_key] = {
                    "mean": mean,
                    "ci95_low": ci_low,
                    "ci95_high": ci_high,
                    "std": std,
                }
        result[group_label(groupby_keys, group_key)] = summaries

    return result

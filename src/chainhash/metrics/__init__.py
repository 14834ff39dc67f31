"""Metrics module for chainhash."""

from chainhash.metrics.stats import group_label, mean_ci95, summarize_groups

__all__ = [
    "mean_ci95",
    "summarize_groups",
    "group_label",
]

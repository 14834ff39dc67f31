"""Experiment 01: collision behavior of the available hash functions."""

import argparse
from pathlib import Path
from typing import Any, Dict

import matplotlib.pyplot as plt

from chainhash.config import TableConfig, build_table
from chainhash.experiments.common import (
    make_output_paths,
    make_rng,
    random_words,
    seed_loop,
    write_metrics_json,
)
from chainhash.experiments.plotting import add_footer, plot_bars_with_ci, save_pdf
from chainhash.hashing.registry import HASH_FUNCTIONS
from chainhash.metrics.stats import group_label, summarize_groups
from chainhash.utils.logging import get_logger
from chainhash.utils.timing import timer

EXP_ID = "exp01"
EXP_SLUG = "hash_comparison"

METRICS = ["collisions", "capacity", "load_factor", "max_load", "gini", "q2_estimate", "insert_seconds"]


def add_args(parser: argparse.ArgumentParser) -> None:
    """Add experiment-specific arguments."""
    parser.add_argument(
        "--N",
        type=int,
        default=1000,
        help="Number of words to insert per trial",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=16,
        help="Initial table capacity",
    )
    parser.add_argument(
        "--hash_functions",
        nargs="+",
        default=list(HASH_FUNCTIONS.keys()),
        choices=list(HASH_FUNCTIONS.keys()),
        help="Hash functions to compare",
    )
    parser.add_argument(
        "--min_len",
        type=int,
        default=3,
        help="Minimum synthetic word length",
    )
    parser.add_argument(
        "--max_len",
        type=int,
        default=10,
        help="Maximum synthetic word length",
    )


def run_trial(cfg: TableConfig, words: list[str]) -> Dict[str, Any]:
    """Insert ``words`` into a fresh table and collect its statistics."""
    table = build_table(cfg)
    with timer(f"insert[{cfg.hash_function}]", verbose=False) as t:
        for word in words:
            table.insert(word)

    stats = table.stats()
    occupancy = stats["occupancy"]
    return {
        "collisions": stats["collisions"],
        "capacity": stats["capacity"],
        "load_factor": stats["load_factor"],
        "max_load": occupancy["max_load"],
        "gini": occupancy["gini"],
        "q2_estimate": occupancy["q2_estimate"],
        "insert_seconds": t.elapsed,
    }


def run(args: argparse.Namespace) -> Dict[str, Any]:
    """Run the hash comparison experiment.

    Args:
        args: Parsed command-line arguments

    Returns:
        Dictionary with metrics_path, figure_path and summary
    """
    out_dir = Path(args.out_dir)
    logger = get_logger(EXP_ID, log_file=out_dir / "logs" / f"{EXP_ID}.log")
    seeds = seed_loop(args.seeds)
    hash_functions = list(args.hash_functions)

    raw_trials = []
    for seed in seeds:
        words = random_words(make_rng(seed), args.N, args.min_len, args.max_len)
        for name in hash_functions:
            cfg = TableConfig(capacity=args.capacity, hash_function=name)
            trial = run_trial(cfg, words)
            trial.update({"seed": seed, "hash_function": name, "N": args.N})
            raw_trials.append(trial)
            logger.info(
                "seed=%d hash=%s collisions=%d capacity=%d max_load=%d",
                seed,
                name,
                trial["collisions"],
                trial["capacity"],
                trial["max_load"],
            )

    summary = summarize_groups(raw_trials, ["hash_function"], METRICS)

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(10, 4))
    for ax, metric, title in (
        (ax1, "collisions", "Collisions after inserting N keys"),
        (ax2, "max_load", "Longest chain"),
    ):
        stats = [summary[group_label(["hash_function"], [name])][metric] for name in hash_functions]
        plot_bars_with_ci(
            ax,
            hash_functions,
            [s["mean"] for s in stats],
            [s["ci95_low"] for s in stats],
            [s["ci95_high"] for s in stats],
        )
        ax.set_title(title)
        ax.set_ylabel(metric)
        ax.grid(True, axis="y", alpha=0.3)
    add_footer(fig, EXP_ID, {"N": args.N, "seeds": len(seeds)})

    metrics_path, figure_path = make_output_paths(out_dir, EXP_ID, EXP_SLUG)
    config_dict = {
        "N": args.N,
        "capacity": args.capacity,
        "hash_functions": hash_functions,
        "min_len": args.min_len,
        "max_len": args.max_len,
    }
    write_metrics_json(
        metrics_path,
        EXP_ID,
        "Hash function comparison",
        config_dict,
        seeds,
        raw_trials,
        summary,
    )
    save_pdf(fig, figure_path)
    logger.info("Wrote %s and %s", metrics_path, figure_path)

    return {
        "metrics_path": str(metrics_path),
        "figure_path": str(figure_path),
        "summary": summary,
    }

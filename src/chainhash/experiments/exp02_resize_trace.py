"""Experiment 02: capacity, load factor and collisions across resizes."""

import argparse
from pathlib import Path
from typing import Any, Dict, List

import matplotlib.pyplot as plt

from chainhash.config import TableConfig, build_table
from chainhash.experiments.common import (
    make_output_paths,
    make_rng,
    random_words,
    write_metrics_json,
)
from chainhash.experiments.plotting import add_footer, save_pdf
from chainhash.hashing.registry import HASH_FUNCTIONS
from chainhash.utils.logging import get_logger

EXP_ID = "exp02"
EXP_SLUG = "resize_trace"


def add_args(parser: argparse.ArgumentParser) -> None:
    """Add experiment-specific arguments."""
    parser.add_argument(
        "--N",
        type=int,
        default=200,
        help="Number of words to insert",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=4,
        help="Initial table capacity",
    )
    parser.add_argument(
        "--hash_function",
        choices=list(HASH_FUNCTIONS.keys()),
        default="polynomial",
        help="Hash function to trace",
    )


def trace_inserts(cfg: TableConfig, words: List[str]) -> List[Dict[str, Any]]:
    """Insert words one at a time, recording the table state after each insert.

    Returns:
        One row per insert with step, capacity, load_factor, collisions
        and a ``resized`` flag set when that insert grew the table.
    """
    table = build_table(cfg)
    rows = []
    for step, word in enumerate(words, start=1):
        before = table.capacity
        table.insert(word)
        rows.append({
            "step": step,
            "capacity": table.capacity,
            "load_factor": table.load_factor(),
            "collisions": table.collision_count(),
            "resized": table.capacity != before,
        })
    return rows


def run(args: argparse.Namespace) -> Dict[str, Any]:
    """Run the resize trace experiment.

    Uses only the first seed: the trace is a single deterministic run.
    """
    out_dir = Path(args.out_dir)
    logger = get_logger(EXP_ID, log_file=out_dir / "logs" / f"{EXP_ID}.log")
    seed = 0
    if args.seeds != 1:
        logger.warning(
            "exp02 traces a single run; ignoring --seeds %d and using seed %d",
            args.seeds,
            seed,
        )
    words = random_words(make_rng(seed), args.N)

    cfg = TableConfig(capacity=args.capacity, hash_function=args.hash_function)
    rows = trace_inserts(cfg, words)
    resizes = [row["step"] for row in rows if row["resized"]]
    logger.info(
        "%d inserts, %d resizes, final capacity %d",
        len(rows),
        len(resizes),
        rows[-1]["capacity"] if rows else args.capacity,
    )

    steps = [row["step"] for row in rows]
    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(8, 8), sharex=True)
    ax1.plot(steps, [row["capacity"] for row in rows], label="capacity", linewidth=2)
    ax1.plot(steps, [row["collisions"] for row in rows], label="collisions", linewidth=2)
    ax1.set_ylabel("count")
    ax1.set_title(f"Exp02: resize trace ({args.hash_function})")
    ax1.grid(True, alpha=0.3)
    ax1.legend()
    ax2.plot(steps, [row["load_factor"] for row in rows], label="load factor", linewidth=2)
    ax2.axhline(cfg.load_threshold, color="gray", linestyle="--", label="threshold")
    ax2.set_xlabel("keys inserted")
    ax2.set_ylabel("load factor")
    ax2.grid(True, alpha=0.3)
    ax2.legend()
    add_footer(fig, EXP_ID)

    metrics_path, figure_path = make_output_paths(out_dir, EXP_ID, EXP_SLUG)
    write_metrics_json(
        metrics_path,
        EXP_ID,
        "Resize trace",
        {
            "N": args.N,
            "capacity": args.capacity,
            "hash_function": args.hash_function,
            "seed": seed,
        },
        [seed],
        rows,
        {
            "resize_steps": resizes,
            "final_capacity": rows[-1]["capacity"] if rows else args.capacity,
            "final_collisions": rows[-1]["collisions"] if rows else 0,
        },
    )
    save_pdf(fig, figure_path)

    return {
        "metrics_path": str(metrics_path),
        "figure_path": str(figure_path),
        "resize_steps": resizes,
    }

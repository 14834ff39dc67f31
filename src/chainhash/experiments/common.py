"""Common utilities for experiments."""

import argparse
import json
import string
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from chainhash.config import load_config
from chainhash.experiments.plotting import get_git_commit, get_hardware_info

LETTERS = np.array(list(string.ascii_lowercase))


def make_output_paths(out_dir: Path, exp_id: str, exp_slug: str) -> tuple[Path, Path]:
    """Create standardized output paths.

    Args:
        out_dir: Base output directory
        exp_id: Experiment ID (e.g., "exp01")
        exp_slug: Experiment slug (e.g., "hash_comparison")

    Returns:
        (metrics_path, figure_path)
        - metrics_path: artifacts/metrics/exp01.json
        - figure_path: artifacts/figures/exp01_hash_comparison.pdf
    """
    out_dir = Path(out_dir)
    metrics_dir = out_dir / "metrics"
    figures_dir = out_dir / "figures"
    metrics_dir.mkdir(parents=True, exist_ok=True)
    figures_dir.mkdir(parents=True, exist_ok=True)

    metrics_path = metrics_dir / f"{exp_id}.json"
    figure_path = figures_dir / f"{exp_id}_{exp_slug}.pdf"

    return metrics_path, figure_path


def seed_loop(num_seeds: int) -> List[int]:
    """Generate list of seeds for deterministic trials.

    Args:
        num_seeds: Number of seeds

    Returns:
        List of seed values [0, 1, ..., num_seeds-1]
    """
    return list(range(num_seeds))


def make_rng(seed: int) -> np.random.Generator:
    """Create a local NumPy random number generator with given seed.

    Args:
        seed: Random seed

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def random_words(
    rng: np.random.Generator, n: int, min_len: int = 3, max_len: int = 10
) -> List[str]:
    """Draw ``n`` synthetic words made of ASCII letters.

    Every word starts with an upper-case letter so it is a valid key for
    all hash functions, including length_initial.

    Args:
        rng: Local random generator
        n: Number of words
        min_len: Minimum word length (>= 1)
        max_len: Maximum word length (inclusive)

    Returns:
        List of words (may contain duplicates)
    """
    if min_len < 1 or max_len < min_len:
        raise ValueError(f"invalid word length range [{min_len}, {max_len}]")
    lengths = rng.integers(min_len, max_len + 1, size=n)
    words = []
    for length in lengths:
        letters = rng.choice(LETTERS, size=int(length))
        words.append(letters[0].upper() + "".join(letters[1:]))
    return words


def apply_config(parser: argparse.ArgumentParser, config_path: Optional[Path]) -> None:
    """Use values from a YAML config as the parser's defaults.

    Flags given on the command line still take precedence once the parser
    runs. Keys that match no argument of ``parser`` are ignored.
    """
    if config_path is None:
        return
    config = load_config(config_path)
    known = {action.dest for action in parser._actions}
    parser.set_defaults(**{k: v for k, v in config.items() if k in known})


def write_metrics_json(
    path: Path,
    experiment_id: str,
    experiment_name: str,
    config: Dict[str, Any],
    seeds: List[int],
    raw_trials: List[Dict[str, Any]],
    summary: Dict[str, Any],
    extra_info: Optional[Dict[str, Any]] = None,
) -> None:
    """Write standardized metrics JSON.

    Args:
        path: Output JSON path
        experiment_id: Experiment identifier (e.g., "exp01")
        experiment_name: Human-readable experiment name
        config: Experiment configuration
        seeds: List of seeds used
        raw_trials: List of per-trial results
        summary: Summary statistics with CI
        extra_info: Optional additional info to include
    """
    metrics = {
        "experiment_id": experiment_id,
        "experiment_name": experiment_name,
        "timestamp": datetime.now().isoformat(),
        "git_commit": get_git_commit(),
        "hardware": get_hardware_info(),
        "config": config,
        "seeds": seeds,
        "raw_trials": raw_trials,
        "summary": summary,
    }

    if extra_info:
        metrics["extra_info"] = extra_info

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2)

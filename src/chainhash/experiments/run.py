"""Canonical experiment runner with --exp flag CLI."""

import argparse
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from chainhash.experiments import exp01_hash_comparison, exp02_resize_trace
from chainhash.experiments.common import apply_config

EXPERIMENTS = {
    "exp01": ("Hash Function Comparison", exp01_hash_comparison),
    "exp02": ("Resize Trace", exp02_resize_trace),
}


def main(argv: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="Run chainhash experiments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Common arguments
    parser.add_argument(
        "--exp",
        choices=list(EXPERIMENTS.keys()),
        required=True,
        help="Experiment to run (exp01-exp02)",
    )
    parser.add_argument(
        "--out_dir", type=Path, default=Path("artifacts"),
        help="Output directory for metrics, figures and logs"
    )
    parser.add_argument(
        "--seeds", type=int, default=5,
        help="Number of random seeds"
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Optional YAML file overriding experiment arguments"
    )

    # Parse known args first to get experiment ID
    args, unknown = parser.parse_known_args(argv)

    exp_id = args.exp
    exp_name, exp_module = EXPERIMENTS[exp_id]

    exp_parser = argparse.ArgumentParser()
    exp_module.add_args(exp_parser)

    # YAML values become defaults, so explicit flags still win
    if args.config is not None:
        apply_config(parser, args.config)
        apply_config(exp_parser, args.config)
        args, unknown = parser.parse_known_args(argv)

    exp_args, remaining = exp_parser.parse_known_args(unknown)

    if remaining:
        parser.error(f"Unrecognized arguments: {remaining}")

    for key, value in vars(exp_args).items():
        setattr(args, key, value)

    print(f"Running {exp_name} ({exp_id})...")
    result = exp_module.run(args)

    print(f"✓ {exp_name} completed")
    print(f"  Metrics: {result.get('metrics_path', 'N/A')}")
    print(f"  Figure: {result.get('figure_path', 'N/A')}")
    return result


if __name__ == "__main__":
    main()

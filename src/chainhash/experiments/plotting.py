"""Shared plotting utilities for experiments."""

import platform
import subprocess
from pathlib import Path
from typing import Optional, Sequence

import matplotlib
# Use Agg backend (non-interactive, PDF-compatible)
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np


def get_git_commit() -> Optional[str]:
    """Get current git commit hash by walking up to find .git directory.

    Returns:
        Git commit hash string, or None if not found
    """
    current = Path(__file__).resolve()
    for _ in range(8):  # Max 8 levels up
        if (current / ".git").exists():
            try:
                result = subprocess.run(
                    ["git", "rev-parse", "HEAD"],
                    capture_output=True,
                    text=True,
                    check=True,
                    cwd=current,
                )
                return result.stdout.strip()
            except (subprocess.CalledProcessError, FileNotFoundError):
                return None
        parent = current.parent
        if parent == current:  # Reached root
            break
        current = parent
    return None


def get_hardware_info() -> dict:
    """Get interpreter and library version information."""
    return {
        "python_version": platform.python_version(),
        "numpy_version": np.__version__,
        "machine": platform.machine(),
    }


def save_pdf(fig, path: Path) -> None:
    """Save figure as PDF with tight layout.

    Args:
        fig: Matplotlib figure
        path: Output PDF path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight", dpi=150)
    plt.close(fig)


def add_footer(fig, experiment_id: str, extra: Optional[dict] = None) -> None:
    """Add version footer to figure.

    Args:
        fig: Matplotlib figure
        experiment_id: Experiment identifier (e.g., "exp01")
        extra: Optional dictionary of additional info to include
    """
    hardware = get_hardware_info()
    git_commit = get_git_commit()

    footer_parts = [experiment_id]
    footer_parts.append(f"Python {hardware['python_version']}")
    footer_parts.append(f"NumPy {hardware['numpy_version']}")

    if git_commit:
        footer_parts.append(f"Git: {git_commit[:8]}")

    if extra:
        for k, v in extra.items():
            footer_parts.append(f"{k}: {v}")

    fig.text(0.5, 0.01, " | ".join(footer_parts), ha="center", va="bottom",
             fontsize=8, alpha=0.7)


def plot_bars_with_ci(
    ax, labels: Sequence[str], mean, ci_low, ci_high, color: Optional[str] = None
) -> None:
    """Plot bars with 95% CI error bars.

    Args:
        ax: Matplotlib axes
        labels: Bar labels
        mean: Bar heights
        ci_low: Lower CI bounds
        ci_high: Upper CI bounds
        color: Optional color (if None, matplotlib chooses)
    """
    mean = np.asarray(mean, dtype=np.float64)
    yerr = np.vstack([mean - np.asarray(ci_low), np.asarray(ci_high) - mean])
    ax.bar(labels, mean, yerr=yerr, capsize=4, color=color, alpha=0.8)

"""Bar chart of the biased die's face distribution."""

from __future__ import annotations

from typing import Mapping

import matplotlib
matplotlib.use("Agg")  # non-interactive backend

import matplotlib.pyplot as plt


def make_roll_chart(
    counts: Mapping[int, int],
    output_path: str = "die_distribution.png",
    title: str = "Snakes & Ladders Die Distribution",
) -> str:
    """Plot how often each face came up, with a uniform reference line.

    Returns the path to the saved PNG.
    """
    faces = sorted(counts)
    values = [counts[f] for f in faces]
    total = sum(values)

    fig, ax = plt.subplots(figsize=(8, 5))
    bars = ax.bar([str(f) for f in faces], values, color="#4A90D9", edgecolor="white")

    # Annotate bars with their share of all rolls
    for bar, value in zip(bars, values):
        share = value / total if total else 0.0
        ax.text(
            bar.get_x() + bar.get_width() / 2, bar.get_height(),
            f"{share:.1%}",
            ha="center", va="bottom", fontsize=10, fontweight="bold",
        )

    if total:
        ax.axhline(total / 6, color="#D94A4A", linestyle="--", label="uniform")
        ax.legend()

    ax.set_xlabel("Face")
    ax.set_ylabel("Rolls")
    ax.set_title(title, fontsize=14, fontweight="bold")

    plt.tight_layout()
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path

"""
Plots of inspection counts.

Provides:
- Bar chart of final counts per monkey, busiest two highlighted
- Cumulative inspection history over rounds
- Heatmap of per-round inspections
- A combined run summary

All plots use matplotlib and return (fig, ax) or fig like the rest of
the helpers, so they can be composed into larger figures.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from monkeysim.analysis.business import inspections_per_round

if TYPE_CHECKING:
    from monkeysim.core.counter import InspectionCounter
    from monkeysim.core.simulator import RunResult


COLOR_BUSY = "#c0392b"    # top-two monkeys
COLOR_IDLE = "#7f8c8d"    # everyone else
CMAP_ROUNDS = "YlOrRd"    # per-round inspections


def plot_inspection_counts(
    counter: "InspectionCounter",
    title: str = "Inspections per Monkey",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """
    Bar chart of final inspection counts.

    The two busiest monkeys are highlighted when at least two monkeys
    inspected something.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    counts = counter.counts
    ids = np.arange(len(counts))
    busiest = set()
    if np.count_nonzero(counts) >= 2:
        busiest = {worker_id for worker_id, _ in counter.top(2)}
    colors = [COLOR_BUSY if i in busiest else COLOR_IDLE for i in ids]

    ax.bar(ids, counts, color=colors)
    ax.set_xticks(ids)
    ax.set_xlabel("Monkey")
    ax.set_ylabel("Items inspected")
    ax.set_title(title)
    ax.grid(True, axis="y", alpha=0.3)

    return fig, ax


def plot_inspection_history(
    history: np.ndarray,
    title: str = "Cumulative Inspections",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> tuple[Figure, Axes]:
    """
    Plot cumulative counts per monkey against round number.

    Args:
        history: Cumulative counts, shape [rounds, n_workers]
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    history = np.asarray(history)
    rounds = np.arange(1, history.shape[0] + 1)
    for worker_id in range(history.shape[1]):
        ax.plot(rounds, history[:, worker_id], label=f"Monkey {worker_id}", linewidth=2)

    ax.set_xlabel("Round")
    ax.set_ylabel("Items inspected")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    if history.shape[1]:
        ax.legend()

    return fig, ax


def plot_round_heatmap(
    history: np.ndarray,
    title: str = "Inspections per Round",
    ax: Axes | None = None,
    colorbar: bool = True,
    figsize: tuple[float, float] = (10, 4),
) -> tuple[Figure, Axes]:
    """Heatmap of inspections done in each round (monkeys × rounds)."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    per_round = inspections_per_round(history)
    im = ax.imshow(
        per_round.T,
        origin="lower",
        cmap=CMAP_ROUNDS,
        aspect="auto",
        interpolation="nearest",
    )
    if colorbar:
        plt.colorbar(im, ax=ax, fraction=0.046, pad=0.04)

    ax.set_xlabel("Round")
    ax.set_ylabel("Monkey")
    ax.set_title(title)

    return fig, ax


def plot_run_summary(
    result: "RunResult",
    figsize: tuple[float, float] = (16, 5),
) -> Figure:
    """
    Final counts, cumulative history and per-round heatmap side by side.

    Without recorded history only the counts panel is drawn.
    """
    if result.history is None or result.history.shape[0] == 0:
        fig, _ = plot_inspection_counts(result.counter, figsize=figsize)
        return fig

    fig, axes = plt.subplots(1, 3, figsize=figsize)
    plot_inspection_counts(result.counter, ax=axes[0])
    plot_inspection_history(result.history, ax=axes[1])
    plot_round_heatmap(result.history, ax=axes[2])

    fig.suptitle(f"{result.rounds} rounds, relief: {result.relief}")
    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)

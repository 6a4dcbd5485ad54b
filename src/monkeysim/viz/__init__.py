"""
Visualization utilities.

- Inspection count bar charts
- Cumulative history plots
- Per-round heatmaps
"""

from monkeysim.viz.counts import (
    plot_inspection_counts,
    plot_inspection_history,
    plot_round_heatmap,
    plot_run_summary,
    save_figure,
)

__all__ = [
    "plot_inspection_counts",
    "plot_inspection_history",
    "plot_round_heatmap",
    "plot_run_summary",
    "save_figure",
]

"""Unit tests for plotting helpers."""

import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
import numpy as np
import pytest

from monkeysim.core.counter import InspectionCounter
from monkeysim.core.simulator import Simulator, SimulatorConfig
from monkeysim.viz.counts import (
    COLOR_BUSY,
    plot_inspection_counts,
    plot_inspection_history,
    plot_round_heatmap,
    plot_run_summary,
    save_figure,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def short_result(example_simulation):
    return Simulator(example_simulation, SimulatorConfig(rounds=20)).run()


class TestPlots:
    """Smoke tests for the plots."""

    def test_counts_bars(self, short_result):
        fig, ax = plot_inspection_counts(short_result.counter)
        assert len(ax.patches) == 4
        heights = [p.get_height() for p in ax.patches]
        assert heights == [101, 95, 7, 105]

    def test_counts_highlight_busiest(self, short_result):
        _, ax = plot_inspection_counts(short_result.counter)
        busy = [i for i, p in enumerate(ax.patches)
                if np.allclose(p.get_facecolor()[:3], to_rgb(COLOR_BUSY))]
        assert busy == [0, 3]

    def test_counts_without_activity(self):
        _, ax = plot_inspection_counts(InspectionCounter(3))
        assert len(ax.patches) == 3

    def test_history_lines(self, short_result):
        _, ax = plot_inspection_history(short_result.history)
        assert len(ax.lines) == 4

    def test_heatmap(self, short_result):
        _, ax = plot_round_heatmap(short_result.history)
        assert len(ax.images) == 1

    def test_plot_on_existing_axes(self, short_result):
        fig, ax = plt.subplots()
        fig2, ax2 = plot_inspection_counts(short_result.counter, ax=ax)
        assert fig2 is fig
        assert ax2 is ax

    def test_run_summary(self, short_result):
        fig = plot_run_summary(short_result)
        assert len(fig.axes) >= 3

    def test_run_summary_without_history(self, example_simulation):
        result = Simulator(example_simulation, SimulatorConfig(rounds=2, record_history=False)).run()
        fig = plot_run_summary(result)
        assert len(fig.axes) == 1

    def test_save_figure(self, short_result, tmp_path):
        fig, _ = plot_inspection_counts(short_result.counter)
        path = tmp_path / "counts.png"
        save_figure(fig, path)
        assert path.exists()

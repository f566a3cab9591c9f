"""Unit tests for visualization helpers."""

import matplotlib.pyplot as plt
import numpy as np
import pytest

from pulsesim.viz.pulses import plot_emission_timeline, plot_pulse_counts, save_figure


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotPulseCounts:
    """Tests for plot_pulse_counts."""

    def test_one_line_per_polarity(self):
        history = np.array([[3, 4], [2, 5], [3, 4]])
        fig, ax = plot_pulse_counts(history)

        lines = ax.get_lines()
        assert len(lines) == 2
        np.testing.assert_array_equal(lines[0].get_ydata(), [3, 2, 3])
        np.testing.assert_array_equal(lines[1].get_xdata(), [1, 2, 3])

    def test_cumulative(self):
        history = np.array([[3, 4], [2, 5]])
        _, ax = plot_pulse_counts(history, cumulative=True)
        np.testing.assert_array_equal(ax.get_lines()[1].get_ydata(), [4, 9])

    def test_uses_given_axes(self):
        fig, ax = plt.subplots()
        fig2, ax2 = plot_pulse_counts(np.zeros((2, 2)), ax=ax)
        assert ax2 is ax
        assert fig2 is fig


class TestPlotEmissionTimeline:
    """Tests for plot_emission_timeline."""

    def test_row_per_node(self):
        _, ax = plot_emission_timeline({"ah": [3, 6, 9], "bh": [5]})
        labels = [t.get_text() for t in ax.get_yticklabels()]
        assert labels == ["ah", "bh"]

    def test_empty(self):
        _, ax = plot_emission_timeline({})
        assert len(ax.get_yticks()) == 0


def test_save_figure(tmp_path):
    fig, _ = plot_pulse_counts(np.array([[1, 2]]))
    path = tmp_path / "counts.png"
    save_figure(fig, path)
    assert path.exists()

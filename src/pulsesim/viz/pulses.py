"""
Plots of simulation results.

- Per-tick high/low pulse counts (and their running totals)
- Emission timelines: on which ticks each node emitted a polarity

All plots use matplotlib and return the figure and axes so they can be
combined or saved by the caller.
"""

from __future__ import annotations
from pathlib import Path
from typing import Mapping, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes


COLOR_HIGH = "tab:red"
COLOR_LOW = "tab:blue"


def plot_pulse_counts(
    history: np.ndarray,
    title: str = "Pulses per Tick",
    cumulative: bool = False,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (10, 4),
) -> tuple[Figure, Axes]:
    """
    Plot high and low pulse counts against the tick index.

    Args:
        history: [n_ticks, 2] array of (high, low), e.g. RunDriver.get_history()
        title: Plot title
        cumulative: Plot running totals instead of per-tick counts
        ax: Existing axes (creates new if None)

    Returns:
        (fig, ax) tuple
    """
    history = np.asarray(history).reshape(-1, 2)
    if cumulative:
        history = np.cumsum(history, axis=0)

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    ticks = np.arange(1, history.shape[0] + 1)
    ax.plot(ticks, history[:, 0], color=COLOR_HIGH, label="high")
    ax.plot(ticks, history[:, 1], color=COLOR_LOW, label="low")

    ax.set_title(title)
    ax.set_xlabel("tick")
    ax.set_ylabel("total pulses" if cumulative else "pulses")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)

    return fig, ax


def plot_emission_timeline(
    ticks_by_node: Mapping[str, Sequence[int]],
    title: str = "Emission Timeline",
    color: str = COLOR_HIGH,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (10, 3),
) -> tuple[Figure, Axes]:
    """
    One row per node, one mark per tick in which the node emitted.

    Args:
        ticks_by_node: {node_id: emission ticks}, e.g. from record_emission_ticks
        title: Plot title
        color: Mark color
        ax: Existing axes (creates new if None)

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    names = list(ticks_by_node)
    positions = [np.asarray(ticks_by_node[name]) for name in names]
    if names:
        ax.eventplot(positions, colors=color, lineoffsets=np.arange(len(names)))

    ax.set_yticks(np.arange(len(names)))
    ax.set_yticklabels(names)
    ax.set_title(title)
    ax.set_xlabel("tick")

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)

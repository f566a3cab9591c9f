"""
Visualization utilities.

- Pulse counts per tick
- Emission timelines per node
"""

from pulsesim.viz.pulses import (
    plot_pulse_counts,
    plot_emission_timeline,
    save_figure,
)

__all__ = [
    "plot_pulse_counts",
    "plot_emission_timeline",
    "save_figure",
]

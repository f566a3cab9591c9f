"""
Signals (pulses) travelling between nodes.

A signal is a directed, polarity-tagged unit of communication. It is created
by the node that emits it, consumed exactly once by the propagation engine,
and never mutated in between.

Two ids are reserved sinks: signals addressed to them are counted and then
dropped. They never exist as nodes.
"""

from dataclasses import dataclass


HIGH = True
LOW = False

# Reserved ids that absorb signals without propagating them
SINK_IDS = ("output", "rx")

# Source id of the synthetic pulse that starts every tick
TRIGGER_SOURCE = ""


def polarity_name(polarity: bool) -> str:
    """Return "high" or "low"."""
    return "high" if polarity else "low"


@dataclass(frozen=True)
class Signal:
    """
    A single pulse from one node to another.

    polarity is True for a high pulse and False for a low pulse.
    """

    source: str
    destination: str
    polarity: bool

    def __str__(self) -> str:
        return f"{self.source} -{polarity_name(self.polarity)}-> {self.destination}"

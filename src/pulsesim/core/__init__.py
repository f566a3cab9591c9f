"""
Core simulation primitives.

This layer knows NOTHING about where a network description comes from or
how results are reported. It only knows:
- Nodes with local state (relay, toggle, gate)
- Signals (pulses) between them
- The breadth-first propagation of one tick
- Repeated triggers: summed counts, or the first tick a node emits a polarity
"""

from pulsesim.core.errors import (
    PulseSimError,
    NetworkError,
    UnknownDestinationError,
    MissingGateInputError,
    NonTerminatingTickError,
    SearchExhaustedError,
    DescriptionError,
)
from pulsesim.core.signals import Signal, HIGH, LOW, SINK_IDS, polarity_name
from pulsesim.core.nodes import Node, RelayState, ToggleState, GateState
from pulsesim.core.network import Network, NetworkConfig, NodeDeclaration
from pulsesim.core.engine import AbortCondition, TickResult, run_tick
from pulsesim.core.driver import RunDriver, RunDriverConfig, pulse_product

__all__ = [
    "PulseSimError",
    "NetworkError",
    "UnknownDestinationError",
    "MissingGateInputError",
    "NonTerminatingTickError",
    "SearchExhaustedError",
    "DescriptionError",
    "Signal",
    "HIGH",
    "LOW",
    "SINK_IDS",
    "polarity_name",
    "Node",
    "RelayState",
    "ToggleState",
    "GateState",
    "Network",
    "NetworkConfig",
    "NodeDeclaration",
    "AbortCondition",
    "TickResult",
    "run_tick",
    "RunDriver",
    "RunDriverConfig",
    "pulse_product",
]

"""
Analysis layer: derived answers built on top of the simulation core.

IMPORTANT: Nothing here mutates the caller's network. Searches run on fresh
clones.

- compose_periods: LCM of independently measured first-occurrence indices
- find_first_occurrences / find_composed_period: per-node searches + LCM
- record_emission_ticks / verify_periodic: check the periodicity precondition
- adjacency_matrix, feeders_of, reachable_from, sink_feeder_gates: topology
"""

from pulsesim.analysis.periods import (
    compose_periods,
    find_first_occurrences,
    find_composed_period,
    record_emission_ticks,
    verify_periodic,
)
from pulsesim.analysis.topology import (
    adjacency_matrix,
    feeders_of,
    reachable_from,
    sink_feeder_gates,
)

__all__ = [
    "compose_periods",
    "find_first_occurrences",
    "find_composed_period",
    "record_emission_ticks",
    "verify_periodic",
    # Topology
    "adjacency_matrix",
    "feeders_of",
    "reachable_from",
    "sink_feeder_gates",
]

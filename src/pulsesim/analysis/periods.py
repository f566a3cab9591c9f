"""
Period composition: answering "when do several nodes line up?"

Unrolling the circuit until a sink finally receives a low pulse can take
billions of ticks. When that sink is fed by a gate whose inputs each emit
high with a fixed period starting at tick 1, the answer is the least common
multiple of those periods, and each period is just a first-occurrence index.

IMPORTANT: the periodicity of each input is a PRECONDITION supplied by the
caller's knowledge of the topology. Nothing here proves it; verify_periodic
only checks it against an observed run.

Every search runs on its own fresh clone of the network, so the caller's
network is never modified.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, Sequence
import logging

import numpy as np

from pulsesim.core.driver import RunDriver, RunDriverConfig
from pulsesim.core.engine import run_tick

if TYPE_CHECKING:
    from pulsesim.core.network import Network

logger = logging.getLogger(__name__)


def compose_periods(periods: Iterable[int]) -> int:
    """
    Least common multiple of positive integer periods.

    Computed on Python ints (object dtype), so large products do not
    overflow.
    """
    values = np.array([int(p) for p in periods], dtype=object)
    if values.size == 0:
        raise ValueError("At least one period is required")
    if any(p <= 0 for p in values):
        raise ValueError(f"Periods must be positive, got {list(values)}")
    return int(np.lcm.reduce(values))


def find_first_occurrences(
    network: "Network",
    node_ids: Sequence[str],
    polarity: bool = True,
    trigger: str = "broadcaster",
    max_triggers: int | None = None,
    max_signals_per_tick: int | None = None,
) -> dict[str, int]:
    """
    First-occurrence index of a polarity for each node, searched independently.

    Args:
        network: Template network; each search uses a fresh clone of it
        node_ids: Nodes to measure
        polarity: True for high pulses, False for low pulses
        trigger: Node that receives the button pulse
        max_triggers: Optional per-search trigger budget
        max_signals_per_tick: Optional per-tick step budget

    Returns:
        {node_id: 1-based trigger index}
    """
    config = RunDriverConfig(trigger=trigger, max_signals_per_tick=max_signals_per_tick)
    indices = {}
    for node_id in node_ids:
        driver = RunDriver(network.clone(fresh=True), config)
        indices[node_id] = driver.first_occurrence(node_id, polarity, max_triggers)
    logger.debug("First occurrences: %s", indices)
    return indices


def find_composed_period(
    network: "Network",
    node_ids: Sequence[str],
    polarity: bool = True,
    trigger: str = "broadcaster",
    max_triggers: int | None = None,
    max_signals_per_tick: int | None = None,
) -> int:
    """
    Trigger count at which all node_ids emit the polarity in the same tick.

    Valid only if each node emits the polarity exactly every p ticks,
    starting at tick p.
    """
    indices = find_first_occurrences(
        network,
        node_ids,
        polarity=polarity,
        trigger=trigger,
        max_triggers=max_triggers,
        max_signals_per_tick=max_signals_per_tick,
    )
    return compose_periods(indices.values())


def record_emission_ticks(
    network: "Network",
    node_id: str,
    polarity: bool = True,
    n_ticks: int = 1000,
    trigger: str = "broadcaster",
) -> np.ndarray:
    """
    Ticks in which a node emitted the polarity at least once.

    Runs n_ticks full ticks on a fresh clone of the network.

    Returns:
        1-based tick indices, ascending, dtype int64
    """
    sim = network.clone(fresh=True)
    ticks = []
    for tick in range(1, n_ticks + 1):
        result = run_tick(sim, trigger, record_trace=True)
        if any(s.source == node_id and s.polarity == polarity for s in result.trace):
            ticks.append(tick)
    return np.array(ticks, dtype=np.int64)


def verify_periodic(ticks: np.ndarray | Sequence[int]) -> int | None:
    """
    Check that emission ticks are exactly p, 2p, 3p, ...

    Returns:
        The period p, or None if the ticks are empty or not of that form
    """
    ticks = np.asarray(ticks, dtype=np.int64)
    if ticks.size == 0:
        return None

    period = int(ticks[0])
    expected = period * np.arange(1, ticks.size + 1, dtype=np.int64)
    if np.array_equal(ticks, expected):
        return period
    return None

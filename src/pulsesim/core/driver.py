"""
Run driver: repeated triggers against one network.

Two modes:
- run(n): fixed number of triggers, summing high/low pulse counts
- first_occurrence(node, polarity): trigger until the node first emits the
  polarity and report on which trigger (1-based) that happened

Node state carries over between triggers and between calls. Use a fresh
clone of the network for an isolated search.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
import itertools
import logging

import numpy as np

from pulsesim.core.engine import AbortCondition, run_tick
from pulsesim.core.errors import SearchExhaustedError
from pulsesim.core.signals import polarity_name

if TYPE_CHECKING:
    from pulsesim.core.network import Network

logger = logging.getLogger(__name__)


@dataclass
class RunDriverConfig:
    """Configuration for the run driver."""

    trigger: str = "broadcaster"  # Node that receives the button pulse
    max_signals_per_tick: int | None = None  # Per-tick step budget, None = unbounded


@dataclass
class RunDriver:
    """
    Triggers a network repeatedly and aggregates the results.

    current_tick counts every trigger issued by this driver. history holds
    one (high, low) row per tick issued by run().
    """

    network: "Network"
    config: RunDriverConfig = field(default_factory=RunDriverConfig)

    current_tick: int = field(default=0, init=False)
    _history: list[tuple[int, int]] = field(default_factory=list, init=False)

    def _trigger(self, abort_condition: AbortCondition | None = None):
        self.current_tick += 1
        return run_tick(
            self.network,
            self.config.trigger,
            abort_condition,
            max_signals=self.config.max_signals_per_tick,
        )

    def run(self, n_ticks: int) -> dict:
        """
        Trigger exactly n_ticks times and sum the pulse counts.

        Args:
            n_ticks: Number of triggers

        Returns:
            Statistics dictionary with total high/low counts and their product
        """
        if n_ticks < 0:
            raise ValueError(f"n_ticks must be non-negative, got {n_ticks}")

        high = 0
        low = 0
        for _ in range(n_ticks):
            result = self._trigger()
            self._history.append(result.counts)
            high += result.high
            low += result.low

        logger.debug("Ran %d ticks: %d high, %d low", n_ticks, high, low)

        return {
            "n_ticks": n_ticks,
            "current_tick": self.current_tick,
            "high": high,
            "low": low,
            "product": high * low,
        }

    def first_occurrence(
        self,
        node_id: str,
        polarity: bool = True,
        max_triggers: int | None = None,
    ) -> int:
        """
        Trigger until node_id emits the given polarity.

        The tick in which that happens is cut short at the matching pulse.
        Without max_triggers the search does not stop on its own if the
        node never emits the polarity.

        Args:
            node_id: Node to watch
            polarity: True for a high pulse, False for a low pulse
            max_triggers: Optional budget of triggers

        Returns:
            1-based index, counted from this call, of the matching trigger

        Raises:
            SearchExhaustedError: budget spent without a match
        """
        condition = AbortCondition(node_id, polarity)
        for presses in itertools.count(1):
            if max_triggers is not None and presses > max_triggers:
                raise SearchExhaustedError(node_id, polarity, max_triggers)
            if self._trigger(condition).aborted:
                logger.debug(
                    "Node %s emitted %s on trigger %d",
                    node_id,
                    polarity_name(polarity),
                    presses,
                )
                return presses

    def get_history(self) -> np.ndarray:
        """Per-tick pulse counts as an [n_ticks, 2] array of (high, low)."""
        return np.array(self._history, dtype=np.int64).reshape(-1, 2)


def pulse_product(network: "Network", n_ticks: int = 1000, trigger: str = "broadcaster") -> int:
    """Product of high and low pulse counts after n_ticks triggers."""
    stats = RunDriver(network, RunDriverConfig(trigger=trigger)).run(n_ticks)
    return stats["product"]

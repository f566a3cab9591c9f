"""
Propagation engine: one trigger, one tick.

A tick starts with a single synthetic low pulse sent to the trigger node
and ends when the pulse queue is empty. The queue is strictly FIFO. Gates
must see their inputs in the order the pulses were emitted, so a LIFO
(depth-first) drain gives a different and wrong trace.

Every dequeued pulse is tallied exactly once, including pulses addressed
to sinks, which are then dropped.
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pulsesim.core.errors import NonTerminatingTickError, UnknownDestinationError
from pulsesim.core.signals import LOW, Signal, TRIGGER_SOURCE

if TYPE_CHECKING:
    from pulsesim.core.network import Network


@dataclass(frozen=True)
class AbortCondition:
    """Stop a tick as soon as node_id is seen emitting the given polarity."""

    node_id: str
    polarity: bool

    @classmethod
    def coerce(cls, item) -> AbortCondition:
        """Accept an AbortCondition or a (node_id, polarity) tuple."""
        if isinstance(item, cls):
            return item
        node_id, polarity = item
        return cls(node_id, bool(polarity))

    def matches(self, signal: Signal) -> bool:
        return signal.source == self.node_id and signal.polarity == self.polarity


@dataclass(frozen=True)
class TickResult:
    """Statistics of one tick."""

    high: int
    low: int
    aborted: bool
    enqueued: int  # Signals put on the queue, including the trigger pulse
    trace: tuple[Signal, ...] = ()  # Dequeued signals, if recorded

    @property
    def counts(self) -> tuple[int, int]:
        """(high, low) pulse counts."""
        return self.high, self.low

    @property
    def total(self) -> int:
        return self.high + self.low


def run_tick(
    network: "Network",
    trigger: str = "broadcaster",
    abort_condition: AbortCondition | tuple[str, bool] | None = None,
    *,
    max_signals: int | None = None,
    record_trace: bool = False,
) -> TickResult:
    """
    Push the button once and propagate until no pulse is left.

    Args:
        network: Network whose node state is advanced in place
        trigger: Node that receives the initial low pulse
        abort_condition: Optional (node_id, polarity). When a dequeued pulse
                         comes from node_id with that polarity, the tick stops
                         right after counting it and the rest of the queue
                         is discarded.
        max_signals: Optional budget of dequeued pulses for this tick
        record_trace: Keep every dequeued pulse in TickResult.trace

    Returns:
        TickResult with high/low counts and whether the tick was aborted

    Raises:
        UnknownDestinationError: trigger is neither a node nor a sink
        NonTerminatingTickError: more than max_signals pulses were dequeued
    """
    if trigger not in network and not network.is_sink(trigger):
        raise UnknownDestinationError(trigger)

    condition = None
    if abort_condition is not None:
        condition = AbortCondition.coerce(abort_condition)

    queue = deque([Signal(TRIGGER_SOURCE, trigger, LOW)])
    enqueued = 1
    high = 0
    low = 0
    trace = []

    while queue:
        signal = queue.popleft()

        if signal.polarity:
            high += 1
        else:
            low += 1

        if max_signals is not None and high + low > max_signals:
            raise NonTerminatingTickError(trigger, max_signals)

        if record_trace:
            trace.append(signal)

        if condition is not None and condition.matches(signal):
            return TickResult(high, low, True, enqueued, tuple(trace))

        if network.is_sink(signal.destination):
            continue

        emitted = network[signal.destination].process(signal)
        queue.extend(emitted)
        enqueued += len(emitted)

    return TickResult(high, low, False, enqueued, tuple(trace))

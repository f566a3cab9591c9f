"""
Nodes define the local reaction of the circuit to a single pulse.

Each node has an id, an ordered list of destinations, and exactly one
state variant:

- RelayState: stateless, repeats the inbound polarity
- ToggleState: flips on low pulses, ignores high pulses
- GateState: remembers the last polarity from each input and emits low
  only when every remembered input is high

The variants form a closed set. Node.process dispatches on them explicitly;
there is no subclass per kind.

A node only ever touches its own state. A gate keeps cached polarities of
its named inputs, never a handle to the input nodes themselves.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, Union
import logging

from pulsesim.core.errors import MissingGateInputError
from pulsesim.core.signals import Signal

logger = logging.getLogger(__name__)


GateDiscovery = Literal["construction", "lazy"]


@dataclass
class RelayState:
    """Broadcaster: no state at all."""


@dataclass
class ToggleState:
    """Flip-flop: on or off, starts off."""

    active: bool = False


@dataclass
class GateState:
    """Conjunction: last polarity seen from every known input."""

    inputs: dict[str, bool] = field(default_factory=dict)


NodeState = Union[RelayState, ToggleState, GateState]

STATE_BY_KIND = {
    "relay": RelayState,
    "toggle": ToggleState,
    "gate": GateState,
}


@dataclass
class Node:
    """
    A single addressable node of the circuit.

    process() is deterministic: the same state and inbound pulse always
    give the same outbound pulses, in destination order.
    """

    id: str
    destinations: tuple[str, ...]
    state: NodeState
    gate_discovery: GateDiscovery = "construction"

    @classmethod
    def from_kind(
        cls,
        node_id: str,
        kind: str,
        destinations,
        gate_discovery: GateDiscovery = "construction",
    ) -> Node:
        """Create a node in its initial state from a kind tag."""
        try:
            state_cls = STATE_BY_KIND[kind]
        except KeyError:
            raise ValueError(f"Unknown node kind: {kind!r}") from None
        return cls(node_id, tuple(destinations), state_cls(), gate_discovery)

    @property
    def kind(self) -> str:
        """Kind tag of this node: "relay", "toggle" or "gate"."""
        if isinstance(self.state, RelayState):
            return "relay"
        if isinstance(self.state, ToggleState):
            return "toggle"
        if isinstance(self.state, GateState):
            return "gate"
        raise TypeError(f"Unknown node state: {self.state!r}")

    def register_input(self, source: str) -> None:
        """Make a gate aware of an input, remembered as low."""
        if not isinstance(self.state, GateState):
            raise TypeError(f"Node {self.id!r} is a {self.kind}, not a gate")
        self.state.inputs.setdefault(source, False)

    def process(self, inbound: Signal) -> list[Signal]:
        """
        React to one inbound pulse.

        Updates the node state first, then returns the pulses to send,
        one per destination in declaration order. A toggle receiving a
        high pulse returns an empty list.
        """
        output = self._next_output(inbound)
        if output is None:
            return []
        return [Signal(self.id, destination, output) for destination in self.destinations]

    def _next_output(self, inbound: Signal) -> bool | None:
        state = self.state

        if isinstance(state, RelayState):
            return inbound.polarity

        if isinstance(state, ToggleState):
            if inbound.polarity:
                return None
            state.active = not state.active
            return state.active

        if isinstance(state, GateState):
            if inbound.source not in state.inputs:
                if self.gate_discovery != "lazy":
                    raise MissingGateInputError(self.id, inbound.source)
                logger.debug("Gate %s discovered input %s", self.id, inbound.source)
                state.inputs[inbound.source] = not inbound.polarity
            state.inputs[inbound.source] = inbound.polarity
            return not all(state.inputs.values())

        raise TypeError(f"Unknown node state: {state!r}")

    def reset(self) -> None:
        """
        Return to the initial state.

        Toggles switch off. Gates keep the inputs they know about but
        remember all of them as low; lazily discovering gates forget them.
        """
        state = self.state
        if isinstance(state, ToggleState):
            state.active = False
        elif isinstance(state, GateState):
            if self.gate_discovery == "lazy":
                state.inputs.clear()
                return
            for source in state.inputs:
                state.inputs[source] = False

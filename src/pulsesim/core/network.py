"""
Network: the full set of nodes that forms a pulse circuit.

The network is built once from an ordered list of node declarations and
is the single owner of every node's mutable state. Its topology never
changes after construction; only toggle and gate state evolves as pulses
are delivered.

Construction also performs gate input discovery: every node that lists a
gate among its destinations is registered as one of the gate's inputs,
remembered as low.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator
import copy
import logging

from pulsesim.core.errors import NetworkError, UnknownDestinationError
from pulsesim.core.nodes import GateDiscovery, GateState, Node, STATE_BY_KIND
from pulsesim.core.signals import SINK_IDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeDeclaration:
    """One parsed node: id, kind tag and ordered destinations."""

    id: str
    kind: str  # "relay", "toggle" or "gate"
    destinations: tuple[str, ...]

    @classmethod
    def coerce(cls, item) -> NodeDeclaration:
        """Accept either a NodeDeclaration or an (id, kind, destinations) tuple."""
        if isinstance(item, cls):
            return item
        node_id, kind, destinations = item
        return cls(node_id, kind, tuple(destinations))


@dataclass
class NetworkConfig:
    """Configuration for building a network."""

    sink_ids: tuple[str, ...] = SINK_IDS  # Ids that absorb signals
    # Raise on destinations that are neither declared nor sinks,
    # instead of treating them as extra sinks
    strict_destinations: bool = False
    # "construction": scan inputs up front, "lazy": learn them from traffic
    gate_discovery: GateDiscovery = "construction"


class Network:
    """
    The pulse circuit's nodes and their state.

    Iterating a network yields node ids in declaration order.
    """

    def __init__(
        self,
        declarations: Iterable[NodeDeclaration | tuple],
        config: NetworkConfig | None = None,
    ):
        self.config = config if config is not None else NetworkConfig()
        self.declarations: tuple[NodeDeclaration, ...] = tuple(
            NodeDeclaration.coerce(item) for item in declarations
        )
        self.nodes: dict[str, Node] = {}
        # Destinations that were neither declared nor sinks, in first-seen order
        self.undeclared_destinations: list[str] = []

        for decl in self.declarations:
            self._add_node(decl)

        self._check_destinations()

        if self.config.gate_discovery == "construction":
            self._discover_gate_inputs()

    def _add_node(self, decl: NodeDeclaration):
        if decl.id in self.config.sink_ids:
            raise NetworkError(f"Node id {decl.id!r} is reserved for a sink")
        if decl.id in self.nodes:
            raise NetworkError(f"Duplicate node id: {decl.id!r}")
        if decl.kind not in STATE_BY_KIND:
            raise NetworkError(f"Node {decl.id!r} has unknown kind {decl.kind!r}")

        self.nodes[decl.id] = Node.from_kind(
            decl.id,
            decl.kind,
            decl.destinations,
            gate_discovery=self.config.gate_discovery,
        )

    def _check_destinations(self):
        for node in self.nodes.values():
            for destination in node.destinations:
                if destination in self.nodes or destination in self.config.sink_ids:
                    continue
                if self.config.strict_destinations:
                    raise UnknownDestinationError(destination, referenced_by=node.id)
                if destination not in self.undeclared_destinations:
                    logger.warning(
                        "Node %s sends to undeclared node %s; treating it as a sink",
                        node.id,
                        destination,
                    )
                    self.undeclared_destinations.append(destination)

    def _discover_gate_inputs(self):
        for node in self.nodes.values():
            if isinstance(node.state, GateState):
                for source in self.sources_of(node.id):
                    node.register_input(source)

    def __getitem__(self, node_id: str) -> Node:
        return self.nodes[node_id]

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes)

    @property
    def sink_ids(self) -> tuple[str, ...]:
        """Every id that absorbs signals: reserved sinks plus undeclared destinations."""
        return tuple(self.config.sink_ids) + tuple(self.undeclared_destinations)

    def is_sink(self, node_id: str) -> bool:
        """True if signals to node_id are counted and dropped."""
        return node_id in self.config.sink_ids or node_id in self.undeclared_destinations

    def sources_of(self, node_id: str) -> list[str]:
        """Ids of all nodes listing node_id as a destination, in declaration order."""
        return [
            node.id for node in self.nodes.values()
            if node_id in node.destinations
        ]

    def reset(self):
        """Put every node back in its initial state (for an isolated re-run)."""
        for node in self.nodes.values():
            node.reset()

    def clone(self, fresh: bool = False) -> Network:
        """
        Create an independent copy of this network.

        Args:
            fresh: If True, the copy starts from the initial state
                   instead of the current one.
        """
        result = copy.deepcopy(self)
        if fresh:
            result.reset()
        return result

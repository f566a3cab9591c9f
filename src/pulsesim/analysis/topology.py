"""
Topology helpers: read-only questions about how nodes are wired.

The network is turned into a sparse adjacency matrix (rows = senders,
columns = receivers). Sinks get trailing rows/columns so they can be
queried like any other node.

These helpers are where a caller finds the nodes to hand to
find_composed_period; the simulation core never calls them.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np
from scipy import sparse
from scipy.sparse.csgraph import breadth_first_order

from pulsesim.core.errors import NetworkError, UnknownDestinationError

if TYPE_CHECKING:
    from pulsesim.core.network import Network


def adjacency_matrix(network: "Network") -> tuple[sparse.csr_matrix, list[str]]:
    """
    Sparse adjacency matrix of the network.

    Returns:
        (matrix, labels) where matrix[i, j] == 1 if labels[i] sends to labels[j].
        Declared nodes come first in declaration order, then sinks.
    """
    labels = list(network) + [s for s in network.sink_ids if s not in network]
    index = {label: i for i, label in enumerate(labels)}

    rows = []
    cols = []
    for node_id in network:
        for destination in network[node_id].destinations:
            rows.append(index[node_id])
            cols.append(index[destination])

    n = len(labels)
    data = np.ones(len(rows), dtype=np.int8)
    rows = np.array(rows, dtype=np.int64)
    cols = np.array(cols, dtype=np.int64)
    matrix = sparse.csr_matrix((data, (rows, cols)), shape=(n, n))
    matrix.sum_duplicates()
    matrix.data[:] = 1
    return matrix, labels


def _label_index(labels: list[str], node_id: str) -> int:
    try:
        return labels.index(node_id)
    except ValueError:
        raise UnknownDestinationError(node_id) from None


def feeders_of(network: "Network", node_id: str) -> list[str]:
    """Nodes that send to node_id, in declaration order."""
    matrix, labels = adjacency_matrix(network)
    column = _label_index(labels, node_id)
    senders = matrix.tocsc()[:, column].nonzero()[0]
    return [labels[i] for i in sorted(senders)]


def reachable_from(network: "Network", node_id: str) -> set[str]:
    """Every node or sink reachable from node_id, node_id included."""
    matrix, labels = adjacency_matrix(network)
    start = _label_index(labels, node_id)
    order = breadth_first_order(matrix, start, directed=True, return_predecessors=False)
    return {labels[i] for i in order}


def sink_feeder_gates(network: "Network", sink: str = "rx") -> list[str]:
    """
    Inputs of the single gate that feeds a sink.

    In the conventional layout the sink only receives low once all of
    these inputs have emitted high during the same tick.

    Raises:
        NetworkError: the sink is not fed by exactly one gate
    """
    feeders = feeders_of(network, sink)
    if len(feeders) != 1 or network[feeders[0]].kind != "gate":
        raise NetworkError(
            f"Expected {sink!r} to be fed by exactly one gate, found {feeders}"
        )
    return feeders_of(network, feeders[0])

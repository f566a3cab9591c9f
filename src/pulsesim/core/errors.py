"""
Errors raised by the simulation core.

All of them derive from PulseSimError. Configuration problems also derive
from ValueError and run-time invariant violations from RuntimeError, so
callers that only know the builtin hierarchy still catch them.
"""


class PulseSimError(Exception):
    """Base class for every error raised by pulsesim."""


class NetworkError(PulseSimError, ValueError):
    """Raised when a network description cannot be turned into a Network."""


class UnknownDestinationError(NetworkError):
    """Raised when a node id is neither a declared node nor a sink."""

    def __init__(self, node_id: str, referenced_by: str | None = None):
        self.node_id = node_id
        self.referenced_by = referenced_by
        if referenced_by is None:
            message = f"Unknown node id: {node_id!r}"
        else:
            message = f"Node {referenced_by!r} sends to unknown node {node_id!r}"
        super().__init__(message)


class MissingGateInputError(PulseSimError, RuntimeError):
    """Raised when a gate hears from a source it never registered."""

    def __init__(self, gate_id: str, source: str):
        self.gate_id = gate_id
        self.source = source
        super().__init__(
            f"Gate {gate_id!r} received a pulse from unregistered input {source!r}"
        )


class NonTerminatingTickError(PulseSimError, RuntimeError):
    """Raised when a tick processes more signals than its budget allows."""

    def __init__(self, trigger: str, budget: int):
        self.trigger = trigger
        self.budget = budget
        super().__init__(
            f"Tick triggered at {trigger!r} exceeded its budget of {budget} signals"
        )


class SearchExhaustedError(PulseSimError, RuntimeError):
    """Raised when a first-occurrence search runs out of triggers."""

    def __init__(self, node_id: str, polarity: bool, max_triggers: int):
        self.node_id = node_id
        self.polarity = polarity
        self.max_triggers = max_triggers
        level = "high" if polarity else "low"
        super().__init__(
            f"Node {node_id!r} did not emit a {level} pulse within {max_triggers} triggers"
        )


class DescriptionError(PulseSimError, ValueError):
    """Raised when a line of a network description cannot be parsed."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Line {line_number}: {reason}: {line!r}")

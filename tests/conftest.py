"""
Pytest configuration and shared fixtures.
"""

import matplotlib
import pytest

matplotlib.use("Agg")


EXAMPLE_1 = """\
broadcaster -> a, b, c
%a -> b
%b -> c
%c -> inv
&inv -> a
"""

EXAMPLE_2 = """\
broadcaster -> a
%a -> inv, con
&inv -> b
%b -> con
&con -> output
"""


def counter_declarations(prefix: str, period: int) -> list[tuple]:
    """
    A toggle counter that makes "<prefix>h" emit high every `period` ticks.

    Toggles <prefix>1..<prefix>m form a binary counter (bit 1 first). The
    gate <prefix>g hears the bits set in `period`; once they are all on it
    sends low to bit 1 and to every bit not set in `period`, which rolls the
    counter over to zero. <prefix>h inverts the gate. `period` must be odd.
    """
    n_bits = period.bit_length()
    toggles = [f"{prefix}{i}" for i in range(1, n_bits + 1)]
    gate = f"{prefix}g"
    inverter = f"{prefix}h"

    declarations = []
    for i, name in enumerate(toggles):
        destinations = []
        if i + 1 < n_bits:
            destinations.append(toggles[i + 1])
        if period >> i & 1:
            destinations.append(gate)
        declarations.append((name, "toggle", destinations))

    gate_destinations = [toggles[0]]
    gate_destinations += [t for i, t in enumerate(toggles) if i > 0 and not period >> i & 1]
    gate_destinations.append(inverter)
    declarations.append((gate, "gate", gate_destinations))
    declarations.append((inverter, "gate", ["output"]))
    return declarations


@pytest.fixture
def example1_text():
    """Published example 1: a three-toggle loop closed by an inverter."""
    return EXAMPLE_1


@pytest.fixture
def example2_text():
    """Published example 2: toggles and gates feeding "output"."""
    return EXAMPLE_2


@pytest.fixture
def two_toggle_declarations():
    """broadcaster -> a, b; both toggles feed gate c; c -> output."""
    return [
        ("broadcaster", "relay", ["a", "b"]),
        ("a", "toggle", ["c"]),
        ("b", "toggle", ["c"]),
        ("c", "gate", ["output"]),
    ]


@pytest.fixture
def counter_factory():
    """Builder for odd-period toggle counters (see counter_declarations)."""
    return counter_declarations


@pytest.fixture
def rx_declarations():
    """
    Four counters with periods 3, 5, 7, 11 whose inverters feed one gate
    that sends to "rx".
    """
    periods = {"a": 3, "b": 5, "c": 7, "d": 11}
    declarations = [("broadcaster", "relay", [f"{p}1" for p in periods])]
    for prefix, period in periods.items():
        for name, kind, destinations in counter_declarations(prefix, period):
            if name == f"{prefix}h":
                destinations = ["zz"]
            declarations.append((name, kind, destinations))
    declarations.append(("zz", "gate", ["rx"]))
    return declarations

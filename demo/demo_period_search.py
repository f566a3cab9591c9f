"""
Demo: Find when "rx" first receives a low pulse, without unrolling every tick.

The circuit has four toggle counters (periods 3, 5, 7 and 11). Each counter
ends in an inverter that emits high once per period; the four inverters
feed one gate, and that gate sends to "rx".

The demo:
1. Builds the circuit and finds the inverters feeding rx's gate
2. Measures each inverter's first high emission on its own fresh copy
3. Composes the periods with an LCM
4. Checks the precondition (exact periodicity) and the answer by brute force
5. Plots the emission timeline
"""

from pathlib import Path

import matplotlib.pyplot as plt

from pulsesim.analysis import (
    find_first_occurrences,
    compose_periods,
    record_emission_ticks,
    sink_feeder_gates,
    verify_periodic,
)
from pulsesim.core import Network, RunDriver
from pulsesim.viz import plot_emission_timeline


PERIODS = {"a": 3, "b": 5, "c": 7, "d": 11}


def counter(prefix: str, period: int) -> list[tuple]:
    """Toggle counter whose gate rolls it over every `period` ticks (odd period)."""
    n_bits = period.bit_length()
    toggles = [f"{prefix}{i}" for i in range(1, n_bits + 1)]
    gate = f"{prefix}g"

    declarations = []
    for i, name in enumerate(toggles):
        destinations = toggles[i + 1:i + 2]
        if period >> i & 1:
            destinations.append(gate)
        declarations.append((name, "toggle", destinations))

    rollover = [toggles[0]] + [t for i, t in enumerate(toggles) if i > 0 and not period >> i & 1]
    declarations.append((gate, "gate", rollover + [f"{prefix}h"]))
    declarations.append((f"{prefix}h", "gate", ["zz"]))
    return declarations


def build_network() -> Network:
    declarations = [("broadcaster", "relay", [f"{p}1" for p in PERIODS])]
    for prefix, period in PERIODS.items():
        declarations += counter(prefix, period)
    declarations.append(("zz", "gate", ["rx"]))
    return Network(declarations)


def main():
    """Run the period search demo."""
    print("=" * 60)
    print("Period Search Demo")
    print("=" * 60)

    network = build_network()

    print("\n1. Finding the nodes that feed rx...")
    feeders = sink_feeder_gates(network, "rx")
    print(f"   Gate inputs: {feeders}")

    print("\n2. Measuring first high emission of each input...")
    indices = find_first_occurrences(network, feeders, polarity=True)
    for node_id, index in indices.items():
        print(f"   {node_id}: {index}")

    print("\n3. Composing periods...")
    answer = compose_periods(indices.values())
    print(f"   LCM: {answer}")

    print("\n4. Checking against the simulation...")
    timeline = {}
    for node_id in feeders:
        ticks = record_emission_ticks(network, node_id, n_ticks=answer)
        timeline[node_id] = ticks
        print(f"   {node_id}: periodic with period {verify_periodic(ticks)}")

    brute_force = RunDriver(network.clone(fresh=True)).first_occurrence("zz", polarity=False)
    print(f"   rx first receives low on press {brute_force}")
    print(f"   Composition {'CONFIRMED' if brute_force == answer else 'NOT CONFIRMED'}")

    print("\n5. Creating visualization...")
    fig, ax = plot_emission_timeline(
        timeline, title=f"High emissions of rx's inputs (LCM = {answer})", figsize=(12, 3)
    )

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)
    output_path = output_dir / "period_search.png"
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    print(f"   Saved to: {output_path}")

    plt.show()

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()

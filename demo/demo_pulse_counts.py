"""
Demo: Count pulses over 1000 button presses.

The demo:
1. Parses the two published example circuits
2. Pushes the button 1000 times on each
3. Prints the high/low totals and their product
4. Plots the per-tick counts of the second circuit
"""

from pathlib import Path

import matplotlib.pyplot as plt

from pulsesim.core import Network, RunDriver
from pulsesim.description import parse_description
from pulsesim.viz import plot_pulse_counts


EXAMPLES = {
    "example 1": """\
broadcaster -> a, b, c
%a -> b
%b -> c
%c -> inv
&inv -> a
""",
    "example 2": """\
broadcaster -> a
%a -> inv, con
&inv -> b
%b -> con
&con -> output
""",
}


def main():
    """Run the pulse counting demo."""
    print("=" * 60)
    print("Pulse Counting Demo")
    print("=" * 60)

    n_ticks = 1000
    drivers = {}

    print(f"\n1. Pushing the button {n_ticks} times...")
    for name, text in EXAMPLES.items():
        network = Network(parse_description(text))
        driver = RunDriver(network)
        stats = driver.run(n_ticks)
        drivers[name] = driver

        print(f"\n   {name}: {len(network)} nodes")
        print(f"     High pulses: {stats['high']}")
        print(f"     Low pulses:  {stats['low']}")
        print(f"     Product:     {stats['product']}")

    print("\n2. Creating visualization...")
    fig, axes = plt.subplots(1, 2, figsize=(14, 4))
    history = drivers["example 2"].get_history()
    plot_pulse_counts(history[:20], title="Example 2: first 20 ticks", ax=axes[0])
    plot_pulse_counts(history, title="Example 2: running totals", cumulative=True, ax=axes[1])
    plt.tight_layout()

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)
    output_path = output_dir / "pulse_counts.png"
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    print(f"   Saved to: {output_path}")

    plt.show()

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()

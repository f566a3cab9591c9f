"""
pulsesim: Discrete-Event Pulse Circuit Simulator

A simulator for small networks of stateful signal nodes driven by an
external trigger ("pushing the button").

Core concepts:
- Nodes react to pulses: relays pass them on, toggles flip on low pulses,
  gates remember the last pulse from every input
- One trigger starts a tick: a breadth-first drain of the pulse queue
- Node state carries over from tick to tick
- Counting pulses over many ticks, or the tick at which a node first emits
  a given polarity, gives the numeric answers

See SPEC_FULL.md and DESIGN.md for full details.
"""

__version__ = "0.1.0"

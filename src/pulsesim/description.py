"""
Text format for network descriptions.

One node per line:

    broadcaster -> a, b, c
    %a -> b          (toggle)
    &inv -> a        (gate)

A name without prefix is a relay. Blank lines are ignored.
"""

from __future__ import annotations
from pathlib import Path
import re

from pulsesim.core.errors import DescriptionError
from pulsesim.core.network import NodeDeclaration

LINE_PATTERN = re.compile(r"^\s*([%&]?)(\w+)\s*->\s*(.*?)\s*$")

KIND_BY_PREFIX = {
    "": "relay",
    "%": "toggle",
    "&": "gate",
}


def parse_line(line: str, line_number: int = 1) -> NodeDeclaration:
    """Parse a single "name -> dest, dest" line."""
    match = LINE_PATTERN.match(line)
    if match is None:
        raise DescriptionError(line_number, line, "expected 'name -> destinations'")

    prefix, name, destinations_raw = match.groups()
    destinations = tuple(d.strip() for d in destinations_raw.split(","))
    if not all(destinations):
        raise DescriptionError(line_number, line, "empty destination")

    return NodeDeclaration(name, KIND_BY_PREFIX[prefix], destinations)


def parse_description(text: str) -> list[NodeDeclaration]:
    """Parse a whole description, skipping blank lines."""
    return [
        parse_line(line, line_number)
        for line_number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]


def load_description(path: str | Path) -> list[NodeDeclaration]:
    """Read and parse a description file."""
    return parse_description(Path(path).read_text())

"""
Tolerant SVG path-data scanner → command list.

M x,y                 MoveTo
L x,y                 LineTo
C x1,y1 x2,y2 x,y     CubicBezier
S x2,y2 x,y           SmoothCubicBezier
Z                     ClosePath

Lowercase letters map to the same commands (input is expected to be absolute
already, see normalize.py). Any other character is skipped. A coordinate that
does not convert to a float reads as 0.0.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple, Union

@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float

@dataclass(frozen=True)
class LineTo:
    x: float
    y: float

@dataclass(frozen=True)
class CubicBezier:
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float

@dataclass(frozen=True)
class SmoothCubicBezier:
    x2: float
    y2: float
    x: float
    y: float

@dataclass(frozen=True)
class ClosePath:
    pass

PathCommand = Union[MoveTo, LineTo, CubicBezier, SmoothCubicBezier, ClosePath]

# letter -> (command type, number of coordinates)
COMMANDS = {
    "M": (MoveTo, 2), "m": (MoveTo, 2),
    "L": (LineTo, 2), "l": (LineTo, 2),
    "C": (CubicBezier, 6), "c": (CubicBezier, 6),
    "S": (SmoothCubicBezier, 4), "s": (SmoothCubicBezier, 4),
    "Z": (ClosePath, 0), "z": (ClosePath, 0),
}

def scan_coordinate(text: str, pos: int) -> Tuple[float, int]:
    """Read one coordinate starting at pos; returns (value, new position)."""
    n = len(text)
    while pos < n and (text[pos].isspace() or text[pos] == ","):
        pos += 1
    start = pos
    if pos < n and text[pos] in "+-":
        pos += 1
    while pos < n and (text[pos].isnumeric() or text[pos] == "."):
        pos += 1
    raw = text[start:pos]
    try:
        # non-ASCII digits are scanned but never convert
        value = float(raw) if raw.isascii() else 0.0
    except ValueError:
        value = 0.0
    return value, pos

def parse_path(path_data: str) -> List[PathCommand]:
    commands: List[PathCommand] = []
    pos = 0
    while pos < len(path_data):
        letter = path_data[pos]
        pos += 1
        if letter not in COMMANDS:
            continue
        kind, arity = COMMANDS[letter]
        coords = []
        for _ in range(arity):
            value, pos = scan_coordinate(path_data, pos)
            coords.append(value)
        commands.append(kind(*coords))
    return commands

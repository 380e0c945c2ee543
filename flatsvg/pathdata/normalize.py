"""
Relative → absolute rewrite of SVG path data.

Input groups are whitespace separated, each one a command letter followed by
comma separated numbers:

m<dx>,<dy> / M<x>,<y>
l<dx>,<dy> / L<x>,<y>
c<x1>,<y1>,<x2>,<y2>,<dx>,<dy> / C...   # only the endpoint is made absolute
z / Z                                  # resets the cursor to 0,0

Groups with any other letter are dropped. A number that fails to convert
aborts the whole rewrite with PathDataError.
"""
from __future__ import annotations
from decimal import Decimal
from typing import List, Tuple
import math
import re

NUMBER_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)

class PathDataError(ValueError):
    """A coordinate in the path data is not a number."""

    def __init__(self, group: str, text: str):
        super().__init__(f"invalid number {text!r} in path group {group!r}")
        self.group = group
        self.text = text

class InvalidPathData(ValueError):
    """Path data does not start with a move command."""

def check_path_data(content: str) -> None:
    if not content:
        raise InvalidPathData("path data is empty")
    if content[0] not in "Mm":
        raise InvalidPathData(f"path data must start with M or m, got {content[0]!r}")

def format_number(value: float) -> str:
    """Shortest decimal form, no exponent, no trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    s = format(Decimal(repr(value)), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s

def _to_float(text: str, group: str) -> float:
    if not NUMBER_RE.fullmatch(text):
        raise PathDataError(group, text)
    return float(text)

def _split_numbers(group: str, count: int) -> List[float]:
    # first count-1 values end at a comma, the last takes the remainder
    rest = group[1:]
    fields = []
    for _ in range(count - 1):
        head, _, rest = rest.partition(",")
        fields.append(head)
    fields.append(rest)
    return [_to_float(f, group) for f in fields]

def convert_relative_to_absolute(path_d: str) -> str:
    cx, cy = 0.0, 0.0
    out: List[str] = []

    def advance(relative: bool, x: float, y: float) -> Tuple[float, float]:
        if relative:
            return cx + x, cy + y
        return x, y

    for group in path_d.split():
        letter = group[0]
        up = letter.upper() if letter in "MmLlCcZz" else ""
        relative = letter.islower()
        if up in ("M", "L"):
            x, y = _split_numbers(group, 2)
            cx, cy = advance(relative, x, y)
            out.append(f"{up}{format_number(cx)},{format_number(cy)}")
        elif up == "C":
            x1, y1, x2, y2, x, y = _split_numbers(group, 6)
            cx, cy = advance(relative, x, y)
            out.append(
                f"C{format_number(x1)},{format_number(y1)} "
                f"{format_number(x2)},{format_number(y2)} "
                f"{format_number(cx)},{format_number(cy)}"
            )
        elif up == "Z":
            out.append("Z")
            cx, cy = 0.0, 0.0
        # other commands are not supported and are skipped
    return " ".join(out)

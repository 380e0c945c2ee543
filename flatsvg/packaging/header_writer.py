"""
C++ header generator for flattened paths.

Emits one inline function per path, `Get<name>Svg(scale, offset)`, holding one
draw call per consecutive pair of points:

    DrawLogoLine({ x0, y0 }, { x1, y1 }, scale, offset, 1.0f, <index>, active_index);

The draw function and thickness literal are configurable; coordinates are
printed with a fixed number of decimals.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple
import re

@dataclass
class HeaderOptions:
    draw_function: str = "DrawLogoLine"
    thickness: str = "1.0f"
    precision: int = 2

def function_name(out: Path) -> str:
    """Base filename turned into a C identifier fragment."""
    return re.sub(r"[^0-9A-Za-z_]", "_", Path(out).stem)

def render_header(points: Sequence[Tuple[float, float]], name: str,
                  options: HeaderOptions | None = None) -> str:
    opts = options or HeaderOptions()
    p = opts.precision
    lines: List[str] = [
        "#pragma once",
        "",
        "#include <vector>",
        "#include <imgui.h>",
        "",
        f"inline void Get{name}Svg(const float scale = 1.0f, const ImVec2 offset = {{0.0f,0.0f}}) {{",
        "",
        "const std::vector<unsigned int> active_index;",
        "",
    ]
    for i, ((x0, y0), (x1, y1)) in enumerate(zip(points, points[1:])):
        lines.append(
            f"{opts.draw_function}({{ {x0:.{p}f}, {y0:.{p}f} }}, {{ {x1:.{p}f}, {y1:.{p}f} }}, "
            f"scale, offset, {opts.thickness}, {i}, active_index);"
        )
    lines.append("}")
    return "\n".join(lines) + "\n"

def write_header(points: Sequence[Tuple[float, float]], out: Path,
                 options: HeaderOptions | None = None) -> Path:
    path = Path(out).with_suffix(".h")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_header(points, function_name(path), options))
    return path

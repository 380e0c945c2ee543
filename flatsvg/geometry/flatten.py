from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from ..pathdata.parser import (
    ClosePath, CubicBezier, LineTo, MoveTo, PathCommand, SmoothCubicBezier, parse_path,
)

Point = Tuple[float, float]

DEFAULT_RESOLUTION = 0.1

def cubic_bezier(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate cubic Bezier at t [0,1]."""
    u = 1.0 - t
    tt = t * t
    uu = u * u
    uuu = uu * u
    ttt = tt * t
    return (
        uuu * p0[0] + 3.0 * uu * t * p1[0] + 3.0 * u * tt * p2[0] + ttt * p3[0],
        uuu * p0[1] + 3.0 * uu * t * p1[1] + 3.0 * u * tt * p2[1] + ttt * p3[1],
    )

def sample_cubic(p0: Point, p1: Point, p2: Point, p3: Point, resolution: float) -> List[Point]:
    """Fixed-step sampling of a cubic Bezier, always ending on p3.

    t is accumulated (t += resolution) rather than computed from a step count,
    so whether t == 1.0 is sampled depends on float drift. p3 is appended
    after the loop regardless.
    """
    out: List[Point] = []
    t = 0.0
    while t <= 1.0:
        out.append(cubic_bezier(p0, p1, p2, p3, t))
        t += resolution
    out.append(p3)
    return out

class PathFlattener:
    """Walks path commands and keeps the pen state for one flattening pass.

    Known quirks:
    - MoveTo leaves last_control_point alone, so a smooth curve after a move
      still reflects the control point of the curve before it.
    - ClosePath emits nothing and does not return to the subpath start, so
      paths with several subpaths come out wrong.
    """

    def __init__(self, resolution: float = DEFAULT_RESOLUTION):
        self.resolution = resolution
        self.current_point: Point = (0.0, 0.0)
        self.last_control_point: Optional[Point] = None

    def reflected_control_point(self) -> Point:
        """First control point of a smooth curve starting at current_point."""
        sx, sy = self.current_point
        if self.last_control_point is None:
            return self.current_point
        lx, ly = self.last_control_point
        return (sx + (sx - lx), sy + (sy - ly))

    def _curve(self, c1: Point, c2: Point, end: Point) -> List[Point]:
        pts = sample_cubic(self.current_point, c1, c2, end, self.resolution)
        self.last_control_point = c2
        self.current_point = end
        return pts

    def flatten_command(self, cmd: PathCommand) -> List[Point]:
        if isinstance(cmd, (MoveTo, LineTo)):
            self.current_point = (cmd.x, cmd.y)
            return [self.current_point]
        if isinstance(cmd, CubicBezier):
            return self._curve((cmd.x1, cmd.y1), (cmd.x2, cmd.y2), (cmd.x, cmd.y))
        if isinstance(cmd, SmoothCubicBezier):
            return self._curve(self.reflected_control_point(), (cmd.x2, cmd.y2), (cmd.x, cmd.y))
        if isinstance(cmd, ClosePath):
            return []
        raise TypeError(f"not a path command: {cmd!r}")

    def flatten(self, commands: Iterable[PathCommand]) -> List[Point]:
        pts: List[Point] = []
        for cmd in commands:
            pts.extend(self.flatten_command(cmd))
        return pts

def flatten_path(path_data: str, resolution: float = DEFAULT_RESOLUTION) -> List[Point]:
    """Parse absolute path data and flatten it into a polyline."""
    return PathFlattener(resolution).flatten(parse_path(path_data))

"""
DXF exporter (AC1018) for flattened paths.

- Writes one DXF file per call.
- Units: sets $INSUNITS=4 (mm) when units=mm, 1 for in, 0 otherwise.
- Geometry: the whole polyline as one LWPOLYLINE, closed when the first and
  last points coincide.

Requires: ezdxf
"""
from __future__ import annotations
from typing import Sequence, Tuple

import ezdxf

def export_dxf(
    points: Sequence[Tuple[float, float]],
    out_path: str,
    units: str = "mm",
    layer: str = "CUT",
):
    doc = ezdxf.new(dxfversion="AC1018")
    msp = doc.modelspace()

    # Units
    if units.lower() == "mm":
        doc.header["$INSUNITS"] = 4  # 4 = millimeters
    elif units.lower() == "in":
        doc.header["$INSUNITS"] = 1  # inches
    else:
        doc.header["$INSUNITS"] = 0  # unitless

    if layer not in doc.layers:
        doc.layers.add(layer, color=7)

    if points:
        closed = len(points) > 2 and tuple(points[0]) == tuple(points[-1])
        msp.add_lwpolyline(points, format="xy", close=closed, dxfattribs={"layer": layer})

    doc.saveas(out_path)
    return out_path

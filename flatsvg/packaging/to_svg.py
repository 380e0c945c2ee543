from typing import Optional, Sequence, Tuple
import svgwrite

def polyline_to_svg(points: Sequence[Tuple[float, float]], filename: str,
                    name: Optional[str] = None, margin=20, stroke_width=1):
    if points:
        min_x = min(x for x, _ in points); max_x = max(x for x, _ in points)
        min_y = min(y for _, y in points); max_y = max(y for _, y in points)
    else:
        min_x = max_x = min_y = max_y = 0.0
    width = (max_x - min_x) + 2 * margin
    height = (max_y - min_y) + 2 * margin
    dwg = svgwrite.Drawing(filename, size=(width, height))
    # shift so the bounding box starts at (margin, margin)
    g = dwg.g(transform=f"translate({margin - min_x},{margin - min_y})")
    if points:
        g.add(dwg.polyline(points=[(x, y) for x, y in points],
                           fill="none", stroke="black", stroke_width=stroke_width))
    if name:
        g.add(dwg.text(name, insert=(min_x, min_y - 5), font_size="12px"))
    dwg.add(g)
    dwg.save()
    return filename

from shapely.geometry import LineString
def has_self_intersections(coords):
    # Fewer than two points cannot form a line.
    if len(coords) < 2:
        return False
    line = LineString(coords)
    return not line.is_simple

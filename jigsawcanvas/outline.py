from jigsawcanvas.vector import Vector2


class EdgeInstance:
    """A lattice edge as one tile sees it: point order plus placement offset."""

    def __init__(self, points, offset, reversed=False):
        self.points = points
        self.offset = Vector2(offset)
        self.reversed = reversed

    def oriented(self):
        return self.points[::-1] if self.reversed else list(self.points)

    def placed(self):
        return [p + self.offset for p in self.oriented()]


class PieceOutline:
    """Closed polygon of one piece in piece-local space (first point not repeated)."""

    def __init__(self, edges):
        self.edges = list(edges)
        self.points = []
        for edge in self.edges:
            self.points.extend(edge.placed())
        self.bounds = polygon_bounds(self.points)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def translated(self, pos):
        return [p + pos for p in self.points]

    def seam_gaps(self):
        """Distance from the end of each edge to the start of the next, wrapping around."""
        placed = [edge.placed() for edge in self.edges]
        gaps = []
        for i, points in enumerate(placed):
            following = placed[(i + 1) % len(placed)]
            gaps.append(points[-1].distance_to(following[0]))
        return gaps


def polygon_bounds(points):
    """Axis-aligned (min_x, min_y, max_x, max_y); None for an empty polygon."""
    if not points:
        return None
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))


def build_outline(lattice, x, y):
    top, right, bottom, left = lattice.tile_edges(x, y)
    hw = lattice.tile_width * 0.5
    hh = lattice.tile_height * 0.5
    return PieceOutline([
        EdgeInstance(top, (0, -hh)),
        EdgeInstance(right, (hw, 0)),
        EdgeInstance(bottom, (0, hh), reversed=True),
        EdgeInstance(left, (-hw, 0), reversed=True),
    ])

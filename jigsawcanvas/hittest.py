from jigsawcanvas.outline import polygon_bounds


def contains_point(p, polygon, offset, bounds=None):
    """
    Even-odd ray casting test of ``p`` against ``polygon`` placed at ``offset``.

    ``bounds`` may carry a precomputed (min_x, min_y, max_x, max_y) of the
    polygon. Polygons with fewer than 3 points contain nothing. Points exactly
    on the boundary are inside on min-x/min-y edges and outside on max-x/max-y
    edges of an axis-aligned polygon.
    """
    n = len(polygon)
    if n < 3:
        return False

    px = p.x - offset.x
    py = p.y - offset.y

    min_x, min_y, max_x, max_y = bounds if bounds is not None else polygon_bounds(polygon)
    if px < min_x or px > max_x or py < min_y or py > max_y:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        pi, pj = polygon[i], polygon[j]
        if (pi.y > py) != (pj.y > py) and \
                px < (pj.x - pi.x) * (py - pi.y) / (pj.y - pi.y) + pi.x:
            inside = not inside
        j = i
    return inside

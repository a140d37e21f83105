import math

from jigsawcanvas.vector import Vector2


class Spline:
    """
    Uniform Catmull-Rom curve through an ordered control path.

    The control points are padded with two copies of the first and last point,
    so the curve is defined for ``0 <= t <= len(path) - 1`` and passes exactly
    through ``path[k]`` at every integral ``t == k``.
    """

    def __init__(self, points):
        points = [Vector2(p) for p in points]
        if len(points) < 2:
            raise ValueError("a spline needs at least 2 control points")
        self.control = points
        self.points = [points[0], points[0]] + points + [points[-1], points[-1]]

    @property
    def max_t(self):
        return len(self.control) - 1

    def get_point(self, t):
        if not 0 <= t <= self.max_t:
            raise ValueError(f"t={t} outside [0, {self.max_t}]")

        # points[k + 2] is control[k]
        i = int(math.floor(t)) + 2
        t = t - math.floor(t)
        p0, p1, p2, p3 = self.points[i - 1], self.points[i], self.points[i + 1], self.points[i + 2]

        tt = t * t
        ttt = tt * t
        q1 = -ttt + 2 * tt - t
        q2 = 3 * ttt - 5 * tt + 2
        q3 = -3 * ttt + 4 * tt + t
        q4 = ttt - tt

        x = 0.5 * (p0.x * q1 + p1.x * q2 + p2.x * q3 + p3.x * q4)
        y = 0.5 * (p0.y * q1 + p1.y * q2 + p2.y * q3 + p3.y * q4)
        return Vector2(x, y)

    def to_path(self, step):
        """Sample the curve every ``step`` of t; the last sample is always t == max_t."""
        if step <= 0:
            raise ValueError("step must be positive")
        max_t = self.max_t
        count = int(math.floor(max_t / step + 1e-9))
        ts = [i * step for i in range(count + 1)]
        if max_t - ts[-1] > 1e-9:
            ts.append(max_t)
        else:
            ts[-1] = max_t
        return [self.get_point(t) for t in ts]

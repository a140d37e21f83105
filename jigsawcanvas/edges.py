"""
Edge generation for jigsaw tiles.

Each grid line between two tiles is generated once as a coarse control path
(straight on the border, a randomized tab/blank in the interior), smoothed
through a Catmull-Rom spline and sampled into a dense polyline. Both tiles
sharing a grid line read the same sampled list, which is what makes
neighbouring pieces interlock without gaps.
"""

import logging
import math

from jigsawcanvas.config import SAMPLE_STEP
from jigsawcanvas.spline import Spline
from jigsawcanvas.vector import Vector2, pivot

logger = logging.getLogger(__name__)

HORIZONTAL = 0.0
VERTICAL = math.pi * 0.5


def _place(points, length, rot):
    """Scale unit-space points to ``length``, centre them on the origin and rotate."""
    shift = Vector2(length * 0.5, 0)
    return [pivot(p * length - shift, rot) for p in points]


def straight_edge(length, rot):
    return _place([Vector2(0, 0), Vector2(1, 0)], length, rot)


def tabbed_edge(length, rot, base_pos, base_len, tip_pos, tip_len, height):
    h_base_len = base_len * 0.5
    h_tip_len = tip_len * 0.5
    points = [
        Vector2(0, 0),
        Vector2(base_pos - h_base_len, 0),
        Vector2(tip_pos - h_tip_len, height),
        Vector2(tip_pos + h_tip_len, height),
        Vector2(base_pos + h_base_len, 0),
        Vector2(1, 0),
    ]
    return _place(points, length, rot)


def rr(rng, lo_hi):
    lo, hi = lo_hi
    return rng.random() * (hi - lo) + lo


def random_tab(config, rng):
    """Draw one set of tab parameters from the configured ranges."""
    base_pos = rr(rng, config.base_pos_range)
    base_len = rr(rng, config.base_size_range)
    tip_len = rr(rng, config.tip_size_range)
    height = rr(rng, config.tip_height_range)
    if rng.random() < 0.5:
        height = -height
    return {
        "base_pos": base_pos,
        "base_len": base_len,
        "tip_pos": base_pos,
        "tip_len": tip_len,
        "height": height,
    }


def sample_edge(control_path, step=SAMPLE_STEP):
    return Spline(control_path).to_path(step)


class EdgeLattice:
    """
    Shared edges of an R x C tile grid.

    ``horizontal[y][x]`` for y in 0..R and x in 0..C-1 runs left to right;
    ``vertical[y][x]`` for y in 0..R-1 and x in 0..C runs top to bottom.
    """

    def __init__(self, rows, cols, tile_width, tile_height, horizontal, vertical):
        self.rows = rows
        self.cols = cols
        self.tile_width = tile_width
        self.tile_height = tile_height
        self.horizontal = horizontal
        self.vertical = vertical

    @classmethod
    def build(cls, rows, cols, tile_width, tile_height, config, rng, step=SAMPLE_STEP):
        if rows < 1 or cols < 1:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError("tile size must be positive")

        horizontal = []
        for y in range(rows + 1):
            row = []
            for x in range(cols):
                if y == 0 or y == rows:
                    path = straight_edge(tile_width, HORIZONTAL)
                else:
                    path = tabbed_edge(tile_width, HORIZONTAL, **random_tab(config, rng))
                row.append(sample_edge(path, step))
            horizontal.append(row)

        vertical = []
        for y in range(rows):
            row = []
            for x in range(cols + 1):
                if x == 0 or x == cols:
                    path = straight_edge(tile_height, VERTICAL)
                else:
                    path = tabbed_edge(tile_height, VERTICAL, **random_tab(config, rng))
                row.append(sample_edge(path, step))
            vertical.append(row)

        logger.debug("built %dx%d edge lattice (tile %.1fx%.1f)", rows, cols, tile_width, tile_height)
        return cls(rows, cols, tile_width, tile_height, horizontal, vertical)

    def tile_edges(self, x, y):
        """Return the (top, right, bottom, left) sampled edges of tile (x, y), unoriented."""
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise IndexError(f"tile ({x}, {y}) outside {self.cols}x{self.rows} grid")
        return (
            self.horizontal[y][x],
            self.vertical[y][x + 1],
            self.horizontal[y + 1][x],
            self.vertical[y][x],
        )

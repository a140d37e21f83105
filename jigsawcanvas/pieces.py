import logging
import random

from jigsawcanvas import render
from jigsawcanvas.config import SAMPLE_STEP, EdgeConfig
from jigsawcanvas.edges import EdgeLattice
from jigsawcanvas.hittest import contains_point
from jigsawcanvas.outline import build_outline
from jigsawcanvas.vector import Vector2

logger = logging.getLogger(__name__)


class PuzzlePiece:
    """One draggable tile: its outline, solved centre and current position."""

    def __init__(self, grid_pos, home, outline, background):
        self.grid_pos = grid_pos
        self.home = Vector2(home)
        self.pos = Vector2(home)
        self.outline = outline
        self.background = background
        self.object_id = None
        self.hovered = False
        self.dragging = False
        self.drag_start_offset = Vector2()
        self._tile = None

    def contains_point(self, p):
        return contains_point(p, self.outline.points, self.pos, self.outline.bounds)

    def update(self, dt):
        pass

    def tile(self):
        """Clipped image surface for this piece, cut once and cached."""
        if self._tile is None:
            self._tile = render.cut_tile(self.background, self.outline, self.home)
        return self._tile

    def draw(self, surface, arbiter):
        render.draw_piece(surface, self, highlighted=arbiter.hovered_id == self.object_id)

    def on_drag_start(self, arbiter):
        arbiter.focus(self)

    def on_drag_end(self, arbiter):
        pass

    def on_drag_move(self, new_pos):
        self.pos = new_pos

    def __repr__(self):
        return f"PuzzlePiece(grid_pos={self.grid_pos}, pos={self.pos!r})"


class PuzzleBoard:
    """Generates the pieces of a puzzle and registers them with an arbiter."""

    def __init__(self, arbiter, background=None):
        self.arbiter = arbiter
        self.background = background
        self.lattice = None
        self.pieces = []

    def rebuild(self, rows, cols, size, config=None, rng=None, step=SAMPLE_STEP):
        """Discard every object and regenerate a rows x cols puzzle covering ``size``."""
        if rows < 1 or cols < 1:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        config = config or EdgeConfig()
        rng = rng or random.Random()
        width, height = size
        tile_width = width / cols
        tile_height = height / rows

        background = self.background if self.background is not None else render.radial_gradient(size)

        self.arbiter.clear()
        self.pieces = []
        self.lattice = EdgeLattice.build(rows, cols, tile_width, tile_height, config, rng, step)

        for y in range(rows):
            for x in range(cols):
                home = Vector2(x * tile_width + tile_width / 2, y * tile_height + tile_height / 2)
                piece = PuzzlePiece((x, y), home, build_outline(self.lattice, x, y), background)
                self.arbiter.add(piece)
                self.pieces.append(piece)

        logger.info("generated %d pieces (%dx%d)", len(self.pieces), rows, cols)
        return self.pieces

    def piece_at(self, x, y):
        if self.lattice is None or not (0 <= x < self.lattice.cols and 0 <= y < self.lattice.rows):
            raise IndexError(f"no piece at ({x}, {y})")
        return self.pieces[y * self.lattice.cols + x]

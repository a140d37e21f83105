"""Interlocking jigsaw piece generation, hit testing and drag arbitration."""

from jigsawcanvas.vector import Vector2
from jigsawcanvas.spline import Spline
from jigsawcanvas.config import EdgeConfig
from jigsawcanvas.edges import EdgeLattice, straight_edge, tabbed_edge
from jigsawcanvas.outline import EdgeInstance, PieceOutline, build_outline
from jigsawcanvas.hittest import contains_point
from jigsawcanvas.arbiter import InteractionArbiter
from jigsawcanvas.pointer import PointerState

__all__ = [
    "Vector2",
    "Spline",
    "EdgeConfig",
    "EdgeLattice",
    "straight_edge",
    "tabbed_edge",
    "EdgeInstance",
    "PieceOutline",
    "build_outline",
    "contains_point",
    "InteractionArbiter",
    "PointerState",
]

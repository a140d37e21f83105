import os
import sys
from pathlib import Path

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pygame
import pytest

from jigsawcanvas.vector import Vector2

pygame.init()


class Box:
    """Axis-aligned square used to drive the arbiter without any drawing."""

    def __init__(self, name, pos, half=10.0):
        self.name = name
        self.pos = Vector2(pos)
        self.half = half
        self.object_id = None
        self.hovered = False
        self.dragging = False
        self.drag_start_offset = Vector2()
        self.events = []

    def contains_point(self, p):
        return abs(p.x - self.pos.x) <= self.half and abs(p.y - self.pos.y) <= self.half

    def update(self, dt):
        pass

    def draw(self, surface, arbiter):
        surface.append(self.name)

    def on_drag_start(self, arbiter):
        self.events.append("start")
        arbiter.focus(self)

    def on_drag_end(self, arbiter):
        self.events.append("end")

    def on_drag_move(self, new_pos):
        self.pos = new_pos

    def __repr__(self):
        return f"Box({self.name!r})"


@pytest.fixture
def make_box():
    return Box

"""Tests for board generation, piece drawing and dragging pieces end to end."""

import random

import pygame
import pytest

from jigsawcanvas import render
from jigsawcanvas.arbiter import InteractionArbiter
from jigsawcanvas.pieces import PuzzleBoard
from jigsawcanvas.pointer import PointerState
from jigsawcanvas.vector import Vector2

SIZE = (400, 300)


@pytest.fixture
def board():
    background = pygame.Surface(SIZE)
    background.fill((200, 30, 30))
    board = PuzzleBoard(InteractionArbiter(), background)
    board.rebuild(3, 4, SIZE, rng=random.Random(9))
    return board


def press(pointer, x, y, down=True):
    pointer.move_to((x, y))
    pointer.button_down = down


def test_rebuild_creates_one_piece_per_tile(board) -> None:
    arbiter = board.arbiter

    assert len(board.pieces) == 12
    assert len(arbiter) == 12
    assert arbiter.objects[0].grid_pos == (0, 0)
    assert board.piece_at(3, 2).home == Vector2(350, 250)
    for piece in board.pieces:
        assert piece.pos == piece.home
        assert piece.contains_point(piece.home)


def test_rebuild_discards_previous_pieces_and_state(board) -> None:
    pointer = PointerState()
    press(pointer, 50, 50)
    board.arbiter.update(pointer)
    old = list(board.pieces)
    assert board.arbiter.drag_locked_id is not None

    board.rebuild(2, 2, SIZE, rng=random.Random(1))

    assert len(board.arbiter) == 4
    assert board.arbiter.hovered_id is None
    assert board.arbiter.drag_locked_id is None
    assert all(piece.object_id is None for piece in old)


def test_rebuild_rejects_empty_grid(board) -> None:
    with pytest.raises(ValueError):
        board.rebuild(0, 3, SIZE)
    assert len(board.arbiter) == 12


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_piece_at_rejects_cells_outside_the_grid(board, x, y) -> None:
    with pytest.raises(IndexError):
        board.piece_at(x, y)


def test_board_without_background_uses_the_gradient() -> None:
    board = PuzzleBoard(InteractionArbiter())
    board.rebuild(2, 2, SIZE, rng=random.Random(4))
    screen = pygame.Surface(SIZE)
    screen.fill((255, 0, 255))

    board.arbiter.draw(screen)

    tile, _ = board.piece_at(0, 0).tile()
    assert tile.get_size()[0] > 0
    # centre of the canvas is the lightest part of the default gradient
    assert tuple(screen.get_at((SIZE[0] // 2 + 20, SIZE[1] // 2 + 20)))[:3] != (255, 0, 255)


def test_dragging_a_piece_brings_it_to_front_and_moves_it(board) -> None:
    pointer = PointerState()
    piece = board.piece_at(2, 1)
    start = piece.home.copy()

    press(pointer, start.x + 4, start.y - 3)
    board.arbiter.update(pointer)
    for step in range(1, 11):
        press(pointer, start.x + 4 + 6 * step, start.y - 3 + 4 * step)
        board.arbiter.update(pointer)

    assert board.arbiter.objects[0] is piece
    assert piece.dragging
    assert piece.pos == start + Vector2(60, 40)

    press(pointer, start.x + 64, start.y + 37, down=False)
    board.arbiter.update(pointer)

    assert not piece.dragging
    assert piece.pos == start + Vector2(60, 40)


def test_tile_is_masked_to_the_outline(board) -> None:
    piece = board.piece_at(1, 1)

    tile, local = piece.tile()

    assert tile.get_size() == local.size
    centre = tile.get_at((-local.x, -local.y))
    assert tuple(centre) == (200, 30, 30, 255)
    assert pygame.mask.from_surface(tile).count() < local.width * local.height
    assert piece.tile() is piece.tile()


def test_draw_strokes_pieces_onto_the_screen(board) -> None:
    screen = pygame.Surface(SIZE)
    screen.fill(render.CLEAR_COLOR)

    board.arbiter.draw(screen)

    assert tuple(screen.get_at((250, 150)))[:3] == (200, 30, 30)


def test_radial_gradient_is_darker_at_the_edges() -> None:
    surface = render.radial_gradient((64, 48))

    centre = surface.get_at((32, 24))
    corner = surface.get_at((0, 0))
    assert surface.get_size() == (64, 48)
    assert centre.r > corner.r

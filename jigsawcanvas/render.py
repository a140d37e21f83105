"""pygame drawing helpers: background images and clipped piece tiles."""

import math

import numpy as np
import pygame
from PIL import Image

CLEAR_COLOR = (250, 250, 250)
STROKE_COLOR = (255, 255, 255)
STROKE_WIDTH = 2
HOVER_STROKE_WIDTH = 3


def load_background(path, size):
    """Load an image with Pillow and stretch it to ``size``."""
    with Image.open(path) as img:
        img = img.convert("RGB").resize(size)
        data = img.tobytes()
    return pygame.image.frombytes(data, size, "RGB")


def radial_gradient(size, inner=(60, 60, 60), outer=(0, 0, 0)):
    """Dark radial gradient used when no background image is supplied."""
    width, height = size
    xs = np.arange(width, dtype=np.float32) - width / 2
    ys = np.arange(height, dtype=np.float32) - height / 2
    # surfarray is indexed [x][y]
    dist = np.sqrt(xs[:, None] ** 2 + ys[None, :] ** 2)
    ratio = np.clip(dist / math.hypot(width / 2, height / 2), 0.0, 1.0)[..., None]
    inner = np.array(inner, dtype=np.float32)
    outer = np.array(outer, dtype=np.float32)
    rgb = inner * (1 - ratio) + outer * ratio
    return pygame.surfarray.make_surface(rgb.astype(np.uint8))


def outline_rect(outline):
    """Integer pygame.Rect enclosing the outline's bounds in piece-local space."""
    min_x, min_y, max_x, max_y = outline.bounds
    left, top = math.floor(min_x), math.floor(min_y)
    return pygame.Rect(left, top, math.ceil(max_x) - left + 1, math.ceil(max_y) - top + 1)


def cut_tile(background, outline, home):
    """
    Cut the region of ``background`` under ``outline`` placed at ``home``.

    Returns an SRCALPHA surface the size of the outline's bounds, transparent
    outside the polygon, along with the local rect it covers.
    """
    local = outline_rect(outline)
    tile = pygame.Surface(local.size, pygame.SRCALPHA)
    src = local.move(round(home.x), round(home.y))
    tile.blit(background, (0, 0), area=src)

    poly = [(p.x - local.x, p.y - local.y) for p in outline]
    mask_surface = pygame.Surface(local.size, pygame.SRCALPHA)
    mask_surface.fill((0, 0, 0, 0))
    pygame.draw.polygon(mask_surface, (255, 255, 255, 255), poly)
    mask = pygame.mask.from_surface(mask_surface)
    mask_image = mask.to_surface(setcolor=(255, 255, 255, 255), unsetcolor=(0, 0, 0, 0))
    tile.blit(mask_image, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
    return tile, local


def draw_piece(screen, piece, highlighted=False):
    tile, local = piece.tile()
    screen.blit(tile, (round(piece.pos.x) + local.x, round(piece.pos.y) + local.y))
    points = [tuple(p) for p in piece.outline.translated(piece.pos)]
    width = HOVER_STROKE_WIDTH if highlighted else STROKE_WIDTH
    pygame.draw.lines(screen, STROKE_COLOR, True, points, width)

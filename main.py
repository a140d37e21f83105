import argparse
import json
import logging
import random
import sys

import pygame

from jigsawcanvas import render
from jigsawcanvas.arbiter import InteractionArbiter
from jigsawcanvas.config import (CANVAS_HEIGHT, CANVAS_WIDTH, DEFAULT_COLS, DEFAULT_ROWS, FPS,
                                  SLIDER_BOUNDS, SLIDER_STEP, EdgeConfig)
from jigsawcanvas.pieces import PuzzleBoard
from jigsawcanvas.pointer import LEFT_BUTTON, PointerState

RANGE_NAMES = list(SLIDER_BOUNDS)
GENERATE_BUTTON = {"label": "Generate", "rect": pygame.Rect(20, 20, 150, 40), "color": (70, 130, 180)}

# --- Global Caches for Performance ---
FONTS = {}          # Cache for fonts keyed by size.


def get_font(size):
    """Return a cached font of the given size."""
    if size not in FONTS:
        FONTS[size] = pygame.font.SysFont("arial", size)
    return FONTS[size]


# --- Helper Functions ---
def draw_text(screen, text, pos, font_size=20, color=(255, 255, 255), shadow_color=(0, 0, 0), shadow_offset=(1, 1)):
    """Draws left-aligned text with a subtle drop shadow for improved legibility."""
    font = get_font(font_size)
    shadow_surface = font.render(text, True, shadow_color)
    screen.blit(shadow_surface, (pos[0] + shadow_offset[0], pos[1] + shadow_offset[1]))
    text_surface = font.render(text, True, color)
    screen.blit(text_surface, pos)


def draw_rounded_button(screen, button, mouse_pos=None):
    """Draws a button with a border, lightened while the mouse is over it."""
    rect = button["rect"]
    base_color = button["color"]
    if mouse_pos and rect.collidepoint(mouse_pos):
        color = tuple(min(255, c + 30) for c in base_color)
    else:
        color = base_color
    border_rect = rect.inflate(4, 4)
    pygame.draw.rect(screen, (0, 0, 0), border_rect, border_radius=8)
    pygame.draw.rect(screen, color, rect, border_radius=8)
    font = get_font(24)
    text_surface = font.render(button["label"], True, (255, 255, 255))
    screen.blit(text_surface, text_surface.get_rect(center=rect.center))


def is_generate_click(event):
    """Left clicks on the Generate button rebuild the puzzle; other buttons fall through."""
    return (event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON
            and GENERATE_BUTTON["rect"].collidepoint(event.pos))


def draw_settings(screen, config, selected):
    y = 75
    for i, name in enumerate(RANGE_NAMES):
        lo, hi = getattr(config, name)
        marker = ">" if i == selected else " "
        draw_text(screen, f"{marker} {name}: {lo:.2f} - {hi:.2f}", (20, y))
        y += 22
    draw_text(screen, "TAB select  LEFT/RIGHT min  DOWN/UP max  R generate", (20, y + 4), font_size=16)


def adjust_range(config, name, d_min=0.0, d_max=0.0):
    """Nudge one range by whole slider steps; invalid results keep the old config."""
    lo, hi = getattr(config, name)
    try:
        return config.with_range(name, lo + d_min * SLIDER_STEP, hi + d_max * SLIDER_STEP)
    except ValueError as exc:
        print(f"Ignored: {exc}")
        return config


# --- Configuration Input ---
def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate an interlocking jigsaw puzzle and drag its pieces around.")
    parser.add_argument("--image", help="Background image to cut into pieces")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Number of puzzle rows")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Number of puzzle columns")
    parser.add_argument("--width", type=int, default=CANVAS_WIDTH, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=CANVAS_HEIGHT, help="Canvas height in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Optional random seed for repeatable tabs")
    parser.add_argument("--config", help="JSON file with basePosRange/baseSizeRange/tipSizeRange/tipHeightRange")
    for name in RANGE_NAMES:
        flag = "--" + name.replace("_range", "").replace("_", "-")
        parser.add_argument(flag, dest=name, type=float, nargs=2, metavar=("MIN", "MAX"))
    parser.add_argument("--verbose", action="store_true", help="Log generation and drag events")
    return parser.parse_args(argv)


def load_edge_config(args):
    data = {}
    if args.config:
        with open(args.config, "r") as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"{args.config} must hold a JSON object")
        data.update(loaded)
    for name in RANGE_NAMES:
        value = getattr(args, name)
        if value is not None:
            data[name] = value
    return EdgeConfig.from_mapping(data)


def load_background(path, size):
    if path:
        try:
            return render.load_background(path, size)
        except OSError as exc:
            print(f"Could not load {path} ({exc}); using the default background.")
    return render.radial_gradient(size)


# --- Main Loop ---
def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        config = load_edge_config(args)
    except (OSError, ValueError) as exc:
        print(f"Invalid edge configuration: {exc}")
        return 2

    pygame.init()
    size = (args.width, args.height)
    screen = pygame.display.set_mode(size)
    pygame.display.set_caption("Jigsaw Canvas")
    clock = pygame.time.Clock()

    rng = random.Random(args.seed)
    pointer = PointerState()
    arbiter = InteractionArbiter()
    board = PuzzleBoard(arbiter, load_background(args.image, size))
    try:
        board.rebuild(args.rows, args.cols, size, config, rng)
    except ValueError as exc:
        print(f"Cannot build puzzle: {exc}")
        pygame.quit()
        return 2

    selected = 0
    frame_counter = 0
    running_time = 0.0
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        running_time += dt
        frame_counter += 1
        if running_time >= 1:
            print(f"{frame_counter} fps")
            pygame.display.set_caption(f"Jigsaw Canvas - {frame_counter} fps")
            running_time = 0.0
            frame_counter = 0

        regenerate = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    regenerate = True
                elif event.key == pygame.K_TAB:
                    selected = (selected + 1) % len(RANGE_NAMES)
                elif event.key == pygame.K_LEFT:
                    config = adjust_range(config, RANGE_NAMES[selected], d_min=-1)
                elif event.key == pygame.K_RIGHT:
                    config = adjust_range(config, RANGE_NAMES[selected], d_min=1)
                elif event.key == pygame.K_DOWN:
                    config = adjust_range(config, RANGE_NAMES[selected], d_max=-1)
                elif event.key == pygame.K_UP:
                    config = adjust_range(config, RANGE_NAMES[selected], d_max=1)
            elif is_generate_click(event):
                regenerate = True
            else:
                pointer.handle_event(event)

        if regenerate:
            board.rebuild(args.rows, args.cols, size, config, rng)

        arbiter.update(pointer, dt)

        screen.fill(render.CLEAR_COLOR)
        arbiter.draw(screen)
        draw_rounded_button(screen, GENERATE_BUTTON, tuple(pointer.pos))
        draw_settings(screen, config, selected)
        pygame.display.flip()

        pointer.end_tick()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())

import pygame

from jigsawcanvas.vector import Vector2

LEFT_BUTTON = 1


class PointerState:
    """Latest mouse position, per-tick motion delta and left button state."""

    def __init__(self):
        self.pos = Vector2()
        self.delta = Vector2()
        self.button_down = False

    def move_to(self, pos):
        last = self.pos
        self.pos = Vector2(pos)
        self.delta = self.pos - last

    def handle_event(self, event):
        """Apply one pygame event; returns True if it was a pointer event."""
        if event.type == pygame.MOUSEMOTION:
            self.move_to(event.pos)
            return True
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            self.button_down = True
            return True
        if event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_BUTTON:
            self.button_down = False
            return True
        return False

    def end_tick(self):
        self.delta = Vector2()

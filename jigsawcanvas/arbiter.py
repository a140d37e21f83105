"""
Per-tick hover and drag arbitration across overlapping objects.

The arbiter owns the z-ordered object list (index 0 is the front) and two
nullable identifiers: the object hovered this tick and the object holding the
drag lock. Only the front-most object under the pointer is hovered, and only
one object at a time may drag.
"""

import itertools
import logging
from typing import Optional, Protocol

from jigsawcanvas.vector import Vector2

logger = logging.getLogger(__name__)


class Interactive(Protocol):
    """Capabilities an object needs to take part in arbitration."""

    object_id: Optional[int]
    pos: Vector2
    hovered: bool
    dragging: bool
    drag_start_offset: Vector2

    def contains_point(self, p: Vector2) -> bool: ...

    def update(self, dt: float) -> None: ...

    def draw(self, surface, arbiter: "InteractionArbiter") -> None: ...

    def on_drag_start(self, arbiter: "InteractionArbiter") -> None: ...

    def on_drag_end(self, arbiter: "InteractionArbiter") -> None: ...

    def on_drag_move(self, new_pos: Vector2) -> None: ...


class InteractionArbiter:

    def __init__(self):
        self._objects = []
        self._by_id = {}
        self._ids = itertools.count(1)
        self.hovered_id: Optional[int] = None
        self.drag_locked_id: Optional[int] = None

    # --- Collection ---
    @property
    def objects(self):
        """Objects front to back."""
        return list(self._objects)

    def back_to_front(self):
        return list(reversed(self._objects))

    def __len__(self):
        return len(self._objects)

    def __contains__(self, obj):
        object_id = getattr(obj, "object_id", None)
        return object_id is not None and self._by_id.get(object_id) is obj

    def add(self, obj):
        """Append ``obj`` behind every object already present."""
        if obj in self:
            raise ValueError(f"object {obj.object_id} already registered")
        obj.object_id = next(self._ids)
        self._objects.append(obj)
        self._by_id[obj.object_id] = obj
        return obj.object_id

    def remove(self, obj):
        if obj not in self:
            raise ValueError("object is not registered with this arbiter")
        self._objects.remove(obj)
        del self._by_id[obj.object_id]
        if self.hovered_id == obj.object_id:
            self.hovered_id = None
        if self.drag_locked_id == obj.object_id:
            self.drag_locked_id = None
        obj.hovered = False
        obj.dragging = False
        obj.object_id = None

    def clear(self):
        for obj in self._objects:
            obj.hovered = False
            obj.dragging = False
            obj.object_id = None
        self._objects = []
        self._by_id = {}
        self.hovered_id = None
        self.drag_locked_id = None

    def get(self, object_id):
        if object_id is None:
            return None
        return self._by_id.get(object_id)

    @property
    def hovered_object(self):
        return self.get(self.hovered_id)

    @property
    def drag_locked_object(self):
        return self.get(self.drag_locked_id)

    def focus(self, obj):
        """Move ``obj`` to the front of the z-order."""
        if obj not in self:
            raise ValueError(f"{obj!r} is not registered")
        self._objects.remove(obj)
        self._objects.insert(0, obj)

    # --- Per-tick update ---
    def update(self, pointer, dt=0.0):
        self.hovered_id = None
        # focus() may reorder the list mid-tick; iterate over this tick's order
        for obj in list(self._objects):
            if obj.object_id not in self._by_id:
                continue
            self._update_hover(obj, pointer)
            self._update_drag(obj, pointer)
            obj.update(dt)

    def _update_hover(self, obj, pointer):
        is_over = obj.contains_point(pointer.pos)
        obj.hovered = is_over and self.hovered_id is None
        if obj.hovered:
            self.hovered_id = obj.object_id

    def _update_drag(self, obj, pointer):
        wants_drag = obj.hovered and pointer.button_down and \
            self.drag_locked_id in (None, obj.object_id)

        if not obj.dragging and wants_drag:
            self.drag_locked_id = obj.object_id
            obj.drag_start_offset = obj.pos - pointer.pos
            obj.dragging = True
            logger.debug("drag start on object %d", obj.object_id)
            obj.on_drag_start(self)
        elif obj.dragging and not wants_drag:
            obj.dragging = False
            obj.drag_start_offset = Vector2()
            if self.drag_locked_id == obj.object_id:
                self.drag_locked_id = None
            logger.debug("drag end on object %d", obj.object_id)
            obj.on_drag_end(self)

        if obj.dragging:
            obj.on_drag_move(obj.drag_start_offset + pointer.pos)

    def draw(self, surface):
        for obj in self.back_to_front():
            obj.draw(surface, self)

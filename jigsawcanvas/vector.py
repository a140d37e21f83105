"""
2D points are pygame's ``Vector2``.

Operators and plain methods (``+``, ``-``, ``*``, ``rotate_rad``, ``normalize``)
return new vectors; augmented assignment and the ``_ip`` methods mutate in
place. ``pivot`` and ``normalise`` are the copying spellings used by the edge
code.
"""

from pygame.math import Vector2

__all__ = ["Vector2", "pivot", "normalise"]


def pivot(v, rot):
    """Copy of ``v`` rotated by ``rot`` radians about the origin."""
    return v.rotate_rad(rot)


def normalise(v):
    """Unit vector along ``v``; raises ValueError for a zero-length vector."""
    return v.normalize()

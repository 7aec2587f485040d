#!/usr/bin/env python3
"""
sim/geometry.py
===============
Axis-aligned rectangle helpers used by :mod:`sim.session` for collision
checks and by the renderers for hitbox overlays.

Coordinates are screen pixels: ``x`` grows to the right, ``y`` grows
downwards, and ``(x, y)`` is the top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Rect:
    """Immutable axis-aligned rectangle."""

    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def as_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "w": self.w, "h": self.h}


def overlaps(a: Rect, b: Rect) -> bool:
    """True iff *a* and *b* overlap on both axes.

    Inequalities are strict, so rectangles that only share an edge do not
    overlap and a zero-width or zero-height rectangle never collides.
    """
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def inset(rect: Rect, margin: float) -> Rect:
    """Shrink *rect* by *margin* pixels on every side."""
    return Rect(
        x=rect.x + margin,
        y=rect.y + margin,
        w=rect.w - 2 * margin,
        h=rect.h - 2 * margin,
    )

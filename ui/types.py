"""
ui/types.py
===========
Lightweight data containers used across every UI module.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

ColorRGB = Tuple[int, int, int]
ColorRGBA = Tuple[int, int, int, int]


@dataclass
class RoadScroll:
    """Cosmetic lane-marker offset; advances with the obstacle speed."""
    marker_height: float = 40.0
    marker_gap: float = 20.0
    offset: float = 0.0

    @property
    def period(self) -> float:
        return self.marker_height + self.marker_gap

    def advance(self, speed: float) -> float:
        self.offset += speed
        if self.offset > self.period:
            self.offset = 0.0
        return self.offset

    def reset(self) -> None:
        self.offset = 0.0

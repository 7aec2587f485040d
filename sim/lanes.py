#!/usr/bin/env python3
"""
sim/lanes.py
============
Road geometry and the lane → pixel mapping shared by the player and
the obstacle spawner.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RoadGeometry:
    """Immutable road layout.

    Attributes
    ----------
    lane_count : int
        Number of discrete lanes.
    edge_width : float
        Width of the margin on each side of the road (pixels).
    lane_width : float
        Width of a single lane (pixels).
    """

    lane_count: int
    edge_width: float
    lane_width: float

    @classmethod
    def for_playfield(
        cls, width: float, lane_count: int = 5, edge_width: float = 100.0
    ) -> "RoadGeometry":
        """Split the space between the two edge margins into equal lanes."""
        if lane_count < 1:
            raise ValueError(f"lane_count must be >= 1, got {lane_count}")
        road_width = width - edge_width * 2
        if road_width <= 0:
            raise ValueError(
                f"playfield width {width} leaves no road between "
                f"two {edge_width}px edges"
            )
        return cls(
            lane_count=lane_count,
            edge_width=edge_width,
            lane_width=road_width / lane_count,
        )

    def lane_x(self, lane: int, entity_width: float) -> float:
        """Left edge of an entity of *entity_width* centred in *lane*."""
        return lane_to_x(lane, self.edge_width, self.lane_width, entity_width)

    def lane_span(self, lane: int):
        """``(left, right)`` pixel bounds of *lane*."""
        left = self.edge_width + lane * self.lane_width
        return left, left + self.lane_width


def lane_to_x(
    lane: int, edge_width: float, lane_width: float, entity_width: float
) -> float:
    """Horizontal position that centres an entity within *lane*.

    No clamping: callers keep *lane* inside ``[0, lane_count)``.
    """
    return edge_width + lane * lane_width + (lane_width - entity_width) / 2

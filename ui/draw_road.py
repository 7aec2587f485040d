#!/usr/bin/env python3
"""
ui/draw_road.py
===============
Renders the scrolling highway: road surface gradient, verges, edge
lines, animated lane markers and the speed-line effect.

All functions are *pure renderers* — they read a snapshot and draw to a
surface.  The marker offset is cosmetic view state, not simulation state.
"""

from __future__ import annotations

import random
from typing import Optional, Sequence, Tuple

import pygame

from sim.session import FrameSnapshot, RunPhase
from .types import ColorRGB


def _vertical_gradient(
    size: Tuple[int, int], stops: Sequence[Tuple[float, ColorRGB]]
) -> pygame.Surface:
    """Surface filled top→bottom through *stops* ``(position, colour)``."""
    w, h = size
    surf = pygame.Surface((max(1, w), max(1, h)))
    for row in range(h):
        t = row / max(1, h - 1)
        for (p0, c0), (p1, c1) in zip(stops, stops[1:]):
            if p0 <= t <= p1:
                k = (t - p0) / (p1 - p0) if p1 > p0 else 0.0
                color = tuple(int(a + (b - a) * k) for a, b in zip(c0, c1))
                pygame.draw.line(surf, color, (0, row), (w, row))
                break
    return surf


def _horizontal_gradient(size: Tuple[int, int], left: ColorRGB, right: ColorRGB) -> pygame.Surface:
    w, h = size
    surf = pygame.Surface((max(1, w), max(1, h)))
    for col in range(w):
        t = col / max(1, w - 1)
        color = tuple(int(a + (b - a) * t) for a, b in zip(left, right))
        pygame.draw.line(surf, color, (col, 0), (col, h))
    return surf


class RoadRenderer:
    """Mixin that draws the road background layers."""

    _road_surface: Optional[pygame.Surface] = None
    _speed_line_rng: random.Random = random.Random()

    # ------------------------------------------------------------------ #
    #  Static background (built once per window size)                     #
    # ------------------------------------------------------------------ #

    def _build_road_surface(self) -> pygame.Surface:
        edge = int(self.road.edge_width)
        surf = pygame.Surface((self.width, self.height))
        road = _vertical_gradient(
            (self.width - edge * 2, self.height),
            (
                (0.0, self.ROAD_TOP_COLOR),
                (0.5, self.ROAD_MID_COLOR),
                (1.0, self.ROAD_BOTTOM_COLOR),
            ),
        )
        surf.blit(road, (edge, 0))
        surf.blit(
            _horizontal_gradient((edge, self.height), self.VERGE_OUTER_COLOR, self.VERGE_INNER_COLOR),
            (0, 0),
        )
        surf.blit(
            _horizontal_gradient((edge, self.height), self.VERGE_INNER_COLOR, self.VERGE_OUTER_COLOR),
            (self.width - edge, 0),
        )
        return surf

    # ------------------------------------------------------------------ #
    #  Public draw methods                                                 #
    # ------------------------------------------------------------------ #

    def draw_road(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        if self._road_surface is None or self._road_surface.get_size() != (self.width, self.height):
            self._road_surface = self._build_road_surface()
        surface.blit(self._road_surface, (0, 0))

        self._draw_edge_lines(surface)
        self._draw_lane_markers(surface)

        self.scroll.advance(snapshot.scroll_speed)
        if (
            snapshot.phase is RunPhase.PLAYING
            and snapshot.speed_multiplier > self.SPEED_LINES_MULTIPLIER
        ):
            self._draw_speed_lines(surface)

    def _draw_edge_lines(self, surface: pygame.Surface) -> None:
        edge = self.road.edge_width
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        for x in (edge, self.width - edge):
            pygame.draw.line(overlay, self.EDGE_LINE_COLOR, (x, 0), (x, self.height), 4)
        surface.blit(overlay, (0, 0))

    def _draw_lane_markers(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        period = self.scroll.period
        start = self.scroll.offset - period
        for lane in range(1, self.road.lane_count):
            x, _ = self.road.lane_span(lane)
            y = start
            while y < self.height:
                pygame.draw.line(
                    overlay,
                    self.LANE_MARKER_COLOR,
                    (x, max(0.0, y)),
                    (x, y + self.scroll.marker_height),
                    3,
                )
                y += period
        surface.blit(overlay, (0, 0))

    def _draw_speed_lines(self, surface: pygame.Surface) -> None:
        edge = self.road.edge_width
        road_w = self.width - edge * 2
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        for i in range(self.SPEED_LINE_COUNT):
            x = edge + self._speed_line_rng.random() * road_w
            y = (self.scroll.offset * 3 + i * 60) % self.height
            pygame.draw.line(overlay, self.SPEED_LINE_COLOR, (x, y), (x, y + 30), 2)
        surface.blit(overlay, (0, 0))

#!/usr/bin/env python3
"""Player and obstacle sprites, plus debug hitboxes (mixin)."""

from __future__ import annotations

from typing import Any, Mapping

import pygame

from sim.session import FrameSnapshot
from .helpers import adjust_brightness, draw_alpha_rect, hex_to_rgb


class VehicleRenderer:
    """Mixin that draws the player's car and every obstacle."""

    # ------------------------------------------------------------------ #
    #  Public draw methods                                                 #
    # ------------------------------------------------------------------ #

    def draw_player(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        p = snapshot.player
        x, y = int(p["x"]), int(p["y"])
        w, h = int(p["width"]), int(p["height"])

        draw_alpha_rect(surface, self.SHADOW_COLOR, pygame.Rect(x + 2, y + 2, w, h))

        # Body + roof
        body = pygame.Rect(x, y + 15, w, h - 25)
        roof = pygame.Rect(x + 3, y + 5, w - 6, 20)
        pygame.draw.rect(surface, self.PLAYER_BODY_COLOR, body)
        pygame.draw.rect(surface, self.PLAYER_BODY_DARK, roof)
        pygame.draw.rect(surface, self.PLAYER_OUTLINE_COLOR, body, width=2)
        pygame.draw.rect(surface, self.PLAYER_OUTLINE_COLOR, roof, width=2)

        # Windshields and side windows
        draw_alpha_rect(surface, self.WINDOW_COLOR, pygame.Rect(x + 5, y + 7, w - 10, 8))
        draw_alpha_rect(surface, self.WINDOW_COLOR, pygame.Rect(x + 5, y + 17, w - 10, 8))
        draw_alpha_rect(surface, self.WINDOW_COLOR, pygame.Rect(x + 3, y + 28, 5, 15))
        draw_alpha_rect(surface, self.WINDOW_COLOR, pygame.Rect(x + w - 8, y + 28, 5, 15))

        # Wheels
        for wx in (x - 3, x + w - 3):
            for wy in (y + 10, y + h - 20):
                pygame.draw.rect(surface, self.WHEEL_COLOR, (wx, wy, 6, 12))
                pygame.draw.rect(surface, self.RIM_COLOR, (wx + 1, wy + 2, 4, 8))

        # Lights
        draw_alpha_rect(surface, self.HEADLIGHT_GLOW, pygame.Rect(x + 2, y - 5, 8, 8))
        draw_alpha_rect(surface, self.HEADLIGHT_GLOW, pygame.Rect(x + w - 10, y - 5, 8, 8))
        pygame.draw.rect(surface, self.HEADLIGHT_COLOR, (x + 4, y, 5, 3))
        pygame.draw.rect(surface, self.HEADLIGHT_COLOR, (x + w - 9, y, 5, 3))
        pygame.draw.rect(surface, self.TAILLIGHT_COLOR, (x + 5, y + h - 3, 5, 3))
        pygame.draw.rect(surface, self.TAILLIGHT_COLOR, (x + w - 10, y + h - 3, 5, 3))

        # Hood line
        pygame.draw.line(
            surface, self.PLAYER_OUTLINE_COLOR, (x + w // 2, y + 5), (x + w // 2, y + 25), 1
        )

        if snapshot.debug:
            hb = snapshot.player_hitbox
            pygame.draw.rect(
                surface,
                self.HITBOX_PLAYER_COLOR,
                (int(hb["x"]), int(hb["y"]), int(hb["w"]), int(hb["h"])),
                width=2,
            )

    def draw_obstacles(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        for obstacle in snapshot.obstacles:
            self._draw_obstacle(surface, obstacle, snapshot.debug)

    def _draw_obstacle(self, surface: pygame.Surface, obstacle: Mapping[str, Any], debug: bool) -> None:
        x, y = int(obstacle["x"]), int(obstacle["y"])
        w, h = int(obstacle["width"]), int(obstacle["height"])
        color = hex_to_rgb(obstacle["color"])
        darker = adjust_brightness(color, -20)

        draw_alpha_rect(surface, self.SHADOW_COLOR, pygame.Rect(x + 2, y + 2, w, h))

        body = pygame.Rect(x, y + 10, w, h - 15)
        roof = pygame.Rect(x + 2, y, w - 4, 15)
        pygame.draw.rect(surface, color, body)
        pygame.draw.rect(surface, color, roof)
        pygame.draw.rect(surface, darker, body, width=2)
        pygame.draw.rect(surface, darker, roof, width=2)

        draw_alpha_rect(surface, self.WINDOW_COLOR, pygame.Rect(x + 4, y + 2, w - 8, 8))
        pygame.draw.rect(surface, self.OBSTACLE_TAILLIGHT_COLOR, (x + 4, y + h - 4, 5, 3))
        pygame.draw.rect(surface, self.OBSTACLE_TAILLIGHT_COLOR, (x + w - 9, y + h - 4, 5, 3))

        if debug:
            pygame.draw.rect(surface, self.HITBOX_OBSTACLE_COLOR, (x, y, w, h), width=2)

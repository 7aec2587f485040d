#!/usr/bin/env python3
"""Score panel, HUD, debug overlay, start / pause / game-over screens (mixin)."""

from __future__ import annotations

import pygame

from high_score import high_score_label
from sim.session import FrameSnapshot
from .helpers import draw_alpha_rect, render_text, speed_label


class HudRenderer:
    """Mixin that draws every overlay / HUD element."""

    # ------------------------------------------------------------------ #
    #  In-game panels                                                      #
    # ------------------------------------------------------------------ #

    def draw_hud(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        if self.font_small is None or self.font_tiny is None:
            return

        draw_alpha_rect(surface, self.HUD_BG_COLOR, pygame.Rect(10, 10, 200, 40))
        render_text(
            surface, self.font_small, f"Score: {snapshot.score}", (20, 19), self.HUD_TEXT_COLOR
        )

        lines = (
            f"HIGH   {snapshot.high_score}",
            f"SPEED  {speed_label(snapshot.speed_multiplier)}",
            f"LEVEL  {snapshot.level}",
        )
        x = self.width - 10
        y = 14
        for line in lines:
            render_text(surface, self.font_tiny, line, (x, y), self.HUD_DIM_COLOR, anchor="topright")
            y += 16

    def _draw_debug_overlay(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        if self.font_tiny is None:
            return
        lines = [
            f"FPS   {round(snapshot.fps)}",
            f"OBST  {len(snapshot.obstacles)}",
            f"LANE  {snapshot.player['lane']}",
            f"DODGE {snapshot.obstacles_dodged}",
        ]
        x, y = 16, 60
        for line in lines:
            render_text(surface, self.font_tiny, line, (x, y), self.DEBUG_TEXT_COLOR)
            y += 14

    # ------------------------------------------------------------------ #
    #  Full-screen overlays                                                #
    # ------------------------------------------------------------------ #

    def _draw_start_screen(self, surface: pygame.Surface, snapshot: FrameSnapshot, tick: float) -> None:
        if self.font_title is None or self.font_small is None or self.font_tiny is None:
            return
        self._dim(surface, 160)
        cx, cy = self.width // 2, self.height // 2
        render_text(surface, self.font_title, "HIGHWAY RUSH", (cx, cy - 80), (240, 240, 240), "center")
        render_text(
            surface, self.font_small, high_score_label(snapshot.high_score),
            (cx, cy - 40), self.HUD_TEXT_COLOR, "center",
        )
        if int(tick * 2) % 2 == 0:
            render_text(
                surface, self.font_small, "Press SPACE to start",
                (cx, cy), (200, 200, 200), "center",
            )
        y = cy + 40
        for line in self.CONTROLS:
            render_text(surface, self.font_tiny, line, (cx, y), self.HUD_DIM_COLOR, "center")
            y += 16

    def _draw_pause_banner(self, surface: pygame.Surface) -> None:
        self._dim(surface, 100)
        if self.font_title:
            render_text(
                surface, self.font_title, "PAUSED",
                (self.width // 2, self.height // 2), (220, 220, 220), "center",
            )
        if self.font_tiny:
            render_text(
                surface, self.font_tiny, "Press SPACE to resume",
                (self.width // 2, self.height // 2 + 30), self.HUD_DIM_COLOR, "center",
            )

    def _draw_game_over(self, surface: pygame.Surface, snapshot: FrameSnapshot, tick: float) -> None:
        report = snapshot.game_over
        if report is None or self.font_title is None or self.font_small is None:
            return
        self._dim(surface, 160)
        cx, cy = self.width // 2, self.height // 2
        render_text(surface, self.font_title, "GAME OVER", (cx, cy - 80), self.GAME_OVER_COLOR, "center")
        rows = (
            f"Score: {report.final_score}",
            f"Time survived: {report.survival_s}s",
            f"High score: {report.high_score}",
        )
        y = cy - 35
        for row in rows:
            render_text(surface, self.font_small, row, (cx, y), (230, 230, 235), "center")
            y += 24
        if report.new_high_score and int((tick * 1000) // self.BLINK_MS) % 2 == 0:
            render_text(
                surface, self.font_small, "NEW HIGH SCORE!",
                (cx, y + 6), self.NEW_HIGH_COLOR, "center",
            )
        if self.font_tiny:
            render_text(
                surface, self.font_tiny, "Press SPACE to play again",
                (cx, y + 40), self.HUD_DIM_COLOR, "center",
            )

    def _dim(self, surface: pygame.Surface, alpha: int) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        surface.blit(overlay, (0, 0))

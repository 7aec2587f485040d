#!/usr/bin/env python3
"""
Main view class — combines all UI mixins into one runnable Pygame window.

Module layout
─────────────
    ui/
    ├── types.py           – ColorRGB, ColorRGBA, RoadScroll
    ├── constants.py       – ViewConstants mixin (all class-level constants)
    ├── helpers.py         – colour, alpha and text utilities
    ├── draw_road.py       – RoadRenderer mixin (road, markers, speed lines)
    ├── draw_vehicles.py   – VehicleRenderer mixin (player, obstacles, hitboxes)
    ├── hud.py             – HudRenderer mixin  (HUD, debug, start/pause/game over)
    └── pygame_view.py     – PygameHighwayView (this file – main loop)
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from events import LEVEL_UP, RUN_PAUSED, RUN_RESUMED, RUN_STARTED
from high_score import HighScoreStore
from sim.session import FrameSnapshot, GameSession, RunPhase
from .constants import ViewConstants
from .draw_road import RoadRenderer
from .draw_vehicles import VehicleRenderer
from .hud import HudRenderer
from .types import RoadScroll

log = logging.getLogger("view")

_LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
_RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


class PygameHighwayView(
    ViewConstants,
    RoadRenderer,
    VehicleRenderer,
    HudRenderer,
):
    """Highway Rush window powered by Pygame.

    The view owns input translation and drawing only.  Each frame it
    forwards key presses to the session, calls
    :meth:`~sim.session.GameSession.advance_frame` with the pygame clock,
    and draws the returned snapshot.
    """

    def __init__(
        self,
        session: GameSession,
        store: Optional[HighScoreStore] = None,
        fps: int = 60,
    ):
        self.session = session
        self.store = store
        self.road = session.road
        self.width = session.width
        self.height = session.height
        self.fps = fps

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.font_tiny: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None

        self.scroll = RoadScroll(self.MARKER_HEIGHT, self.MARKER_GAP)
        self.time_seconds = 0.0

    @staticmethod
    def _load_font(size: int, bold: bool = False) -> pygame.font.Font:
        return pygame.font.SysFont("Arial", size, bold=bold)

    # ------------------------------------------------------------------ #
    #  Input                                                               #
    # ------------------------------------------------------------------ #
    def _handle_event(self, event: pygame.event.Event, now_ms: int) -> bool:
        """Forward one pygame event.  False when the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in _LEFT_KEYS:
                self.session.request_lane_change("left")
            elif event.key in _RIGHT_KEYS:
                self.session.request_lane_change("right")
            elif event.key == pygame.K_SPACE:
                self.session.press_action(now_ms)
            elif event.key == pygame.K_F3:
                self.session.toggle_debug()
        elif event.type == pygame.KEYUP:
            if event.key in _LEFT_KEYS:
                self.session.release_lane_change("left")
            elif event.key in _RIGHT_KEYS:
                self.session.release_lane_change("right")
            elif event.key == pygame.K_SPACE:
                self.session.release_action()
        return True

    # ------------------------------------------------------------------ #
    #  Outbound events                                                     #
    # ------------------------------------------------------------------ #
    def _drain_events(self) -> None:
        bus = self.session.bus
        if bus.poll(RUN_STARTED):
            self.scroll.reset()
        for event in bus.poll(LEVEL_UP):
            log.debug("level %s reached", event.payload.get("level"))
        bus.poll(RUN_PAUSED)
        bus.poll(RUN_RESUMED)
        if self.store is not None:
            self.store.persist_from(self.session.bus)

    # ------------------------------------------------------------------ #
    #  Render                                                              #
    # ------------------------------------------------------------------ #
    def render(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        surface.fill(self.BG_COLOR)
        self.draw_road(surface, snapshot)
        self.draw_obstacles(surface, snapshot)
        self.draw_player(surface, snapshot)
        self.draw_hud(surface, snapshot)
        if snapshot.debug:
            self._draw_debug_overlay(surface, snapshot)

        if snapshot.phase is RunPhase.IDLE:
            self._draw_start_screen(surface, snapshot, self.time_seconds)
        elif snapshot.phase is RunPhase.PAUSED:
            self._draw_pause_banner(surface)
        elif snapshot.phase is RunPhase.GAME_OVER:
            self._draw_game_over(surface, snapshot, self.time_seconds)

    # ------------------------------------------------------------------ #
    #  Main loop                                                           #
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("HIGHWAY RUSH")
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.font_small = self._load_font(20, bold=True)
        self.font_tiny = self._load_font(13)
        self.font_title = self._load_font(40, bold=True)
        log.info("View opened %dx%d @ %d fps", self.width, self.height, self.fps)

        running = True
        while running:
            self.time_seconds += self.clock.tick(self.fps) / 1000.0
            now_ms = pygame.time.get_ticks()

            for event in pygame.event.get():
                if not self._handle_event(event, now_ms):
                    running = False

            snapshot = self.session.advance_frame(now_ms)
            self._drain_events()

            self.render(self.screen, snapshot)
            pygame.display.flip()

        pygame.quit()
        log.info("View closed")


# ---------------------------------------------------------------------- #
#  Convenience entry point                                                 #
# ---------------------------------------------------------------------- #
def run_pygame_view(
    session: GameSession, store: Optional[HighScoreStore] = None, fps: int = 60
) -> None:
    view = PygameHighwayView(session=session, store=store, fps=fps)
    view.run()


if __name__ == "__main__":
    raise SystemExit(
        "pygame_view.py needs a GameSession. Run `python main.py` "
        "or call run_pygame_view(session)."
    )

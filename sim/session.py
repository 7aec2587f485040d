#!/usr/bin/env python3
"""
sim/session.py
==============
The :class:`GameSession` aggregate owns one road, one player, the active
obstacles and the per-run counters, and advances them once per frame.

Public API consumed by :mod:`ui.pygame_view` and :mod:`api`
-----------------------------------------------------------
* ``request_lane_change(direction)`` / ``release_lane_change(direction)``
* ``start(now_ms)``                  → ``None``
* ``request_pause_toggle()``         → ``bool``
* ``press_action(now_ms)`` / ``release_action()``
* ``toggle_debug()``                 → ``bool``
* ``advance_frame(timestamp_ms)``    → :class:`FrameSnapshot`
* ``snapshot()``                     → :class:`FrameSnapshot`

Renderers read snapshots only; they never hold a reference to the
session's entities.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from events import EventBus, LEVEL_UP, RUN_OVER, RUN_PAUSED, RUN_RESUMED, RUN_STARTED
from sim.difficulty import update_difficulty
from sim.entities import GameState, Obstacle, Player
from sim.geometry import inset, overlaps
from sim.intents import IntentMailbox
from sim.lanes import RoadGeometry
from sim.motion import update_player
from sim.policy import GamePolicy
from sim.spawner import ObstacleSpawner

log = logging.getLogger("session")


class RunPhase(str, Enum):
    """Run lifecycle states."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameOverReport:
    """Outcome of a finished run, for display and persistence."""

    final_score: int
    survival_s: int
    high_score: int
    new_high_score: bool
    obstacles_dodged: int
    level: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "final_score": self.final_score,
            "survival_s": self.survival_s,
            "high_score": self.high_score,
            "new_high_score": self.new_high_score,
            "obstacles_dodged": self.obstacles_dodged,
            "level": self.level,
        }


@dataclass(frozen=True)
class FrameSnapshot:
    """Plain-data view of a session after a frame."""

    phase: RunPhase
    score: int
    high_score: int
    speed_multiplier: float
    scroll_speed: float
    level: int
    obstacles_dodged: int
    obstacles: Tuple[Dict[str, Any], ...]
    player: Dict[str, Any]
    player_hitbox: Dict[str, float]
    fps: float
    debug: bool
    game_over: Optional[GameOverReport] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "score": self.score,
            "high_score": self.high_score,
            "speed_multiplier": self.speed_multiplier,
            "scroll_speed": self.scroll_speed,
            "level": self.level,
            "obstacles_dodged": self.obstacles_dodged,
            "obstacles": [dict(o) for o in self.obstacles],
            "player": dict(self.player),
            "player_hitbox": dict(self.player_hitbox),
            "fps": self.fps,
            "debug": self.debug,
            "game_over": self.game_over.as_dict() if self.game_over else None,
        }


class GameSession:
    """Endless-runner simulation for a single player.

    Parameters
    ----------
    width, height : int
        Playfield size in pixels.
    lane_count : int
        Number of lanes.
    edge_width : float
        Margin on each side of the road in pixels.
    policy : GamePolicy or None
        Tunable constants; uses defaults when *None*.
    seed : int or None
        Random seed for reproducible obstacle streams.
    rng : random.Random or None
        Explicit generator; takes precedence over *seed*.
    high_score : int
        Best score loaded by the persistence collaborator.
    bus : EventBus or None
        Receives lifecycle events; a private bus is created when *None*.
    """

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        lane_count: int = 5,
        edge_width: float = 100.0,
        policy: Optional[GamePolicy] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        high_score: int = 0,
        bus: Optional[EventBus] = None,
    ) -> None:
        self.policy = policy or GamePolicy()
        self.width = width
        self.height = height
        self.road = RoadGeometry.for_playfield(width, lane_count, edge_width)
        if not 0 <= self.policy.start_lane < self.road.lane_count:
            raise ValueError(
                f"start_lane {self.policy.start_lane} outside "
                f"[0, {self.road.lane_count})"
            )
        self._rng = rng or random.Random(seed)
        self.spawner = ObstacleSpawner(self.road, self.policy, self._rng)
        self.intents = IntentMailbox()
        self.bus = bus or EventBus()
        self.high_score = max(0, int(high_score))

        self.state = GameState.fresh(self.policy, 0.0)
        self.player = self._make_player()
        self.obstacles: List[Obstacle] = []
        self.phase = RunPhase.IDLE
        self.last_report: Optional[GameOverReport] = None

        self.debug = False
        self.last_frame_ms = 0.0
        self.fps = 0.0

    # ── initialisation / reset ────────────────────────────────────────────

    def _make_player(self) -> Player:
        p = self.policy
        return Player(
            x=self.road.lane_x(p.start_lane, p.player_width),
            y=self.height - p.player_height - p.player_bottom_margin,
            width=p.player_width,
            height=p.player_height,
            speed=p.player_speed,
            lane=p.start_lane,
            target_lane=p.start_lane,
            max_lanes=self.road.lane_count,
        )

    def _reset_run(self, now_ms: float) -> None:
        self.player = self._make_player()
        self.obstacles = []
        self.state = GameState.fresh(self.policy, now_ms)
        self.intents.clear_lane_changes()
        self.last_report = None

    # ── queries ───────────────────────────────────────────────────────────

    @property
    def is_playing(self) -> bool:
        return self.phase in (RunPhase.PLAYING, RunPhase.PAUSED)

    def snapshot(self) -> FrameSnapshot:
        """Plain-data state for renderers and the API."""
        return FrameSnapshot(
            phase=self.phase,
            score=self.state.score,
            high_score=self.high_score,
            speed_multiplier=self.state.speed_multiplier,
            scroll_speed=self.state.speed * self.state.speed_multiplier,
            level=self.state.level,
            obstacles_dodged=self.state.obstacles_dodged,
            obstacles=tuple(o.as_dict() for o in self.obstacles),
            player=self.player.as_dict(),
            player_hitbox=self._player_hitbox().as_dict(),
            fps=self.fps,
            debug=self.debug,
            game_over=self.last_report,
        )

    # ── inbound: input ────────────────────────────────────────────────────

    def request_lane_change(self, direction: str) -> None:
        self.intents.request_lane_change(direction)

    def release_lane_change(self, direction: str) -> None:
        self.intents.release(direction)

    def press_action(self, now_ms: float) -> None:
        """Action key pressed: start, pause or resume depending on phase."""
        if not self.intents.press_action():
            return
        if not self.is_playing:
            self.start(now_ms)
        else:
            self.request_pause_toggle(now_ms)

    def release_action(self) -> None:
        self.intents.release_action()

    def toggle_debug(self) -> bool:
        self.debug = not self.debug
        log.info("Debug mode: %s", "ON" if self.debug else "OFF")
        return self.debug

    # ── inbound: lifecycle ────────────────────────────────────────────────

    def start(self, now_ms: float) -> None:
        """Begin a new run, discarding all state of the previous one."""
        self._reset_run(now_ms)
        self.phase = RunPhase.PLAYING
        log.info("Run started at %.0f ms (high score %d)", now_ms, self.high_score)
        self.bus.publish(RUN_STARTED, {"high_score": self.high_score}, ts=now_ms)

    def request_pause_toggle(self, now_ms: float = 0.0) -> bool:
        """Pause a running game or resume a paused one.  False otherwise."""
        if self.phase is RunPhase.PLAYING:
            self.phase = RunPhase.PAUSED
            log.info("Run paused (score %d)", self.state.score)
            self.bus.publish(RUN_PAUSED, {"score": self.state.score}, ts=now_ms)
            return True
        if self.phase is RunPhase.PAUSED:
            self.phase = RunPhase.PLAYING
            log.info("Run resumed")
            self.bus.publish(RUN_RESUMED, {"score": self.state.score}, ts=now_ms)
            return True
        return False

    # ── tick ──────────────────────────────────────────────────────────────

    def advance_frame(self, timestamp_ms: float) -> FrameSnapshot:
        """Host clock callback.  Steps the simulation when playing."""
        delta = timestamp_ms - self.last_frame_ms
        self.last_frame_ms = timestamp_ms
        self.fps = 1000.0 / delta if delta > 0 else 0.0

        if self.phase is RunPhase.PLAYING:
            self._step(timestamp_ms)
        return self.snapshot()

    def _step(self, now_ms: float) -> None:
        # 1. Player motion
        update_player(
            self.player, self.road, self.intents, self.policy.snap_threshold_px
        )

        # 2–4. Obstacles: advance + score, cull, spawn
        self._advance_obstacles()
        self._remove_offscreen()
        self._maybe_spawn()

        # 5. Difficulty
        if update_difficulty(self.state, now_ms, self.policy):
            self.bus.publish(
                LEVEL_UP,
                {
                    "level": self.state.level,
                    "speed_multiplier": self.state.speed_multiplier,
                    "spawn_interval": self.state.spawn_interval,
                },
                ts=now_ms,
            )

        # 6. Collision ends the run; no trickle on the final frame
        if self.check_collision():
            self._end_run(now_ms)
            return

        # 7. Survival trickle
        self.state.score += int(math.floor(self.state.speed_multiplier))

    def _advance_obstacles(self) -> None:
        pass_line = self.player.y + self.player.height
        for obstacle in self.obstacles:
            obstacle.y += obstacle.speed
            if not obstacle.passed and obstacle.y > pass_line:
                obstacle.passed = True
                self.state.obstacles_dodged += 1
                self.state.score += self.policy.pass_bonus
                log.debug(
                    "passed lane=%d dodged=%d score=%d",
                    obstacle.lane, self.state.obstacles_dodged, self.state.score,
                )

    def _remove_offscreen(self) -> None:
        self.obstacles = [o for o in self.obstacles if o.y <= self.height]

    def _maybe_spawn(self) -> None:
        self.state.frames_since_spawn += 1
        if self.state.frames_since_spawn >= self.state.spawn_interval:
            self.obstacles.append(self.spawner.create(self.obstacles, self.state))
            self.state.frames_since_spawn = 0

    # ── collision ─────────────────────────────────────────────────────────

    def _player_hitbox(self):
        return inset(self.player.rect(), self.policy.hitbox_margin)

    def check_collision(self) -> bool:
        """True when the inset player hitbox touches any obstacle."""
        hitbox = self._player_hitbox()
        for obstacle in self.obstacles:
            if overlaps(hitbox, obstacle.rect()):
                return True
        return False

    # ── game over ─────────────────────────────────────────────────────────

    def _end_run(self, now_ms: float) -> GameOverReport:
        self.phase = RunPhase.GAME_OVER
        self.state.survival_s = int(math.floor(self.state.elapsed_s(now_ms)))

        new_high = self.state.score > self.high_score
        if new_high:
            self.high_score = self.state.score

        report = GameOverReport(
            final_score=self.state.score,
            survival_s=self.state.survival_s,
            high_score=self.high_score,
            new_high_score=new_high,
            obstacles_dodged=self.state.obstacles_dodged,
            level=self.state.level,
        )
        self.last_report = report
        log.info(
            "Game over: score=%d survived=%ds level=%d new_high=%s",
            report.final_score, report.survival_s, report.level, new_high,
        )
        self.bus.publish(RUN_OVER, report.as_dict(), ts=now_ms)
        return report

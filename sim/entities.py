#!/usr/bin/env python3
"""
sim/entities.py
===============
Mutable entities owned by a :class:`~sim.session.GameSession`: the
player's vehicle, the obstacles scrolling down the road, and the
per-run counters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from sim.geometry import Rect
from sim.policy import GamePolicy


@dataclass
class Player:
    """The player's vehicle.

    Attributes
    ----------
    x, y : float
        Top-left corner in pixels.  ``y`` is fixed for the whole run.
    width, height : float
        Sprite size in pixels.
    speed : float
        Horizontal pixels moved per frame while changing lanes.
    lane : int
        Lane the vehicle has committed to (updated on arrival).
    target_lane : int
        Lane the vehicle is steering towards.
    max_lanes : int
        Number of lanes; ``0 <= lane, target_lane < max_lanes``.
    """

    x: float
    y: float
    width: float
    height: float
    speed: float
    lane: int
    target_lane: int
    max_lanes: int

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "lane": self.lane,
            "target_lane": self.target_lane,
        }


@dataclass
class Obstacle:
    """A vehicle in the player's way.

    ``x`` is fixed at spawn from the lane and width; only ``y`` advances.
    ``speed`` is a snapshot of the global speed at spawn time.
    """

    x: float
    y: float
    width: float
    height: float
    color: str
    lane: int
    speed: float
    passed: bool = field(default=False)

    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "color": self.color,
            "lane": self.lane,
            "speed": self.speed,
            "passed": self.passed,
        }


@dataclass
class GameState:
    """Per-run counters and difficulty values.

    ``score``, ``obstacles_dodged``, ``level`` and ``speed_multiplier``
    never decrease within a run; ``spawn_interval`` never increases.
    """

    score: int = 0
    speed: float = GamePolicy.base_speed
    speed_multiplier: float = GamePolicy.start_multiplier
    level: int = 1
    spawn_interval: int = GamePolicy.base_spawn_interval
    frames_since_spawn: int = 0
    obstacles_dodged: int = 0
    start_ms: float = 0.0
    survival_s: int = 0

    @classmethod
    def fresh(cls, policy: GamePolicy, start_ms: float) -> "GameState":
        """Initial values for a new run starting at *start_ms*."""
        return cls(
            score=0,
            speed=policy.base_speed,
            speed_multiplier=policy.start_multiplier,
            level=1,
            spawn_interval=policy.base_spawn_interval,
            frames_since_spawn=0,
            obstacles_dodged=0,
            start_ms=start_ms,
            survival_s=0,
        )

    def elapsed_s(self, now_ms: float) -> float:
        return (now_ms - self.start_ms) / 1000.0

#!/usr/bin/env python3
"""
sim/policy.py
=============
Tunable speed, spawning, scoring and difficulty parameters for the
highway simulation.  Every constant lives in the frozen
:class:`GamePolicy` dataclass so that experiments can swap policies
without touching code.

Also provides two stateless difficulty helpers:

* :func:`level_for_elapsed` — level reached after a survival time.
* :func:`spawn_interval_for_level` — frames between spawns at a level.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ObstacleVariant:
    """One visual / size class an obstacle can be spawned with."""

    width: float
    height: float
    color: str


DEFAULT_VARIANTS: Tuple[ObstacleVariant, ...] = (
    ObstacleVariant(width=40, height=80, color="#fc8181"),
    ObstacleVariant(width=45, height=90, color="#f687b3"),
    ObstacleVariant(width=38, height=75, color="#b794f4"),
    ObstacleVariant(width=50, height=100, color="#f56565"),
)


@dataclass(frozen=True)
class GamePolicy:
    """Immutable bag of every tunable simulation parameter.

    Groups: player, speed, spawning, scoring, difficulty.
    """

    # ── Player ────────────────────────────────────────────────────────────
    player_width: float = 40.0
    player_height: float = 80.0

    player_speed: float = 8.0
    """Horizontal pixels moved per frame while changing lanes."""

    start_lane: int = 2

    player_bottom_margin: float = 30.0
    """Gap between the player's lower edge and the playfield bottom."""

    snap_threshold_px: float = 2.0
    """Within this distance the player snaps onto the lane centre."""

    hitbox_margin: float = 5.0
    """Inset applied to every side of the player for collision checks."""

    # ── Speed ─────────────────────────────────────────────────────────────
    base_speed: float = 3.0
    """Obstacle pixels per frame before the multiplier is applied."""

    start_multiplier: float = 1.0

    multiplier_step: float = 0.15
    """Added to the multiplier on every call that raises the level."""

    # ── Spawning ──────────────────────────────────────────────────────────
    base_spawn_interval: int = 120
    """Frames between spawns at the start of a run."""

    spawn_interval_step: int = 8
    """Frames removed from the interval per level."""

    min_spawn_interval: int = 40
    """Floor for the spawn interval."""

    recent_spawn_y: float = 100.0
    """A last obstacle above this y still counts as a fresh spawn."""

    lane_retry_attempts: int = 5
    """Draws allowed to find a lane different from a fresh spawn."""

    variants: Tuple[ObstacleVariant, ...] = field(default=DEFAULT_VARIANTS)

    # ── Scoring ───────────────────────────────────────────────────────────
    pass_bonus: int = 10
    """Points awarded once per obstacle that scrolls past the player."""

    # ── Difficulty ────────────────────────────────────────────────────────
    level_period_s: float = 10.0
    """Seconds of survival per level."""


def level_for_elapsed(elapsed_s: float, policy: GamePolicy) -> int:
    """Level reached after *elapsed_s* seconds (level 1 at t = 0)."""
    return int(math.floor(elapsed_s / policy.level_period_s)) + 1


def spawn_interval_for_level(level: int, policy: GamePolicy) -> int:
    """Frames between spawns at *level*, floored at the policy minimum."""
    return max(
        policy.min_spawn_interval,
        policy.base_spawn_interval - level * policy.spawn_interval_step,
    )

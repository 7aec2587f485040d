#!/usr/bin/env python3
"""
sim/difficulty.py
=================
Time-driven difficulty ramp.

The level is derived from survival time.  Whenever a call observes a
higher level, the multiplier grows by one step and the spawn interval
shrinks.  The step is applied once per call, so a call that skips
several levels (e.g. after a long dropped frame) still adds a single
step.
"""

from __future__ import annotations

import logging

from sim.entities import GameState
from sim.policy import GamePolicy, level_for_elapsed, spawn_interval_for_level

log = logging.getLogger("session.difficulty")


def update_difficulty(state: GameState, now_ms: float, policy: GamePolicy) -> bool:
    """Raise the level if enough time has elapsed.  True when it changed."""
    new_level = level_for_elapsed(state.elapsed_s(now_ms), policy)
    if new_level <= state.level:
        return False

    state.level = new_level
    state.speed_multiplier += policy.multiplier_step
    state.spawn_interval = spawn_interval_for_level(state.level, policy)
    log.info(
        "level up → %d  multiplier=%.2f  spawn_interval=%d",
        state.level, state.speed_multiplier, state.spawn_interval,
    )
    return True

#!/usr/bin/env python3
"""
sim/spawner.py
==============
Obstacle creation with soft anti-clustering.

A new obstacle avoids the lane of the most recently spawned one while
that obstacle is still near the top of the road.  Only the last
obstacle is inspected and the rule gives up after a fixed number of
draws, so two fresh obstacles can still share a lane.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from sim.entities import GameState, Obstacle
from sim.lanes import RoadGeometry
from sim.policy import GamePolicy

log = logging.getLogger("session.spawner")


class ObstacleSpawner:
    """Builds :class:`~sim.entities.Obstacle` entities for one road.

    Parameters
    ----------
    road : RoadGeometry
        Lane layout used to place obstacles.
    policy : GamePolicy
        Variants, retry budget and the fresh-spawn threshold.
    rng : random.Random or None
        Source of randomness; a fresh unseeded generator when *None*.
    """

    def __init__(
        self,
        road: RoadGeometry,
        policy: GamePolicy,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.road = road
        self.policy = policy
        self._rng = rng or random.Random()

    def pick_lane(self, obstacles: Sequence[Obstacle]) -> int:
        """Choose a spawn lane, steering away from a fresh last spawn."""
        lane_count = self.road.lane_count
        if obstacles:
            recent = obstacles[-1]
            if recent.y < self.policy.recent_spawn_y:
                attempts = 0
                while True:
                    lane = self._rng.randrange(lane_count)
                    attempts += 1
                    if (
                        lane != recent.lane
                        or attempts >= self.policy.lane_retry_attempts
                    ):
                        return lane
        return self._rng.randrange(lane_count)

    def create(self, obstacles: Sequence[Obstacle], state: GameState) -> Obstacle:
        """Spawn one obstacle just above the visible road."""
        lane = self.pick_lane(obstacles)
        variant = self._rng.choice(self.policy.variants)
        obstacle = Obstacle(
            x=self.road.lane_x(lane, variant.width),
            y=-variant.height,
            width=variant.width,
            height=variant.height,
            color=variant.color,
            lane=lane,
            speed=state.speed * state.speed_multiplier,
        )
        log.debug(
            "spawn lane=%d size=%gx%g speed=%.2f",
            lane, variant.width, variant.height, obstacle.speed,
        )
        return obstacle

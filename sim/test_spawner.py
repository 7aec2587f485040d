#!/usr/bin/env python3
"""Obstacle spawner tests with a scripted random source."""

from __future__ import annotations

import random
import unittest
from typing import Iterable, List

from sim.entities import GameState, Obstacle
from sim.lanes import RoadGeometry
from sim.policy import DEFAULT_VARIANTS, GamePolicy
from sim.spawner import ObstacleSpawner

ROAD = RoadGeometry.for_playfield(800)


class ScriptedRandom:
    """Returns pre-set lanes from ``randrange`` and the first variant from ``choice``."""

    def __init__(self, lanes: Iterable[int]) -> None:
        self._lanes: List[int] = list(lanes)
        self.randrange_calls = 0

    def randrange(self, stop: int) -> int:
        self.randrange_calls += 1
        return self._lanes.pop(0)

    def choice(self, seq):
        return seq[0]


def _obstacle(lane: int, y: float) -> Obstacle:
    return Obstacle(x=ROAD.lane_x(lane, 40), y=y, width=40, height=80,
                    color="#fc8181", lane=lane, speed=3.0)


class PickLaneTests(unittest.TestCase):
    def test_avoids_lane_of_fresh_spawn(self) -> None:
        rng = ScriptedRandom([2, 2, 3])
        spawner = ObstacleSpawner(ROAD, GamePolicy(), rng)

        self.assertEqual(spawner.pick_lane([_obstacle(2, -80)]), 3)
        self.assertEqual(rng.randrange_calls, 3)

    def test_gives_up_after_five_attempts(self) -> None:
        rng = ScriptedRandom([2] * 10)
        spawner = ObstacleSpawner(ROAD, GamePolicy(), rng)

        self.assertEqual(spawner.pick_lane([_obstacle(2, 50)]), 2)
        self.assertEqual(rng.randrange_calls, 5)

    def test_no_exclusion_once_last_obstacle_moved_down(self) -> None:
        rng = ScriptedRandom([2])
        spawner = ObstacleSpawner(ROAD, GamePolicy(), rng)

        self.assertEqual(spawner.pick_lane([_obstacle(2, 100)]), 2)
        self.assertEqual(rng.randrange_calls, 1)

    def test_only_last_obstacle_is_inspected(self) -> None:
        rng = ScriptedRandom([1])
        spawner = ObstacleSpawner(ROAD, GamePolicy(), rng)

        obstacles = [_obstacle(1, -80), _obstacle(3, 300)]
        self.assertEqual(spawner.pick_lane(obstacles), 1)

    def test_empty_road_draws_once(self) -> None:
        rng = ScriptedRandom([4])
        spawner = ObstacleSpawner(ROAD, GamePolicy(), rng)

        self.assertEqual(spawner.pick_lane([]), 4)
        self.assertEqual(rng.randrange_calls, 1)


class CreateTests(unittest.TestCase):
    def test_obstacle_starts_above_road_with_speed_snapshot(self) -> None:
        spawner = ObstacleSpawner(ROAD, GamePolicy(), ScriptedRandom([1]))
        state = GameState(speed=3.0, speed_multiplier=1.15)

        obstacle = spawner.create([], state)

        variant = DEFAULT_VARIANTS[0]
        self.assertEqual(obstacle.lane, 1)
        self.assertEqual(obstacle.x, ROAD.lane_x(1, variant.width))
        self.assertEqual(obstacle.y, -variant.height)
        self.assertEqual(obstacle.color, variant.color)
        self.assertAlmostEqual(obstacle.speed, 3.45)
        self.assertFalse(obstacle.passed)

        state.speed_multiplier = 2.0
        self.assertAlmostEqual(obstacle.speed, 3.45)

    def test_seeded_streams_are_reproducible(self) -> None:
        state = GameState()
        a = ObstacleSpawner(ROAD, GamePolicy(), random.Random(7))
        b = ObstacleSpawner(ROAD, GamePolicy(), random.Random(7))

        lanes_a = [a.create([], state).lane for _ in range(20)]
        lanes_b = [b.create([], state).lane for _ in range(20)]
        self.assertEqual(lanes_a, lanes_b)
        self.assertTrue(all(0 <= lane < ROAD.lane_count for lane in lanes_a))


if __name__ == "__main__":
    unittest.main()

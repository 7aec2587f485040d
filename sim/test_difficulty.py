#!/usr/bin/env python3
"""Difficulty ramp tests."""

from __future__ import annotations

import unittest

from sim.difficulty import update_difficulty
from sim.entities import GameState
from sim.policy import GamePolicy, level_for_elapsed, spawn_interval_for_level


class DifficultyTests(unittest.TestCase):
    def setUp(self) -> None:
        self.policy = GamePolicy()
        self.state = GameState.fresh(self.policy, start_ms=1000)

    def test_no_change_before_period(self) -> None:
        self.assertFalse(update_difficulty(self.state, 10999, self.policy))
        self.assertEqual(self.state.level, 1)
        self.assertEqual(self.state.speed_multiplier, 1.0)
        self.assertEqual(self.state.spawn_interval, 120)

    def test_level_two_after_ten_seconds(self) -> None:
        self.assertTrue(update_difficulty(self.state, 11000, self.policy))
        self.assertEqual(self.state.level, 2)
        self.assertAlmostEqual(self.state.speed_multiplier, 1.15)
        self.assertEqual(self.state.spawn_interval, 104)

        self.assertFalse(update_difficulty(self.state, 11016, self.policy))
        self.assertAlmostEqual(self.state.speed_multiplier, 1.15)

    def test_skipped_levels_add_one_step(self) -> None:
        self.assertTrue(update_difficulty(self.state, 41000, self.policy))
        self.assertEqual(self.state.level, 5)
        self.assertAlmostEqual(self.state.speed_multiplier, 1.15)
        self.assertEqual(self.state.spawn_interval, 80)

    def test_spawn_interval_floor(self) -> None:
        self.assertEqual(spawn_interval_for_level(10, self.policy), 40)
        self.assertEqual(spawn_interval_for_level(50, self.policy), 40)
        self.assertEqual(spawn_interval_for_level(1, self.policy), 112)

    def test_interval_never_rises_over_a_long_run(self) -> None:
        previous_interval = self.state.spawn_interval
        previous_multiplier = self.state.speed_multiplier
        # ~200 s of 16 ms frames
        for now in range(1000, 201_001, 16):
            update_difficulty(self.state, now, self.policy)
            self.assertLessEqual(self.state.spawn_interval, previous_interval)
            self.assertGreaterEqual(self.state.spawn_interval, 40)
            self.assertGreaterEqual(self.state.speed_multiplier, previous_multiplier)
            previous_interval = self.state.spawn_interval
            previous_multiplier = self.state.speed_multiplier
        self.assertEqual(self.state.level, 21)
        self.assertEqual(self.state.spawn_interval, 40)

    def test_state_defaults_match_policy(self) -> None:
        self.assertEqual(GameState(), GameState.fresh(self.policy, 0.0))

    def test_level_for_elapsed(self) -> None:
        self.assertEqual(level_for_elapsed(0, self.policy), 1)
        self.assertEqual(level_for_elapsed(9.99, self.policy), 1)
        self.assertEqual(level_for_elapsed(25, self.policy), 3)


if __name__ == "__main__":
    unittest.main()

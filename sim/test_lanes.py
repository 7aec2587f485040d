#!/usr/bin/env python3
"""Road geometry and lane → pixel mapping tests."""

from __future__ import annotations

import unittest

from sim.lanes import RoadGeometry, lane_to_x


class RoadGeometryTests(unittest.TestCase):
    def test_default_playfield_splits_into_equal_lanes(self) -> None:
        road = RoadGeometry.for_playfield(800)
        self.assertEqual(road.lane_count, 5)
        self.assertAlmostEqual(road.lane_width, 120.0)

    def test_entity_is_centred_inside_its_lane(self) -> None:
        road = RoadGeometry.for_playfield(800)
        for lane in range(road.lane_count):
            for width in (38, 40, 45, 50):
                left, right = road.lane_span(lane)
                x = road.lane_x(lane, width)
                self.assertGreaterEqual(x, left)
                self.assertLessEqual(x + width, right)
                self.assertAlmostEqual(x - left, right - (x + width))

    def test_known_positions(self) -> None:
        self.assertEqual(lane_to_x(2, 100, 120, 40), 380)
        self.assertEqual(lane_to_x(0, 100, 120, 50), 135)

    def test_rejects_degenerate_layouts(self) -> None:
        with self.assertRaises(ValueError):
            RoadGeometry.for_playfield(800, lane_count=0)
        with self.assertRaises(ValueError):
            RoadGeometry.for_playfield(200, edge_width=100)


if __name__ == "__main__":
    unittest.main()

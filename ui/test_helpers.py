#!/usr/bin/env python3
"""Pure UI helper tests (no display needed)."""

from __future__ import annotations

import unittest

from ui.helpers import adjust_brightness, hex_to_rgb, speed_label
from ui.types import RoadScroll


class HelperTests(unittest.TestCase):
    def test_hex_to_rgb(self) -> None:
        self.assertEqual(hex_to_rgb("#fc8181"), (252, 129, 129))
        self.assertEqual(hex_to_rgb("f56565"), (245, 101, 101))

    def test_adjust_brightness_clamps(self) -> None:
        self.assertEqual(adjust_brightness((252, 129, 129), -20), (201, 78, 78))
        self.assertEqual(adjust_brightness((10, 250, 128), 20), (61, 255, 179))
        self.assertEqual(adjust_brightness((10, 20, 30), -50), (0, 0, 0))

    def test_speed_label(self) -> None:
        self.assertEqual(speed_label(1.0), "1.0x")
        self.assertEqual(speed_label(1.15), "1.1x")
        self.assertEqual(speed_label(2.5), "2.5x")


class RoadScrollTests(unittest.TestCase):
    def test_offset_wraps_past_period(self) -> None:
        scroll = RoadScroll()
        self.assertEqual(scroll.period, 60)
        for _ in range(20):
            scroll.advance(3.0)
        self.assertEqual(scroll.offset, 60.0)
        scroll.advance(3.0)
        self.assertEqual(scroll.offset, 0.0)

    def test_reset(self) -> None:
        scroll = RoadScroll(offset=25.0)
        scroll.reset()
        self.assertEqual(scroll.offset, 0.0)


if __name__ == "__main__":
    unittest.main()

#!/usr/bin/env python3
"""Rectangle overlap and inset tests."""

from __future__ import annotations

import unittest

from sim.geometry import Rect, inset, overlaps


class OverlapTests(unittest.TestCase):
    def test_overlap_is_symmetric(self) -> None:
        a = Rect(0, 0, 40, 80)
        b = Rect(20, 40, 40, 80)
        self.assertTrue(overlaps(a, b))
        self.assertTrue(overlaps(b, a))

    def test_shared_edge_is_not_an_overlap(self) -> None:
        a = Rect(0, 0, 40, 80)
        self.assertFalse(overlaps(a, Rect(40, 0, 40, 80)))
        self.assertFalse(overlaps(a, Rect(0, 80, 40, 80)))

    def test_zero_size_rect_never_collides(self) -> None:
        a = Rect(0, 0, 40, 80)
        self.assertFalse(overlaps(a, Rect(10, 10, 0, 20)))
        self.assertFalse(overlaps(a, Rect(10, 10, 20, 0)))

    def test_inset_shrinks_every_side(self) -> None:
        r = inset(Rect(300, 400, 40, 80), 5)
        self.assertEqual(r, Rect(305, 405, 30, 70))
        self.assertEqual(r.right, 335)
        self.assertEqual(r.bottom, 475)


if __name__ == "__main__":
    unittest.main()

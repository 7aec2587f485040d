#!/usr/bin/env python3
"""High-score persistence tests."""

from __future__ import annotations

import os
import tempfile
import unittest

from events import EventBus, RUN_OVER
from high_score import HighScoreStore, high_score_label


class HighScoreStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "scores", "highscore.txt")
        self.store = HighScoreStore(self.path)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, text: str) -> None:
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)

    def test_missing_file_loads_zero(self) -> None:
        self.assertEqual(self.store.load(), 0)

    def test_save_creates_parent_directory(self) -> None:
        self.assertTrue(self.store.save(1234))
        self.assertEqual(self.store.load(), 1234)

    def test_blank_file_loads_zero(self) -> None:
        for text in ("", "   \n"):
            self._write(text)
            self.assertEqual(self.store.load(), 0)

    def test_invalid_contents_load_zero(self) -> None:
        for text in ("abc", "-5", "12.5"):
            self._write(text)
            with self.assertLogs("high_score", level="WARNING"):
                self.assertEqual(self.store.load(), 0, msg=repr(text))

    def test_save_failure_returns_false(self) -> None:
        # A directory where the file should be makes open() fail
        os.makedirs(self.path)
        with self.assertLogs("high_score", level="WARNING"):
            self.assertFalse(self.store.save(10))

    def test_persist_from_saves_only_new_highs(self) -> None:
        bus = EventBus()
        bus.publish(RUN_OVER, {"high_score": 300, "new_high_score": True})
        bus.publish(RUN_OVER, {"high_score": 300, "new_high_score": False})

        self.assertEqual(self.store.persist_from(bus), 1)
        self.assertEqual(self.store.load(), 300)
        self.assertEqual(bus.pending(RUN_OVER), 0)


class LabelTests(unittest.TestCase):
    def test_label(self) -> None:
        self.assertEqual(high_score_label(0), "No high score yet!")
        self.assertEqual(high_score_label(42), "High Score: 42")


if __name__ == "__main__":
    unittest.main()

#!/usr/bin/env python3
"""
high_score.py
=============
Persists the single best score between sessions as a plain-text
integer.

Storage failures never interrupt gameplay: a failed load yields ``0``
and a failed save is logged and reported as ``False``.
"""

from __future__ import annotations

import logging
import os

from events import EventBus, RUN_OVER

log = logging.getLogger("high_score")


class HighScoreStore:
    """File-backed high-water mark.

    Parameters
    ----------
    path : str
        Location of the score file.  ``~`` is expanded and missing parent
        directories are created on save.
    """

    def __init__(self, path: str) -> None:
        self.path = os.path.expanduser(path)

    def load(self) -> int:
        """Stored high score, or ``0`` when absent or unreadable."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read().strip()
        except FileNotFoundError:
            return 0
        except OSError as exc:
            log.warning("Could not load high score from %s: %s", self.path, exc)
            return 0

        if not raw:
            return 0
        try:
            value = int(raw)
        except ValueError:
            log.warning("Ignoring invalid high score %r in %s", raw, self.path)
            return 0
        if value < 0:
            log.warning("Ignoring negative high score %d in %s", value, self.path)
            return 0
        return value

    def save(self, score: int) -> bool:
        """Write *score*.  True on success."""
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(str(int(score)))
        except OSError as exc:
            log.warning("Could not save high score to %s: %s", self.path, exc)
            return False
        log.info("High score %d saved to %s", score, self.path)
        return True

    def persist_from(self, bus: EventBus) -> int:
        """Drain ``run.over`` events and save every new high score.

        Returns the number of scores written.
        """
        saved = 0
        for event in bus.poll(RUN_OVER):
            if event.payload.get("new_high_score"):
                if self.save(event.payload.get("high_score", 0)):
                    saved += 1
        return saved


def high_score_label(high_score: int) -> str:
    """Start-screen text for the stored best score."""
    if high_score > 0:
        return f"High Score: {high_score}"
    return "No high score yet!"

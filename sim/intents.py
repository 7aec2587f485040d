#!/usr/bin/env python3
"""
sim/intents.py
==============
Single-slot mailbox for player input.

The input collaborator (keyboard handler, API, bot) writes intents; the
simulation drains them once per frame.  Lane-change intents are
edge-triggered and consumed exactly once.  The action key (start /
pause / resume) is latched so a held key fires only once until it is
released.
"""

from __future__ import annotations

from dataclasses import dataclass

LEFT = "left"
RIGHT = "right"
DIRECTIONS = (LEFT, RIGHT)


@dataclass
class IntentMailbox:
    """Pending intents for one session."""

    left: bool = False
    right: bool = False
    action_held: bool = False

    @staticmethod
    def _checked(direction: str) -> str:
        direction = direction.lower()
        if direction not in DIRECTIONS:
            raise ValueError(f"unknown lane-change direction: {direction!r}")
        return direction

    def request_lane_change(self, direction: str) -> None:
        """Queue a one-lane move towards *direction* (``left`` / ``right``)."""
        if self._checked(direction) == LEFT:
            self.left = True
        else:
            self.right = True

    def release(self, direction: str) -> None:
        """Key released: drop a still-pending intent of that direction."""
        if self._checked(direction) == LEFT:
            self.left = False
        else:
            self.right = False

    def press_action(self) -> bool:
        """Latch the action key.  True only on the first press."""
        if self.action_held:
            return False
        self.action_held = True
        return True

    def release_action(self) -> None:
        self.action_held = False

    def clear_lane_changes(self) -> None:
        self.left = False
        self.right = False

#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf — it never imports from
other project packages.
"""

# ── Playfield ────────────────────────────────────────────────────────────────
WINDOW_WIDTH: int = 800
WINDOW_HEIGHT: int = 600
TARGET_FPS: int = 60

# ── Road ─────────────────────────────────────────────────────────────────────
LANE_COUNT: int = 5
EDGE_WIDTH: float = 100.0

# ── Persistence ──────────────────────────────────────────────────────────────
HIGH_SCORE_PATH: str = "~/.highway_rush/highscore.txt"

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL: str = "INFO"
LOG_FILE: str = "highway_rush.log"
SESSION_DEBUG_LOG_FILE: str = "session_debug.log"

# ── Environment overrides ────────────────────────────────────────────────────
ENV_HIGH_SCORE_FILE: str = "HIGHWAY_RUSH_HIGH_SCORE_FILE"
ENV_SEED: str = "HIGHWAY_RUSH_SEED"
ENV_LOG_LEVEL: str = "HIGHWAY_RUSH_LOG_LEVEL"
ENV_FPS: str = "HIGHWAY_RUSH_FPS"

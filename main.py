#!/usr/bin/env python3

import logging
import os
from typing import Optional

import config
from events import EventBus
from high_score import HighScoreStore
from logging_setup import setup_logging
from sim.session import GameSession


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger("main").warning("Ignoring non-integer %s=%r", name, raw)
        return default


def _env_log_level() -> int:
    name = os.environ.get(config.ENV_LOG_LEVEL, config.LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def main():
    setup_logging(_env_log_level())
    log = logging.getLogger("main")

    store = HighScoreStore(os.environ.get(config.ENV_HIGH_SCORE_FILE, config.HIGH_SCORE_PATH))
    high_score = store.load()
    seed = _env_int(config.ENV_SEED, None)
    fps = _env_int(config.ENV_FPS, config.TARGET_FPS) or config.TARGET_FPS

    session = GameSession(
        width=config.WINDOW_WIDTH,
        height=config.WINDOW_HEIGHT,
        lane_count=config.LANE_COUNT,
        edge_width=config.EDGE_WIDTH,
        seed=seed,
        high_score=high_score,
        bus=EventBus(),
    )
    log.info("Starting Highway Rush (high score %d, seed %s, %d fps)", high_score, seed, fps)

    # Imported late so the headless modules never need a display.
    from ui.pygame_view import run_pygame_view

    try:
        run_pygame_view(session, store=store, fps=fps)
    except KeyboardInterrupt:
        log.info("Shutting down...")
    finally:
        log.info("Bus metrics: %s", session.bus.metrics.report())


if __name__ == "__main__":
    main()

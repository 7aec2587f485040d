"""
api.py
======
Optional FastAPI server that drives one in-process :class:`GameSession`
without a window.  Clients supply their own frame timestamps, which makes
the endpoints usable by bots and replay tools.

Start the server::

    python api.py          # → http://localhost:8000/snapshot

.. note::

   This server is **not** required to play the Pygame game.
"""

import logging
import os
import threading

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

import config
from events import LEVEL_UP, RUN_PAUSED, RUN_RESUMED, RUN_STARTED
from high_score import HighScoreStore
from sim.session import GameSession

log = logging.getLogger("api")

# ── Pydantic request schemas ─────────────────────────────────────────────────


class TimestampRequest(BaseModel):
    """Host-clock time of the request, in milliseconds."""
    timestamp_ms: float


class LaneRequest(BaseModel):
    """One-lane move; ``direction`` is ``left`` or ``right``."""
    direction: str


# ── Shared state ─────────────────────────────────────────────────────────────

store = HighScoreStore(os.environ.get(config.ENV_HIGH_SCORE_FILE, config.HIGH_SCORE_PATH))
session = GameSession(
    width=config.WINDOW_WIDTH,
    height=config.WINDOW_HEIGHT,
    lane_count=config.LANE_COUNT,
    edge_width=config.EDGE_WIDTH,
    high_score=store.load(),
)

# Endpoints run on FastAPI's thread pool; every session access holds this lock.
_lock = threading.Lock()


def _drain_events() -> None:
    """Persist new high scores and drop lifecycle events nobody reads here."""
    store.persist_from(session.bus)
    for topic in (RUN_STARTED, RUN_PAUSED, RUN_RESUMED, LEVEL_UP):
        session.bus.poll(topic)


# ── FastAPI application ──────────────────────────────────────────────────────

app = FastAPI(
    title="Highway Rush Control API",
    description="Drives a headless Highway Rush session frame by frame.",
    version="1.0",
)


@app.post("/start")
def start_run(req: TimestampRequest):
    """Begin a new run."""
    with _lock:
        session.start(req.timestamp_ms)
        _drain_events()
        return session.snapshot().as_dict()


@app.post("/lane")
def change_lane(req: LaneRequest):
    """Queue a lane change for the next frame."""
    with _lock:
        try:
            session.request_lane_change(req.direction)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
    return {"queued": req.direction.lower()}


@app.post("/lane/release")
def release_lane(req: LaneRequest):
    """Drop a lane change that has not been applied yet (key released)."""
    with _lock:
        try:
            session.release_lane_change(req.direction)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
    return {"released": req.direction.lower()}


@app.post("/pause")
def toggle_pause(req: TimestampRequest):
    """Pause or resume.  ``changed`` is false when no run is active."""
    with _lock:
        changed = session.request_pause_toggle(req.timestamp_ms)
        _drain_events()
        return {"changed": changed, "phase": session.phase.value}


@app.post("/frame")
def advance_frame(req: TimestampRequest):
    """Advance one frame and return the resulting snapshot."""
    with _lock:
        snapshot = session.advance_frame(req.timestamp_ms)
        _drain_events()
    return snapshot.as_dict()


@app.get("/snapshot")
def get_snapshot():
    with _lock:
        return session.snapshot().as_dict()


@app.get("/high-score")
def get_high_score():
    with _lock:
        return {"high_score": session.high_score}


# ── Standalone entry point ───────────────────────────────────────────────────

if __name__ == "__main__":
    from logging_setup import setup_logging

    setup_logging(logging.INFO)
    log.info("Starting Highway Rush API on http://0.0.0.0:8000")
    uvicorn.run(app, host="0.0.0.0", port=8000)

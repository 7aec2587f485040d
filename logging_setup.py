#!/usr/bin/env python3
"""
logging_setup.py
================
Configures the root logger with a console handler and a rotating file
handler (``highway_rush.log``, 1 MB, 2 backups).

Call :func:`setup_logging` once at startup before the first frame.
"""

import logging
from logging.handlers import RotatingFileHandler

import config


def setup_logging(
    level: int = logging.INFO,
    log_file: str = config.LOG_FILE,
    session_debug_file: str = config.SESSION_DEBUG_LOG_FILE,
) -> None:
    """Apply a unified log format to both console and file output.

    Parameters
    ----------
    level : int
        Minimum severity level (e.g. ``logging.DEBUG``, ``logging.INFO``).
    log_file : str
        Path of the rotating application log.
    session_debug_file : str
        Path of the per-frame DEBUG log written by the ``session`` logger.
    """
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)

    fh = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=2)
    fh.setLevel(level)
    fh.setFormatter(fmt)

    root.handlers.clear()
    root.addHandler(ch)
    root.addHandler(fh)

    # ── Dedicated debug file for per-frame simulation detail ──────────
    session_logger = logging.getLogger("session")
    session_logger.setLevel(logging.DEBUG)
    dfh = RotatingFileHandler(
        session_debug_file, maxBytes=5_000_000, backupCount=2
    )
    dfh.setLevel(logging.DEBUG)
    dfh.setFormatter(fmt)
    session_logger.addHandler(dfh)

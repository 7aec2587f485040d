"""
events — In-memory notification channel
=======================================

Carries run-lifecycle notifications from :class:`sim.session.GameSession`
to the rendering, UI and persistence collaborators without giving them a
reference into simulation internals.

Modules
-------
event
    :class:`GameEvent` dataclass.
event_bus
    :class:`EventBus` publish / poll transport and topic names.
metrics
    :class:`BusMetrics` counter snapshot.
"""

from .event import GameEvent
from .event_bus import (
    EventBus,
    RUN_STARTED,
    RUN_PAUSED,
    RUN_RESUMED,
    LEVEL_UP,
    RUN_OVER,
)
from .metrics import BusMetrics

__all__ = [
    "GameEvent",
    "EventBus",
    "BusMetrics",
    "RUN_STARTED",
    "RUN_PAUSED",
    "RUN_RESUMED",
    "LEVEL_UP",
    "RUN_OVER",
]

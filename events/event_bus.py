"""
EventBus: In-memory pub/sub for simulation → collaborator notifications.

Supports:
    - Topic-based events
    - Drain-on-poll delivery
    - Logging of events

Intended usage:
    - GameSession publishes 'run.started', 'run.paused', 'run.resumed',
      'level.up' and 'run.over'
    - The view / persistence wiring polls the topics it cares about
      once per frame
"""

import uuid
import logging
from typing import Dict, List, Optional

from .event import GameEvent
from .metrics import BusMetrics

log = logging.getLogger("events")

RUN_STARTED = "run.started"
RUN_PAUSED = "run.paused"
RUN_RESUMED = "run.resumed"
LEVEL_UP = "level.up"
RUN_OVER = "run.over"


class EventBus:
    """
    Single-threaded event queue keyed by topic.

    Attributes:
        metrics (BusMetrics): Publish / delivery counters.
    """

    def __init__(self):
        self._topics: Dict[str, List[GameEvent]] = {}
        self.metrics = BusMetrics()

    def publish(self, topic: str, payload: Optional[dict] = None, ts: float = 0.0) -> str:
        """
        Publish an event to a topic.

        Args:
            topic (str): The topic name (e.g., 'run.over').
            payload (dict): Plain data describing the event.
            ts (float): Frame timestamp in milliseconds.

        Returns:
            str: The unique event ID.
        """
        event_id = str(uuid.uuid4())
        event = GameEvent(id=event_id, topic=topic, payload=dict(payload or {}), ts=ts)
        self._topics.setdefault(topic, []).append(event)
        self.metrics.record_publish(topic)
        log.info("publish topic=%s id=%s", topic, event_id)
        return event_id

    def poll(self, topic: str) -> List[GameEvent]:
        """
        Retrieve and clear all events from a given topic.

        Args:
            topic (str): The topic name to poll.

        Returns:
            List[GameEvent]: Events published to the topic since the last poll, oldest first.
        """
        events = self._topics.get(topic, [])
        self._topics[topic] = []
        self.metrics.delivered += len(events)
        return events

    def pending(self, topic: str) -> int:
        """Number of undelivered events on *topic*."""
        return len(self._topics.get(topic, []))

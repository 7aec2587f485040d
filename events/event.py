"""
GameEvent: a notification published by the simulation for outside collaborators.
"""

from dataclasses import dataclass, field


@dataclass
class GameEvent:
    """
    Represents a single event emitted by a GameSession.

    Attributes:
        id (str): Unique identifier for the event.
        topic (str): Event kind (e.g., 'run.started', 'level.up', 'run.over').
        payload (dict): Event details; plain data only.
        ts (float): Host-clock timestamp (milliseconds) of the frame that emitted it.
    """
    id: str
    topic: str
    payload: dict = field(default_factory=dict)
    ts: float = 0.0

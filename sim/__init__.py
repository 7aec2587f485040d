"""
sim — Simulation core
=====================

Modules
-------
session
    :class:`GameSession` run lifecycle and per-frame step.
policy
    :class:`GamePolicy` tunable constants and difficulty helpers.
entities
    :class:`Player`, :class:`Obstacle` and :class:`GameState`.
lanes
    :class:`RoadGeometry` and the lane → pixel mapping.
geometry
    :class:`Rect` overlap and inset helpers.
intents
    :class:`IntentMailbox` single-slot input mailbox.
motion
    Lane-change movement for the player.
spawner
    :class:`ObstacleSpawner` with soft anti-clustering.
difficulty
    Time-driven level / speed / spawn-rate ramp.
"""

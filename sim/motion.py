#!/usr/bin/env python3
"""
sim/motion.py
=============
Turns discrete lane-change intents into smooth horizontal movement.
"""

from __future__ import annotations

from sim.entities import Player
from sim.intents import IntentMailbox
from sim.lanes import RoadGeometry


def update_player(
    player: Player,
    road: RoadGeometry,
    intents: IntentMailbox,
    snap_threshold_px: float = 2.0,
) -> None:
    """Advance the player by one frame.

    A pending intent is consumed only when it can be applied; one that
    points off the road stays pending.  The player moves a full
    ``player.speed`` step towards the target lane, which may overshoot by
    up to ``speed - snap_threshold_px``; once within the threshold it
    snaps onto the lane and commits to it.
    """
    if intents.left and player.target_lane > 0:
        player.target_lane -= 1
        intents.left = False
    if intents.right and player.target_lane < player.max_lanes - 1:
        player.target_lane += 1
        intents.right = False

    target_x = road.lane_x(player.target_lane, player.width)

    if abs(player.x - target_x) > snap_threshold_px:
        if player.x < target_x:
            player.x += player.speed
        else:
            player.x -= player.speed
    else:
        player.x = target_x
        player.lane = player.target_lane

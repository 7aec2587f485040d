#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Sequence

from .types import ColorRGB, ColorRGBA


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    BG_COLOR: ColorRGB = (23, 25, 35)
    ROAD_TOP_COLOR: ColorRGB = (45, 55, 72)
    ROAD_MID_COLOR: ColorRGB = (26, 32, 44)
    ROAD_BOTTOM_COLOR: ColorRGB = (23, 25, 35)
    VERGE_OUTER_COLOR: ColorRGB = (26, 32, 44)
    VERGE_INNER_COLOR: ColorRGB = (45, 55, 72)
    EDGE_LINE_COLOR: ColorRGBA = (99, 179, 237, 128)
    LANE_MARKER_COLOR: ColorRGBA = (99, 179, 237, 153)
    SPEED_LINE_COLOR: ColorRGBA = (255, 255, 255, 26)

    PLAYER_BODY_COLOR: ColorRGB = (99, 179, 237)
    PLAYER_BODY_DARK: ColorRGB = (66, 153, 225)
    PLAYER_OUTLINE_COLOR: ColorRGB = (44, 82, 130)
    WHEEL_COLOR: ColorRGB = (45, 55, 72)
    RIM_COLOR: ColorRGB = (203, 213, 224)
    HEADLIGHT_COLOR: ColorRGB = (250, 240, 137)
    HEADLIGHT_GLOW: ColorRGBA = (250, 240, 137, 77)
    TAILLIGHT_COLOR: ColorRGB = (231, 76, 60)
    OBSTACLE_TAILLIGHT_COLOR: ColorRGB = (192, 57, 43)
    SHADOW_COLOR: ColorRGBA = (0, 0, 0, 77)
    WINDOW_COLOR: ColorRGBA = (0, 0, 0, 102)

    HITBOX_PLAYER_COLOR: ColorRGB = (46, 204, 113)
    HITBOX_OBSTACLE_COLOR: ColorRGB = (231, 76, 60)

    HUD_BG_COLOR: ColorRGBA = (0, 0, 0, 128)
    HUD_TEXT_COLOR: ColorRGB = (99, 179, 237)
    HUD_DIM_COLOR: ColorRGB = (160, 174, 192)
    DEBUG_TEXT_COLOR: ColorRGB = (0, 255, 127)
    GAME_OVER_COLOR: ColorRGB = (252, 129, 129)
    NEW_HIGH_COLOR: ColorRGB = (250, 240, 137)

    SPEED_LINES_MULTIPLIER = 1.5
    SPEED_LINE_COUNT = 10
    MARKER_HEIGHT = 40
    MARKER_GAP = 20
    BLINK_MS = 500

    CONTROLS: Sequence[str] = (
        "LEFT / A   Move left",
        "RIGHT / D  Move right",
        "SPACE      Start / Pause / Resume",
        "F3         Debug overlay",
        "ESC        Quit",
    )

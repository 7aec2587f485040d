"""
ui/helpers.py
=============
Pure utility functions shared across UI modules:
colour parsing and shading, alpha-surface drawing, text rendering and
HUD label formatting.
"""

from __future__ import annotations

from typing import Tuple

import pygame

from .types import ColorRGB


# ── Colour helpers ────────────────────────────────────────────────────────────

def hex_to_rgb(color: str) -> ColorRGB:
    """``'#fc8181'`` → ``(252, 129, 129)``."""
    value = int(color.lstrip("#"), 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def adjust_brightness(color: ColorRGB, percent: float) -> ColorRGB:
    """Shift every channel by *percent* of full scale, clamped to 0–255."""
    amount = round(2.55 * percent)
    return tuple(max(0, min(255, c + amount)) for c in color)  # type: ignore[return-value]


# ── Label helpers ─────────────────────────────────────────────────────────────

def speed_label(multiplier: float) -> str:
    return f"{multiplier:.1f}x"


# ── Alpha drawing helpers ────────────────────────────────────────────────────

def draw_alpha_rect(
    target: pygame.Surface,
    color: Tuple[int, ...],
    rect: pygame.Rect,
    border_radius: int = 0,
) -> None:
    """Draw a semi-transparent rectangle (colour tuple with 4 channels)."""
    if rect.w <= 0 or rect.h <= 0:
        return
    tmp = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    pygame.draw.rect(tmp, color, (0, 0, rect.w, rect.h), border_radius=border_radius)
    target.blit(tmp, rect.topleft)


# ── Text helper ──────────────────────────────────────────────────────────────

def render_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: Tuple[int, int],
    color: Tuple[int, ...] = (230, 230, 235),
    anchor: str = "topleft",
) -> pygame.Rect:
    """Render text with flexible *anchor* ('topleft', 'center', 'midright' …)."""
    img = font.render(text, True, color)
    rect = img.get_rect(**{anchor: pos})
    surface.blit(img, rect)
    return rect

# chaos_jump/game/render.py
from __future__ import annotations
import random
from typing import Optional
import pygame
from .config import (
    CANVAS_WIDTH, CANVAS_HEIGHT,
    COLOR_BG, COLOR_FG, COLOR_PLAYER, COLOR_PANEL, COLOR_PANEL_EDGE
)
from .session import GameSession, Mode

# Jitter source for the shake offset. Kept apart from the session RNG so that
# drawing (or not drawing) never changes the simulation.
_render_rng = random.Random()


def draw_frame(surf: pygame.Surface, session: GameSession,
               rng: Optional[random.Random] = None):
    """Draw the world for the current state. Reads `session`, never mutates it."""
    surf.fill(COLOR_BG)
    offset = session.shake.offset(rng or _render_rng)

    session.level.draw(surf, offset)
    pygame.draw.rect(surf, COLOR_PLAYER, session.player.rect.move(*offset))
    session.particles.draw(surf, offset)


def draw_hud(surf: pygame.Surface, session: GameSession, font: pygame.font.Font):
    """Level / lives / score line plus the end-of-level and game-over panels."""
    hud = session.hud_state()
    line = f"Level: {hud['level']}   Lives: {hud['lives']}   Score: {hud['score']}"
    surf.blit(font.render(line, True, COLOR_FG), (12, 10))
    surf.blit(font.render(hud["level_name"], True, (160, 180, 210)), (12, 32))

    if session.mode is Mode.LEVEL_COMPLETE:
        _panel(surf, font, "Level Complete!", "Next level (N)")
    elif session.mode is Mode.GAME_OVER:
        title = "You Win!" if session.won else "Game Over"
        _panel(surf, font, title, f"Final score: {session.final_score}", "Restart (R)")


def _panel(surf: pygame.Surface, font: pygame.font.Font, *lines: str):
    w, h = 260, 30 + 24 * len(lines)
    rect = pygame.Rect((CANVAS_WIDTH - w) // 2, (CANVAS_HEIGHT - h) // 2, w, h)
    pygame.draw.rect(surf, COLOR_PANEL, rect, border_radius=10)
    pygame.draw.rect(surf, COLOR_PANEL_EDGE, rect, width=2, border_radius=10)
    y = rect.top + 15
    for msg in lines:
        txt = font.render(msg, True, (220, 235, 255))
        surf.blit(txt, (rect.centerx - txt.get_width() // 2, y))
        y += 24

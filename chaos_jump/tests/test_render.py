# chaos_jump/tests/test_render.py
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from chaos_jump.game.config import CANVAS_WIDTH, CANVAS_HEIGHT, COLOR_PLAYER, COLOR_PORTAL
from chaos_jump.game.render import draw_frame, draw_hud
from chaos_jump.game.session import GameSession


def _state(s: GameSession):
    return (s.frame, s.player.x, s.player.y, s.shake.intensity, len(s.particles),
            s.rng.getstate(), [(p.x, p.y) for p in s.level.platforms])


def test_draw_frame_reads_only():
    s = GameSession(seed=4)
    s.shake.pulse(10.0)
    surf = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))
    before = _state(s)
    draw_frame(surf, s, random.Random(0))
    assert _state(s) == before


def test_player_and_portal_drawn_without_shake():
    s = GameSession(seed=4)
    surf = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))
    draw_frame(surf, s)
    px, py = int(s.player.x) + 5, int(s.player.y) + 5
    assert tuple(surf.get_at((px, py)))[:3] == COLOR_PLAYER
    assert tuple(surf.get_at((710, 310)))[:3] == COLOR_PORTAL


def test_hud_draws_for_every_mode():
    pygame.font.init()
    font = pygame.font.Font(None, 18)
    surf = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))
    s = GameSession(seed=4)
    draw_hud(surf, s, font)
    s.complete_level()
    draw_hud(surf, s, font)
    s.advance_level()
    for _ in range(3):
        s.lose_life()
    draw_hud(surf, s, font)

# chaos_jump/env/observations.py
from __future__ import annotations
from typing import Optional, Tuple
import numpy as np

from chaos_jump.game.config import (
    CANVAS_WIDTH, CANVAS_HEIGHT, PLAYER_W, PLAYER_H, PLAYER_SPEED,
    LEVEL_COUNT, LIVES_START, DEATH_SHAKE
)

OBS_SIZE = 16
MAX_OBS_VY = 20.0       # |vy| beyond this is clipped (jump impulse is 12)
MAX_CHAOS = 4
MAX_GRAVITY = 1.0

OBS_LOW = np.array(
    [0.0, 0.0, -1.0, -1.0, 0.0,    # player x, y, vx, vy, on_ground
     -1.0, -1.0,                   # nearest enemy dx, dy
     -1.0, -1.0,                   # portal dx, dy
     0.0, 0.0,                     # floor dy, floor falling
     0.0, 0.0, 0.0, 0.0, 0.0],     # level, lives, chaos, gravity, shake
    dtype=np.float32)
OBS_HIGH = np.ones(OBS_SIZE, dtype=np.float32)


def _center(box) -> Tuple[float, float]:
    return box.x + box.width / 2, box.y + box.height / 2


def _nearest_enemy(player, enemies) -> Optional[object]:
    px, py = _center(player)
    best, best_d2 = None, None
    for e in enemies:
        ex, ey = _center(e)
        d2 = (ex - px) ** 2 + (ey - py) ** 2
        if best_d2 is None or d2 < best_d2:
            best, best_d2 = e, d2
    return best


def _floor_below(player, platforms) -> Optional[object]:
    """
    Highest platform whose span covers the player's center column and whose top
    is at or below the player's feet.
    """
    cx = player.x + player.width / 2
    feet = player.y + player.height
    floor = None
    for p in platforms:
        # strict left<=x<right to avoid double-counting shared edges
        if p.x <= cx < p.x + p.width and p.y >= feet - 1e-6:
            if floor is None or p.y < floor.y:
                floor = p
    return floor


def build_observation(session) -> np.ndarray:
    """
    Returns a fixed (16,) float32 vector:
      [ x_norm, y_norm, vx_norm, vy_norm, on_ground,
        enemy_dx, enemy_dy, portal_dx, portal_dy,
        floor_dy, floor_falling,
        level_norm, lives_norm, chaos_norm, gravity_norm, shake_norm ]
    - positions normalized by the canvas, deltas are center-to-center in [-1,1]
    - floor_dy: distance from feet to the floor under the player / canvas height;
      sentinel 1.0 if there is no floor
    - everything clipped into [OBS_LOW, OBS_HIGH]
    """
    player = session.player
    level = session.level

    x_norm = player.x / float(CANVAS_WIDTH - PLAYER_W)
    y_norm = player.y / float(CANVAS_HEIGHT - PLAYER_H)
    vx_norm = player.vx / PLAYER_SPEED
    vy_norm = player.vy / MAX_OBS_VY
    px, py = _center(player)

    enemy = _nearest_enemy(player, level.enemies)
    if enemy is None:
        enemy_dx, enemy_dy = 1.0, 1.0   # "far away" sentinel
    else:
        ex, ey = _center(enemy)
        enemy_dx = (ex - px) / CANVAS_WIDTH
        enemy_dy = (ey - py) / CANVAS_HEIGHT

    gx, gy = _center(level.portal)
    portal_dx = (gx - px) / CANVAS_WIDTH
    portal_dy = (gy - py) / CANVAS_HEIGHT

    floor = _floor_below(player, level.platforms)
    if floor is None:
        floor_dy, floor_falling = 1.0, 0.0
    else:
        floor_dy = (floor.y - (player.y + player.height)) / CANVAS_HEIGHT
        floor_falling = 1.0 if floor.falling else 0.0

    feats = [
        x_norm, y_norm, vx_norm, vy_norm, 1.0 if player.on_ground else 0.0,
        enemy_dx, enemy_dy, portal_dx, portal_dy,
        floor_dy, floor_falling,
        session.current_level / LEVEL_COUNT,
        session.lives / LIVES_START,
        level.chaos / MAX_CHAOS,
        level.gravity / MAX_GRAVITY,
        session.shake.intensity / DEATH_SHAKE,
    ]
    obs = np.asarray(feats, dtype=np.float32)
    return np.clip(obs, OBS_LOW, OBS_HIGH).astype(np.float32)

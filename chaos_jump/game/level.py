# chaos_jump/game/level.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple
import pygame
from .config import (
    CANVAS_WIDTH, GRAVITY_BASE, ENEMY_W, ENEMY_H, PLATFORM_FALL_SPEED,
    CHAOS_FLIP_CHANCE, LEVEL_COUNT,
    COLOR_PLAT, COLOR_PLAT_FALLING, COLOR_ENEMY, COLOR_PORTAL
)
from .geometry import to_rect

logger = logging.getLogger(__name__)


@dataclass
class Platform:
    x: float
    y: float
    width: float
    height: float
    vx: float = 0.0                  # 0.0 = no horizontal drift
    falls_when_landed: bool = False  # "falling" type
    falling: bool = False            # set on first landing, never cleared

    @property
    def rect(self) -> pygame.Rect:
        return to_rect(self)

    def drift(self):
        """Unbounded horizontal drift; nothing keeps the platform on screen."""
        if self.vx:
            self.x += self.vx

    def trigger_fall(self):
        if self.falls_when_landed:
            self.falling = True

    def sink(self):
        if self.falling:
            self.y += PLATFORM_FALL_SPEED


@dataclass
class Enemy:
    x: float
    y: float
    vx: float
    width: float = ENEMY_W
    height: float = ENEMY_H

    @property
    def rect(self) -> pygame.Rect:
        return to_rect(self)

    def patrol(self, chaos: int, rng: random.Random):
        """Move, bounce off the canvas side edges, maybe flip at random under chaos."""
        self.x += self.vx
        if self.x < 0 or self.x > CANVAS_WIDTH - self.width:
            self.vx *= -1
        if chaos > 0 and rng.random() < CHAOS_FLIP_CHANCE:
            self.vx *= -1


@dataclass(frozen=True)
class Portal:
    x: float
    y: float
    width: float = 50
    height: float = 50

    @property
    def rect(self) -> pygame.Rect:
        return to_rect(self)


# ---------------- Immutable templates ----------------

@dataclass(frozen=True)
class PlatformSpec:
    x: float
    y: float
    width: float
    height: float = 50
    vx: float = 0.0
    # (lo, hi): vx is drawn uniformly from [lo, hi) every time the level is built
    vx_range: Optional[Tuple[float, float]] = None
    falls: bool = False

    def build(self, rng: random.Random) -> Platform:
        vx = self.vx
        if self.vx_range is not None:
            lo, hi = self.vx_range
            vx = rng.uniform(lo, hi)
        return Platform(self.x, self.y, self.width, self.height,
                        vx=vx, falls_when_landed=self.falls)


@dataclass(frozen=True)
class EnemySpec:
    x: float
    y: float
    vx: float

    def build(self) -> Enemy:
        return Enemy(self.x, self.y, self.vx)


@dataclass(frozen=True)
class LevelSpec:
    name: str
    platforms: Tuple[PlatformSpec, ...]
    enemies: Tuple[EnemySpec, ...]
    portal: Portal
    gravity: float
    chaos: int


def _steps(width: float = 200, **kw) -> Tuple[PlatformSpec, ...]:
    """The three-step staircase every level is built on."""
    per_step = kw.pop("per_step", ({}, {}, {}))
    return tuple(
        PlatformSpec(x, y, width, **{**kw, **extra})
        for (x, y), extra in zip(((0, 550), (300, 450), (600, 350)), per_step)
    )


LEVELS: Tuple[LevelSpec, ...] = (
    LevelSpec(
        name="Warm Up",
        platforms=_steps(),
        enemies=(EnemySpec(400, 400, 1),),
        portal=Portal(700, 300),
        gravity=GRAVITY_BASE,
        chaos=0,
    ),
    LevelSpec(
        name="Moving Hell",
        platforms=_steps(per_step=({"vx": 2}, {"vx": -1}, {"vx": 1})),
        enemies=(EnemySpec(400, 400, 2),),
        portal=Portal(700, 300),
        gravity=GRAVITY_BASE,
        chaos=1,
    ),
    LevelSpec(
        name="Falling Trap",
        platforms=_steps(falls=True),
        enemies=(EnemySpec(400, 400, 3),),
        portal=Portal(700, 300),
        gravity=GRAVITY_BASE + 0.1,
        chaos=2,
    ),
    LevelSpec(
        name="Chaos Mode",
        platforms=_steps(vx_range=(-2.0, 2.0)),
        enemies=(EnemySpec(400, 400, 4), EnemySpec(200, 500, -3)),
        portal=Portal(700, 300),
        gravity=GRAVITY_BASE + 0.2,
        chaos=3,
    ),
    LevelSpec(
        name="Final Madness",
        platforms=_steps(150, vx_range=(-3.0, 3.0), falls=True),
        enemies=(EnemySpec(400, 400, 5), EnemySpec(200, 500, -4), EnemySpec(500, 300, 3)),
        portal=Portal(700, 250),
        gravity=GRAVITY_BASE + 0.3,
        chaos=4,
    ),
)


@dataclass
class Level:
    """A live, mutable copy of one template. Thrown away on every level load."""
    number: int
    name: str
    platforms: List[Platform]
    enemies: List[Enemy]
    portal: Portal
    gravity: float
    chaos: int

    def draw(self, surf: pygame.Surface, offset: Tuple[int, int] = (0, 0)):
        ox, oy = offset
        for p in self.platforms:
            color = COLOR_PLAT_FALLING if p.falling else COLOR_PLAT
            pygame.draw.rect(surf, color, p.rect.move(ox, oy))
        for e in self.enemies:
            pygame.draw.rect(surf, COLOR_ENEMY, e.rect.move(ox, oy))
        pygame.draw.rect(surf, COLOR_PORTAL, self.portal.rect.move(ox, oy))


def build_level(number: int, rng: random.Random) -> Level:
    """Instantiate level `number` (1-based). Randomized fields are drawn from `rng`."""
    if not 1 <= number <= LEVEL_COUNT:
        raise ValueError(f"level must be in 1..{LEVEL_COUNT}, got {number}")
    spec = LEVELS[number - 1]
    level = Level(
        number=number,
        name=spec.name,
        platforms=[ps.build(rng) for ps in spec.platforms],
        enemies=[es.build() for es in spec.enemies],
        portal=spec.portal,
        gravity=spec.gravity,
        chaos=spec.chaos,
    )
    logger.debug("built level %d (%s): platform vx=%s", number, spec.name,
                 [round(p.vx, 3) for p in level.platforms])
    return level

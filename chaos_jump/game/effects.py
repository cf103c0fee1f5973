# chaos_jump/game/effects.py
from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import List, Tuple
import pygame
from .config import (
    PARTICLE_LIFE, PARTICLE_SPREAD_X, PARTICLE_MAX_VX, PARTICLE_MAX_UP,
    SHAKE_DECAY, COLOR_PARTICLE
)


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: int = PARTICLE_LIFE

    def update(self):
        self.x += self.vx
        self.y += self.vy
        self.life -= 1


@dataclass
class ParticleSystem:
    """Unbounded pool of short-lived sparks, pruned every frame."""
    particles: List[Particle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.particles)

    def spawn(self, x: float, y: float, count: int, rng: random.Random):
        for _ in range(count):
            self.particles.append(Particle(
                x=x + rng.uniform(-PARTICLE_SPREAD_X, PARTICLE_SPREAD_X),
                y=y,
                vx=rng.uniform(-PARTICLE_MAX_VX, PARTICLE_MAX_VX),
                vy=-rng.uniform(0.0, PARTICLE_MAX_UP),
            ))

    def update(self):
        for p in self.particles:
            p.update()
        self.particles = [p for p in self.particles if p.life > 0]

    def clear(self):
        self.particles.clear()

    def draw(self, surf: pygame.Surface, offset: Tuple[int, int] = (0, 0)):
        ox, oy = offset
        for p in self.particles:
            surf.fill(COLOR_PARTICLE, pygame.Rect(int(p.x) + ox, int(p.y) + oy, 2, 2))


@dataclass
class ScreenShake:
    intensity: float = 0.0

    def pulse(self, intensity: float):
        self.intensity = intensity

    def decay(self):
        # clamp: 0.5 steps from an arbitrary pulse can undershoot zero
        self.intensity = max(0.0, self.intensity - SHAKE_DECAY)

    def offset(self, rng: random.Random) -> Tuple[int, int]:
        """Render-time jitter in [-s/2, s/2) on each axis."""
        s = self.intensity
        if s <= 0.0:
            return 0, 0
        return (int(rng.random() * s - s / 2), int(rng.random() * s - s / 2))

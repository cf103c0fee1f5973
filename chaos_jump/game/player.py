# chaos_jump/game/player.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Tuple
from .config import (
    PLAYER_W, PLAYER_H, PLAYER_SPEED, JUMP_FORCE, PLAYER_START_X, PLAYER_START_Y
)
from .geometry import to_rect


@dataclass
class InputState:
    """Held/released flags written by the event pump, read once per update."""
    left: bool = False
    right: bool = False
    jump: bool = False


@dataclass
class Player:
    """
    The controlled sprite. Per-frame units, no dt:
    - horizontal velocity is set from input each frame (no acceleration)
    - vertical velocity accumulates gravity (explicit Euler)
    """
    x: float = PLAYER_START_X
    y: float = PLAYER_START_Y
    vx: float = 0.0
    vy: float = 0.0
    on_ground: bool = False
    width: int = PLAYER_W
    height: int = PLAYER_H

    @property
    def rect(self) -> pygame.Rect:
        return to_rect(self)

    @property
    def feet(self) -> Tuple[float, float]:
        """Bottom-center point, where jump and death particles spawn."""
        return self.x + self.width / 2, self.y + self.height

    def reset(self):
        """Back to the level start point. Only position and velocity change."""
        self.x = PLAYER_START_X
        self.y = PLAYER_START_Y
        self.vx = 0.0
        self.vy = 0.0

    def apply_input(self, inputs: InputState) -> bool:
        """Set vx from held keys and jump if grounded. Returns True if a jump started."""
        self.vx = 0.0
        if inputs.left:
            self.vx = -PLAYER_SPEED
        if inputs.right:
            self.vx = PLAYER_SPEED

        if inputs.jump and self.on_ground:
            self.vy = JUMP_FORCE
            self.on_ground = False
            return True
        return False

    def update_physics(self, gravity: float):
        """Add gravity to vy, then integrate both axes."""
        self.vy += gravity
        self.x += self.vx
        self.y += self.vy

    def can_land_on(self, top: float) -> bool:
        """Only a downward-moving player whose top is still above the surface lands."""
        return self.vy > 0 and self.y < top

    def land_on(self, top: float):
        """Rest exactly on a surface whose top edge is at `top`."""
        self.y = top - self.height
        self.vy = 0.0
        self.on_ground = True

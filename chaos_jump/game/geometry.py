# chaos_jump/game/geometry.py
from __future__ import annotations
from typing import Protocol
import pygame


class Box(Protocol):
    """Anything with a float axis-aligned box: top-left (x, y) plus size."""
    x: float
    y: float
    width: float
    height: float


def collides(a: Box, b: Box) -> bool:
    """Strict AABB overlap. Boxes that only share an edge do not collide."""
    return (a.x < b.x + b.width and a.x + a.width > b.x
            and a.y < b.y + b.height and a.y + a.height > b.y)


def to_rect(box: Box) -> pygame.Rect:
    """Integer pygame.Rect view of a float box (drawing only, never for collisions)."""
    return pygame.Rect(int(box.x), int(box.y), int(box.width), int(box.height))

"""
projectile.py – A single thrown / fired projectile.

Projectiles travel in a straight line (no gravity), belong to the
ball that fired them and are drawn according to their sprite kind.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from entities.ball import Ball


class Projectile:
    """A single projectile.

    Attributes
    ----------
    x, y     : float  – center position
    vx, vy   : float  – velocity in pixels/frame
    damage   : float  – damage applied on hit
    owner    : Ball   – the ball that fired it (never hit by it)
    sprite   : str    – "sword" | "arrow" | "bullet"
    size     : float  – hit size; hit radius adds size / 2
    color    : tuple  – draw color
    active   : bool   – False after hit or leaving the arena
    """

    __slots__ = (
        "x", "y", "vx", "vy", "damage", "owner",
        "sprite", "size", "color", "active",
    )

    def __init__(self, x: float, y: float, vx: float, vy: float,
                 damage: float, owner: Ball, sprite: str = "bullet",
                 size: float = 8, color: tuple = (0, 0, 0)):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.damage = damage
        self.owner = owner
        self.sprite = sprite
        self.size = size
        self.color = color
        self.active = True

    def update(self):
        self.x += self.vx
        self.y += self.vy

    def out_of_bounds(self, width: float, height: float, margin: float) -> bool:
        return (self.x < -margin or self.x > width + margin
                or self.y < -margin or self.y > height + margin)

    def touches(self, ball: Ball) -> bool:
        """True when *ball* is a valid target within hit range."""
        if ball is self.owner:
            return False
        dist = math.hypot(self.x - ball.x, self.y - ball.y)
        return dist < ball.radius + self.size / 2

    # ── Drawing ───────────────────────────────────────────

    def draw(self, surface: pygame.Surface):
        if not self.active:
            return
        angle = math.atan2(self.vy, self.vx)
        if self.sprite == "arrow":
            shaft = [(-10, -2), (10, -2), (10, 2), (-10, 2)]
            head = [(10, 0), (6, -4), (6, 4)]
            pygame.draw.polygon(surface, self.color, self._place(shaft, angle))
            pygame.draw.polygon(surface, self.color, self._place(head, angle))
        elif self.sprite == "sword":
            blade = [(-8, -2), (6, -2), (10, 0), (6, 2), (-8, 2)]
            guard = [(-8, -5), (-6, -5), (-6, 5), (-8, 5)]
            pygame.draw.polygon(surface, (200, 200, 210), self._place(blade, angle))
            pygame.draw.polygon(surface, self.color, self._place(guard, angle))
        else:
            half = self.size / 2
            rect = pygame.Rect(int(self.x - half), int(self.y - half),
                               int(self.size), int(self.size))
            pygame.draw.rect(surface, self.color, rect)

    def _place(self, points, angle: float):
        c, s = math.cos(angle), math.sin(angle)
        return [(self.x + px * c - py * s, self.y + px * s + py * c) for px, py in points]

    def __repr__(self) -> str:
        return (f"<Projectile {self.sprite} P{self.owner.player_id} "
                f"dmg={self.damage} at ({self.x:.0f},{self.y:.0f})>")

"""
ball.py – Combatant ball.

A ball is a circle with a velocity, HP and a set of movement / combat
stats.  The stats are owned by the ball but written by whichever
character is attached to it (see characters/).  Two balls live for
the whole session; selection and reset mutate them in place.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import pygame
from settings import WHITE, DARK_TEXT, BALL_OUTLINE_WIDTH

if TYPE_CHECKING:
    from characters.base import Character, WeaponSpec

logger = logging.getLogger(__name__)


class Ball:
    """A single combatant.

    Attributes
    ----------
    player_id      : int    – 1 or 2
    x, y           : float  – centre position
    vx, vy         : float  – velocity in pixels/frame
    hp, max_hp     : float  – health, clamped to [0, max_hp]
    speed          : float  – character-managed launch speed
    max_speed      : float  – ceiling for ``speed``
    damage         : float  – current (displayed) damage
    weapon_damage  : float  – damage the next projectile will carry
    hit_count      : int    – landed hits / bounces counted by the character
    last_shot      : float | None – ms timestamp of the last shot (None = never)
    current_speed  : float  – |v| recomputed every physics step
    """

    def __init__(self, player_id: int, x: float = 0.0, y: float = 0.0,
                 vx: float = 0.0, vy: float = 0.0):
        self.player_id = player_id

        # Position / motion
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.radius = 30.0
        self.current_speed = math.hypot(vx, vy)

        # Character (set via Match.set_character)
        self.character: Character | None = None

        # Health
        self.max_hp = 100.0
        self.hp = 100.0

        # Movement / offence stats
        self.speed = 5.0
        self.max_speed = 5.0
        self.damage = 0.0
        self.weapon_damage = 0.0

        # Combat bookkeeping
        self.hit_count = 0
        self.last_shot: float | None = None

    # ── Properties ────────────────────────────────────────

    @property
    def alive(self) -> bool:
        return self.hp > 0

    @property
    def weapon(self) -> WeaponSpec | None:
        return self.character.weapon if self.character else None

    # ── Mutators ──────────────────────────────────────────

    def update_speed(self) -> float:
        self.current_speed = math.hypot(self.vx, self.vy)
        return self.current_speed

    def take_damage(self, amount: float) -> float:
        """Reduce HP, never below zero.  Returns the HP actually lost."""
        if amount <= 0:
            return 0.0
        before = self.hp
        self.hp = max(0.0, self.hp - amount)
        actual = before - self.hp
        logger.debug("P%d health reduced to %.1f (took %.1f)", self.player_id, self.hp, actual)
        return actual

    def apply_knockback(self, vx: float, vy: float = 0.0):
        self.vx += vx
        self.vy += vy

    # ── Drawing ───────────────────────────────────────────

    def draw(self, surface: pygame.Surface, font: pygame.font.Font | None = None):
        """Body, outline, held weapon and the HP number in the centre."""
        char = self.character
        if char is None:
            return
        centre = (int(self.x), int(self.y))
        r = int(self.radius)
        pygame.draw.circle(surface, char.color, centre, r)
        pygame.draw.circle(surface, char.border_color, centre, r, BALL_OUTLINE_WIDTH)

        char.draw_weapon(surface, self)

        if font is not None:
            color = WHITE if self.player_id == 1 else DARK_TEXT
            text = font.render(str(math.ceil(self.hp)), True, color)
            surface.blit(text, text.get_rect(center=centre))

    # ── Serialization helpers ─────────────────────────────

    def get_state_snapshot(self) -> dict:
        return {
            "player_id": self.player_id,
            "character": self.character.id if self.character else None,
            "hp": self.hp,
            "max_hp": self.max_hp,
            "x": self.x,
            "y": self.y,
            "vx": self.vx,
            "vy": self.vy,
            "speed": self.speed,
            "max_speed": self.max_speed,
            "damage": self.damage,
            "weapon_damage": self.weapon_damage,
            "hit_count": self.hit_count,
        }

    def __repr__(self) -> str:
        cid = self.character.id if self.character else None
        return f"<Ball P{self.player_id} {cid} hp={self.hp:.1f} at ({self.x:.0f},{self.y:.0f})>"

"""
sword.py – Sword character.

Throws a blade every 0.8 s.  Every landed hit (contact or thrown)
adds 1 to the weapon damage, and the held blade turns from silver to
red as the damage climbs.
"""

from __future__ import annotations

import logging
import math

import pygame

from characters.base import BaseStats, Character, WeaponSpec

logger = logging.getLogger(__name__)

CONTACT_DAMAGE_MULT = 0.5      # contact hit = weapon damage × this
DAMAGE_PER_HIT = 1

_HANDLE_COLOR = (139, 69, 19)
_GUARD_COLOR = (255, 215, 0)
_SHINE_COLOR = (245, 245, 245)


def blade_color(weapon_damage: float, base_damage: float) -> tuple[int, int, int]:
    """Silver at base damage, shading to red with every extra point."""
    level = weapon_damage - base_damage
    red = int(min(255, 192 + level * 8))
    other = int(max(0, 192 - level * 12))
    return red, other, other


def _rotated(points, angle: float, cx: float, cy: float):
    """Rotate local (x, y) points by *angle* and move them to (cx, cy)."""
    c, s = math.cos(angle), math.sin(angle)
    return [(cx + x * c - y * s, cy + x * s + y * c) for x, y in points]


def _rect(x: float, y: float, w: float, h: float):
    return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]


class SwordCharacter(Character):
    id = "sword"
    name = "Sword"
    icon = "🗡️"
    color = (250, 128, 114)
    border_color = (233, 150, 122)
    description = ("Sword deals 1 more damage each attack. "
                   "Reliable damage scaling.")
    weapon = WeaponSpec(
        damage=5,
        fire_rate=800,
        projectile_speed=12,
        projectile_size=8,
        sprite="sword",
    )
    stats = BaseStats(speed=5, max_speed=5, damage=5, max_hp=100, radius=30)

    def on_init(self, ball):
        self.apply_base_stats(ball)

    def on_update(self, ball, target):
        ball.damage = ball.weapon_damage

    def on_wall_hit(self, ball, side):
        pass

    def on_ball_hit(self, ball, other):
        contact = ball.weapon_damage * CONTACT_DAMAGE_MULT
        other.take_damage(contact)
        self._sharpen(ball)

    def on_projectile_hit(self, ball, target):
        self._sharpen(ball)

    @staticmethod
    def _sharpen(ball):
        ball.weapon_damage += DAMAGE_PER_HIT
        ball.hit_count += 1
        logger.debug("SLASH! P%d sword damage now %d", ball.player_id, ball.weapon_damage)

    # ── Drawing ───────────────────────────────────────────

    def draw_weapon(self, surface, ball):
        """Draw the held sword pointing along the ball's velocity."""
        angle = math.atan2(ball.vy, ball.vx)
        r = ball.radius
        blade = blade_color(ball.weapon_damage, self.weapon.damage)

        parts = [
            (_HANDLE_COLOR, _rect(r - 5, -4, 10, 8)),
            (_GUARD_COLOR, _rect(r + 3, -7, 4, 14)),
            (blade, _rect(r + 7, -3, 25, 6)),
            (blade, [(r + 32, 0), (r + 27, -4), (r + 27, 4)]),
        ]
        for color, pts in parts:
            pygame.draw.polygon(surface, color, _rotated(pts, angle, ball.x, ball.y))

        # Highlight along the blade
        shine = _rotated(_rect(r + 9, -2, 18, 2), angle, ball.x, ball.y)
        pygame.draw.polygon(surface, _SHINE_COLOR, shine)

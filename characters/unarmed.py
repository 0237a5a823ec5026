"""
unarmed.py – Melee-only character.

Gains speed with every wall bounce and every landed hit; contact
damage is twice the ball's current speed.
"""

from __future__ import annotations

import logging
import math

from characters.base import BaseStats, Character

logger = logging.getLogger(__name__)

SPEED_GROWTH = 0.5             # speed / max speed gained per bounce or hit
DAMAGE_GROWTH = 0.5            # damage gained per landed hit
SPEED_DAMAGE_MULT = 2.0        # damage = current speed × this


class UnarmedCharacter(Character):
    id = "unarmed"
    name = "Unarmed"
    icon = "⚪"
    color = (153, 153, 153)
    border_color = (102, 102, 102)
    description = ("Gains speed and damage with every hit. "
                   "Damage scales with current velocity.")
    weapon = None
    stats = BaseStats(speed=5, max_speed=5, damage=0, max_hp=100, radius=30)

    def on_init(self, ball):
        self.apply_base_stats(ball)

    def on_update(self, ball, target):
        ball.damage = ball.current_speed * SPEED_DAMAGE_MULT

    def on_wall_hit(self, ball, side):
        ball.hit_count += 1
        self._grow_speed(ball)

        # Re-launch at the new speed, keeping the bounce direction
        current = math.hypot(ball.vx, ball.vy)
        if current > 0:
            ratio = ball.speed / current
            ball.vx *= ratio
            ball.vy *= ratio

    def on_ball_hit(self, ball, other):
        contact = ball.current_speed * SPEED_DAMAGE_MULT
        other.take_damage(contact)
        logger.debug("Unarmed P%d hits P%d for %.1f", ball.player_id, other.player_id, contact)

        ball.hit_count += 1
        self._grow_speed(ball)
        ball.damage += DAMAGE_GROWTH

    @staticmethod
    def _grow_speed(ball):
        # max_speed grows first; speed never exceeds it.
        ball.max_speed += SPEED_GROWTH
        ball.speed = min(ball.speed + SPEED_GROWTH, ball.max_speed)

"""
projectile_system.py – Weapon fire and projectile resolution.

Handles:
- Rate-limited weapon fire aimed at the opposing ball
- Straight-line projectile movement (no gravity)
- Removal on leaving the arena (with a margin) or on hit
- Hit resolution: damage, death check, knockback, on-hit hook
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Sequence

import pygame
from entities.projectile import Projectile
from settings import (
    ARENA_WIDTH, ARENA_HEIGHT, PROJECTILE_MARGIN, KNOCKBACK_FACTOR,
)

if TYPE_CHECKING:
    from entities.ball import Ball
    from systems.combat_system import CombatDispatcher, CombatResult

logger = logging.getLogger(__name__)


class ProjectileSystem:
    """Manages all live projectiles.

    Call ``try_fire`` for each armed ball, then ``update`` once per frame.
    """

    def __init__(self, dispatcher: CombatDispatcher,
                 width: float = ARENA_WIDTH, height: float = ARENA_HEIGHT,
                 margin: float = PROJECTILE_MARGIN):
        self.dispatcher = dispatcher
        self.width = width
        self.height = height
        self.margin = margin
        self._projectiles: list[Projectile] = []

    @property
    def projectiles(self) -> list[Projectile]:
        return self._projectiles

    def __len__(self) -> int:
        return len(self._projectiles)

    # ── Firing ────────────────────────────────────────────

    def can_fire(self, ball: Ball, now: float) -> bool:
        weapon = ball.weapon
        if weapon is None:
            return False
        if ball.last_shot is None:
            return True
        return now - ball.last_shot >= weapon.fire_rate

    def try_fire(self, ball: Ball, target: Ball, now: float) -> Projectile | None:
        """Fire *ball*'s weapon at *target* if its cooldown has elapsed.

        *now* is a monotonic timestamp in milliseconds.
        """
        if not self.can_fire(ball, now):
            return None
        weapon = ball.weapon

        dx = target.x - ball.x
        dy = target.y - ball.y
        dist = math.hypot(dx, dy)
        if dist == 0:
            # No direction to aim in; keep the cooldown for next frame
            return None

        ball.last_shot = now
        proj = Projectile(
            ball.x, ball.y,
            dx / dist * weapon.projectile_speed,
            dy / dist * weapon.projectile_speed,
            damage=ball.weapon_damage,
            owner=ball,
            sprite=weapon.sprite,
            size=weapon.projectile_size,
            color=ball.character.border_color,
        )
        self._projectiles.append(proj)
        logger.debug("P%d fired %s (dmg=%.1f) at t=%.0f", ball.player_id, weapon.sprite, proj.damage, now)
        return proj

    # ── Per-frame ─────────────────────────────────────────

    def update(self, balls: Sequence[Ball]) -> list[CombatResult]:
        """Move every projectile and resolve hits against *balls*.

        Candidates are tested in the order given; the first ball in
        range takes the hit and the projectile is removed.
        """
        results: list[CombatResult] = []
        for proj in list(self._projectiles):
            proj.update()

            if proj.out_of_bounds(self.width, self.height, self.margin):
                proj.active = False
                self._projectiles.remove(proj)
                continue

            for target in balls:
                if not proj.touches(target):
                    continue
                results.append(self._resolve_hit(proj, target))
                proj.active = False
                self._projectiles.remove(proj)
                break
        return results

    def _resolve_hit(self, proj: Projectile, target: Ball) -> CombatResult:
        owner = proj.owner
        result = self.dispatcher.deal_damage(owner, target, proj.damage)
        target.apply_knockback(proj.vx * KNOCKBACK_FACTOR, proj.vy * KNOCKBACK_FACTOR)
        self.dispatcher.projectile_hit(owner, target)
        logger.debug("Projectile hit P%d! dmg=%.1f", target.player_id, result.damage)
        return result

    # ── Drawing / housekeeping ────────────────────────────

    def draw(self, surface: pygame.Surface):
        for p in self._projectiles:
            p.draw(surface)

    def clear(self):
        self._projectiles.clear()

"""
physics.py – Ball integration, arena bounces and ball-ball collisions.

Units are pixels and frames: gravity is px/frame², velocities are
px/frame.  Projectiles are handled in projectile_system.py and are
not affected by gravity.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from settings import ARENA_WIDTH, ARENA_HEIGHT, GRAVITY

if TYPE_CHECKING:
    from entities.ball import Ball
    from systems.combat_system import CombatDispatcher, CombatResult

logger = logging.getLogger(__name__)


class PhysicsEngine:
    """Per-frame physics for the two balls.

    Usage:
        physics = PhysicsEngine(dispatcher)
        # each frame:
        physics.step_ball(ball1)
        physics.step_ball(ball2)
        physics.resolve_ball_collision(ball1, ball2)
    """

    def __init__(self, dispatcher: CombatDispatcher,
                 width: float = ARENA_WIDTH, height: float = ARENA_HEIGHT,
                 gravity: float = GRAVITY):
        self.dispatcher = dispatcher
        self.width = width
        self.height = height
        self.gravity = gravity

    # ── Single ball ───────────────────────────────────────

    def step_ball(self, ball: Ball) -> list[CombatResult]:
        """Integrate one ball and bounce it off the arena edges.

        Returns one wall-hit result per bounce this frame.
        """
        ball.vy += self.gravity
        ball.x += ball.vx
        ball.y += ball.vy
        ball.update_speed()

        hits: list[CombatResult] = []
        r = ball.radius

        # Left / right walls
        if ball.x - r < 0 or ball.x + r > self.width:
            ball.vx = -ball.vx
            ball.x = max(r, min(self.width - r, ball.x))
            side = "left" if ball.x < self.width / 2 else "right"
            hits.append(self.dispatcher.wall_hit(ball, side))

        # Floor
        if ball.y + r > self.height:
            ball.y = self.height - r
            ball.vy = -ball.vy
            hits.append(self.dispatcher.wall_hit(ball, "floor"))

        # Ceiling
        if ball.y - r < 0:
            ball.y = r
            ball.vy = -ball.vy
            hits.append(self.dispatcher.wall_hit(ball, "ceiling"))

        return hits

    # ── Ball vs ball ──────────────────────────────────────

    def resolve_ball_collision(self, ball1: Ball, ball2: Ball) -> list[CombatResult]:
        """Separate overlapping balls and exchange normal velocity.

        Hooks fire only when the balls are closing on each other:
        ball1's hook first, then ball2's.  Returns their results.
        """
        dx = ball2.x - ball1.x
        dy = ball2.y - ball1.y
        distance = math.hypot(dx, dy)
        min_distance = ball1.radius + ball2.radius

        if distance >= min_distance:
            return []
        if distance == 0:
            # Coincident centres: no normal this frame
            logger.debug("Coincident ball centres – collision skipped")
            return []

        nx = dx / distance
        ny = dy / distance

        # Push apart, half the overlap each
        half = (min_distance - distance) * 0.5
        ball1.x -= nx * half
        ball1.y -= ny * half
        ball2.x += nx * half
        ball2.y += ny * half

        # Relative velocity along the normal
        dvn = (ball2.vx - ball1.vx) * nx + (ball2.vy - ball1.vy) * ny
        if dvn >= 0:
            return []

        ball1.vx += dvn * nx
        ball1.vy += dvn * ny
        ball2.vx -= dvn * nx
        ball2.vy -= dvn * ny

        return [
            self.dispatcher.ball_hit(ball1, ball2),
            self.dispatcher.ball_hit(ball2, ball1),
        ]

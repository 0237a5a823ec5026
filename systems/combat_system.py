"""
combat_system.py – Character callback dispatch and damage bookkeeping.

Responsibilities:
- Invoke character hooks at the right lifecycle points
  (init, per-frame update, wall hit, ball hit, projectile hit)
- Measure the damage each hook dealt and detect deaths
- Notify stat observers (HUD) after every hook so they always
  show the latest HP / speed / damage
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from entities.ball import Ball

logger = logging.getLogger(__name__)

StatsObserver = Callable[["Ball"], None]
DefeatHandler = Callable[["Ball", "Ball"], None]   # (loser, winner)


class CombatResult:
    """Encapsulates the outcome of one dispatched event for the match loop."""

    __slots__ = ("kind", "attacker", "target", "damage", "defeated", "side")

    def __init__(self, kind: str, attacker: Ball, target: Ball | None = None,
                 damage: float = 0.0, defeated: bool = False, side: str = ""):
        self.kind = kind               # "wall" | "ball" | "projectile"
        self.attacker = attacker
        self.target = target
        self.damage = damage
        self.defeated = defeated
        self.side = side               # wall tag for kind == "wall"

    def __repr__(self) -> str:
        tgt = self.target.player_id if self.target else None
        return (f"<CombatResult {self.kind} P{self.attacker.player_id}→{tgt} "
                f"dmg={self.damage:.1f} defeated={self.defeated}>")


class CombatDispatcher:
    """Central hook dispatcher.

    Every call runs the character hook, then reports the touched balls
    to the observers.  Deaths are forwarded to ``on_defeat``; the match
    decides whether that ends it.
    """

    def __init__(self, on_defeat: DefeatHandler | None = None):
        self._observers: list[StatsObserver] = []
        self.on_defeat = on_defeat

    # ── Observers ─────────────────────────────────────────

    def add_observer(self, observer: StatsObserver):
        self._observers.append(observer)

    def notify(self, *balls: Ball):
        for ball in balls:
            for observer in self._observers:
                observer(ball)

    # ══════════════════════════════════════════════════════
    #  Lifecycle hooks
    # ══════════════════════════════════════════════════════

    def init(self, ball: Ball):
        if ball.character is None:
            return
        ball.character.on_init(ball)
        self.notify(ball)

    def update(self, ball: Ball, target: Ball):
        if ball.character is None:
            return
        ball.character.on_update(ball, target)
        self.notify(ball)

    def wall_hit(self, ball: Ball, side: str) -> CombatResult:
        result = CombatResult("wall", ball, side=side)
        if ball.character is None:
            return result
        ball.character.on_wall_hit(ball, side)
        self.notify(ball)
        return result

    def ball_hit(self, ball: Ball, other: Ball) -> CombatResult:
        """Run *ball*'s contact hook against *other*."""
        result = CombatResult("ball", ball, other)
        if ball.character is None:
            return result
        before = other.hp
        ball.character.on_ball_hit(ball, other)
        result.damage = before - other.hp
        result.defeated = self.check_death(other, ball)
        logger.debug("Ball hit P%d → P%d (dmg=%.1f)", ball.player_id, other.player_id, result.damage)
        self.notify(ball, other)
        return result

    def projectile_hit(self, owner: Ball, target: Ball) -> None:
        """Run the owner's optional on-ranged-hit hook."""
        if owner.character is None:
            return
        owner.character.on_projectile_hit(owner, target)
        self.notify(owner)

    # ══════════════════════════════════════════════════════
    #  Damage
    # ══════════════════════════════════════════════════════

    def deal_damage(self, attacker: Ball, target: Ball, amount: float) -> CombatResult:
        """Apply *amount* to *target* and check for a kill."""
        result = CombatResult("projectile", attacker, target)
        result.damage = target.take_damage(amount)
        result.defeated = self.check_death(target, attacker)
        self.notify(target)
        return result

    def check_death(self, victim: Ball, winner: Ball) -> bool:
        if victim.alive:
            return False
        if self.on_defeat is not None:
            self.on_defeat(victim, winner)
        return True

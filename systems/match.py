"""
match.py – Match state and the per-frame simulation step.

State machine:  IDLE → RUNNING → (PAUSED ⇄ RUNNING) → ENDED
                reset() from any state → IDLE

The match owns both balls, the projectile system and the dispatcher,
and runs one frame per ``step(now)`` call:

    integrate balls → ball-ball collision → per-frame hooks
    → weapon fire → projectiles

Drawing is left to the caller (see main.py).
"""

from __future__ import annotations

import logging
import math
import random
from enum import Enum
from typing import Callable

from characters import REGISTRY, CharacterConfigError, CharacterRegistry
from entities.ball import Ball
from settings import (
    ARENA_WIDTH, ARENA_HEIGHT,
    P1_SPAWN_X_FRAC, P2_SPAWN_X_FRAC, SPAWN_Y_FRAC,
    RESET_SPEED_MIN, RESET_SPEED_MAX,
    DEFAULT_P1_CHARACTER, DEFAULT_P2_CHARACTER,
)
from systems.combat_system import CombatDispatcher, CombatResult, StatsObserver
from systems.match_stats import MatchStats
from systems.physics import PhysicsEngine
from systems.projectile_system import ProjectileSystem

logger = logging.getLogger(__name__)

EndListener = Callable[[int], None]     # receives the winning player id


class MatchState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


class Match:
    """One arena with two balls.

    Usage:
        match = Match("sword", "unarmed")
        match.add_end_listener(on_winner)
        match.start()
        # every display tick:
        match.step(pygame.time.get_ticks())
    """

    def __init__(self, p1_character: str = DEFAULT_P1_CHARACTER,
                 p2_character: str = DEFAULT_P2_CHARACTER,
                 registry: CharacterRegistry = REGISTRY,
                 rng: random.Random | None = None,
                 width: float = ARENA_WIDTH, height: float = ARENA_HEIGHT):
        self.registry = registry
        self.rng = rng or random.Random()
        self.width = width
        self.height = height

        self.ball1 = Ball(1)
        self.ball2 = Ball(2)

        self.dispatcher = CombatDispatcher(on_defeat=self._on_defeat)
        self.physics = PhysicsEngine(self.dispatcher, width, height)
        self.projectile_system = ProjectileSystem(self.dispatcher, width, height)

        self.state = MatchState.IDLE
        self.winner: int | None = None
        self.frame = 0
        self._end_listeners: list[EndListener] = []

        for player, cid in ((1, p1_character), (2, p2_character)):
            if not self.set_character(player, cid):
                raise CharacterConfigError(f"unknown character {cid!r} for player {player}")

        self.stats: MatchStats
        self.reset()

    # ── Accessors ─────────────────────────────────────────

    @property
    def balls(self) -> tuple[Ball, Ball]:
        return self.ball1, self.ball2

    @property
    def projectiles(self):
        return self.projectile_system.projectiles

    @property
    def running(self) -> bool:
        return self.state is MatchState.RUNNING

    def ball(self, player: int) -> Ball:
        if player == 1:
            return self.ball1
        if player == 2:
            return self.ball2
        raise ValueError(f"player must be 1 or 2, got {player!r}")

    def opponent(self, ball: Ball) -> Ball:
        return self.ball2 if ball is self.ball1 else self.ball1

    # ── Observers ─────────────────────────────────────────

    def add_observer(self, observer: StatsObserver):
        """Register a stats observer and push the current state to it."""
        self.dispatcher.add_observer(observer)
        for ball in self.balls:
            observer(ball)

    def add_end_listener(self, listener: EndListener):
        self._end_listeners.append(listener)

    # ══════════════════════════════════════════════════════
    #  Selection
    # ══════════════════════════════════════════════════════

    def set_character(self, player: int, character_id: str) -> bool:
        """Attach a character to a player's ball.

        Unknown ids are ignored and leave the ball untouched.
        """
        char = self.registry.get(character_id)
        if char is None:
            logger.debug("Ignoring unknown character %r for P%d", character_id, player)
            return False
        ball = self.ball(player)
        ball.character = char
        self.dispatcher.init(ball)
        ball.hp = ball.max_hp
        self.dispatcher.notify(self.ball1, self.ball2)
        logger.info("P%d selected %s %s", player, char.icon, char.name)
        return True

    # ══════════════════════════════════════════════════════
    #  State transitions
    # ══════════════════════════════════════════════════════

    def start(self) -> bool:
        if self.state in (MatchState.IDLE, MatchState.PAUSED):
            self.state = MatchState.RUNNING
            logger.info("Match started")
            return True
        logger.debug("start() ignored in state %s", self.state.value)
        return False

    def pause(self) -> MatchState:
        """Toggle RUNNING ⇄ PAUSED.  No effect in other states."""
        if self.state is MatchState.RUNNING:
            self.state = MatchState.PAUSED
        elif self.state is MatchState.PAUSED:
            self.state = MatchState.RUNNING
        else:
            logger.debug("pause() ignored in state %s", self.state.value)
        return self.state

    def resume(self) -> bool:
        if self.state is MatchState.PAUSED:
            self.state = MatchState.RUNNING
            return True
        return False

    def reset(self):
        """Back to IDLE with fresh positions, velocities and stats."""
        self.state = MatchState.IDLE
        self.winner = None
        self.frame = 0

        spawns = (
            (self.ball1, P1_SPAWN_X_FRAC),
            (self.ball2, P2_SPAWN_X_FRAC),
        )
        for ball, x_frac in spawns:
            ball.x = self.width * x_frac
            ball.y = self.height * SPAWN_Y_FRAC
            angle = self.rng.random() * math.pi * 2
            speed = RESET_SPEED_MIN + self.rng.random() * (RESET_SPEED_MAX - RESET_SPEED_MIN)
            ball.vx = math.cos(angle) * speed
            ball.vy = math.sin(angle) * speed
            ball.update_speed()
            ball.hit_count = 0
            ball.last_shot = None
            self.dispatcher.init(ball)

        self.projectile_system.clear()
        self.stats = self._new_stats()
        self.dispatcher.notify(self.ball1, self.ball2)
        logger.info("Match reset: P1 %s vs P2 %s",
                    self.ball1.character.name, self.ball2.character.name)

    # ══════════════════════════════════════════════════════
    #  Frame step
    # ══════════════════════════════════════════════════════

    def step(self, now: float) -> bool:
        """Advance one frame.  *now* is a monotonic clock in ms.

        Returns False (and does nothing) unless the match is running.
        A frame that ends the match still runs to completion.
        """
        if self.state is not MatchState.RUNNING:
            return False
        b1, b2 = self.ball1, self.ball2
        results: list[CombatResult] = []

        results += self.physics.step_ball(b1)
        results += self.physics.step_ball(b2)
        results += self.physics.resolve_ball_collision(b1, b2)

        self.dispatcher.update(b1, b2)
        self.dispatcher.update(b2, b1)

        for shooter, target in ((b1, b2), (b2, b1)):
            if self.projectile_system.try_fire(shooter, target, now) is not None:
                self.stats.record_shot(shooter)

        results += self.projectile_system.update((b1, b2))

        for result in results:
            self.stats.record(result)
        self.stats.tick(b1, b2)
        self.frame += 1
        return True

    # ── Internals ─────────────────────────────────────────

    def _on_defeat(self, loser: Ball, winner: Ball):
        if self.winner is not None:
            return
        self.winner = winner.player_id
        self.state = MatchState.ENDED
        self.stats.end_match(self.winner)
        for listener in self._end_listeners:
            listener(self.winner)

    def _new_stats(self) -> MatchStats:
        return MatchStats(self.ball1.character.id, self.ball2.character.id)

"""
base.py – Character template and the callback contract every
character implements.

Architecture
────────────
Character (base)
 ├── UnarmedCharacter   – melee only, speed-scaled contact damage
 └── SwordCharacter     – thrown blades, +1 damage per landed hit

A character is an immutable template.  Anything that changes during
a match (current damage, weapon damage, hit count) lives on the
``Ball`` that the character is attached to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from entities.ball import Ball


class CharacterConfigError(ValueError):
    """Raised when a character definition is incomplete."""


@dataclass(frozen=True)
class WeaponSpec:
    """Ranged weapon descriptor.

    fire_rate is the cooldown in milliseconds; projectile_speed is in
    pixels per frame.
    """
    damage: float
    fire_rate: float
    projectile_speed: float
    projectile_size: float
    sprite: str = "bullet"         # "sword" | "arrow" | "bullet"


@dataclass(frozen=True)
class BaseStats:
    speed: float = 5.0
    max_speed: float = 5.0
    damage: float = 0.0
    max_hp: float = 100.0
    radius: float = 30.0


# Hooks a character must override; the rest have no-op defaults.
REQUIRED_HOOKS = ("on_init", "on_update", "on_wall_hit", "on_ball_hit")


class Character:
    """Base class for all characters.

    Subclasses set the class attributes and override the four required
    hooks.  ``on_projectile_hit`` and ``draw_weapon`` are optional.
    """

    id: str = ""
    name: str = "Character"
    icon: str = ""
    color: tuple[int, int, int] = (153, 153, 153)
    border_color: tuple[int, int, int] = (102, 102, 102)
    description: str = ""
    weapon: WeaponSpec | None = None
    stats: BaseStats = BaseStats()

    # ── Required hooks ────────────────────────────────────

    def on_init(self, ball: Ball) -> None:
        """Load base stats onto *ball* (match start, reset, re-selection)."""
        raise NotImplementedError

    def on_update(self, ball: Ball, target: Ball) -> None:
        """Recompute derived stats once per frame."""
        raise NotImplementedError

    def on_wall_hit(self, ball: Ball, side: str) -> None:
        """*side* is one of "left", "right", "floor", "ceiling"."""
        raise NotImplementedError

    def on_ball_hit(self, ball: Ball, other: Ball) -> None:
        """Called on an approaching ball-ball contact."""
        raise NotImplementedError

    # ── Optional hooks ────────────────────────────────────

    def on_projectile_hit(self, ball: Ball, target: Ball) -> None:
        """Called when one of *ball*'s projectiles strikes *target*."""

    def draw_weapon(self, surface: pygame.Surface, ball: Ball) -> None:
        """Draw a held weapon on top of the ball."""

    # ── Shared helpers ────────────────────────────────────

    def apply_base_stats(self, ball: Ball) -> None:
        """Copy the template stats onto *ball* and refill its HP."""
        s = self.stats
        ball.speed = s.speed
        ball.max_speed = s.max_speed
        ball.damage = s.damage
        ball.radius = s.radius
        ball.max_hp = s.max_hp
        ball.hp = ball.max_hp
        ball.hit_count = 0
        ball.weapon_damage = self.weapon.damage if self.weapon else 0.0

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id!r}>"


def validate_character(definition) -> None:
    """Fail fast on a definition that cannot take part in a match."""
    if not getattr(definition, "id", ""):
        raise CharacterConfigError(f"{definition!r} has no id")
    for hook in REQUIRED_HOOKS:
        impl = getattr(type(definition), hook, None)
        if not callable(impl) or impl is getattr(Character, hook):
            raise CharacterConfigError(
                f"character {definition.id!r} does not implement {hook}()"
            )

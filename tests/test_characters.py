"""
Character Behaviour Tests

Sword damage escalation and Unarmed speed growth.

Run with: pytest tests/test_characters.py -v
"""

import dataclasses
import math

import pytest

from characters import SwordCharacter, get_character
from characters.sword import blade_color


# ── Sword ────────────────────────────────────────────────

@pytest.mark.parametrize("ball_hits,projectile_hits", [(0, 0), (3, 0), (0, 4), (2, 5)])
def test_sword_damage_grows_one_per_hit(dispatcher, make, ball_hits, projectile_hits):
    sword = make(1, "sword", x=100, y=100)
    dummy = make(2, "unarmed", x=300, y=100)
    dummy.max_hp = dummy.hp = 10_000

    for _ in range(ball_hits):
        dispatcher.ball_hit(sword, dummy)
    for _ in range(projectile_hits):
        dispatcher.projectile_hit(sword, dummy)

    n = ball_hits + projectile_hits
    assert sword.weapon_damage == 5 + n
    assert sword.hit_count == n

    dispatcher.update(sword, dummy)
    assert sword.damage == 5 + n


def test_sword_contact_damage_is_half_weapon_damage(dispatcher, make):
    sword = make(1, "sword")
    other = make(2, "unarmed")
    sword.weapon_damage = 8
    result = dispatcher.ball_hit(sword, other)
    assert result.damage == pytest.approx(4)
    assert other.hp == pytest.approx(96)


def test_sword_template_is_not_mutated(dispatcher, make):
    sword = make(1, "sword")
    other = make(2, "unarmed")
    for _ in range(5):
        dispatcher.ball_hit(sword, other)
    assert SwordCharacter.weapon.damage == 5
    assert get_character("sword").weapon.damage == 5
    with pytest.raises(dataclasses.FrozenInstanceError):
        SwordCharacter.weapon.damage = 99


def test_sword_init_resets_escalation(dispatcher, make):
    sword = make(1, "sword")
    sword.weapon_damage = 12
    sword.hit_count = 7
    sword.hp = 3
    dispatcher.init(sword)
    assert (sword.weapon_damage, sword.hit_count, sword.hp) == (5, 0, 100)


def test_blade_colour_reddens():
    assert blade_color(5, 5) == (192, 192, 192)
    r, g, b = blade_color(10, 5)
    assert r > 192 and g < 192 and g == b
    assert blade_color(100, 5) == (255, 0, 0)


# ── Unarmed ──────────────────────────────────────────────

def test_unarmed_damage_tracks_speed(dispatcher, make):
    ball = make(1, "unarmed", vx=3, vy=4)
    other = make(2, "sword")
    dispatcher.update(ball, other)
    assert ball.damage == pytest.approx(10)


def test_unarmed_wall_hit_grows_speed(dispatcher, make):
    ball = make(1, "unarmed", vx=3, vy=0)
    dispatcher.wall_hit(ball, "left")
    assert ball.speed == pytest.approx(5.5)
    assert ball.max_speed == pytest.approx(5.5)
    assert ball.hit_count == 1
    # relaunched at the new speed, same direction
    assert math.hypot(ball.vx, ball.vy) == pytest.approx(5.5)
    assert ball.vy == 0 and ball.vx > 0


def test_unarmed_speed_never_exceeds_max(dispatcher, make):
    ball = make(1, "unarmed", vx=1, vy=1)
    ball.speed = 2
    for side in ("left", "floor", "right", "ceiling") * 5:
        dispatcher.wall_hit(ball, side)
        assert ball.speed <= ball.max_speed
    assert ball.max_speed == pytest.approx(5 + 0.5 * 20)


def test_unarmed_ball_hit(dispatcher, make):
    ball = make(1, "unarmed", vx=6, vy=8)
    other = make(2, "sword")
    dispatcher.update(ball, other)
    result = dispatcher.ball_hit(ball, other)

    assert result.damage == pytest.approx(20)
    assert other.hp == pytest.approx(80)
    assert ball.hit_count == 1
    assert ball.speed == pytest.approx(5.5)
    assert ball.max_speed == pytest.approx(5.5)
    assert ball.damage == pytest.approx(20.5)

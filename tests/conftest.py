"""Shared fixtures.  pygame runs headless for the whole suite."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random

import pytest

from characters import get_character
from characters.base import BaseStats, Character
from entities.ball import Ball
from systems.combat_system import CombatDispatcher
from systems.match import Match


class RecordingCharacter(Character):
    """Test character that logs every hook call."""

    id = "recorder"
    name = "Recorder"
    stats = BaseStats(speed=5, max_speed=5, damage=0, max_hp=100, radius=30)

    def __init__(self):
        self.calls = []

    def on_init(self, ball):
        self.apply_base_stats(ball)
        self.calls.append(("init", ball.player_id))

    def on_update(self, ball, target):
        self.calls.append(("update", ball.player_id))

    def on_wall_hit(self, ball, side):
        self.calls.append(("wall", ball.player_id, side))

    def on_ball_hit(self, ball, other):
        self.calls.append(("ball", ball.player_id, other.player_id))


def make_ball(player_id, character_id="sword", x=0.0, y=0.0, vx=0.0, vy=0.0):
    ball = Ball(player_id, x, y, vx, vy)
    ball.character = get_character(character_id)
    ball.character.on_init(ball)
    ball.x, ball.y, ball.vx, ball.vy = x, y, vx, vy
    ball.update_speed()
    return ball


@pytest.fixture
def dispatcher():
    return CombatDispatcher()


@pytest.fixture
def recorder():
    return RecordingCharacter()


@pytest.fixture
def match():
    return Match("sword", "unarmed", rng=random.Random(1234))


@pytest.fixture
def make():
    """Factory for balls with an initialised character."""
    return make_ball

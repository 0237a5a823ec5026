"""
Match Tests

State machine, selection, reset and end-of-match handling.

Run with: pytest tests/test_match.py -v
"""

import random

import pytest

from characters.base import CharacterConfigError
from settings import ARENA_WIDTH, ARENA_HEIGHT, RESET_SPEED_MIN, RESET_SPEED_MAX
from systems.combat_system import CombatDispatcher
from systems.match import Match, MatchState


def test_starts_idle_and_does_not_step(match):
    before = (match.ball1.x, match.ball1.y)
    assert match.state is MatchState.IDLE
    assert match.step(0) is False
    assert (match.ball1.x, match.ball1.y) == before


def test_state_transitions(match):
    assert match.start()
    assert match.state is MatchState.RUNNING
    assert match.pause() is MatchState.PAUSED

    snapshot = match.ball1.get_state_snapshot()
    assert match.step(16) is False
    assert match.ball1.get_state_snapshot() == snapshot

    assert match.pause() is MatchState.RUNNING
    assert match.step(32) is True
    assert match.frame == 1


def test_resume_only_from_paused(match):
    assert match.resume() is False
    match.start()
    match.pause()
    assert match.resume() is True
    assert match.running


def test_reset_scenario(match):
    match.start()
    for t in range(0, 2000, 16):
        match.step(t)
    match.reset()

    assert match.state is MatchState.IDLE
    assert match.projectiles == []
    assert match.ball1.x == pytest.approx(ARENA_WIDTH * 0.25)
    assert match.ball2.x == pytest.approx(ARENA_WIDTH * 0.75)
    for ball in match.balls:
        assert ball.y == pytest.approx(ARENA_HEIGHT / 2)
        assert ball.hp == ball.max_hp
        assert ball.hit_count == 0
        assert ball.last_shot is None
        assert RESET_SPEED_MIN <= ball.current_speed < RESET_SPEED_MAX
    assert match.ball1.weapon_damage == 5
    assert match.winner is None
    assert match.stats.frames == 0


def test_unknown_selection_is_ignored(match):
    before = match.ball1.character
    match.ball1.hp = 42
    assert match.set_character(1, "laser") is False
    assert match.ball1.character is before
    assert match.ball1.hp == 42


def test_selection_runs_init_and_notifies(match):
    seen = []
    match.add_observer(lambda ball: seen.append(ball.player_id))
    seen.clear()

    match.ball2.hp = 1
    assert match.set_character(2, "SWORD")
    assert match.ball2.character.id == "sword"
    assert match.ball2.hp == match.ball2.max_hp
    assert match.ball2.weapon_damage == 5
    assert 2 in seen


def test_unknown_character_at_construction():
    with pytest.raises(CharacterConfigError):
        Match("nope", "sword")


def test_match_ends_once(match):
    winners = []
    match.add_end_listener(winners.append)
    match.start()

    match.dispatcher.deal_damage(match.ball1, match.ball2, 1000)
    assert match.state is MatchState.ENDED
    assert match.winner == 1
    assert match.ball2.hp == 0

    # A later death in the same frame does not change the result
    match.dispatcher.deal_damage(match.ball2, match.ball1, 1000)
    assert match.winner == 1
    assert winners == [1]

    assert match.step(100) is False
    assert match.start() is False
    assert match.pause() is MatchState.ENDED


def test_reset_after_end_returns_to_idle(match):
    match.start()
    match.dispatcher.deal_damage(match.ball2, match.ball1, 1000)
    assert match.winner == 2
    match.reset()
    assert match.state is MatchState.IDLE
    assert match.start()


def test_weapon_fire_rate_in_match(match):
    match.start()
    for t in range(0, 800, 10):
        match.step(t)
    assert match.stats.shots_fired[1] == 1
    assert match.stats.shots_fired[2] == 0


def test_health_stays_in_bounds_for_full_match():
    match = Match("sword", "unarmed", rng=random.Random(99))
    match.start()
    t = 0.0
    for _ in range(60 * 120):
        if not match.step(t):
            break
        t += 1000 / 60
        for ball in match.balls:
            assert 0 <= ball.hp <= ball.max_hp
            assert ball.character is not None

    if match.state is MatchState.ENDED:
        loser = match.ball(3 - match.winner)
        assert loser.hp == 0
        assert match.ball(match.winner).hp >= 0


def test_ball_lookup_rejects_bad_player(match):
    with pytest.raises(ValueError):
        match.ball(3)
    assert match.opponent(match.ball1) is match.ball2


def test_check_death_only_for_dead_balls(make):
    defeats = []
    dispatcher = CombatDispatcher(on_defeat=lambda loser, winner: defeats.append((loser, winner)))
    a, b = make(1), make(2)

    b.hp = 0.5
    assert b.alive
    assert not dispatcher.check_death(b, a)
    assert defeats == []

    b.take_damage(5)
    assert not b.alive
    assert dispatcher.check_death(b, a)
    assert defeats == [(b, a)]

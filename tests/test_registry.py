"""
Character Registry Tests

Run with: pytest tests/test_registry.py -v
"""

import pytest

from characters import (
    REGISTRY, CharacterRegistry, SwordCharacter, UnarmedCharacter,
    character_ids, get_character,
)
from characters.base import Character, CharacterConfigError


def test_default_ids_in_registration_order():
    assert character_ids() == ["unarmed", "sword"]


def test_lookup_is_case_insensitive():
    assert get_character("SWORD") is get_character("sword")
    assert isinstance(get_character("Unarmed"), UnarmedCharacter)


def test_unknown_id_returns_none():
    assert get_character("bow") is None
    assert REGISTRY.get(None) is None


def test_reregistration_last_wins_and_keeps_position():
    reg = CharacterRegistry()
    first = UnarmedCharacter()
    reg.register(first)
    reg.register(SwordCharacter())
    second = UnarmedCharacter()
    reg.register(second)

    assert reg.get("unarmed") is second
    assert reg.list_ids() == ["unarmed", "sword"]
    assert len(reg) == 2


def test_missing_required_hook_fails_at_registration():
    class Half(Character):
        id = "half"

        def on_init(self, ball):
            pass

        def on_update(self, ball, target):
            pass

    reg = CharacterRegistry()
    with pytest.raises(CharacterConfigError, match="on_wall_hit"):
        reg.register(Half())
    assert "half" not in reg


def test_missing_id_fails_at_registration(recorder):
    recorder.id = ""
    with pytest.raises(CharacterConfigError):
        CharacterRegistry().register(recorder)


def test_optional_hooks_not_required(recorder):
    reg = CharacterRegistry()
    reg.register(recorder)
    assert reg.list_ids() == ["recorder"]

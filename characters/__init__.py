"""characters package – Character registry plus the built-in Unarmed and Sword characters."""

from __future__ import annotations

import logging

from .base import (
    BaseStats, Character, CharacterConfigError, WeaponSpec, validate_character,
)
from .sword import SwordCharacter
from .unarmed import UnarmedCharacter

logger = logging.getLogger(__name__)


class CharacterRegistry:
    """Id → character lookup.

    Ids are stored lower-case.  Re-registering an id replaces the
    definition but keeps its original position in ``list_ids()``.
    """

    def __init__(self):
        self._characters: dict[str, Character] = {}

    def register(self, definition: Character) -> Character:
        validate_character(definition)
        key = definition.id.lower()
        if key in self._characters:
            logger.info("Character %r re-registered (last registration wins)", key)
        self._characters[key] = definition
        return definition

    def get(self, character_id: str) -> Character | None:
        """Case-insensitive lookup; None when the id is unknown."""
        if not isinstance(character_id, str):
            return None
        return self._characters.get(character_id.lower())

    def list_ids(self) -> list[str]:
        return list(self._characters)

    def __contains__(self, character_id) -> bool:
        return self.get(character_id) is not None

    def __len__(self) -> int:
        return len(self._characters)


# ── Default registry (populated once at import) ───────────

REGISTRY = CharacterRegistry()
REGISTRY.register(UnarmedCharacter())
REGISTRY.register(SwordCharacter())


def get_character(character_id: str) -> Character | None:
    return REGISTRY.get(character_id)


def character_ids() -> list[str]:
    return REGISTRY.list_ids()

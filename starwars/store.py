"""
starwars/store.py  ·  in-memory character directory
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from .models import Character, route_name_for

logger = logging.getLogger(__name__)

SEED_CHARACTERS: tuple[dict[str, Any], ...] = (
    {
        "routeName": "yoda",
        "name": "Yoda",
        "role": "Jedi Master",
        "age": 900,
        "forcePoints": 2000,
    },
    {
        "routeName": "darthmaul",
        "name": "Darth Maul",
        "role": "Sith Lord",
        "age": 200,
        "forcePoints": 1200,
    },
    {
        "routeName": "obiwankenobi",
        "name": "Obi Wan Kenobi",
        "role": "Jedi Master",
        "age": 55,
        "forcePoints": 1350,
    },
)


class CharacterStore:
    """Ordered, append-only list of characters living for the process lifetime.

    Duplicate ``routeName`` values are accepted; lookups return the first one.
    """

    def __init__(self, seed: Iterable[Mapping[str, Any]] = SEED_CHARACTERS) -> None:
        self._characters: list[Character] = [Character(**row) for row in seed]

    def __len__(self) -> int:
        return len(self._characters)

    def list_all(self) -> list[Character]:
        return list(self._characters)

    def find(self, route_name: str) -> Character | None:
        for character in self._characters:
            if character.routeName == route_name:
                return character
        return None

    def add(self, payload: Mapping[str, Any]) -> Character:
        """Derive ``routeName`` from ``payload["name"]`` and append the record.

        Raises ``MissingNameError`` when the payload has no string name.
        """
        route_name = route_name_for(payload.get("name"))
        character = Character(**{**payload, "routeName": route_name})
        self._characters.append(character)
        logger.info("added character %s", character.to_json())
        return character

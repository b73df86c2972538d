import re
from typing import Any

from pydantic import BaseModel, ConfigDict

# JavaScript counts U+FEFF as whitespace, Python does not
_WHITESPACE = re.compile(r"[\s\ufeff]+")


class MissingNameError(ValueError):
    """Creation payload carries no string ``name`` to derive a slug from."""


class Character(BaseModel):
    # extra keys from the creation payload are stored as sent
    model_config = ConfigDict(extra="allow")

    routeName: str
    name: str
    # stored exactly as sent
    role: Any = None
    age: Any = None
    forcePoints: Any = None

    def to_json(self) -> dict[str, Any]:
        # fields the payload never sent stay out of the JSON
        unset = set(type(self).model_fields) - self.model_fields_set
        return self.model_dump(exclude=unset)


def route_name_for(name: Any) -> str:
    """"Han Solo" -> "hansolo"."""
    if not isinstance(name, str):
        raise MissingNameError(f"character name must be a string, got {name!r}")
    return _WHITESPACE.sub("", name).lower()

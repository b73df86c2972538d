"""In-memory Star Wars character directory served over HTTP."""

from .models import Character, MissingNameError, route_name_for
from .store import CharacterStore

__all__ = ["Character", "CharacterStore", "MissingNameError", "route_name_for"]

"""Configuration for the character directory.

Values come from the environment; ``PORT`` is what Heroku binds at dyno start.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


def _int_from_env(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return int(val)


def _list_from_env(name: str) -> tuple[str, ...]:
    val = os.getenv(name, "")
    return tuple(part.strip() for part in val.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        port: TCP port the server listens on.
        host: Interface the server binds to.
        log_level: Root log level name.
        cors_origins: Origins allowed to call the API from a browser; empty
            disables CORS handling.
    """

    port: int = field(default_factory=lambda: _int_from_env("PORT", DEFAULT_PORT))
    host: str = field(default_factory=lambda: os.getenv("HOST", DEFAULT_HOST))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    cors_origins: tuple[str, ...] = field(
        default_factory=lambda: _list_from_env("CORS_ORIGINS")
    )


def get_settings() -> Settings:
    """Return a Settings instance using current environment variables."""
    return Settings()

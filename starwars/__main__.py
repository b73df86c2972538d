"""Run the character directory.

Usage:
    python -m starwars                     # listens on $PORT, default 3000
    uvicorn starwars.main:app --port 3000  # equivalent, via uvicorn's CLI
"""
from __future__ import annotations

import logging

import uvicorn

from .config import get_settings
from .main import create_app

logger = logging.getLogger("starwars")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings=settings)
    logger.info("App listening on PORT %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()

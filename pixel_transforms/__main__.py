"""Serve the transform endpoints with Flask's development server."""

from __future__ import annotations

from .app import create_app
from .config import SETTINGS, configure_logging


def main() -> None:
    logger = configure_logging()
    logger.info("Serving on port %d (cool mode: %s)", SETTINGS.port, SETTINGS.cool_mode)
    create_app().run(host="0.0.0.0", port=SETTINGS.port, debug=False)


if __name__ == "__main__":
    main()

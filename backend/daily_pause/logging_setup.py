"""
Daily Pause Backend — Logging Configuration
============================================

What:  Sets up logging with a consistent format across all modules.
When:  Called once from the lifespan of either app variant, before any
       other initialization logs.

Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
"""

import logging
import sys

from daily_pause.config import settings


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def log_configuration_warnings(logger: logging.Logger) -> None:
    # Insecure settings are allowed for local development; just say so loudly
    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.warning("%s", str(e))

"""Logging setup for the decision service."""

from __future__ import annotations

import logging
import os

from taiga.config.server import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Decision core, service and server loggers all follow the service level.
SERVICE_LOGGERS = ("taiga", "taiga_backend", "uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str | None = None) -> str:
    """Pick the explicit level, else ``TAIGA_LOG_LEVEL``, else the default."""
    raw_level = level if level is not None else os.getenv("TAIGA_LOG_LEVEL")
    return (raw_level or DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: str | None = None) -> logging.Logger:
    """Route engine and service logs through one root handler at one level.

    Args:
        level: Explicit log level name; see ``resolve_level`` for fallbacks

    Returns:
        The service logger (``taiga_backend``).
    """
    resolved_level = resolve_level(level)
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT, datefmt=DATE_FORMAT)

    for name in SERVICE_LOGGERS:
        logging.getLogger(name).setLevel(resolved_level)

    service_logger = logging.getLogger("taiga_backend")
    service_logger.debug("Logging configured at %s", resolved_level)
    return service_logger

"""JSON logging for the permit checker."""

from __future__ import annotations

import logging

from pythonjsonlogger import jsonlogger

from .settings import settings

_LOGGER_NAME = "routeguard"


def _parse_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger() -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)

    # Reloaders import the app twice; only attach handlers once.
    if getattr(logger, "_configured", False):
        return logger

    logger.setLevel(_parse_level(settings.log_level))
    logger.propagate = False

    handler = logging.StreamHandler()
    handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)

    logger._configured = True  # type: ignore[attr-defined]
    return logger


def log_event(event: str, **fields: object) -> None:
    """Emit a structured info event with ``fields`` as JSON attributes."""

    get_logger().info(event, extra={"event": event, **fields})


__all__ = ["get_logger", "log_event"]

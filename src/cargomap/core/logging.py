"""structlog wiring shared by every cargomap module."""

from __future__ import annotations

import logging

import structlog

from cargomap.core.config import AppSettings


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure structlog from application settings.

    Safe to call more than once; the last call wins.
    """
    if settings is None:
        settings = AppSettings()

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

"""
Logging configuration helpers.
The API factory calls `configure_logging` once so every named logger shares one format and level.
"""

from __future__ import annotations

import logging

from credit_system.common.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level_name: str | None = None) -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    resolved_name = (level_name or get_settings().LOG_LEVEL).upper()
    level = getattr(logging, resolved_name, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True

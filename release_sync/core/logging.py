"""Process-wide logging setup."""

from __future__ import annotations

import logging
import logging.config

from release_sync.core.config import Settings

_configured = False


def configure_logging(settings: Settings) -> None:
    """Install a single console handler honouring ``settings.log_level``."""
    global _configured
    if _configured:
        return

    level_name = settings.log_level.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level_name = "INFO"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "[release-sync] %(asctime)s %(levelname)s %(name)s %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "release_sync": {
                    "handlers": ["console"],
                    "level": level_name,
                    "propagate": False,
                },
            },
        }
    )
    _configured = True


__all__ = ["configure_logging"]

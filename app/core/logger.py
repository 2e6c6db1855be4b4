"""Logging configuration shared by the API and the CLI."""
import logging
import logging.config

from app.core.config import settings


def setup_logging(level: str | None = None) -> None:
    level = (level or settings.LOG_LEVEL or "INFO").upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "loggers": {
                "app": {"handlers": ["console"], "level": level, "propagate": False},
            },
            "root": {"handlers": ["console"], "level": "WARNING"},
        }
    )
    logging.getLogger(__name__).debug("Logging configured at %s", level)

"""Logging configuration for smallrye-info."""

import logging.config
from typing import Any


def setup_logging(level: str = "WARNING") -> None:
    """Configure console logging for the smallrye_info logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "rich": {
                "format": "%(name)s: %(message)s",
                "datefmt": "[%X]",
            },
        },
        "handlers": {
            "console": {
                "class": "rich.logging.RichHandler",
                "formatter": "rich",
                "level": level,
                "show_path": False,
            },
        },
        "loggers": {
            "smallrye_info": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(config)

"""Central logging configuration for the service.

Applies a root stdout handler so all module loggers emit without per-module
setup. Keeps uvicorn loggers on the same handler and avoids duplicate
handlers on reloads.
"""
import logging
from logging.config import dictConfig

from .config import LOG_LEVEL


def _dict_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "uvicorn": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": level, "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": level, "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure process-wide logging once.

    If the root logger already has handlers (pytest, reloaders), leave it alone.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    dictConfig(_dict_config(level))

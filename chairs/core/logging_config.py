import logging
from logging.config import dictConfig

from .config import get_settings


def get_logging_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "chairs": {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            },
        },
    }


def setup_logging(level: str = None) -> None:
    """Configure the `chairs` logger tree. Safe to call more than once."""
    level = (level or get_settings().logging_level).upper()
    dictConfig(get_logging_config(level))
    logging.getLogger(__name__).debug("Logging configured at %s", level)

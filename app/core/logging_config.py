from __future__ import annotations

import logging
from logging.config import dictConfig

from app.core.config import Settings

PLAIN_FORMAT = "%(levelname)s %(asctime)s %(name)s %(message)s"
JSON_FORMAT = (
    '{"level":"%(levelname)s","time":"%(asctime)s","logger":"%(name)s",'
    '"module":"%(module)s","message":"%(message)s"}'
)

# Third-party loggers that echo prompts or request bodies at DEBUG.
QUIET_LOGGERS = ("openai", "httpx", "httpcore")


def configure_logging(settings: Settings) -> None:
    formatters: dict[str, dict[str, object]] = {
        "standard": {
            "format": JSON_FORMAT if settings.log_json else PLAIN_FORMAT,
            "datefmt": "%Y-%m-%dT%H:%M:%S",
        }
    }

    handlers: dict[str, dict[str, object]] = {
        "default": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        }
    }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": formatters,
            "handlers": handlers,
            "root": {
                "level": settings.log_level,
                "handlers": ["default"],
            },
            "loggers": {
                name: {"level": "WARNING", "propagate": True} for name in QUIET_LOGGERS
            },
        }
    )

    logging.getLogger("uvicorn.error").setLevel(settings.log_level)

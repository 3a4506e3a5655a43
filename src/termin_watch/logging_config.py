"""Structured JSON logging configuration for scheduled runs.

Configures Python stdlib logging to emit JSON on stderr so the scheduler's
run log keeps one parseable line per event. A plain text format is available
for local runs.

Usage:
    from termin_watch.logging_config import configure_logging
    configure_logging("WARNING")
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "termin-watch",
            },
        },
        "text": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stderr",
        },
    },
    "root": {
        "level": "WARNING",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "WARNING", fmt: str = "json") -> None:
    """Apply the logging configuration with the given root level and format.

    Unknown formats fall back to ``json``. Call once at process start.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["root"]["level"] = level.upper()
    config["handlers"]["console"]["formatter"] = fmt if fmt in config["formatters"] else "json"
    logging.config.dictConfig(config)

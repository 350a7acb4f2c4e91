"""Structured JSON logging to an append-only error log.

Configures Python stdlib logging to write one JSON object per line to
``error.log`` in the working directory. Stdout is left alone so the
command's own messages stay clean.

Usage:
    from notion_register.logging_config import configure_logging
    configure_logging()
"""

import logging
import logging.config

DEFAULT_LOG_FILE = "error.log"


def build_logging_config(log_file: str = DEFAULT_LOG_FILE) -> dict:
    """Return a dictConfig mapping that appends WARNING and above to log_file."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(levelname)s %(name)s %(module)s %(lineno)d %(message)s",
                "rename_fields": {
                    "levelname": "severity",
                    "asctime": "timestamp",
                    "name": "logger",
                },
                "static_fields": {
                    "service": "notion-register",
                },
            },
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "formatter": "json",
                "filename": log_file,
                "mode": "a",
                "encoding": "utf-8",
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["file"],
        },
    }


def configure_logging(log_file: str = DEFAULT_LOG_FILE) -> None:
    """Apply the error-log configuration.

    Call once at startup, before settings are loaded, so config warnings
    land in the log too. The file is created if it does not exist.
    """
    logging.config.dictConfig(build_logging_config(log_file))

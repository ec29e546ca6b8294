"""
Logging setup for processes embedding the account hierarchy.

Records go to stdout, optionally also to a rotating file and a separate
error file. With ``LOG_FORMAT=json`` they are emitted through
python-json-logger for log aggregation. Every record carries the
correlation id bound by the host for the current request.
"""

import logging
import logging.config
import sys
from contextvars import ContextVar, Token
from pathlib import Path
from typing import Any

from account_hierarchy.infrastructure.config.settings import Settings

correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)

DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)
JSON_FORMAT = (
    "%(asctime)s %(name)s %(levelname)s %(correlation_id)s "
    "%(filename)s %(lineno)d %(funcName)s %(message)s"
)


def setup_logging(settings: Settings) -> None:
    """
    Apply the logging configuration. Call once at process startup.

    Args:
        settings: Settings built by the host process
    """
    if settings.log_file_enabled:
        Path(settings.log_file_path).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(get_logging_config(settings))

    logging.getLogger(__name__).info(
        f"Logging configured: level={settings.log_level}, "
        f"format={settings.log_format}, file_enabled={settings.log_file_enabled}"
    )


def _rotating_file_handler(
    settings: Settings, filename: str, level: str, formatter: str
) -> dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": formatter,
        "filename": filename,
        "maxBytes": settings.log_file_max_bytes,
        "backupCount": settings.log_file_backup_count,
        "encoding": "utf-8",
        "filters": ["correlation_id"],
    }


def get_logging_config(settings: Settings) -> dict[str, Any]:
    """
    Build the dictConfig for the given settings.

    SQLAlchemy loggers are held at WARNING; ``database_echo`` is the switch
    for statement logging.

    Args:
        settings: Settings built by the host process

    Returns:
        Dictionary accepted by logging.config.dictConfig()
    """
    formatter = "json" if settings.log_format == "json" else "detailed"
    handlers = ["console"]

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {"format": DETAILED_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": JSON_FORMAT,
            },
        },
        "filters": {
            "correlation_id": {"()": CorrelationIdFilter},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.log_level,
                "formatter": formatter,
                "stream": sys.stdout,
                "filters": ["correlation_id"],
            },
        },
    }

    if settings.log_file_enabled:
        log_dir = Path(settings.log_file_path).parent
        config["handlers"]["file"] = _rotating_file_handler(
            settings, settings.log_file_path, settings.log_level, formatter
        )
        config["handlers"]["error_file"] = _rotating_file_handler(
            settings, str(log_dir / "error.log"), "ERROR", formatter
        )
        handlers += ["file", "error_file"]

    config["root"] = {"level": settings.log_level, "handlers": list(handlers)}
    config["loggers"] = {
        "sqlalchemy": {"level": "WARNING", "handlers": ["console"], "propagate": False},
        "account_hierarchy": {
            "level": settings.log_level,
            "handlers": list(handlers),
            "propagate": False,
        },
    }
    return config


def set_correlation_id(correlation_id: str | None) -> Token:
    """
    Bind a correlation id to the current context.

    The host sets it per request and restores the previous value with
    ``correlation_id_var.reset(token)``.
    """
    return correlation_id_var.set(correlation_id)


class CorrelationIdFilter(logging.Filter):
    """Stamp ``correlation_id`` on every record ("no-request-id" when unbound)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = correlation_id_var.get() or "no-request-id"
        return True

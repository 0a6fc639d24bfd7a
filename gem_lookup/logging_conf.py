"""Logging configuration built around structlog JSON logging."""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import structlog

LOGGER_NAME = "gem_lookup"
LOG_FILENAME = "gem_lookup.log"

_LOGGING_INITIALISED = False


def _build_config(level: str, log_dir: Path | None) -> dict[str, Any]:
    handlers: dict[str, Any] = {
        # Lookup output owns stdout; diagnostics go to stderr.
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "plain",
            "stream": "ext://sys.stderr",
        },
    }
    if log_dir is not None:
        handlers["lookup_file"] = {
            "class": "logging.FileHandler",
            "level": "INFO",
            "filename": str(log_dir / LOG_FILENAME),
            "formatter": "plain",
            "encoding": "utf-8",
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            }
        },
        "handlers": handlers,
        "loggers": {
            LOGGER_NAME: {
                "handlers": list(handlers),
                "level": "DEBUG" if level == "DEBUG" else "INFO",
                "propagate": False,
            },
        },
    }


def configure_logging(
    verbose: bool = False, log_dir: Path | None = None, force: bool = False
) -> structlog.BoundLogger:
    """Configure structlog + stdlib handlers and return the application logger."""

    global _LOGGING_INITIALISED
    if not _LOGGING_INITIALISED or force:
        level = "DEBUG" if verbose else "WARNING"
        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
        logging.config.dictConfig(_build_config(level, log_dir))

        # Forward structlog events to stdlib logging; JSON rendering happens in the handler.
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
        _LOGGING_INITIALISED = True
    return structlog.get_logger(LOGGER_NAME)


def component_logger(component: str) -> structlog.BoundLogger:
    """Return a logger named under the application namespace."""

    return structlog.get_logger(f"{LOGGER_NAME}.{component}").bind(component=component)


__all__ = ["LOGGER_NAME", "component_logger", "configure_logging"]

"""
Structured logging configuration using structlog.

Every event carries the application name and version plus the storage
backend in use, so log lines from different inventory deployments can be
told apart. Development gets colored console output, other environments
JSON lines.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from src.config.settings import Settings, get_settings


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Tag each event with app, version, environment and storage backend."""
    settings = get_settings()
    event_dict.setdefault("app", settings.app_name)
    event_dict.setdefault("version", settings.app_version)
    event_dict.setdefault("environment", settings.environment)
    event_dict.setdefault("storage_backend", settings.storage.backend)
    return event_dict


def _renderers(settings: Settings) -> list[Processor]:
    if settings.environment == "development":
        return [structlog.dev.ConsoleRenderer(colors=True)]
    return [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]


def configure_logging() -> None:
    """Configure structlog over stdlib logging at the configured level."""
    settings = get_settings()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        *_renderers(settings),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )
    logging.getLogger("src").setLevel(settings.log_level)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)

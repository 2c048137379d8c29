"""Structured logging helpers for tutormatch."""

import logging
from typing import Optional

from .config import configure_logging, configure_logging_from_config
from .context import clear_log_context, get_log_context, log_context, pop_log_context, push_log_context


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges its component field with per-call extras."""

    def process(self, msg, kwargs):
        # Call-site extras win over the adapter defaults
        extra = kwargs.get("extra", {})
        kwargs["extra"] = {**self.extra, **extra}
        return msg, kwargs


def get_logger(name: str, component: Optional[str] = None):
    """Get a logger with an optional default ``component`` field.

    Args:
        name: Logger name (typically __name__)
        component: Optional component identifier injected into every record

    Returns:
        Logger or ComponentLoggerAdapter instance

    Example:
        >>> logger = get_logger(__name__, component="matching")
        >>> logger.info("Ranked jobs", extra={"event": "matching.rank.completed"})
    """
    logger = logging.getLogger(name)

    if component:
        return ComponentLoggerAdapter(logger, {"component": component})

    return logger


__all__ = [
    "ComponentLoggerAdapter",
    "get_logger",
    "configure_logging",
    "configure_logging_from_config",
    "log_context",
    "push_log_context",
    "pop_log_context",
    "get_log_context",
    "clear_log_context",
]

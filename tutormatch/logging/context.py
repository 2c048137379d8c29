"""Context propagation for structured logging.

Fields pushed here (tutor_id, job_id, ...) are injected into every log record
emitted inside the scope. Backed by contextvars, so each thread or asyncio
task handling a request sees its own context.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional


LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return LogContextVar.get().copy()


def push_log_context(**kwargs) -> Token:
    """Merge new fields into the logging context.

    Args:
        **kwargs: Key-value pairs to add to the logging context

    Returns:
        Token for restoring the previous context with pop_log_context()

    Example:
        >>> token = push_log_context(tutor_id="t-42")
        >>> # ... all logs now include tutor_id ...
        >>> pop_log_context(token)
    """
    current = LogContextVar.get()
    return LogContextVar.set({**current, **kwargs})


def pop_log_context(token: Token) -> None:
    """Restore the logging context to the state captured by ``token``."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Clear all logging context fields. Mostly useful in tests."""
    LogContextVar.set({})


class log_context:
    """Context manager for scoped logging context.

    Example:
        >>> with log_context(tutor_id="t-42"):
        ...     get_log_context()
        {'tutor_id': 't-42'}
    """

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.kwargs)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
        return False

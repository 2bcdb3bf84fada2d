"""Structured logging for the view resolver.

This module provides structured logging functions that attach a
dictionary of string fields to every record, so resolution outcomes can
be correlated and filtered by view name, locale or resolver.

Records are emitted through the ``view_resolver`` logger; configure it
with the standard ``logging`` machinery. The normalized fields are
available on each record as ``record.fields``.

Example:
    >>> from view_resolver import log_info, log_error
    >>>
    >>> log_info("Resolver configured", {
    ...     "resolver": "templates",
    ...     "prefix": "templates/"
    ... })
    >>>
    >>> try:
    ...     await resolver.resolve_view_name("home", "en")
    ... except Exception as e:
    ...     log_error(f"Resolution failed: {e}", {
    ...         "view_name": "home",
    ...         "error_type": type(e).__name__
    ...     })
"""

from __future__ import annotations

import logging
from typing import Any

from .types import LogContext

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_logger = logging.getLogger("view_resolver")


def log_error(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an ERROR level message with structured fields.

    Use this for failures that require intervention.

    Args:
        message: The log message.
        fields: Optional structured fields for context. Can be a dict
                or a LogContext instance.
    """
    _emit(logging.ERROR, message, fields)


def log_warn(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a WARN level message with structured fields.

    Use this for degraded operation, like a discarded initialization result.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _emit(logging.WARNING, message, fields)


def log_info(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an INFO level message with structured fields.

    Use this for lifecycle events such as resolver configuration.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _emit(logging.INFO, message, fields)


def log_debug(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a DEBUG level message with structured fields.

    Use this for per-resolution diagnostics.

    Args:
        message: The log message.
        fields: Optional structured fields for context.

    Example:
        >>> log_debug("View not found", {
        ...     "view_name": "missing",
        ...     "url": "templates/missing.html"
        ... })
    """
    _emit(logging.DEBUG, message, fields)


def log_trace(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a TRACE level message with structured fields.

    Use this for very verbose logging, like probe entry/exit.
    This level is typically disabled in production.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _emit(TRACE, message, fields)


def _emit(
    level: int,
    message: str,
    fields: dict[str, Any] | LogContext | None,
) -> None:
    if not _logger.isEnabledFor(level):
        return
    fields_dict = _normalize_fields(fields)
    _logger.log(level, message, extra={"fields": fields_dict or {}})


def _normalize_fields(
    fields: dict[str, Any] | LogContext | None,
) -> dict[str, str] | None:
    """Normalize fields to a dict of strings.

    Args:
        fields: Input fields as dict, LogContext, or None.

    Returns:
        Dict with string values, or None if no fields.
    """
    if fields is None:
        return None

    if isinstance(fields, LogContext):
        # Convert LogContext to dict, excluding None values
        return {k: str(v) for k, v in fields.model_dump().items() if v is not None}

    return {k: str(v) for k, v in fields.items()}


__all__ = [
    "TRACE",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]

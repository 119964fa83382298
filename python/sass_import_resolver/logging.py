"""Structured logging for sass-import-resolver.

This module provides structured logging functions on top of the standard
library ``logging`` package. Every message goes through the
``sass_import_resolver`` logger, with optional structured fields appended
to the message and attached to the record as ``record.fields``.

Example:
    >>> from sass_import_resolver import log_debug, log_error
    >>>
    >>> log_debug("Resolving import", {
    ...     "specifier": "variables",
    ...     "referrer": "/proj/index.scss",
    ... })
    >>>
    >>> try:
    ...     importer.resolve("missing", "/proj/index.scss")
    ... except ImportResolutionError as e:
    ...     log_error(f"Import failed: {e}", {
    ...         "specifier": e.specifier,
    ...         "error_type": type(e).__name__,
    ...     })
"""

from __future__ import annotations

import logging
import os
from typing import Any

from .types import LogContext

LOGGER_NAME = "sass_import_resolver"

# Below DEBUG, for per-probe output.
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the package logger."""
    return _logger


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    The level defaults to the ``SASS_IMPORT_LOG`` environment variable,
    falling back to ``info``. ``trace`` maps to the TRACE level.

    Args:
        level: Level name (trace, debug, info, warn, error).

    Returns:
        The configured package logger.
    """
    level_name = (level or os.environ.get("SASS_IMPORT_LOG", "info")).upper()
    if level_name == "WARN":
        level_name = "WARNING"
    numeric = TRACE if level_name == "TRACE" else getattr(logging, level_name, logging.INFO)

    if not any(getattr(h, "_sass_import_resolver", False) for h in _logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S%z",
            )
        )
        handler._sass_import_resolver = True  # type: ignore[attr-defined]
        _logger.addHandler(handler)

    _logger.setLevel(numeric)
    return _logger


def log_error(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an ERROR level message with structured fields.

    Use this for unrecoverable resolution failures.

    Args:
        message: The log message.
        fields: Optional structured fields for context. Can be a dict
                or a LogContext instance.
    """
    _emit(logging.ERROR, message, fields)


def log_warn(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a WARN level message with structured fields.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _emit(logging.WARNING, message, fields)


def log_info(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log an INFO level message with structured fields.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _emit(logging.INFO, message, fields)


def log_debug(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a DEBUG level message with structured fields.

    Args:
        message: The log message.
        fields: Optional structured fields for context.

    Example:
        >>> log_debug("Lookup", {"strategy": "local", "base_directory": "/proj"})
    """
    _emit(logging.DEBUG, message, fields)


def log_trace(message: str, fields: dict[str, Any] | LogContext | None = None) -> None:
    """Log a TRACE level message with structured fields.

    Use this for very verbose logging, like individual file probes.

    Args:
        message: The log message.
        fields: Optional structured fields for context.
    """
    _emit(TRACE, message, fields)


def _emit(level: int, message: str, fields: dict[str, Any] | LogContext | None) -> None:
    if not _logger.isEnabledFor(level):
        return

    fields_dict = _normalize_fields(fields)
    if fields_dict:
        rendered = " ".join(f"{k}={v}" for k, v in fields_dict.items())
        message = f"{message} [{rendered}]"

    # stacklevel=3 points the record at the caller of log_*
    _logger.log(level, message, extra={"fields": fields_dict or {}}, stacklevel=3)


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
    "LOGGER_NAME",
    "TRACE",
    "configure_logging",
    "get_logger",
    "log_error",
    "log_warn",
    "log_info",
    "log_debug",
    "log_trace",
]

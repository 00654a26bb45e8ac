"""
Logging utilities for safe structured logging.

Helpers that attach key/value context to log records without risking
formatting errors on arbitrary values (lists, ORM rows, long prompts).

Dependencies: logging (stdlib), sales_agent.observability.correlation
System role: Logging helper functions
"""

import logging
from typing import Any
from uuid import UUID

from sales_agent.observability.correlation import get_correlation_id


def safe_log_value(value: Any, max_length: int = 300) -> str:
    """
    Safely convert any value to a short string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, UUID):
            return str(value)
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple, set)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def _build_context(context: dict[str, Any]) -> dict[str, str]:
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.setdefault("request_correlation_id", get_correlation_id() or "-")
    return safe_context


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value pairs attached as record extras
    """
    logger.log(level, message, extra=_build_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with traceback and context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    safe_context = _build_context(context)
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(str(exc)),
    })
    logger.error(message, exc_info=exc, extra=safe_context)

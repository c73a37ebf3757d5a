"""
Structured Logging

The client logs through structlog. Nothing is configured on import;
applications call ``setup_logging`` (or configure structlog themselves).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

SENSITIVE_KEYS = frozenset({"api_key", "authorization", "token", "secret", "password"})
MAX_VALUE_LENGTH = 1000


def filter_sensitive_data(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Mask values whose key names a credential."""

    def _mask_value(key: str, value: Any) -> Any:
        key_lower = key.lower()
        for sensitive in SENSITIVE_KEYS:
            if sensitive in key_lower:
                return "***MASKED***"
        return value

    return {k: _mask_value(k, v) for k, v in event_dict.items()}


def truncate_large_values(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Truncate long strings and lists, e.g. SQL text or parameter lists."""

    def _truncate(value: Any) -> Any:
        if isinstance(value, str) and len(value) > MAX_VALUE_LENGTH:
            return value[:MAX_VALUE_LENGTH] + f"... [truncated, total length: {len(value)}]"
        if isinstance(value, (list, tuple)) and len(value) > 50:
            return list(value[:50]) + [f"... [{len(value) - 50} more items]"]
        return value

    return {k: _truncate(v) for k, v in event_dict.items()}


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        level: Log level name
        json_format: Render JSON lines instead of the console format
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        filter_sensitive_data,
        truncate_large_values,
    ]

    if json_format:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """
    Get a structlog logger, typically for ``__name__``.

    Output goes through the standard library logger of the same name, so
    level filtering follows the application's ``logging`` setup.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

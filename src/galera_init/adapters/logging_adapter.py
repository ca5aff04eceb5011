"""Standard library logging adapter implementing LoggingPort."""

from __future__ import annotations

import logging
from typing import Any

from galera_init.adapters.ports import LoggingPort


def format_fields(message: str, fields: dict[str, Any]) -> str:
    """Render a message followed by key=value pairs in insertion order."""
    if not fields:
        return message
    pairs = " ".join(f"{key}={value}" for key, value in fields.items())
    return f"{message} {pairs}"


class StdlibLoggingAdapter:
    """Adapter delivering LoggingPort calls to a stdlib logger.

    Structured fields are appended to the message as ``key=value`` pairs so
    each phase transition stays a single grep-able line.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the adapter.

        Args:
            logger: Target logger, defaults to the 'galera_init' logger.
        """
        self._logger = logger or logging.getLogger("galera_init")

    def info(self, message: str, **fields: Any) -> None:
        self._logger.info(format_fields(message, fields))

    def warning(self, message: str, **fields: Any) -> None:
        self._logger.warning(format_fields(message, fields))


# Runtime protocol check
assert isinstance(StdlibLoggingAdapter(), LoggingPort)

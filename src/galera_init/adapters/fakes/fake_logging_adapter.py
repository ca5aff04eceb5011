"""Fake logging adapter for testing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LogCall:
    """One captured log call."""

    level: str
    message: str
    fields: dict[str, Any] = field(default_factory=dict)


class FakeLoggingAdapter:
    """Fake logging adapter that captures log messages for assertion.

    Implements LoggingPort protocol by storing calls in a list
    for later retrieval and assertion in tests.

    Example:
        logger = FakeLoggingAdapter()
        coordinator.run()
        assert "Configured Galera" in logger.messages
    """

    def __init__(self) -> None:
        """Initialize with an empty call list."""
        self._calls: list[LogCall] = []

    def info(self, message: str, **fields: Any) -> None:
        self._calls.append(LogCall(level="info", message=message, fields=fields))

    def warning(self, message: str, **fields: Any) -> None:
        self._calls.append(LogCall(level="warning", message=message, fields=fields))

    @property
    def calls(self) -> list[LogCall]:
        """Get a copy of captured calls."""
        return list(self._calls)

    @property
    def messages(self) -> list[str]:
        """Get the captured messages of every level."""
        return [call.message for call in self._calls]

    @property
    def warnings(self) -> list[str]:
        """Get the captured warning messages."""
        return [call.message for call in self._calls if call.level == "warning"]

    def clear(self) -> None:
        """Clear all captured calls."""
        self._calls.clear()

"""Logging setup for the galera-init command."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import TextIO

LOGGER_NAME = "galera_init"

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

TIME_FORMATS = ("epoch", "millis", "nano", "iso8601", "rfc3339", "rfc3339nano")

_PRODUCTION_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
_DEVELOPMENT_FORMAT = (
    "%(asctime)s | %(levelname)-7s | %(name)s:%(lineno)d | %(message)s"
)


class TimeFormatter(logging.Formatter):
    """Formatter rendering ``asctime`` in one of TIME_FORMATS.

    epoch, millis and nano are numeric offsets from the Unix epoch in
    seconds, milliseconds and nanoseconds. The others are local time with
    the UTC offset.
    """

    def __init__(self, fmt: str, time_format: str = "epoch") -> None:
        if time_format not in TIME_FORMATS:
            raise ValueError(
                f"Unknown log time format {time_format!r}, "
                f"expected one of: {', '.join(TIME_FORMATS)}"
            )
        super().__init__(fmt)
        self.time_format = time_format

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        if self.time_format == "epoch":
            return f"{record.created:.6f}"
        if self.time_format == "millis":
            return f"{record.created * 1e3:.3f}"
        if self.time_format == "nano":
            return str(int(record.created * 1e9))

        moment = datetime.fromtimestamp(record.created).astimezone()
        if self.time_format == "iso8601":
            return moment.strftime("%Y-%m-%dT%H:%M:%S.") + (
                f"{moment.microsecond // 1000:03d}" + moment.strftime("%z")
            )
        if self.time_format == "rfc3339":
            return moment.isoformat(timespec="seconds")
        return moment.isoformat(timespec="microseconds")


def init_logging(
    *,
    level: str = "info",
    development: bool = False,
    time_format: str = "epoch",
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the 'galera_init' logger with a single console handler.

    Development mode forces DEBUG and adds source line numbers. Calling this
    again replaces the previous handler.

    Args:
        level: One of debug, info, warning, error.
        development: Enable development logs.
        time_format: How timestamps are written, one of TIME_FORMATS.
        stream: Output stream, defaults to stderr.

    Returns:
        The configured logger.

    Raises:
        ValueError: If level or time_format is not a known name.
    """
    try:
        log_level = LOG_LEVELS[level.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown log level {level!r}, expected one of: {', '.join(LOG_LEVELS)}"
        ) from None
    if development:
        log_level = logging.DEBUG
    formatter = TimeFormatter(
        _DEVELOPMENT_FORMAT if development else _PRODUCTION_FORMAT,
        time_format=time_format,
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger

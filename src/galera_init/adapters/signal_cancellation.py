"""Signal-driven cancellation for the readiness wait."""

from __future__ import annotations

import logging
import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGTERM", "SIGHUP", "SIGQUIT")
    if hasattr(signal, name)
)


@contextmanager
def signal_cancellation(
    signals: tuple[signal.Signals, ...] = SHUTDOWN_SIGNALS,
) -> Iterator[threading.Event]:
    """Yield an event that is set when a shutdown signal arrives.

    Handlers are installed for the duration of the block and the previous
    handlers restored afterwards. Must be entered from the main thread.
    """
    event = threading.Event()

    def _handler(signum: int, frame: object) -> None:
        logger.info("Received signal %s, cancelling", signal.Signals(signum).name)
        event.set()

    previous = {sig: signal.signal(sig, _handler) for sig in signals}
    try:
        yield event
    finally:
        for sig, handler in previous.items():
            # None means the handler was not installed from Python
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)

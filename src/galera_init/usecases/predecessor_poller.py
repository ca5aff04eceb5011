"""Predecessor readiness poller use case."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from galera_init.adapters.ports import LoggingPort, ReadinessOraclePort
from galera_init.domain.exceptions import (
    ConfigurationError,
    PollCancelledError,
    TransientOracleError,
)
from galera_init.domain.identity import NodeIdentity


class _NullLogger:
    def info(self, message: str, **fields: object) -> None:
        pass

    def warning(self, message: str, **fields: object) -> None:
        pass


class PredecessorReadinessPoller:
    """Blocks until the predecessor node reports ready.

    Asks a ReadinessOraclePort about the predecessor immediately and then
    once per interval. The wait between checks happens on the cancellation
    event, so setting the event wakes the poller at once.

    Outcomes:
        - oracle returns True: wait_until_ready() returns
        - oracle returns False or raises TransientOracleError: poll again
        - oracle raises any other ReadinessOracleError: propagated
        - event set or deadline passed: PollCancelledError

    Thread safety:
        A poller is used by one thread; the cancellation event may be set
        from any thread or a signal handler.
    """

    def __init__(
        self,
        oracle: ReadinessOraclePort,
        interval: float = 1.0,
        timeout: float | None = None,
        logger: LoggingPort | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the poller.

        Args:
            oracle: Source of truth for the predecessor's readiness.
            interval: Seconds between checks. Must be positive.
            timeout: Seconds before giving up, None to wait until cancelled.
            logger: Logging port for retry warnings.
            clock: Monotonic clock, injectable for tests.

        Raises:
            ConfigurationError: If interval or timeout is not positive.
        """
        if interval <= 0:
            raise ConfigurationError("poll interval must be positive")
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("poll timeout must be positive when set")
        self._oracle = oracle
        self._interval = interval
        self._timeout = timeout
        self._logger: LoggingPort = logger or _NullLogger()
        self._clock = clock

    @property
    def interval(self) -> float:
        """Seconds between checks."""
        return self._interval

    @property
    def timeout(self) -> float | None:
        """Seconds before giving up, or None."""
        return self._timeout

    def wait_until_ready(
        self,
        predecessor: NodeIdentity,
        cancel_event: threading.Event | None = None,
    ) -> int:
        """Poll until the predecessor is ready.

        Args:
            predecessor: Identity of the node to wait for.
            cancel_event: Set to cancel the wait.

        Returns:
            Number of readiness checks performed, including the successful one.

        Raises:
            PollCancelledError: If cancelled or the timeout elapsed first.
            ReadinessOracleError: If the oracle reports a non-retryable error.
        """
        event = cancel_event if cancel_event is not None else threading.Event()
        deadline = None if self._timeout is None else self._clock() + self._timeout
        attempts = 0

        while True:
            if event.is_set():
                raise PollCancelledError("signal", attempts)
            if deadline is not None and self._clock() >= deadline:
                raise PollCancelledError("deadline", attempts)

            attempts += 1
            if self._check(predecessor, attempts):
                return attempts

            wait = self._interval
            if deadline is not None:
                wait = max(0.0, min(wait, deadline - self._clock()))
            if event.wait(wait):
                raise PollCancelledError("signal", attempts)

    def _check(self, predecessor: NodeIdentity, attempt: int) -> bool:
        """Run one oracle check, mapping transient failures to not ready."""
        try:
            return bool(self._oracle.check(predecessor))
        except TransientOracleError as e:
            self._logger.warning(
                "Readiness check failed, retrying",
                pod=predecessor.name,
                attempt=attempt,
                error=str(e),
            )
            return False

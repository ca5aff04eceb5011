"""Fake readiness oracle for testing."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from galera_init.domain.identity import NodeIdentity


class FakeReadinessOracle:
    """Fake implementation of ReadinessOraclePort driven by a script.

    Each check consumes the next scripted response: a bool is returned,
    an exception instance is raised. Once the script is exhausted the last
    response repeats (or False when the script was empty).

    Example:
        >>> oracle = FakeReadinessOracle([False, False, True])
        >>> [oracle.check(node) for _ in range(3)]
        [False, False, True]

    Attributes:
        cancel_on_check: When set with ``cancel_event``, the event is set
            during that (1-based) check, simulating a shutdown signal that
            arrives mid-poll.
    """

    def __init__(
        self,
        responses: Iterable[bool | Exception] = (),
        cancel_event: threading.Event | None = None,
        cancel_on_check: int | None = None,
    ) -> None:
        """Initialize with scripted responses.

        Args:
            responses: Responses returned (bool) or raised (Exception) in order.
            cancel_event: Event to set on ``cancel_on_check``.
            cancel_on_check: 1-based check number that sets ``cancel_event``.
        """
        self._responses = list(responses)
        self._cancel_event = cancel_event
        self._cancel_on_check = cancel_on_check
        self._checked: list[NodeIdentity] = []

    def check(self, node: NodeIdentity) -> bool:
        """Return or raise the next scripted response."""
        self._checked.append(node)
        if (
            self._cancel_event is not None
            and self._cancel_on_check == len(self._checked)
        ):
            self._cancel_event.set()

        index = min(len(self._checked), len(self._responses)) - 1
        response: bool | Exception = self._responses[index] if index >= 0 else False
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def checked(self) -> list[NodeIdentity]:
        """Get the nodes checked, in order."""
        return list(self._checked)

    @property
    def check_count(self) -> int:
        """Number of checks performed."""
        return len(self._checked)

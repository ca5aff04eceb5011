"""Domain exceptions.

Exception hierarchy:
- GaleraInitError: Base for every failure raised by galera-init.
  - ConfigurationError: Invalid process configuration or topology.
    - FeatureDisabledError, UnsupportedSSTMethodError, InvalidTopologyError
  - DescriptorLookupError: The topology descriptor could not be fetched.
    - DescriptorDecodeError
  - MalformedNameError, NoPredecessorError: Violations of the pod naming
    and ordering conventions of the replica group.
  - StateReadError: Local state directory could not be read.
  - ConfigWriteError: A config or marker file could not be written.
  - ReadinessOracleError: Non-retryable readiness query failure.
    - TransientOracleError: Retried by the poller on the next tick.
  - PollCancelledError: The readiness wait was cancelled.
"""

from __future__ import annotations


class GaleraInitError(Exception):
    """Base exception for all galera-init failures.

    Every fatal category derives from this class so the command-line entry
    point can map it to a non-zero exit code with a single handler.
    """

    pass


class ConfigurationError(GaleraInitError):
    """Raised when process configuration or the cluster topology is invalid.

    Covers missing required environment values, invalid settings, clustering
    disabled on the descriptor and unsupported SST methods.
    """

    pass


class FeatureDisabledError(ConfigurationError):
    """Raised when Galera is not enabled on the topology descriptor."""

    pass


class UnsupportedSSTMethodError(ConfigurationError):
    """Raised when the SST method has no engine keyword."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Unsupported SST method: {method!r}")
        self.method = method


class InvalidTopologyError(ConfigurationError):
    """Raised when the topology cannot produce a cluster address list."""

    pass


class DescriptorLookupError(GaleraInitError):
    """Raised when the topology descriptor cannot be fetched.

    Attributes:
        name: Name of the requested resource (optional).
        namespace: Namespace of the requested resource (optional).
        original_error: The underlying exception (optional).
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        namespace: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.name = name
        self.namespace = namespace
        self.original_error = original_error


class DescriptorDecodeError(DescriptorLookupError):
    """Raised when a fetched resource does not decode into a descriptor."""

    pass


class MalformedNameError(GaleraInitError):
    """Raised when a pod name carries no valid trailing ordinal."""

    pass


class NoPredecessorError(GaleraInitError):
    """Raised when a predecessor is requested for the first node."""

    pass


class StateReadError(GaleraInitError):
    """Raised on genuine I/O failure while reading the state directory.

    An absent state directory is not an error; it means the node is fresh.
    """

    pass


class ConfigWriteError(GaleraInitError):
    """Raised when a config or marker file cannot be written."""

    pass


class ReadinessOracleError(GaleraInitError):
    """Raised when a readiness query fails in a way retrying cannot fix."""

    pass


class TransientOracleError(ReadinessOracleError):
    """Raised when a readiness query fails transiently.

    The poller treats this as "not ready yet" and tries again on the next
    tick; it is never surfaced while the poll is still running.
    """

    pass


class PollCancelledError(GaleraInitError):
    """Raised when waiting for the predecessor is cancelled.

    Attributes:
        reason: "signal" for an external shutdown, "deadline" when the
            configured poll timeout elapsed.
        attempts: Number of readiness checks performed before cancellation.
    """

    def __init__(self, reason: str, attempts: int = 0) -> None:
        super().__init__(
            f"Readiness wait cancelled ({reason}) after {attempts} check(s)"
        )
        self.reason = reason
        self.attempts = attempts

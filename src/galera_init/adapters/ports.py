"""Port interfaces for the galera-init core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from galera_init.domain.identity import NodeIdentity


@runtime_checkable
class TopologyLookupPort(Protocol):
    """Port interface for fetching the cluster's topology descriptor.

    Implementations return the raw ``MariaDB`` resource; decoding it into a
    TopologyDescriptor is a domain concern.

    Contract:
        - fetch(name, namespace) returns the resource as a mapping
        - Raises DescriptorLookupError if the resource cannot be fetched
          or is not a mapping
        - Read-only, never retried by the caller
    """

    def fetch(self, name: str, namespace: str) -> Mapping[str, Any]:
        """Fetch the MariaDB resource.

        Args:
            name: Name of the MariaDB resource.
            namespace: Namespace of the MariaDB resource.

        Returns:
            The resource with camelCase keys ('metadata', 'spec', ...).

        Raises:
            DescriptorLookupError: If the resource cannot be fetched or decoded.
        """
        ...


@runtime_checkable
class ReadinessOraclePort(Protocol):
    """Port interface for asking whether a node can be joined against.

    Implementations query an external source of truth (the orchestration
    platform or the node's database) about one node.

    Contract:
        - check(node) returns True if the node is ready, False if not yet
        - Raises TransientOracleError for failures worth retrying
        - Raises ReadinessOracleError for failures retrying cannot fix
        - Opens and releases any connection within the call
    """

    def check(self, node: NodeIdentity) -> bool:
        """Check whether the node is ready.

        Args:
            node: Identity of the node to check.

        Returns:
            True if the node is ready, False otherwise.

        Raises:
            TransientOracleError: On a retryable query failure.
            ReadinessOracleError: On a non-retryable query failure.
        """
        ...


@runtime_checkable
class ConfigWriterPort(Protocol):
    """Port interface for persisting config and marker files.

    Contract:
        - write(file_name, data) stores data under the writer's directory
        - The write is atomic: readers see the old file or the new one
        - Returns the path written
        - Raises ConfigWriteError on failure
    """

    def write(self, file_name: str, data: bytes) -> Path:
        """Write a file.

        Args:
            file_name: Name of the file inside the config directory.
            data: Exact bytes to write.

        Returns:
            Path of the written file.

        Raises:
            ConfigWriteError: If the file cannot be written.
        """
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for structured logging.

    Implementations handle log message delivery to configured logging backends.
    Abstracts the logging mechanism from use cases that report phase
    transitions and retries.

    Contract:
        - info(message, **fields) logs an info-level message
        - warning(message, **fields) logs a warning-level message
        - Fields are key/value context rendered by the implementation
        - Fire-and-forget (no return value, no exceptions propagated)
    """

    def info(self, message: str, **fields: Any) -> None:
        """Log an info message.

        Args:
            message: The message to log.
            **fields: Structured context.
        """
        ...

    def warning(self, message: str, **fields: Any) -> None:
        """Log a warning message.

        Args:
            message: The warning message to log.
            **fields: Structured context.
        """
        ...

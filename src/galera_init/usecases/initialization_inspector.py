"""Initialization-state inspector use case."""

from __future__ import annotations

from pathlib import Path

from galera_init.domain.bootstrap import DetectionPolicy, InitializationState
from galera_init.domain.exceptions import StateReadError

GRASTATE_FILE_NAME = "grastate.dat"


class InitializationInspector:
    """Classifies the local MariaDB state directory as fresh or initialized.

    Two policies are supported:
        - DetectionPolicy.ANY_ENTRY: a non-empty directory is initialized.
        - DetectionPolicy.MARKER_FILE: a non-empty ``grastate.dat`` is required.

    An absent state directory is always FRESH. Only genuine I/O failures
    (permissions, a file where the directory should be, broken mounts)
    raise StateReadError.
    """

    def __init__(self, policy: DetectionPolicy = DetectionPolicy.MARKER_FILE) -> None:
        """Initialize the inspector.

        Args:
            policy: Detection policy to apply.
        """
        self.policy = policy

    def inspect(self, state_dir: Path) -> InitializationState:
        """Inspect the state directory.

        Args:
            state_dir: MariaDB data directory.

        Returns:
            InitializationState.ALREADY_INITIALIZED or InitializationState.FRESH.

        Raises:
            StateReadError: If the directory cannot be read.
        """
        try:
            entries = list(state_dir.iterdir())
        except FileNotFoundError:
            return InitializationState.FRESH
        except OSError as e:
            raise StateReadError(
                f"Error reading state directory {state_dir}: {e}"
            ) from e

        if not entries:
            return InitializationState.FRESH

        if self.policy is DetectionPolicy.ANY_ENTRY:
            return InitializationState.ALREADY_INITIALIZED

        return self._inspect_marker(state_dir / GRASTATE_FILE_NAME)

    def _inspect_marker(self, marker: Path) -> InitializationState:
        """Classify by the size of the cluster-state marker file."""
        try:
            stat = marker.stat()
        except FileNotFoundError:
            return InitializationState.FRESH
        except OSError as e:
            raise StateReadError(f"Error reading {marker}: {e}") from e

        if marker.is_file() and stat.st_size > 0:
            return InitializationState.ALREADY_INITIALIZED
        return InitializationState.FRESH

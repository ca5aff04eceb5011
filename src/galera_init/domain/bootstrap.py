"""Bootstrap state machine value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from galera_init.domain.identity import NodeIdentity


class InitializationState(Enum):
    """Initialization status of the node's local state directory.

    Attributes:
        FRESH: No persisted cluster state, the node has never joined.
        ALREADY_INITIALIZED: Persisted cluster state exists.
    """

    FRESH = "fresh"
    ALREADY_INITIALIZED = "already_initialized"


class DetectionPolicy(Enum):
    """How the local state directory is classified.

    Attributes:
        ANY_ENTRY: Any entry in the state directory means initialized.
        MARKER_FILE: Only a non-empty cluster-state marker file
            (``grastate.dat``) means initialized.
    """

    ANY_ENTRY = "any-entry"
    MARKER_FILE = "marker-file"


class BootstrapDecision(Enum):
    """Outcome of the bootstrap decision engine."""

    BOOTSTRAP = "bootstrap"
    JOIN = "join"
    SKIP_ALREADY_INITIALIZED = "skip_already_initialized"


@dataclass(frozen=True)
class InitOutcome:
    """Result of one successful run of the init coordinator.

    Attributes:
        decision: The bootstrap decision that was taken.
        identity: Identity of the node the run was for.
        config_path: Where the cluster config file was written.
        bootstrap_path: Where the bootstrap marker was written, only set
            for the BOOTSTRAP decision.
        predecessor: The node that was waited for, only set for JOIN.
        poll_attempts: Number of readiness checks performed, 0 unless JOIN.
    """

    decision: BootstrapDecision
    identity: NodeIdentity
    config_path: Path
    bootstrap_path: Path | None = None
    predecessor: NodeIdentity | None = None
    poll_attempts: int = 0

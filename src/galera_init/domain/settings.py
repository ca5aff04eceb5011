"""Process settings domain entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from galera_init.domain.bootstrap import DetectionPolicy
from galera_init.domain.exceptions import ConfigurationError
from galera_init.domain.topology import DEFAULT_CLUSTER_DOMAIN

DEFAULT_CONFIG_DIR = Path("/etc/mysql/mariadb.conf.d")
DEFAULT_STATE_DIR = Path("/var/lib/mysql")
DEFAULT_MARIADB_PORT = 3306


@dataclass(frozen=True)
class InitSettings:
    """Immutable configuration for one run of galera-init.

    Built once at startup from command-line options and the process
    environment, then passed explicitly to every component. No component
    reads process state on its own.

    Attributes:
        pod_name: Name of the pod this run is for (POD_NAME).
        root_password: MariaDB root password (MARIADB_ROOT_PASSWORD).
        mariadb_name: Name of the MariaDB resource to initialize.
        mariadb_namespace: Namespace of the MariaDB resource.
        config_dir: Directory that receives the config files.
        state_dir: MariaDB data directory inspected for prior state.
        oracle: Readiness oracle used for joiners, "pod" asks the
            Kubernetes API, "mariadb" probes the predecessor database.
        detection_policy: How the state directory is classified.
        poll_interval: Seconds between readiness checks.
        poll_timeout: Seconds to wait for the predecessor, None for no limit.
        cluster_domain: DNS suffix used for pod addresses.
        mariadb_port: Port probed by the "mariadb" oracle.
        connect_timeout: Connect timeout in seconds for the "mariadb" oracle.
    """

    pod_name: str
    root_password: str = field(repr=False)
    mariadb_name: str
    mariadb_namespace: str
    config_dir: Path = DEFAULT_CONFIG_DIR
    state_dir: Path = DEFAULT_STATE_DIR
    oracle: Literal["pod", "mariadb"] = "pod"
    detection_policy: DetectionPolicy = DetectionPolicy.MARKER_FILE
    poll_interval: float = 1.0
    poll_timeout: float | None = None
    cluster_domain: str = DEFAULT_CLUSTER_DOMAIN
    mariadb_port: int = DEFAULT_MARIADB_PORT
    connect_timeout: float = 5.0

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        self._validate_required()
        self._validate_oracle()
        self._validate_timing()

    def _validate_required(self) -> None:
        """Validate that required string values are present."""
        for name in ("pod_name", "root_password", "mariadb_name", "mariadb_namespace"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ConfigurationError(f"{name} cannot be empty")

    def _validate_oracle(self) -> None:
        """Validate oracle is one of the supported strategies."""
        if self.oracle not in ("pod", "mariadb"):
            raise ConfigurationError(
                f"oracle must be 'pod' or 'mariadb', got: {self.oracle!r}"
            )

    def _validate_timing(self) -> None:
        """Validate poll interval, timeout and connect timeout."""
        if self.poll_interval <= 0:
            raise ConfigurationError("poll_interval must be positive")
        if self.poll_timeout is not None and self.poll_timeout <= 0:
            raise ConfigurationError("poll_timeout must be positive when set")
        if self.connect_timeout <= 0:
            raise ConfigurationError("connect_timeout must be positive")
        if not 0 < self.mariadb_port < 65536:
            raise ConfigurationError(
                f"mariadb_port must be a valid TCP port, got: {self.mariadb_port}"
            )

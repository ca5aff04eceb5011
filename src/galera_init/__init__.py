"""galera-init: ordered bootstrap for MariaDB Galera nodes on Kubernetes."""

__version__ = "0.1.0"

from galera_init.domain.bootstrap import (
    BootstrapDecision,
    DetectionPolicy,
    InitializationState,
    InitOutcome,
)
from galera_init.domain.exceptions import GaleraInitError
from galera_init.domain.settings import InitSettings
from galera_init.domain.topology import SSTMethod, TopologyDescriptor
from galera_init.usecases.config_renderer import ConfigRenderer
from galera_init.usecases.init_coordinator import InitCoordinator

__all__ = [
    "BootstrapDecision",
    "ConfigRenderer",
    "DetectionPolicy",
    "GaleraInitError",
    "InitCoordinator",
    "InitializationState",
    "InitOutcome",
    "InitSettings",
    "SSTMethod",
    "TopologyDescriptor",
]

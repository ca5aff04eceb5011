"""Domain layer: value objects and exceptions with no I/O."""

from galera_init.domain.bootstrap import (
    BootstrapDecision,
    DetectionPolicy,
    InitializationState,
    InitOutcome,
)
from galera_init.domain.identity import ClusterAddressSet, NodeIdentity
from galera_init.domain.settings import InitSettings
from galera_init.domain.topology import SSTMethod, TopologyDescriptor

__all__ = [
    "BootstrapDecision",
    "ClusterAddressSet",
    "DetectionPolicy",
    "InitializationState",
    "InitOutcome",
    "InitSettings",
    "NodeIdentity",
    "SSTMethod",
    "TopologyDescriptor",
]

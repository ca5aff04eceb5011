"""Use cases: the bootstrap protocol, free of framework dependencies."""

from galera_init.usecases.bootstrap_decider import BootstrapDecisionEngine
from galera_init.usecases.cluster_address_builder import ClusterAddressBuilder
from galera_init.usecases.config_renderer import ConfigRenderer
from galera_init.usecases.init_coordinator import InitCoordinator
from galera_init.usecases.initialization_inspector import InitializationInspector
from galera_init.usecases.ordinal_resolver import OrdinalResolver
from galera_init.usecases.predecessor_poller import PredecessorReadinessPoller

__all__ = [
    "BootstrapDecisionEngine",
    "ClusterAddressBuilder",
    "ConfigRenderer",
    "InitCoordinator",
    "InitializationInspector",
    "OrdinalResolver",
    "PredecessorReadinessPoller",
]

"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from galera_init.adapters.fakes.fake_config_writer import FakeConfigWriter
from galera_init.adapters.fakes.fake_logging_adapter import FakeLoggingAdapter, LogCall
from galera_init.adapters.fakes.fake_readiness_oracle import FakeReadinessOracle
from galera_init.adapters.fakes.fake_topology_lookup import (
    FakeTopologyLookup,
    mariadb_resource,
)

__all__ = [
    "FakeConfigWriter",
    "FakeLoggingAdapter",
    "FakeReadinessOracle",
    "FakeTopologyLookup",
    "LogCall",
    "mariadb_resource",
]

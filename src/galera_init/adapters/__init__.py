"""Interface adapters: ports and the adapters that need no third-party clients.

Kubernetes and PyMySQL adapters live in their own modules and are imported
explicitly so the use cases can be used without those clients installed.
"""

from galera_init.adapters.ports import (
    ConfigWriterPort,
    LoggingPort,
    ReadinessOraclePort,
    TopologyLookupPort,
)
from galera_init.adapters.environment import Environment, read_environment
from galera_init.adapters.filesystem_config_writer import FilesystemConfigWriter
from galera_init.adapters.logging_adapter import StdlibLoggingAdapter

__all__ = [
    "ConfigWriterPort",
    "Environment",
    "FilesystemConfigWriter",
    "LoggingPort",
    "ReadinessOraclePort",
    "StdlibLoggingAdapter",
    "TopologyLookupPort",
    "read_environment",
]

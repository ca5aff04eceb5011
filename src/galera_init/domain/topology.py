"""Topology descriptor domain entity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from galera_init.domain.exceptions import (
    DescriptorDecodeError,
    UnsupportedSSTMethodError,
)

DEFAULT_CLUSTER_DOMAIN = "cluster.local"
DEFAULT_SST_METHOD = "mariabackup"
DEFAULT_REPLICA_THREADS = 1


class SSTMethod(Enum):
    """State Snapshot Transfer methods understood by the Galera engine.

    The enum value is the keyword written to ``wsrep_sst_method``.
    """

    RSYNC = "rsync"
    MARIABACKUP = "mariabackup"
    MYSQLDUMP = "mysqldump"

    @classmethod
    def parse(cls, value: str) -> SSTMethod:
        """Map a descriptor SST value to a known method.

        Matching is case-insensitive and ignores surrounding whitespace.

        Raises:
            UnsupportedSSTMethodError: If the value is not a known method.
        """
        normalized = value.strip().lower() if isinstance(value, str) else value
        for method in cls:
            if method.value == normalized:
                return method
        raise UnsupportedSSTMethodError(value)

    @property
    def requires_auth(self) -> bool:
        """Whether the donor needs database credentials for this method."""
        return self in (SSTMethod.MARIABACKUP, SSTMethod.MYSQLDUMP)


@dataclass(frozen=True)
class TopologyDescriptor:
    """Declared topology of one Galera cluster.

    Passive value object built once per run from the ``MariaDB`` resource
    plus the root credential taken from the environment. Validation of the
    fields that matter for rendering (replica count, clustering enabled,
    SST method) is left to the use cases so that each failure surfaces with
    its own exception type.

    Attributes:
        group_name: Name of the replica group (the MariaDB resource name).
        namespace: Namespace the group runs in.
        replica_count: Declared number of replicas.
        galera_enabled: Whether Galera clustering is turned on.
        sst_method: Raw SST method value, see ``SSTMethod.parse``.
        replica_threads: Number of replication apply threads.
        root_credential: Root password, hidden from repr.
        cluster_domain: DNS suffix of the orchestration platform.
    """

    group_name: str
    namespace: str
    replica_count: int
    galera_enabled: bool = True
    sst_method: str = DEFAULT_SST_METHOD
    replica_threads: int = DEFAULT_REPLICA_THREADS
    root_credential: str = field(default="", repr=False)
    cluster_domain: str = DEFAULT_CLUSTER_DOMAIN

    @property
    def internal_service(self) -> str:
        """Name of the headless service that gives each pod a DNS record."""
        return f"{self.group_name}-internal"

    @property
    def service_fqdn(self) -> str:
        """Fully qualified domain of the internal service."""
        return (
            f"{self.internal_service}.{self.namespace}.svc.{self.cluster_domain}"
        )

    @classmethod
    def from_resource(
        cls,
        resource: Mapping[str, Any],
        root_credential: str,
        cluster_domain: str = DEFAULT_CLUSTER_DOMAIN,
        default_namespace: str | None = None,
    ) -> TopologyDescriptor:
        """Decode a ``MariaDB`` custom resource into a descriptor.

        Args:
            resource: The resource as returned by the API (camelCase keys).
            root_credential: Root password sourced from the environment.
            cluster_domain: DNS suffix used for pod addresses.
            default_namespace: Namespace to use when the resource metadata
                carries none (e.g. a resource loaded from a file).

        Returns:
            TopologyDescriptor for the resource.

        Raises:
            DescriptorDecodeError: If metadata or spec are missing or malformed.
        """
        if not isinstance(resource, Mapping):
            raise DescriptorDecodeError("MariaDB resource must be a mapping")

        metadata = resource.get("metadata")
        spec = resource.get("spec")
        if not isinstance(metadata, Mapping) or not isinstance(spec, Mapping):
            raise DescriptorDecodeError(
                "MariaDB resource must contain 'metadata' and 'spec' mappings"
            )

        name = metadata.get("name")
        if not isinstance(name, str) or not name.strip():
            raise DescriptorDecodeError("MariaDB resource has no metadata.name")

        namespace = metadata.get("namespace") or default_namespace
        if not isinstance(namespace, str) or not namespace.strip():
            raise DescriptorDecodeError(
                f"MariaDB '{name}' has no namespace", name=name
            )

        replicas = spec.get("replicas", 0)
        if isinstance(replicas, bool) or not isinstance(replicas, int):
            raise DescriptorDecodeError(
                f"spec.replicas must be an integer, got: {replicas!r}",
                name=name,
                namespace=namespace,
            )

        galera = spec.get("galera") or {}
        if not isinstance(galera, Mapping):
            raise DescriptorDecodeError(
                "spec.galera must be a mapping", name=name, namespace=namespace
            )

        threads = galera.get("replicaThreads", DEFAULT_REPLICA_THREADS)
        if isinstance(threads, bool) or not isinstance(threads, int):
            raise DescriptorDecodeError(
                f"spec.galera.replicaThreads must be an integer, got: {threads!r}",
                name=name,
                namespace=namespace,
            )

        return cls(
            group_name=name,
            namespace=namespace,
            replica_count=replicas,
            galera_enabled=bool(galera.get("enabled", False)),
            sst_method=str(galera.get("sst") or DEFAULT_SST_METHOD),
            replica_threads=threads,
            root_credential=root_credential,
            cluster_domain=cluster_domain,
        )

"""Fake topology lookup for testing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from galera_init.domain.exceptions import DescriptorLookupError


def mariadb_resource(
    name: str = "mariadb-galera",
    namespace: str = "default",
    replicas: int = 3,
    enabled: bool = True,
    sst: str = "mariabackup",
    replica_threads: int = 1,
) -> dict[str, Any]:
    """Build a MariaDB resource mapping as returned by the Kubernetes API."""
    return {
        "apiVersion": "mariadb.mmontes.io/v1alpha1",
        "kind": "MariaDB",
        "metadata": {"name": name, "namespace": namespace},
        "spec": {
            "replicas": replicas,
            "galera": {
                "enabled": enabled,
                "sst": sst,
                "replicaThreads": replica_threads,
            },
        },
    }


class FakeTopologyLookup:
    """Fake implementation of TopologyLookupPort backed by a dict.

    Example:
        >>> lookup = FakeTopologyLookup()
        >>> lookup.add(mariadb_resource(name="db", namespace="prod"))
        >>> lookup.fetch("db", "prod")["spec"]["replicas"]
        3
    """

    def __init__(self, resources: Iterable[Mapping[str, Any]] = ()) -> None:
        """Initialize with optional resources.

        Args:
            resources: Resources to serve, keyed by their metadata.
        """
        self._resources: dict[tuple[str, str], Mapping[str, Any]] = {}
        self._requests: list[tuple[str, str]] = []
        for resource in resources:
            self.add(resource)

    def add(self, resource: Mapping[str, Any]) -> None:
        """Serve ``resource`` under its metadata name and namespace."""
        metadata = resource["metadata"]
        self._resources[(metadata["name"], metadata["namespace"])] = resource

    def fetch(self, name: str, namespace: str) -> Mapping[str, Any]:
        """Return the stored resource.

        Raises:
            DescriptorLookupError: If no such resource was added.
        """
        self._requests.append((name, namespace))
        try:
            return self._resources[(name, namespace)]
        except KeyError:
            raise DescriptorLookupError(
                f"error requesting '{name}' MariaDB in namespace '{namespace}': "
                "404 Not Found",
                name=name,
                namespace=namespace,
            ) from None

    @property
    def requests(self) -> list[tuple[str, str]]:
        """Get the (name, namespace) pairs requested, in order."""
        return list(self._requests)

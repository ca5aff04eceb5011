"""Kubernetes API implementation of TopologyLookupPort."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kubernetes import client
from kubernetes.client.rest import ApiException

from galera_init.adapters.kubernetes_client import REQUEST_TIMEOUT
from galera_init.adapters.ports import TopologyLookupPort
from galera_init.domain.exceptions import DescriptorDecodeError, DescriptorLookupError

MARIADB_GROUP = "mariadb.mmontes.io"
MARIADB_VERSION = "v1alpha1"
MARIADB_PLURAL = "mariadbs"


class KubernetesTopologyLookup:
    """Fetches the MariaDB custom resource from the Kubernetes API.

    Uses CustomObjectsApi.get_namespaced_custom_object(). Kubernetes
    configuration must already be loaded (see load_kubernetes_config).
    """

    def __init__(
        self,
        api: client.CustomObjectsApi | None = None,
        request_timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the lookup.

        Args:
            api: CustomObjectsApi for dependency injection (testing).
                If not provided, one is created on first fetch.
            request_timeout: Seconds allowed for the API call.
        """
        self._api = api
        self._request_timeout = request_timeout

    def fetch(self, name: str, namespace: str) -> Mapping[str, Any]:
        """Fetch the MariaDB resource.

        Raises:
            DescriptorLookupError: If the API request fails.
            DescriptorDecodeError: If the response is not a mapping.
        """
        api = self._api if self._api is not None else client.CustomObjectsApi()
        try:
            resource = api.get_namespaced_custom_object(
                group=MARIADB_GROUP,
                version=MARIADB_VERSION,
                namespace=namespace,
                plural=MARIADB_PLURAL,
                name=name,
                _request_timeout=self._request_timeout,
            )
        except ApiException as e:
            raise DescriptorLookupError(
                f"error requesting '{name}' MariaDB in namespace '{namespace}': "
                f"{e.status} {e.reason}",
                name=name,
                namespace=namespace,
                original_error=e,
            ) from e

        if not isinstance(resource, Mapping):
            raise DescriptorDecodeError(
                f"error decoding MariaDB '{name}': expected an object, "
                f"got {type(resource).__name__}",
                name=name,
                namespace=namespace,
            )
        return resource


# Runtime protocol check
assert isinstance(KubernetesTopologyLookup(), TopologyLookupPort)

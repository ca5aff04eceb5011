"""Kubernetes pod status implementation of ReadinessOraclePort."""

from __future__ import annotations

import logging

from kubernetes import client
from kubernetes.client.rest import ApiException
from urllib3.exceptions import HTTPError

from galera_init.adapters.kubernetes_client import REQUEST_TIMEOUT
from galera_init.adapters.ports import ReadinessOraclePort
from galera_init.domain.exceptions import ReadinessOracleError, TransientOracleError
from galera_init.domain.identity import NodeIdentity

logger = logging.getLogger(__name__)

# Statuses that cannot be fixed by asking again
_FATAL_STATUSES = frozenset({400, 401, 403})


class KubernetesPodReadinessOracle:
    """Asks the Kubernetes API whether a pod is Ready.

    A pod is ready when its ``Ready`` condition has status ``"True"``, which
    the kubelet only sets once the MariaDB readiness probe passes. Missing
    pods, throttling, server errors and connection failures are transient:
    during a rollout the predecessor may not exist yet.
    """

    def __init__(
        self,
        namespace: str,
        api: client.CoreV1Api | None = None,
        request_timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the oracle.

        Args:
            namespace: Namespace of the replica group.
            api: CoreV1Api for dependency injection (testing).
                If not provided, one is created per check.
            request_timeout: Seconds allowed for each API call.
        """
        self._namespace = namespace
        self._api = api
        self._request_timeout = request_timeout

    def check(self, node: NodeIdentity) -> bool:
        """Check the Ready condition of the node's pod.

        Raises:
            TransientOracleError: If the pod cannot be read right now.
            ReadinessOracleError: If access is denied or the request is invalid.
        """
        api = self._api if self._api is not None else client.CoreV1Api()
        try:
            pod = api.read_namespaced_pod(
                name=node.name,
                namespace=self._namespace,
                _request_timeout=self._request_timeout,
            )
        except ApiException as e:
            if e.status in _FATAL_STATUSES:
                raise ReadinessOracleError(
                    f"error getting Pod '{node.name}': {e.status} {e.reason}"
                ) from e
            raise TransientOracleError(
                f"error getting Pod '{node.name}': {e.status} {e.reason}"
            ) from e
        except HTTPError as e:
            raise TransientOracleError(
                f"error getting Pod '{node.name}': {e}"
            ) from e

        conditions = (pod.status.conditions if pod.status else None) or []
        for condition in conditions:
            if condition.type == "Ready":
                ready = condition.status == "True"
                logger.debug("Pod %s Ready=%s", node.name, condition.status)
                return ready
        return False


# Runtime protocol check
assert isinstance(KubernetesPodReadinessOracle(namespace="default"), ReadinessOraclePort)

"""Kubernetes client configuration loading."""

from __future__ import annotations

import logging

from kubernetes import config
from kubernetes.config.config_exception import ConfigException

from galera_init.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Seconds allowed for a single API call
REQUEST_TIMEOUT = 10.0


def load_kubernetes_config(kube_context: str | None = None) -> None:
    """Load in-cluster configuration, falling back to the local kubeconfig.

    Args:
        kube_context: Kubeconfig context to use outside a cluster.

    Raises:
        ConfigurationError: If neither configuration can be loaded.
    """
    try:
        config.load_incluster_config()
        logger.debug("Loaded in-cluster Kubernetes configuration")
        return
    except ConfigException:
        pass

    try:
        config.load_kube_config(context=kube_context)
    except (ConfigException, OSError) as e:
        raise ConfigurationError(
            f"Error loading Kubernetes configuration: {e}"
        ) from e
    logger.debug("Loaded local Kubernetes configuration")

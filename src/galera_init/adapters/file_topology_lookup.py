"""File-based implementation of TopologyLookupPort."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from galera_init.domain.exceptions import DescriptorDecodeError, DescriptorLookupError


class FileTopologyLookup:
    """Reads the MariaDB resource from a YAML (or JSON) manifest.

    Used to run galera-init outside a cluster, e.g. against a manifest
    exported with ``kubectl get mariadb -o yaml``. Multi-document files are
    searched for the MariaDB document with the requested name.
    """

    def __init__(self, path: Path) -> None:
        """Initialize the lookup.

        Args:
            path: Path to the manifest file.
        """
        self._path = Path(path)

    def fetch(self, name: str, namespace: str) -> Mapping[str, Any]:
        """Load the resource named ``name`` from the manifest.

        A document without a namespace matches any namespace.

        Raises:
            DescriptorLookupError: If the file cannot be read or holds no
                matching resource.
            DescriptorDecodeError: If the file is not valid YAML.
        """
        try:
            text = self._path.read_text()
        except OSError as e:
            raise DescriptorLookupError(
                f"Error reading topology file {self._path}: {e}",
                name=name,
                namespace=namespace,
                original_error=e,
            ) from e

        try:
            documents = [doc for doc in yaml.safe_load_all(text) if doc is not None]
        except yaml.YAMLError as e:
            raise DescriptorDecodeError(
                f"Invalid YAML in {self._path}: {e}",
                name=name,
                namespace=namespace,
                original_error=e,
            ) from e

        for doc in documents:
            if not isinstance(doc, Mapping):
                continue
            metadata = doc.get("metadata")
            if not isinstance(metadata, Mapping):
                continue
            if metadata.get("name") != name:
                continue
            if metadata.get("namespace") not in (None, namespace):
                continue
            return doc

        raise DescriptorLookupError(
            f"MariaDB '{name}' in namespace '{namespace}' not found in {self._path}",
            name=name,
            namespace=namespace,
        )

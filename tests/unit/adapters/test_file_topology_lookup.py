"""Unit tests for FileTopologyLookup adapter."""

from pathlib import Path

import pytest

from galera_init.adapters.file_topology_lookup import FileTopologyLookup
from galera_init.adapters.ports import TopologyLookupPort
from galera_init.domain.exceptions import DescriptorDecodeError, DescriptorLookupError

MANIFEST = """\
apiVersion: v1
kind: Service
metadata:
  name: mariadb-galera-internal
  namespace: default
---
apiVersion: mariadb.mmontes.io/v1alpha1
kind: MariaDB
metadata:
  name: mariadb-galera
  namespace: default
spec:
  replicas: 3
  galera:
    enabled: true
    sst: mariabackup
    replicaThreads: 1
---
apiVersion: mariadb.mmontes.io/v1alpha1
kind: MariaDB
metadata:
  name: mariadb-galera
  namespace: staging
spec:
  replicas: 5
"""


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.FileTopologyLookup")
class TestFileTopologyLookup:
    """Test FileTopologyLookup adapter."""

    def test_selects_document_by_name_and_namespace(self, tmp_path: Path):
        path = tmp_path / "mariadb.yaml"
        path.write_text(MANIFEST)
        lookup = FileTopologyLookup(path)

        assert lookup.fetch("mariadb-galera", "default")["spec"]["replicas"] == 3
        assert lookup.fetch("mariadb-galera", "staging")["spec"]["replicas"] == 5

    def test_document_without_namespace_matches_any(self, tmp_path: Path):
        path = tmp_path / "mariadb.yaml"
        path.write_text("metadata:\n  name: db\nspec:\n  replicas: 1\n")

        assert FileTopologyLookup(path).fetch("db", "prod")["metadata"]["name"] == "db"

    def test_reads_json(self, tmp_path: Path):
        path = tmp_path / "mariadb.json"
        path.write_text('{"metadata": {"name": "db", "namespace": "prod"}, "spec": {}}')

        assert FileTopologyLookup(path).fetch("db", "prod")["spec"] == {}

    def test_missing_resource(self, tmp_path: Path):
        path = tmp_path / "mariadb.yaml"
        path.write_text(MANIFEST)

        with pytest.raises(DescriptorLookupError, match="not found") as exc_info:
            FileTopologyLookup(path).fetch("mariadb-galera", "prod")
        assert exc_info.value.namespace == "prod"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(DescriptorLookupError) as exc_info:
            FileTopologyLookup(tmp_path / "absent.yaml").fetch("db", "prod")

        assert isinstance(exc_info.value.original_error, FileNotFoundError)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "mariadb.yaml"
        path.write_text("metadata: [unclosed\n")

        with pytest.raises(DescriptorDecodeError):
            FileTopologyLookup(path).fetch("db", "prod")

    def test_skips_non_mapping_documents(self, tmp_path: Path):
        path = tmp_path / "mariadb.yaml"
        path.write_text("- a list\n---\nmetadata:\n  name: db\nspec: {}\n")

        assert FileTopologyLookup(path).fetch("db", "prod")["spec"] == {}

    def test_implements_port(self, tmp_path: Path):
        assert isinstance(FileTopologyLookup(tmp_path / "x.yaml"), TopologyLookupPort)

"""Config renderer use case for the Galera cluster config file."""

from __future__ import annotations

from jinja2 import Environment, StrictUndefined

from galera_init.domain.exceptions import FeatureDisabledError, InvalidTopologyError
from galera_init.domain.identity import ClusterAddressSet, NodeIdentity
from galera_init.domain.topology import SSTMethod, TopologyDescriptor
from galera_init.usecases.cluster_address_builder import ClusterAddressBuilder

CONFIG_FILE_NAME = "0-galera.cnf"
BOOTSTRAP_FILE_NAME = "1-bootstrap.cnf"
BOOTSTRAP_FILE = b'[galera]\nwsrep_new_cluster="ON"'

CLUSTER_NAME = "mariadb-operator"
PROVIDER_PATH = "/usr/lib/galera/libgalera_smm.so"

# The template ends on the closing tag so the rendered text ends with the
# newline of its last emitted line and nothing else.
_GALERA_TEMPLATE = """\
[mariadb]
bind-address=0.0.0.0
default_storage_engine=InnoDB
binlog_format=row
innodb_autoinc_lock_mode=2

# Cluster configuration
wsrep_on=ON
wsrep_provider={{ provider }}
wsrep_cluster_address="{{ cluster_address }}"
wsrep_cluster_name={{ cluster_name }}
wsrep_slave_threads={{ threads }}

# Node configuration
wsrep_node_address="{{ node_address }}"
wsrep_node_name="{{ node_name }}"
wsrep_sst_method="{{ sst }}"
{% if sst_auth %}wsrep_sst_auth="root:{{ root_password }}"
{% endif %}"""


class ConfigRenderer:
    """Renders the Galera cluster config file.

    Pure function of its inputs: identical topology, identity and addresses
    always produce byte-identical output. Writing the bytes to disk is left
    to a ConfigWriterPort.
    """

    def __init__(self, address_builder: ClusterAddressBuilder | None = None) -> None:
        """Initialize the renderer.

        Args:
            address_builder: Builder used to format the membership string.
        """
        self._address_builder = address_builder or ClusterAddressBuilder()
        self._env = Environment(autoescape=False, undefined=StrictUndefined)
        self._template = self._env.from_string(_GALERA_TEMPLATE)

    def render(
        self,
        topology: TopologyDescriptor,
        identity: NodeIdentity,
        addresses: ClusterAddressSet,
    ) -> bytes:
        """Render the config for one node.

        Args:
            topology: Declared topology of the cluster.
            identity: Identity of the node being configured.
            addresses: Cluster addresses built from the same topology.

        Returns:
            UTF-8 encoded config file contents.

        Raises:
            FeatureDisabledError: If Galera is not enabled on the topology.
            InvalidTopologyError: If the topology declares no replicas.
            UnsupportedSSTMethodError: If the SST method is unknown.
        """
        if not topology.galera_enabled:
            raise FeatureDisabledError(
                f"Galera is not enabled for MariaDB '{topology.group_name}'"
            )
        if topology.replica_count < 1:
            raise InvalidTopologyError(
                "at least one replica must be specified to get a valid cluster address"
            )

        sst = SSTMethod.parse(topology.sst_method)

        text = self._template.render(
            provider=PROVIDER_PATH,
            cluster_address=self._address_builder.cluster_address(addresses),
            cluster_name=CLUSTER_NAME,
            threads=int(topology.replica_threads),
            node_address=identity.address,
            node_name=identity.name,
            sst=sst.value,
            sst_auth=sst.requires_auth,
            root_password=topology.root_credential,
        )
        return text.encode("utf-8")

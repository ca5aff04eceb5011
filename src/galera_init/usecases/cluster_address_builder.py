"""Cluster address builder use case."""

from __future__ import annotations

from galera_init.domain.exceptions import InvalidTopologyError, NoPredecessorError
from galera_init.domain.identity import ClusterAddressSet, NodeIdentity
from galera_init.domain.topology import TopologyDescriptor

CLUSTER_ADDRESS_SCHEME = "gcomm"


class ClusterAddressBuilder:
    """Builds the per-node network addresses of a replica group.

    Each pod of the group is reachable as
    ``<group>-<ordinal>.<group>-internal.<namespace>.svc.<cluster-domain>``
    through the group's headless internal service.

    This is a stateless, pure logic component.
    """

    def pod_name(self, topology: TopologyDescriptor, ordinal: int) -> str:
        """Return the pod name for an ordinal."""
        return f"{topology.group_name}-{ordinal}"

    def pod_address(self, topology: TopologyDescriptor, ordinal: int) -> str:
        """Return the network address for an ordinal."""
        return f"{self.pod_name(topology, ordinal)}.{topology.service_fqdn}"

    def build(self, topology: TopologyDescriptor, ordinal: int) -> ClusterAddressSet:
        """Build the address set for the whole group.

        Args:
            topology: Declared topology of the cluster.
            ordinal: Ordinal of the node this run is for.

        Returns:
            ClusterAddressSet with one member per replica in ordinal order;
            self_address is the member at ``ordinal``.

        Raises:
            InvalidTopologyError: If the topology declares no replicas or the
                ordinal is outside the group.
        """
        if topology.replica_count < 1:
            raise InvalidTopologyError(
                "at least one replica must be specified to get a valid cluster address"
            )
        if not 0 <= ordinal < topology.replica_count:
            raise InvalidTopologyError(
                f"ordinal {ordinal} is outside the replica group "
                f"of size {topology.replica_count}"
            )

        members = tuple(
            self.pod_address(topology, i) for i in range(topology.replica_count)
        )
        return ClusterAddressSet(members=members, self_address=members[ordinal])

    def cluster_address(self, addresses: ClusterAddressSet) -> str:
        """Render the membership string, e.g. 'gcomm://a,b,c'."""
        return f"{CLUSTER_ADDRESS_SCHEME}://{','.join(addresses.members)}"

    def predecessor_of(
        self, topology: TopologyDescriptor, identity: NodeIdentity
    ) -> NodeIdentity:
        """Return the identity of the node right before ``identity``.

        Raises:
            NoPredecessorError: If ``identity`` is the first node.
        """
        if identity.ordinal == 0:
            raise NoPredecessorError(f"Pod '{identity.name}' is the first Pod")
        previous = identity.ordinal - 1
        return NodeIdentity(
            ordinal=previous,
            name=self.pod_name(topology, previous),
            address=self.pod_address(topology, previous),
        )

"""Node identity and cluster address value objects."""

from __future__ import annotations

from dataclasses import dataclass

from galera_init.domain.exceptions import InvalidTopologyError, MalformedNameError


@dataclass(frozen=True)
class NodeIdentity:
    """Identity of one node in the replica group.

    Attributes:
        ordinal: Zero-based position parsed from the node name.
        name: Pod name, e.g. 'mariadb-galera-1'.
        address: Network address of the node inside the cluster.
    """

    ordinal: int
    name: str
    address: str

    def __post_init__(self) -> None:
        """Validate node identity."""
        if self.ordinal < 0:
            raise MalformedNameError(
                f"ordinal cannot be negative, got: {self.ordinal}"
            )
        if not self.name or not self.name.strip():
            raise MalformedNameError("node name cannot be empty")


@dataclass(frozen=True)
class ClusterAddressSet:
    """Addresses of every member of the cluster, in ordinal order.

    Order is meaningful: the replication engine tries members in the order
    they appear in the cluster address string.

    Attributes:
        members: Address per ordinal 0..replica_count-1.
        self_address: Address of the node this run is for.
    """

    members: tuple[str, ...]
    self_address: str

    def __post_init__(self) -> None:
        """Validate the address set."""
        if not self.members:
            raise InvalidTopologyError("cluster address set cannot be empty")
        if self.self_address not in self.members:
            raise InvalidTopologyError(
                f"self address {self.self_address!r} is not a cluster member"
            )

    def __len__(self) -> int:
        return len(self.members)

"""Ordinal resolver use case."""

from __future__ import annotations

from galera_init.domain.exceptions import MalformedNameError

ORDINAL_SEPARATOR = "-"


class OrdinalResolver:
    """Extracts a node's zero-based ordinal from its pod name.

    StatefulSet pods are named ``<group>-<ordinal>``; the ordinal is the
    integer after the last separator. When constructed with a group name the
    prefix must match it exactly, which catches a pod being pointed at the
    wrong MariaDB resource.
    """

    def __init__(self, group_name: str | None = None) -> None:
        """Initialize the resolver.

        Args:
            group_name: Expected name prefix, or None to accept any prefix.
        """
        self._group_name = group_name

    def resolve(self, name: str) -> int:
        """Resolve the ordinal encoded in a pod name.

        Args:
            name: Pod name, e.g. 'mariadb-galera-2'.

        Returns:
            The ordinal as a non-negative integer.

        Raises:
            MalformedNameError: If the name has no trailing numeric ordinal
                or its prefix does not match the expected group.
        """
        prefix, sep, suffix = name.rpartition(ORDINAL_SEPARATOR)
        if not sep or not prefix:
            raise MalformedNameError(f"Pod name {name!r} has no ordinal suffix")

        # str.isdigit() accepts non-ASCII digits that int() would also parse
        if not suffix or not (suffix.isascii() and suffix.isdigit()):
            raise MalformedNameError(
                f"Pod name {name!r} has a non-numeric ordinal suffix {suffix!r}"
            )

        if self._group_name is not None and prefix != self._group_name:
            raise MalformedNameError(
                f"Pod name {name!r} does not belong to group {self._group_name!r}"
            )

        return int(suffix)

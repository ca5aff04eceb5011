"""Direct database probe implementation of ReadinessOraclePort."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import pymysql

from galera_init.adapters.ports import ReadinessOraclePort
from galera_init.domain.exceptions import TransientOracleError
from galera_init.domain.identity import NodeIdentity

logger = logging.getLogger(__name__)

WSREP_READY_QUERY = (
    "SELECT variable_value FROM information_schema.global_status "
    "WHERE variable_name = 'wsrep_ready'"
)


class MariaDBReadinessOracle:
    """Probes the node's MariaDB for the ``wsrep_ready`` status variable.

    Opens a fresh connection per check and always closes it. A node is ready
    when ``wsrep_ready`` is ``ON``; connection failures and query errors are
    transient since the predecessor may still be starting.
    """

    def __init__(
        self,
        password: str,
        user: str = "root",
        port: int = 3306,
        connect_timeout: float = 5.0,
        connect: Callable[..., Any] = pymysql.connect,
    ) -> None:
        """Initialize the oracle.

        Args:
            password: Password of ``user``.
            user: Database user to probe with.
            port: MariaDB port on the node.
            connect_timeout: Connect timeout in seconds.
            connect: Connection factory, injectable for tests.
        """
        self._password = password
        self._user = user
        self._port = port
        self._connect_timeout = connect_timeout
        self._connect = connect

    def check(self, node: NodeIdentity) -> bool:
        """Check ``wsrep_ready`` on the node.

        Raises:
            TransientOracleError: If the node cannot be reached or queried.
        """
        try:
            conn = self._connect(
                host=node.address,
                port=self._port,
                user=self._user,
                password=self._password,
                connect_timeout=self._connect_timeout,
            )
        except pymysql.err.MySQLError as e:
            raise TransientOracleError(
                f"error connecting to {node.address}:{self._port}: {e}"
            ) from e

        try:
            with conn.cursor() as cursor:
                cursor.execute(WSREP_READY_QUERY)
                row = cursor.fetchone()
        except pymysql.err.MySQLError as e:
            raise TransientOracleError(
                f"error querying wsrep_ready on {node.address}: {e}"
            ) from e
        finally:
            conn.close()

        value = row[0] if row else None
        if isinstance(value, bytes):
            value = value.decode()
        logger.debug("Pod %s wsrep_ready=%s", node.name, value)
        return isinstance(value, str) and value.strip().upper() == "ON"


# Runtime protocol check
assert isinstance(MariaDBReadinessOracle(password="x"), ReadinessOraclePort)

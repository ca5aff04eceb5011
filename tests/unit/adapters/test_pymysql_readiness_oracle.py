"""Unit tests for MariaDBReadinessOracle adapter."""

import pymysql
import pytest

from galera_init.adapters.ports import ReadinessOraclePort
from galera_init.adapters.pymysql_readiness_oracle import (
    WSREP_READY_QUERY,
    MariaDBReadinessOracle,
)
from galera_init.domain.exceptions import TransientOracleError
from galera_init.domain.identity import NodeIdentity

NODE = NodeIdentity(
    ordinal=1,
    name="mariadb-galera-1",
    address="mariadb-galera-1.mariadb-galera-internal.default.svc.cluster.local",
)


class FakeCursor:
    def __init__(self, row=None, error=None):
        self.row = row
        self.error = error
        self.queries = []

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def execute(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error

    def fetchone(self):
        return self.row


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.closed = False

    def cursor(self):
        return self._cursor

    def close(self):
        self.closed = True


class FakeConnect:
    """Stands in for pymysql.connect and records its arguments."""

    def __init__(self, connection=None, error=None):
        self.connection = connection
        self.error = error
        self.kwargs = None

    def __call__(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        return self.connection


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.MariaDBReadinessOracle")
class TestMariaDBReadinessOracle:
    """Test MariaDBReadinessOracle adapter."""

    @pytest.mark.parametrize("value", ["ON", "on", b"ON", " ON "])
    def test_wsrep_ready_on(self, value):
        cursor = FakeCursor(row=(value,))
        connection = FakeConnection(cursor)
        oracle = MariaDBReadinessOracle(
            password="pw", connect=FakeConnect(connection)
        )

        assert oracle.check(NODE) is True
        assert cursor.queries == [WSREP_READY_QUERY]
        assert connection.closed

    @pytest.mark.parametrize("row", [("OFF",), (b"OFF",), None, (None,)])
    def test_not_ready(self, row):
        connection = FakeConnection(FakeCursor(row=row))
        oracle = MariaDBReadinessOracle(password="pw", connect=FakeConnect(connection))

        assert oracle.check(NODE) is False

    def test_connects_to_node_address(self):
        connect = FakeConnect(FakeConnection(FakeCursor(row=("ON",))))
        oracle = MariaDBReadinessOracle(
            password="pw", port=3307, connect_timeout=2.0, connect=connect
        )

        oracle.check(NODE)

        assert connect.kwargs == {
            "host": NODE.address,
            "port": 3307,
            "user": "root",
            "password": "pw",
            "connect_timeout": 2.0,
        }

    def test_connection_failure_is_transient(self):
        connect = FakeConnect(
            error=pymysql.err.OperationalError(2003, "Can't connect to MySQL server")
        )
        oracle = MariaDBReadinessOracle(password="pw", connect=connect)

        with pytest.raises(TransientOracleError, match="connecting"):
            oracle.check(NODE)

    def test_query_failure_is_transient_and_closes(self):
        connection = FakeConnection(
            FakeCursor(error=pymysql.err.InternalError(1047, "WSREP has not yet prepared node"))
        )
        oracle = MariaDBReadinessOracle(password="pw", connect=FakeConnect(connection))

        with pytest.raises(TransientOracleError, match="wsrep_ready"):
            oracle.check(NODE)
        assert connection.closed

    def test_implements_port(self):
        assert isinstance(MariaDBReadinessOracle(password="pw"), ReadinessOraclePort)

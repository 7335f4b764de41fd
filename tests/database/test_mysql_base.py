from __future__ import annotations

import pytest
from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError, OperationalError

from session_attendance.core.exceptions import DuplicateKeyError
from session_attendance.database.bootstrap import _iter_sql_statements, _strip_comments
from session_attendance.database.connection import DBConfig
from session_attendance.database.mysql_base import db_cursor


class StubCursor:
    def __init__(self, error=None):
        self.error = error
        self.closed = False
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((sql, params))
        if self.error:
            raise self.error

    def close(self):
        self.closed = True


class StubConnection:
    def __init__(self, cursor: StubCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class StubFactory:
    def __init__(self, conn: StubConnection):
        self.conn = conn

    def connect(self):
        return self.conn


def _factory(error=None) -> StubFactory:
    return StubFactory(StubConnection(StubCursor(error)))


def test_successful_block_commits_and_releases():
    factory = _factory()
    with db_cursor(factory) as (_, cur):
        cur.execute("SELECT 1")

    assert factory.conn.committed
    assert not factory.conn.rolled_back
    assert factory.conn.closed
    assert factory.conn._cursor.closed


def test_duplicate_entry_becomes_duplicate_key_error():
    factory = _factory(IntegrityError(msg="Duplicate entry '1-3' for key 'uq_attendance'", errno=errorcode.ER_DUP_ENTRY))

    with pytest.raises(DuplicateKeyError) as excinfo:
        with db_cursor(factory) as (_, cur):
            cur.execute("INSERT INTO attendance ...")

    assert "Duplicate entry" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, IntegrityError)
    assert factory.conn.rolled_back
    assert not factory.conn.committed
    assert factory.conn.closed


def test_other_integrity_errors_propagate_unchanged():
    factory = _factory(IntegrityError(msg="Cannot add or update a child row", errno=errorcode.ER_NO_REFERENCED_ROW_2))

    with pytest.raises(IntegrityError):
        with db_cursor(factory) as (_, cur):
            cur.execute("INSERT INTO enrollments ...")

    assert factory.conn.rolled_back


def test_driver_errors_roll_back_and_propagate():
    factory = _factory(OperationalError(msg="Lost connection", errno=2013))

    with pytest.raises(OperationalError):
        with db_cursor(factory) as (_, cur):
            cur.execute("SELECT 1")

    assert factory.conn.rolled_back
    assert factory.conn.closed


def test_db_config_from_dict_applies_defaults():
    config = DBConfig.from_dict({"host": "db", "user": "app", "password": "pw", "database": "attendance"}, pool_size=3)

    assert config.port == 3306
    assert config.pool_size == 3
    assert config.database == "attendance"


def test_schema_script_splits_into_statements():
    script = """
    -- users
    CREATE TABLE a (id INT, note VARCHAR(10) DEFAULT 'x;y');
    CREATE TABLE b (
        -- primary key only
        id INT
    );
    """
    statements = list(_iter_sql_statements(_strip_comments(script)))

    assert len(statements) == 2
    assert statements[0].startswith("CREATE TABLE a")
    assert "'x;y'" in statements[0]
    assert "primary key only" not in statements[1]

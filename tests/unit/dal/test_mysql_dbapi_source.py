import pymysql
import pytest

from dal.mysql import MysqlConfig
from dal.mysql.dbapi_source import DbApiMetadataSource, open_dbapi_source
from table_schema import SourceError
from tests._support.fake_mysql import FakeDbApiConnection
from tests._support.fixtures.mysql_show_rows import (
    schema_test_column_rows,
    schema_test_index_rows,
)


@pytest.mark.asyncio
async def test_tuple_rows_are_keyed_by_description():
    conn = FakeDbApiConnection(schema_test_column_rows(), schema_test_index_rows())
    source = DbApiMetadataSource(conn)

    columns = await source.fetch_columns("test", "schema_test")
    indexes = await source.fetch_indexes("test", "schema_test")

    assert conn.executed == [
        "SHOW FULL COLUMNS FROM `test`.`schema_test`",
        "SHOW INDEX FROM `test`.`schema_test`",
    ]
    assert conn.closed_cursors == 2
    assert columns[4].raw_type.startswith("enum('appointing'")
    assert [row.index_name for row in indexes] == ["PRIMARY", "PRIMARY", "id1", "name_idx"]


@pytest.mark.asyncio
async def test_bytes_values_are_decoded():
    conn = FakeDbApiConnection(
        schema_test_column_rows(), schema_test_index_rows(), bytes_fields=("Type", "Collation")
    )
    columns = await DbApiMetadataSource(conn).fetch_columns("test", "schema_test")
    assert columns[10].raw_type == "varchar(256)"
    assert columns[10].collation == "ucs2_general_ci"


@pytest.mark.asyncio
async def test_cursor_is_closed_when_query_fails():
    error = pymysql.err.OperationalError(1142, "SELECT command denied to user 'u'@'%'")
    conn = FakeDbApiConnection([], [], error=error)

    with pytest.raises(SourceError) as exc_info:
        await DbApiMetadataSource(conn).fetch_indexes("test", "t")

    assert exc_info.value.category == "auth"
    assert exc_info.value.__cause__ is error
    assert conn.closed_cursors == 1


@pytest.mark.asyncio
async def test_non_pymysql_driver_errors_are_wrapped():
    """Any DB-API driver's errors surface as SourceError."""

    class _DriverError(Exception):
        pass

    conn = FakeDbApiConnection([], [], error=_DriverError("Lost connection to MySQL server"))
    with pytest.raises(SourceError) as exc_info:
        await DbApiMetadataSource(conn).fetch_columns("test", "t")
    assert exc_info.value.category == "connectivity"


@pytest.mark.asyncio
async def test_open_dbapi_source_closes_connection(monkeypatch):
    conn = FakeDbApiConnection([], [])
    captured = {}

    def fake_connect(**kwargs):
        captured.update(kwargs)
        return conn

    monkeypatch.setattr("dal.mysql.dbapi_source.pymysql.connect", fake_connect)
    config = MysqlConfig(host="db", port=3306, user="u", password="p", database="test")

    async with open_dbapi_source(config) as source:
        assert isinstance(source, DbApiMetadataSource)
        assert conn.closed is False

    assert conn.closed is True
    assert captured["database"] == "test"
    assert captured["autocommit"] is True

"""Contract tests: both MySQL metadata sources must assemble identical tables."""

import pytest

from common.interfaces import MetadataSource
from dal.mysql import AiomysqlMetadataSource, DbApiMetadataSource
from table_schema import assemble_table
from tests._support.fake_mysql import FakeAiomysqlConnection, FakeDbApiConnection
from tests._support.fixtures.mysql_show_rows import (
    schema_test_column_rows,
    schema_test_index_rows,
)


def _native(columns, indexes):
    return AiomysqlMetadataSource(FakeAiomysqlConnection(columns, indexes))


def _dbapi(columns, indexes):
    # Mimic a connector that hands back SHOW output as bytes.
    conn = FakeDbApiConnection(
        columns, indexes, bytes_fields=("Field", "Type", "Collation", "Key_name")
    )
    return DbApiMetadataSource(conn)


SOURCE_FACTORIES = [_native, _dbapi]


@pytest.mark.parametrize("factory", SOURCE_FACTORIES, ids=["aiomysql", "dbapi"])
def test_sources_satisfy_protocol(factory):
    assert isinstance(factory([], []), MetadataSource)


@pytest.mark.asyncio
async def test_schema_test_converges():
    tables = [
        await assemble_table(
            factory(schema_test_column_rows(), schema_test_index_rows()), "test", "schema_test"
        )
        for factory in SOURCE_FACTORIES
    ]
    assert tables[0] == tables[1]
    assert tables[0].model_dump() == tables[1].model_dump()


@pytest.mark.asyncio
async def test_quoted_identifiers_converge():
    """A hyphenated table with a dotted column keeps its names through both sources."""
    columns = [
        {
            "Field": "a.b",
            "Type": "int(11)",
            "Collation": None,
            "Null": "YES",
            "Key": "",
            "Default": None,
            "Extra": "",
            "Privileges": "select",
            "Comment": "",
        }
    ]
    tables = []
    for factory in SOURCE_FACTORIES:
        source = factory(columns, [])
        tables.append(await assemble_table(source, "test", "a-b_test"))

    assert tables[0] == tables[1]
    assert tables[0].columns[0].name == "a.b"
    assert tables[0].name == "a-b_test"
    assert tables[0].indexes == ()
    assert tables[0].pk_columns == ()

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List

import aiomysql

from dal.error_classification import to_source_error
from dal.mysql.config import MysqlConfig
from dal.mysql.quoting import show_full_columns_sql, show_index_sql
from dal.mysql.row_mapping import column_rows_from_show, index_rows_from_show
from dal.tracing import trace_query_operation
from table_schema.rows import ColumnMetadataRow, IndexMetadataRow

logger = logging.getLogger(__name__)


class AiomysqlMetadataSource:
    """Metadata source over a native-protocol aiomysql connection."""

    provider = "mysql"

    def __init__(self, conn: aiomysql.Connection) -> None:
        self._conn = conn

    async def fetch_columns(self, schema: str, table: str) -> List[ColumnMetadataRow]:
        rows = await self._fetch(show_full_columns_sql(schema, table), "fetch_columns")
        return column_rows_from_show(rows)

    async def fetch_indexes(self, schema: str, table: str) -> List[IndexMetadataRow]:
        rows = await self._fetch(show_index_sql(schema, table), "fetch_indexes")
        return index_rows_from_show(rows)

    async def _fetch(self, sql: str, operation: str) -> List[Dict[str, Any]]:
        async def _run():
            async with self._conn.cursor(aiomysql.DictCursor) as cursor:
                await cursor.execute(sql)
                return list(await cursor.fetchall())

        try:
            return await trace_query_operation(
                f"dal.metadata.{operation}",
                provider=self.provider,
                execution_model="async",
                sql=sql,
                operation=_run(),
            )
        except aiomysql.Error as exc:
            raise to_source_error(self.provider, operation, exc) from exc


@asynccontextmanager
async def open_native_source(config: MysqlConfig) -> AsyncIterator[AiomysqlMetadataSource]:
    """Connect with aiomysql, yield a metadata source, and always close the connection."""
    try:
        conn = await aiomysql.connect(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            db=config.database,
            connect_timeout=config.connect_timeout_seconds,
            autocommit=True,
        )
    except aiomysql.Error as exc:
        raise to_source_error(AiomysqlMetadataSource.provider, "connect", exc) from exc

    logger.debug("Opened aiomysql metadata connection to %s:%s", config.host, config.port)
    try:
        yield AiomysqlMetadataSource(conn)
    finally:
        conn.close()

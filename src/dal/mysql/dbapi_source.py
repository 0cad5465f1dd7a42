import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List

import pymysql

from dal.error_classification import to_source_error
from dal.mysql.config import MysqlConfig
from dal.mysql.quoting import show_full_columns_sql, show_index_sql
from dal.mysql.row_mapping import column_rows_from_show, index_rows_from_show
from dal.tracing import trace_query_operation
from table_schema.rows import ColumnMetadataRow, IndexMetadataRow

logger = logging.getLogger(__name__)


class DbApiMetadataSource:
    """Metadata source over any PEP 249 (DB-API 2.0) connection to MySQL.

    The connection is blocking, so each statement runs in a worker thread.
    Rows may come back as tuples; they are keyed by ``cursor.description``
    before mapping so this source yields the same rows as the native one.
    """

    provider = "mysql"

    def __init__(self, conn: Any) -> None:
        self._conn = conn

    async def fetch_columns(self, schema: str, table: str) -> List[ColumnMetadataRow]:
        rows = await self._fetch(show_full_columns_sql(schema, table), "fetch_columns")
        return column_rows_from_show(rows)

    async def fetch_indexes(self, schema: str, table: str) -> List[IndexMetadataRow]:
        rows = await self._fetch(show_index_sql(schema, table), "fetch_indexes")
        return index_rows_from_show(rows)

    async def _fetch(self, sql: str, operation: str) -> List[Dict[str, Any]]:
        try:
            return await trace_query_operation(
                f"dal.metadata.{operation}",
                provider=self.provider,
                execution_model="sync",
                sql=sql,
                operation=asyncio.to_thread(self._query, sql),
            )
        except Exception as exc:
            raise to_source_error(self.provider, operation, exc) from exc

    def _query(self, sql: str) -> List[Dict[str, Any]]:
        cursor = self._conn.cursor()
        try:
            cursor.execute(sql)
            names = [entry[0] for entry in cursor.description or ()]
            return [
                dict(row) if isinstance(row, dict) else dict(zip(names, row))
                for row in cursor.fetchall()
            ]
        finally:
            cursor.close()


@asynccontextmanager
async def open_dbapi_source(config: MysqlConfig) -> AsyncIterator[DbApiMetadataSource]:
    """Connect with PyMySQL, yield a metadata source, and always close the connection."""
    try:
        conn = await asyncio.to_thread(
            pymysql.connect,
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            database=config.database,
            connect_timeout=config.connect_timeout_seconds,
            autocommit=True,
        )
    except pymysql.Error as exc:
        raise to_source_error(DbApiMetadataSource.provider, "connect", exc) from exc

    logger.debug("Opened DB-API metadata connection to %s:%s", config.host, config.port)
    try:
        yield DbApiMetadataSource(conn)
    finally:
        await asyncio.to_thread(conn.close)

import logging
import time
from typing import TYPE_CHECKING

from common.observability.metrics import schema_metrics
from table_schema.column_def import build_columns
from table_schema.errors import MissingTableError, SourceError, TableSchemaError
from table_schema.index_def import build_indexes
from table_schema.primary_key import resolve_pk_columns
from table_schema.table_def import TableDef

if TYPE_CHECKING:
    from common.interfaces.metadata_source import MetadataSource

logger = logging.getLogger(__name__)


async def assemble_table(source: "MetadataSource", schema: str, table: str) -> TableDef:
    """Fetch metadata for ``schema.table`` from ``source`` and build a TableDef.

    Columns are fetched before indexes; no partial TableDef is ever returned.

    Raises:
        SourceError: If the source fails or reports no columns for the table.
        ParseError: If a column type cannot be parsed.
        ResolutionError: If index or column metadata is inconsistent.
    """
    provider = getattr(source, "provider", "unknown")
    logger.debug("Assembling table %s.%s via %s", schema, table, provider)
    started = time.monotonic()

    try:
        column_rows = await _fetch(source.fetch_columns, schema, table, provider)
        if not column_rows:
            raise MissingTableError(schema, table, provider=provider)
        index_rows = await _fetch(source.fetch_indexes, schema, table, provider)

        columns = build_columns(column_rows)
        indexes = build_indexes(index_rows, columns)
        table_def = TableDef(
            schema_name=schema,
            name=table,
            columns=columns,
            indexes=indexes,
            pk_columns=resolve_pk_columns(indexes),
        )
    except TableSchemaError as exc:
        logger.warning(
            "Failed to assemble table %s.%s via %s: %s", schema, table, provider, exc
        )
        _record_assembly(provider, exc.code.value, started)
        raise

    logger.info(
        "Assembled table %s via %s (%d columns, %d indexes)",
        table_def.qualified_name,
        provider,
        len(table_def.columns),
        len(table_def.indexes),
    )
    _record_assembly(provider, "ok", started)
    return table_def


async def _fetch(fetch, schema: str, table: str, provider: str):
    try:
        return await fetch(schema, table)
    except TableSchemaError:
        raise
    except Exception as exc:
        raise SourceError(
            f"Metadata fetch for {schema}.{table} failed: {exc}", provider=provider
        ) from exc


def _record_assembly(provider: str, status: str, started: float) -> None:
    attributes = {"provider": provider, "status": status}
    schema_metrics.add_counter(
        "table_schema.assemble.count",
        description="Table assemblies by outcome",
        attributes=attributes,
    )
    schema_metrics.record_histogram(
        "table_schema.assemble.duration_ms",
        (time.monotonic() - started) * 1000.0,
        description="Wall time spent assembling a table",
        unit="ms",
        attributes=attributes,
    )

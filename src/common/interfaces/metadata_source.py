from typing import List, Protocol, runtime_checkable

from table_schema.rows import ColumnMetadataRow, IndexMetadataRow


@runtime_checkable
class MetadataSource(Protocol):
    """Protocol for fetching raw table metadata rows from a database."""

    provider: str

    async def fetch_columns(self, schema: str, table: str) -> List[ColumnMetadataRow]:
        """Fetch column rows for a table, ordered by ordinal."""
        ...

    async def fetch_indexes(self, schema: str, table: str) -> List[IndexMetadataRow]:
        """Fetch per-column index rows for a table, in any order."""
        ...

"""MySQL metadata sources for table-schema assembly."""

from .config import MysqlConfig
from .dbapi_source import DbApiMetadataSource, open_dbapi_source
from .native_source import AiomysqlMetadataSource, open_native_source
from .quoting import qualify_table, quote_identifier, show_full_columns_sql, show_index_sql

__all__ = [
    "AiomysqlMetadataSource",
    "DbApiMetadataSource",
    "MysqlConfig",
    "open_dbapi_source",
    "open_native_source",
    "qualify_table",
    "quote_identifier",
    "show_full_columns_sql",
    "show_index_sql",
]

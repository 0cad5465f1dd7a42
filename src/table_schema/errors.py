"""Error taxonomy for table-structure introspection."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class SchemaErrorCode(str, Enum):
    """Bounded error codes for introspection failures."""

    PARSE_ERROR = "PARSE_ERROR"
    RESOLUTION_ERROR = "RESOLUTION_ERROR"
    SOURCE_ERROR = "SOURCE_ERROR"
    MISSING_TABLE = "MISSING_TABLE"


class TableSchemaError(Exception):
    """Base class for errors that abort table assembly."""

    code: SchemaErrorCode = SchemaErrorCode.SOURCE_ERROR


class ParseError(TableSchemaError):
    """Raised when a raw column type string cannot be parsed."""

    code = SchemaErrorCode.PARSE_ERROR

    def __init__(self, raw_type: str, reason: str) -> None:
        self.raw_type = raw_type
        self.reason = reason
        super().__init__(f"Cannot parse column type {raw_type!r}: {reason}")


class ResolutionError(TableSchemaError):
    """Raised when column or index metadata does not line up."""

    code = SchemaErrorCode.RESOLUTION_ERROR

    def __init__(self, message: str, table: Optional[str] = None) -> None:
        self.table = table
        if table:
            message = f"{table}: {message}"
        super().__init__(message)


class SourceError(TableSchemaError):
    """Raised when a metadata source fails to fetch rows."""

    code = SchemaErrorCode.SOURCE_ERROR

    def __init__(
        self,
        message: str,
        category: str = "unknown",
        provider: Optional[str] = None,
    ) -> None:
        self.category = category
        self.provider = provider
        super().__init__(message)


class MissingTableError(SourceError):
    """Raised when the source returns no column metadata for a table."""

    code = SchemaErrorCode.MISSING_TABLE

    def __init__(self, schema: str, table: str, provider: Optional[str] = None) -> None:
        self.schema = schema
        self.table = table
        super().__init__(
            f"Table {schema}.{table} has no column metadata; it may not exist.",
            category="missing_table",
            provider=provider,
        )

"""Immutable models of MySQL table structure and the pipeline that builds them."""

from .assembler import assemble_table
from .column_def import ColumnDef, build_column, build_columns
from .errors import (
    MissingTableError,
    ParseError,
    ResolutionError,
    SchemaErrorCode,
    SourceError,
    TableSchemaError,
)
from .index_def import PRIMARY_INDEX_NAME, IndexDef, build_indexes
from .primary_key import resolve_pk_columns
from .rows import ColumnMetadataRow, IndexMetadataRow
from .table_def import TableDef
from .type_descriptor import ColumnKind, TypeDescriptor
from .type_parser import parse_column_type

__all__ = [
    "ColumnDef",
    "ColumnKind",
    "ColumnMetadataRow",
    "IndexDef",
    "IndexMetadataRow",
    "MissingTableError",
    "PRIMARY_INDEX_NAME",
    "ParseError",
    "ResolutionError",
    "SchemaErrorCode",
    "SourceError",
    "TableDef",
    "TableSchemaError",
    "TypeDescriptor",
    "assemble_table",
    "build_column",
    "build_columns",
    "build_indexes",
    "parse_column_type",
    "resolve_pk_columns",
]

from typing import Iterable, Optional, Tuple

from pydantic import BaseModel

from table_schema.errors import ResolutionError
from table_schema.rows import ColumnMetadataRow
from table_schema.type_descriptor import ColumnKind, TypeDescriptor
from table_schema.type_parser import parse_column_type


class ColumnDef(BaseModel):
    """Canonical representation of a table column."""

    ordinal: int
    name: str
    type: TypeDescriptor
    raw_type: str
    is_nullable: bool = True
    default: Optional[str] = None
    extra: str = ""
    comment: str = ""
    is_auto_increment: bool = False
    is_virtual: bool = False
    is_stored: bool = False

    model_config = {"frozen": True}

    @property
    def kind(self) -> ColumnKind:
        return self.type.kind

    @property
    def collation(self) -> str:
        return self.type.collation


def build_column(row: ColumnMetadataRow) -> ColumnDef:
    """Build a ColumnDef from one column metadata row."""
    extra = (row.extra or "").strip()
    normalized_extra = extra.lower()
    return ColumnDef(
        ordinal=row.ordinal,
        name=row.name,
        type=parse_column_type(row.raw_type, row.collation),
        raw_type=row.raw_type,
        is_nullable=row.nullable,
        default=row.default,
        extra=extra,
        comment=row.comment or "",
        is_auto_increment="auto_increment" in normalized_extra,
        is_virtual="virtual generated" in normalized_extra,
        is_stored="stored generated" in normalized_extra,
    )


def build_columns(rows: Iterable[ColumnMetadataRow]) -> Tuple[ColumnDef, ...]:
    """Build the ordered column sequence; ordinals must run 0..n-1."""
    ordered = sorted(rows, key=lambda row: row.ordinal)
    for position, row in enumerate(ordered):
        if row.ordinal != position:
            raise ResolutionError(
                f"column {row.name!r} has ordinal {row.ordinal}, expected {position}"
            )
    return tuple(build_column(row) for row in ordered)

"""Typed metadata rows handed to the builders by a metadata source."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ColumnMetadataRow:
    """One column as reported by the server, in declaration order."""

    ordinal: int
    name: str
    raw_type: str
    collation: str = ""
    nullable: bool = True
    default: Optional[str] = None
    extra: str = ""
    comment: str = ""


@dataclass(frozen=True)
class IndexMetadataRow:
    """One (index, column) pair as reported by the server."""

    index_name: str
    column_name: Optional[str]
    seq_in_index: int
    non_unique: bool

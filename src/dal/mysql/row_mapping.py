"""Map ``SHOW FULL COLUMNS`` / ``SHOW INDEX`` result rows to typed metadata rows.

Both MySQL metadata sources hand their raw dict rows to these helpers, so any
driver difference (bytes vs. str, int vs. str flags) is normalized in one
place and the sources converge on identical rows.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional

from table_schema.rows import ColumnMetadataRow, IndexMetadataRow


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


def _as_int(value: Any) -> int:
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8")
    return int(value)


def _get(row: Mapping[str, Any], key: str) -> Any:
    # Some drivers lower-case result labels.
    if key in row:
        return row[key]
    return row.get(key.lower())


def column_rows_from_show(rows: Iterable[Mapping[str, Any]]) -> List[ColumnMetadataRow]:
    """Convert ``SHOW FULL COLUMNS`` rows (in result order) to ColumnMetadataRows."""
    return [
        ColumnMetadataRow(
            ordinal=ordinal,
            name=_as_text(_get(row, "Field")) or "",
            raw_type=_as_text(_get(row, "Type")) or "",
            collation=_as_text(_get(row, "Collation")) or "",
            nullable=(_as_text(_get(row, "Null")) or "").upper() == "YES",
            default=_as_text(_get(row, "Default")),
            extra=_as_text(_get(row, "Extra")) or "",
            comment=_as_text(_get(row, "Comment")) or "",
        )
        for ordinal, row in enumerate(rows)
    ]


def index_rows_from_show(rows: Iterable[Mapping[str, Any]]) -> List[IndexMetadataRow]:
    """Convert ``SHOW INDEX`` rows to IndexMetadataRows."""
    return [
        IndexMetadataRow(
            index_name=_as_text(_get(row, "Key_name")) or "",
            column_name=_as_text(_get(row, "Column_name")),
            seq_in_index=_as_int(_get(row, "Seq_in_index")),
            non_unique=bool(_as_int(_get(row, "Non_unique"))),
        )
        for row in rows
    ]

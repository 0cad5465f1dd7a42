from typing import Dict, List, Sequence, Tuple

from pydantic import BaseModel

from table_schema.column_def import ColumnDef
from table_schema.errors import ResolutionError
from table_schema.rows import IndexMetadataRow

PRIMARY_INDEX_NAME = "PRIMARY"


class IndexDef(BaseModel):
    """Canonical representation of an index.

    ``columns`` holds column ordinals in index declaration order, which need
    not match the order of the columns in the table.
    """

    name: str
    is_unique: bool
    columns: Tuple[int, ...]
    column_names: Tuple[str, ...]

    model_config = {"frozen": True}

    @property
    def is_primary(self) -> bool:
        return self.name == PRIMARY_INDEX_NAME


def build_indexes(
    rows: Sequence[IndexMetadataRow], columns: Sequence[ColumnDef]
) -> Tuple[IndexDef, ...]:
    """Group raw index rows into IndexDefs.

    Indexes keep the order in which their names are first seen; columns
    within an index are ordered by ``seq_in_index``.

    Raises:
        ResolutionError: If a row names an unknown column, carries no column
            (expression index), repeats a sequence number within an index, or
            disagrees with other rows of the same index on uniqueness.
    """
    ordinals_by_name = {column.name: column.ordinal for column in columns}
    grouped: Dict[str, List[IndexMetadataRow]] = {}
    for row in rows:
        grouped.setdefault(row.index_name, []).append(row)

    indexes = []
    for name, group in grouped.items():
        uniqueness = {row.non_unique for row in group}
        if len(uniqueness) > 1:
            raise ResolutionError(f"index {name!r} has conflicting uniqueness flags")

        seen_seq = set()
        for row in group:
            if row.seq_in_index in seen_seq:
                raise ResolutionError(
                    f"index {name!r} repeats sequence number {row.seq_in_index}"
                )
            seen_seq.add(row.seq_in_index)

        ordered = sorted(group, key=lambda row: row.seq_in_index)
        ordinals = []
        for row in ordered:
            if row.column_name is None:
                raise ResolutionError(
                    f"index {name!r} part {row.seq_in_index} is an expression, not a column"
                )
            ordinal = ordinals_by_name.get(row.column_name)
            if ordinal is None:
                raise ResolutionError(
                    f"index {name!r} references unknown column {row.column_name!r}"
                )
            ordinals.append(ordinal)

        indexes.append(
            IndexDef(
                name=name,
                is_unique=not group[0].non_unique,
                columns=tuple(ordinals),
                column_names=tuple(row.column_name for row in ordered),
            )
        )
    return tuple(indexes)

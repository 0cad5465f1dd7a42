from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, Field, model_validator

from .column_def import ColumnDef
from .index_def import IndexDef


class TableDef(BaseModel):
    """Canonical representation of a table's structure.

    Instances are frozen. Two TableDefs built from the same table compare
    equal regardless of which metadata source produced them.
    """

    schema_name: str
    name: str
    columns: Tuple[ColumnDef, ...] = Field(default_factory=tuple)
    indexes: Tuple[IndexDef, ...] = Field(default_factory=tuple)
    pk_columns: Tuple[int, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_references(self) -> "TableDef":
        for position, column in enumerate(self.columns):
            if column.ordinal != position:
                raise ValueError(f"column {column.name!r} is stored at position {position}")
        column_count = len(self.columns)
        for index in self.indexes:
            if any(not 0 <= ordinal < column_count for ordinal in index.columns):
                raise ValueError(f"index {index.name!r} references a missing column")
        if any(not 0 <= ordinal < column_count for ordinal in self.pk_columns):
            raise ValueError("primary key references a missing column")
        return self

    def __str__(self) -> str:
        return self.qualified_name

    @property
    def qualified_name(self) -> str:
        return f"{self.schema_name}.{self.name}"

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    @property
    def has_primary_key(self) -> bool:
        return bool(self.pk_columns)

    def is_primary_key(self, ordinal: int) -> bool:
        """Return True if the column at ``ordinal`` is part of the primary key."""
        return ordinal in self.pk_columns

    def get_pk_column(self, position: int) -> Optional[ColumnDef]:
        """Return the column at ``position`` within the primary key, or None."""
        if not 0 <= position < len(self.pk_columns):
            return None
        return self.columns[self.pk_columns[position]]

    def find_column(self, name: str) -> Optional[int]:
        """Return the ordinal of the column called ``name``, or None."""
        for column in self.columns:
            if column.name == name:
                return column.ordinal
        return None

    def get_column(self, key: Union[int, str]) -> Optional[ColumnDef]:
        """Look a column up by ordinal or by name."""
        if isinstance(key, int):
            if 0 <= key < len(self.columns):
                return self.columns[key]
            return None
        ordinal = self.find_column(key)
        return None if ordinal is None else self.columns[ordinal]

    def get_index(self, name: str) -> Optional[IndexDef]:
        for index in self.indexes:
            if index.name == name:
                return index
        return None

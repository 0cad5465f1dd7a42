from enum import Enum
from typing import Tuple

from pydantic import BaseModel, model_validator


class ColumnKind(str, Enum):
    """Coarse classification of a column type."""

    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    STRING = "string"
    BINARY = "binary"
    ENUM = "enum"
    SET = "set"
    OTHER = "other"


CHARSET_AWARE_KINDS = frozenset({ColumnKind.STRING, ColumnKind.ENUM, ColumnKind.SET})


class TypeDescriptor(BaseModel):
    """Structured form of a raw column type such as ``varchar(256)``."""

    kind: ColumnKind
    base_type: str
    max_size: int = 0
    fixed_size: int = 0
    is_unsigned: bool = False
    is_zerofill: bool = False
    precision: int = 0
    scale: int = 0
    enum_values: Tuple[str, ...] = ()
    set_values: Tuple[str, ...] = ()
    collation: str = ""

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_invariants(self) -> "TypeDescriptor":
        if self.enum_values and self.kind != ColumnKind.ENUM:
            raise ValueError("enum_values are only allowed for enum columns")
        if self.set_values and self.kind != ColumnKind.SET:
            raise ValueError("set_values are only allowed for set columns")
        if self.max_size and self.fixed_size and self.fixed_size > self.max_size:
            raise ValueError("fixed_size cannot exceed max_size")
        return self

    @property
    def is_fixed_width(self) -> bool:
        return self.fixed_size > 0

    @property
    def charset(self) -> str:
        """Character set implied by the collation, e.g. ``utf8mb4``."""
        if not self.collation:
            return ""
        return self.collation.split("_", 1)[0]

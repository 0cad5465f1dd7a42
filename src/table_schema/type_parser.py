"""Parse raw MySQL column type strings into TypeDescriptor values.

The input is the ``Type`` column of ``SHOW FULL COLUMNS`` (equivalently
``information_schema.columns.column_type``), for example::

    varchar(256)
    int(11) unsigned zerofill
    decimal(2,1)
    enum('appointing','serving','it''s')

Parsing is strict: an unknown base type, malformed brackets, an unterminated
value list or an unexpected trailing token raises ``ParseError`` and no
descriptor is produced.
"""

import re
from typing import Dict, List, Tuple

from table_schema.errors import ParseError
from table_schema.type_descriptor import CHARSET_AWARE_KINDS, ColumnKind, TypeDescriptor

_BASE_TYPE_PATTERN = re.compile(r"\s*([A-Za-z][A-Za-z0-9_]*)")
_SIZE_ARG_PATTERN = re.compile(r"\s*(\d+)\s*")

BASE_TYPE_KINDS: Dict[str, ColumnKind] = {
    # integers
    "tinyint": ColumnKind.INTEGER,
    "smallint": ColumnKind.INTEGER,
    "mediumint": ColumnKind.INTEGER,
    "int": ColumnKind.INTEGER,
    "integer": ColumnKind.INTEGER,
    "bigint": ColumnKind.INTEGER,
    "year": ColumnKind.INTEGER,
    "bool": ColumnKind.INTEGER,
    "boolean": ColumnKind.INTEGER,
    # approximate numerics
    "float": ColumnKind.FLOAT,
    "double": ColumnKind.FLOAT,
    "real": ColumnKind.FLOAT,
    # exact numerics
    "decimal": ColumnKind.DECIMAL,
    "numeric": ColumnKind.DECIMAL,
    "dec": ColumnKind.DECIMAL,
    "fixed": ColumnKind.DECIMAL,
    # character strings
    "char": ColumnKind.STRING,
    "varchar": ColumnKind.STRING,
    "tinytext": ColumnKind.STRING,
    "text": ColumnKind.STRING,
    "mediumtext": ColumnKind.STRING,
    "longtext": ColumnKind.STRING,
    # byte strings
    "binary": ColumnKind.BINARY,
    "varbinary": ColumnKind.BINARY,
    "tinyblob": ColumnKind.BINARY,
    "blob": ColumnKind.BINARY,
    "mediumblob": ColumnKind.BINARY,
    "longblob": ColumnKind.BINARY,
    "enum": ColumnKind.ENUM,
    "set": ColumnKind.SET,
    # temporal, bit, json, spatial
    "date": ColumnKind.OTHER,
    "datetime": ColumnKind.OTHER,
    "timestamp": ColumnKind.OTHER,
    "time": ColumnKind.OTHER,
    "bit": ColumnKind.OTHER,
    "json": ColumnKind.OTHER,
    "geometry": ColumnKind.OTHER,
    "point": ColumnKind.OTHER,
    "linestring": ColumnKind.OTHER,
    "polygon": ColumnKind.OTHER,
    "multipoint": ColumnKind.OTHER,
    "multilinestring": ColumnKind.OTHER,
    "multipolygon": ColumnKind.OTHER,
    "geometrycollection": ColumnKind.OTHER,
    "geomcollection": ColumnKind.OTHER,
    "vector": ColumnKind.OTHER,
}

FIXED_WIDTH_TYPES = frozenset({"char", "binary"})

TYPE_MODIFIERS = frozenset({"unsigned", "signed", "zerofill"})

_SIZED_KINDS = frozenset({ColumnKind.STRING, ColumnKind.BINARY})
_VALUE_LIST_KINDS = frozenset({ColumnKind.ENUM, ColumnKind.SET})


def parse_column_type(raw_type: str, collation: str = "") -> TypeDescriptor:
    """Parse a raw column type into a TypeDescriptor.

    Args:
        raw_type: Column type as reported by the server.
        collation: Resolved collation for the column, empty when the server
            reports none.

    Returns:
        A frozen TypeDescriptor.

    Raises:
        ParseError: If the type string is malformed or its base type is unknown.
    """
    if raw_type is None or not raw_type.strip():
        raise ParseError(raw_type or "", "empty column type")

    match = _BASE_TYPE_PATTERN.match(raw_type)
    if match is None:
        raise ParseError(raw_type, "missing base type name")

    base_type = match.group(1).lower()
    kind = BASE_TYPE_KINDS.get(base_type)
    if kind is None:
        raise ParseError(raw_type, f"unrecognized base type {base_type!r}")

    pos = _skip_spaces(raw_type, match.end())
    sizes: Tuple[int, ...] = ()
    values: Tuple[str, ...] = ()
    has_brackets = pos < len(raw_type) and raw_type[pos] == "("

    if kind in _VALUE_LIST_KINDS:
        if not has_brackets:
            raise ParseError(raw_type, f"{base_type} requires a value list")
        values, pos = _parse_value_list(raw_type, pos + 1)
    elif has_brackets:
        sizes, pos = _parse_size_args(raw_type, pos + 1)

    modifiers = _parse_modifiers(raw_type, raw_type[pos:])
    is_zerofill = "zerofill" in modifiers

    max_size = 0
    fixed_size = 0
    precision = 0
    scale = 0
    if kind in _SIZED_KINDS and sizes:
        if len(sizes) != 1:
            raise ParseError(raw_type, f"{base_type} takes a single size argument")
        max_size = sizes[0]
        if base_type in FIXED_WIDTH_TYPES:
            fixed_size = max_size
    elif kind == ColumnKind.DECIMAL and sizes:
        precision = sizes[0]
        scale = sizes[1] if len(sizes) > 1 else 0

    return TypeDescriptor(
        kind=kind,
        base_type=base_type,
        max_size=max_size,
        fixed_size=fixed_size,
        is_unsigned="unsigned" in modifiers or is_zerofill,
        is_zerofill=is_zerofill,
        precision=precision,
        scale=scale,
        enum_values=values if kind == ColumnKind.ENUM else (),
        set_values=values if kind == ColumnKind.SET else (),
        collation=(collation or "") if kind in CHARSET_AWARE_KINDS else "",
    )


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _parse_size_args(raw_type: str, start: int) -> Tuple[Tuple[int, ...], int]:
    end = raw_type.find(")", start)
    if end == -1:
        raise ParseError(raw_type, "unterminated size arguments")

    parts = raw_type[start:end].split(",")
    if len(parts) > 2:
        raise ParseError(raw_type, "too many size arguments")

    sizes: List[int] = []
    for part in parts:
        match = _SIZE_ARG_PATTERN.fullmatch(part)
        if match is None:
            raise ParseError(raw_type, f"invalid size argument {part.strip()!r}")
        sizes.append(int(match.group(1)))
    return tuple(sizes), end + 1


def _parse_value_list(raw_type: str, start: int) -> Tuple[Tuple[str, ...], int]:
    values: List[str] = []
    pos = start
    while True:
        pos = _skip_spaces(raw_type, pos)
        if pos >= len(raw_type):
            raise ParseError(raw_type, "unterminated value list")
        ch = raw_type[pos]
        if ch == ")" and not values:
            raise ParseError(raw_type, "empty value list")
        if ch != "'":
            raise ParseError(raw_type, f"expected a quoted literal at offset {pos}")

        value, pos = _read_quoted(raw_type, pos + 1)
        values.append(value)

        pos = _skip_spaces(raw_type, pos)
        if pos >= len(raw_type):
            raise ParseError(raw_type, "unterminated value list")
        ch = raw_type[pos]
        if ch == ",":
            pos += 1
            continue
        if ch == ")":
            return tuple(values), pos + 1
        raise ParseError(raw_type, f"unexpected character {ch!r} in value list")


def _read_quoted(raw_type: str, start: int) -> Tuple[str, int]:
    chars: List[str] = []
    pos = start
    while pos < len(raw_type):
        ch = raw_type[pos]
        if ch == "\\" and pos + 1 < len(raw_type):
            chars.append(raw_type[pos + 1])
            pos += 2
            continue
        if ch == "'":
            # '' is an escaped quote inside the literal
            if pos + 1 < len(raw_type) and raw_type[pos + 1] == "'":
                chars.append("'")
                pos += 2
                continue
            return "".join(chars), pos + 1
        chars.append(ch)
        pos += 1
    raise ParseError(raw_type, "unterminated quoted literal")


def _parse_modifiers(raw_type: str, tail: str) -> frozenset:
    modifiers = set()
    for token in tail.split():
        normalized = token.lower()
        if normalized not in TYPE_MODIFIERS:
            raise ParseError(raw_type, f"unexpected token {token!r}")
        modifiers.add(normalized)
    return frozenset(modifiers)

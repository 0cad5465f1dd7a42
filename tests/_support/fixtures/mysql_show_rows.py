"""Canned ``SHOW FULL COLUMNS`` / ``SHOW INDEX`` output for the schema_test table."""

from typing import Any, Dict, List

SCHEMA_TEST_DDL = """
CREATE TABLE IF NOT EXISTS schema_test (
    id INT,
    id1 INT,
    id2 INT,
    name VARCHAR(256),
    status ENUM('appointing','serving','abnormal','stop','noaftermarket','finish','financial_audit'),
    se SET('a', 'b', 'c'),
    f FLOAT,
    d DECIMAL(2, 1),
    uint INT UNSIGNED,
    zfint INT ZEROFILL,
    name_ucs VARCHAR(256) CHARACTER SET ucs2,
    name_utf8 VARCHAR(256) CHARACTER SET utf8,
    name_char CHAR(10),
    name_binary BINARY(11),
    name_varbinary VARBINARY(12),
    PRIMARY KEY(id2, id),
    UNIQUE (id1),
    INDEX name_idx (name)
) ENGINE = INNODB
"""

STATUS_VALUES = [
    "appointing",
    "serving",
    "abnormal",
    "stop",
    "noaftermarket",
    "finish",
    "financial_audit",
]


def _column(field, type_, collation=None, null="YES", key="", default=None, extra=""):
    return {
        "Field": field,
        "Type": type_,
        "Collation": collation,
        "Null": null,
        "Key": key,
        "Default": default,
        "Extra": extra,
        "Privileges": "select,insert,update,references",
        "Comment": "",
    }


def _index_part(key_name, seq, column, non_unique=0, cardinality=0):
    return {
        "Table": "schema_test",
        "Non_unique": non_unique,
        "Key_name": key_name,
        "Seq_in_index": seq,
        "Column_name": column,
        "Collation": "A",
        "Cardinality": cardinality,
        "Sub_part": None,
        "Packed": None,
        "Null": "",
        "Index_type": "BTREE",
        "Comment": "",
        "Index_comment": "",
    }


def schema_test_column_rows() -> List[Dict[str, Any]]:
    """Rows as returned for the schema_test table by a MySQL 5.7 server."""
    status_type = "enum(" + ",".join(f"'{value}'" for value in STATUS_VALUES) + ")"
    return [
        _column("id", "int(11)", null="NO", key="PRI"),
        _column("id1", "int(11)", key="UNI"),
        _column("id2", "int(11)", null="NO", key="PRI"),
        _column("name", "varchar(256)", "utf8mb4_general_ci", key="MUL"),
        _column("status", status_type, "utf8mb4_general_ci"),
        _column("se", "set('a','b','c')", "utf8mb4_general_ci"),
        _column("f", "float"),
        _column("d", "decimal(2,1)"),
        _column("uint", "int(10) unsigned"),
        _column("zfint", "int(10) unsigned zerofill"),
        _column("name_ucs", "varchar(256)", "ucs2_general_ci"),
        _column("name_utf8", "varchar(256)", "utf8_general_ci"),
        _column("name_char", "char(10)", "utf8mb4_general_ci"),
        _column("name_binary", "binary(11)"),
        _column("name_varbinary", "varbinary(12)"),
    ]


def schema_test_index_rows() -> List[Dict[str, Any]]:
    """Index parts for schema_test, in the server's output order."""
    return [
        _index_part("PRIMARY", 1, "id2"),
        _index_part("PRIMARY", 2, "id"),
        _index_part("id1", 1, "id1"),
        _index_part("name_idx", 1, "name", non_unique=1),
    ]

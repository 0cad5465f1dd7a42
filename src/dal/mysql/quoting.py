def quote_identifier(name: str) -> str:
    """Quote an identifier with MySQL backticks, doubling embedded backticks."""
    return "`" + name.replace("`", "``") + "`"


def qualify_table(schema: str, table: str) -> str:
    """Return a ``schema.table`` reference safe for hyphens, dots and backticks."""
    return f"{quote_identifier(schema)}.{quote_identifier(table)}"


def show_full_columns_sql(schema: str, table: str) -> str:
    """Build the statement listing a table's columns with collations."""
    return f"SHOW FULL COLUMNS FROM {qualify_table(schema, table)}"


def show_index_sql(schema: str, table: str) -> str:
    """Build the statement listing a table's index parts."""
    return f"SHOW INDEX FROM {qualify_table(schema, table)}"

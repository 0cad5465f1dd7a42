from typing import Sequence, Tuple

from table_schema.index_def import PRIMARY_INDEX_NAME, IndexDef


def resolve_pk_columns(indexes: Sequence[IndexDef]) -> Tuple[int, ...]:
    """Return the primary key ordinals in key declaration order.

    The primary key is the index named exactly ``PRIMARY``; tables without
    one have an empty key.
    """
    for index in indexes:
        if index.name == PRIMARY_INDEX_NAME:
            return index.columns
    return ()

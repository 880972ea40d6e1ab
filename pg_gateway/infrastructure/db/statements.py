from __future__ import annotations

import re
from typing import Any

from pg_gateway.config.policy import MAX_ROW_LIMIT

# what sqlalchemy.text() would read as a ":name" bind marker
_BIND_LIKE = re.compile(r"(?<![:\w\\]):(?=\w)")


def quote_ident(name: str) -> str:
    # verbatim; names reaching here have already passed the schema gate
    return f'"{name}"'


def escape_bind_markers(fragment: str) -> str:
    """Keep ``:word`` inside caller text (JSON literals, times) from becoming a bind."""
    return _BIND_LIKE.sub(r"\\:", fragment)


def display_sql(sql: str) -> str:
    return sql.replace("\\:", ":")


def build_table_select(
    schema: str,
    table: str,
    columns: str = "*",
    where: str | None = None,
    limit: int = 5,
) -> tuple[str, dict[str, Any]]:
    """SQL text and bound parameters for a single-table read.

    ``columns`` and ``where`` are appended as-is, apart from escaping colons
    so ``text()`` passes them through untouched. The row cap is always bound,
    never interpolated, and must already be within the ceiling.
    """
    if not 1 <= limit <= MAX_ROW_LIMIT:
        raise ValueError(f"limit must be within [1, {MAX_ROW_LIMIT}], got {limit}")

    query = f"SELECT {escape_bind_markers(columns)} FROM {quote_ident(schema)}.{quote_ident(table)}"
    if where and where.strip():
        query += f" WHERE {escape_bind_markers(where)}"
    query += " LIMIT :limit"
    return query, {"limit": limit}

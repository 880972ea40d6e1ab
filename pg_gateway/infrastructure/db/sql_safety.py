from __future__ import annotations

import re

from pg_gateway.application.errors import InvalidOperation

READ_ONLY_START = ("select", "with")

FORBIDDEN_KEYWORDS = (
    "insert",
    "update",
    "delete",
    "drop",
    "alter",
    "create",
    "truncate",
    "grant",
    "revoke",
    "execute",
    "copy",
)

# words that put a forbidden keyword into a modifying context; a bare
# identifier like delete_date or a column named "update" is not enough
OBJECT_CONTEXT = (
    "into",
    "from",
    "table",
    "schema",
    "database",
    "index",
    "function",
    "procedure",
    "trigger",
    "role",
    "user",
    "privileges",
    "on",
    "all",
)

_FORBIDDEN_PATTERNS = {
    kw: re.compile(rf"\b{kw}\b\s+(?:{'|'.join(OBJECT_CONTEXT)})\b", re.IGNORECASE)
    for kw in FORBIDDEN_KEYWORDS
}

_LIMIT_RE = re.compile(r"\bLIMIT\s+(\d+)", re.IGNORECASE)


def normalize_sql(sql: str) -> str:
    s = (sql or "").strip()
    while s.endswith(";"):
        s = s[:-1].rstrip()
    return s


def is_readonly_sql(sql: str) -> bool:
    return normalize_sql(sql).lower().startswith(READ_ONLY_START)


def validate_readonly_sql(sql: str) -> None:
    """Reject anything that is not a SELECT/WITH read.

    A keyword heuristic: it catches the obvious modifying statements and
    tolerates identifiers that merely contain a forbidden word. It is not a
    parser and can be fooled by comments or creative spacing.
    """
    if not is_readonly_sql(sql):
        raise InvalidOperation(
            "Only SELECT or WITH (CTE) queries are allowed. INSERT, UPDATE, DELETE, DROP, ALTER, "
            "CREATE and other modifying operations are rejected."
        )

    for kw, pattern in _FORBIDDEN_PATTERNS.items():
        if pattern.search(sql):
            raise InvalidOperation(
                f"Operation not allowed: the query contains '{kw}' followed by a modifying context. "
                "Only read queries (SELECT/WITH) are allowed."
            )


def apply_row_limit(sql: str, requested: int, ceiling: int) -> tuple[str, int]:
    """Return ``(final_sql, effective_cap)``.

    Without a LIMIT the statement gets ``LIMIT min(requested, ceiling)``. With
    one, only its first occurrence is rewritten to ``min(existing, ceiling)``
    and the requested cap is ignored.
    """
    final_sql = normalize_sql(sql)

    match = _LIMIT_RE.search(final_sql)
    if match is None:
        cap = max(1, min(requested, ceiling))
        return f"{final_sql} LIMIT {cap}", cap

    cap = min(int(match.group(1)), ceiling)
    return _LIMIT_RE.sub(f"LIMIT {cap}", final_sql, count=1), cap

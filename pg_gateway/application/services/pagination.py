from __future__ import annotations

from typing import Any


def page_result(key: str, items: list[dict], total: int, offset: int, **extra: Any) -> dict:
    """Wrap one page of catalog rows with the pagination fields clients rely on.

    ``next_offset`` is only present when more items remain.
    """
    count = len(items)
    has_more = total > offset + count

    out: dict[str, Any] = dict(extra)
    out[key] = items
    out["count"] = count
    out["total"] = total
    out["offset"] = offset
    out["has_more"] = has_more
    if has_more:
        out["next_offset"] = offset + count
    return out

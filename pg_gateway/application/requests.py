from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PageRequest:
    schema: str
    limit: int = 50
    offset: int = 0


@dataclass(frozen=True)
class TableReadRequest:
    schema: str
    table: str
    columns: str = "*"
    where: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class FreeformQueryRequest:
    query: str
    limit: int | None = None

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine


class CatalogReader:
    """Runs parameterized reads on short-lived pooled connections.

    Each call checks out its own connection, so independent calls can run
    concurrently on the same event loop.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def fetch_all(self, sql: str, params: Mapping[str, Any] | None = None) -> list[dict]:
        async with self.engine.connect() as conn:
            result = await conn.execute(text(sql), dict(params or {}))
            return [dict(r) for r in result.mappings().all()]

    async def fetch_one(self, sql: str, params: Mapping[str, Any] | None = None) -> dict | None:
        rows = await self.fetch_all(sql, params)
        return rows[0] if rows else None

    async def fetch_scalar(self, sql: str, params: Mapping[str, Any] | None = None) -> Any:
        async with self.engine.connect() as conn:
            result = await conn.execute(text(sql), dict(params or {}))
            return result.scalar_one()

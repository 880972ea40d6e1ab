from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

_NO_PARAMS = {"no_parameters": True}


@dataclass
class StatementResult:
    fields: list[str]
    rows: list[dict] = field(default_factory=list)


class ReadOnlyUnitOfWork:
    """Exclusive connection for one freeform statement.

    Session settings are applied with ``SET LOCAL`` inside the unit's
    transaction, so they vanish with it. The transaction is always rolled back
    and the connection always returned to the pool, whatever happens inside.
    """

    def __init__(self, engine: AsyncEngine, statement_timeout_ms: int, search_path: str | None = None):
        self.engine = engine
        self.statement_timeout_ms = statement_timeout_ms
        self.search_path = search_path
        self.connection: AsyncConnection | None = None

    async def __aenter__(self):
        self.connection = await self.engine.connect()
        try:
            await self.connection.begin()
            await self.connection.exec_driver_sql(
                f"SET LOCAL statement_timeout = {int(self.statement_timeout_ms)}", execution_options=_NO_PARAMS
            )
            if self.search_path:
                await self.connection.exec_driver_sql(
                    f"SET LOCAL search_path = {self.search_path}", execution_options=_NO_PARAMS
                )
        except BaseException:
            await self.connection.close()
            self.connection = None
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb):
        try:
            await self.connection.rollback()
        finally:
            await self.connection.close()
            self.connection = None

    async def execute(self, sql: str) -> StatementResult:
        # raw driver call: freeform text may contain ':' and '%' that must not
        # be read as bind markers
        result = await self.connection.exec_driver_sql(sql, execution_options=_NO_PARAMS)
        if not result.returns_rows:
            return StatementResult(fields=[])
        fields = list(result.keys())
        return StatementResult(fields=fields, rows=[dict(r) for r in result.mappings().all()])

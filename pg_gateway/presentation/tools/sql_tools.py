from __future__ import annotations

from pydantic import Field

from pg_gateway.application.requests import FreeformQueryRequest, TableReadRequest
from pg_gateway.config.policy import MAX_ROW_LIMIT
from pg_gateway.container import Container
from pg_gateway.presentation.dispatch import dispatch
from pg_gateway.presentation.tools.annotations import QUERY_ANNOTATIONS


def register(mcp, container: Container) -> None:
    default_limit = container.policy.default_limit

    @mcp.tool(
        name="postgres_query_table",
        title="Query single table",
        description=(
            "Run a simple SELECT on one table with an automatic LIMIT. For JOINs, subqueries, CTEs or "
            f"multi-table queries use postgres_execute_query. Max rows: {MAX_ROW_LIMIT}."
        ),
        tags={"sql"},
        meta={"read": True},
        annotations=QUERY_ANNOTATIONS,
    )
    async def query_table(
        schema: str = Field(min_length=1, description="Schema name."),
        table: str = Field(min_length=1, description="Table name."),
        columns: str = Field(default="*", description='Columns to select (e.g. "id, name" or "*" for all).'),
        where: str | None = Field(default=None, description="Optional WHERE clause, without the WHERE keyword."),
        limit: int = Field(
            default=default_limit,
            ge=1,
            le=MAX_ROW_LIMIT,
            description=f"Max rows to return (default: {default_limit}, max: {MAX_ROW_LIMIT}).",
        ),
    ) -> str:
        req = TableReadRequest(schema=schema, table=table, columns=columns, where=where, limit=limit)
        return await dispatch("postgres_query_table", container.sql.query_table(req))

    @mcp.tool(
        name="postgres_execute_query",
        title="Execute read-only SQL query",
        description=(
            "Run a complete read-only SQL query. Supports JOINs, subqueries, CTEs (WITH), aggregates, UNION "
            "and multi-table reads. Only SELECT/WITH are allowed. Timeout: 30 seconds. "
            f"Max rows: {MAX_ROW_LIMIT}."
        ),
        tags={"sql"},
        meta={"read": True, "safety": "readonly"},
        annotations=QUERY_ANNOTATIONS,
    )
    async def execute_query(
        query: str = Field(
            min_length=1,
            description="Complete SELECT statement (e.g. SELECT a.*, b.name FROM s.t1 a JOIN s.t2 b ON a.id = b.id).",
        ),
        limit: int = Field(
            default=default_limit,
            ge=1,
            le=MAX_ROW_LIMIT,
            description=f"Max rows (default: {default_limit}, max: {MAX_ROW_LIMIT}). An explicit LIMIT in the query wins.",
        ),
    ) -> str:
        req = FreeformQueryRequest(query=query, limit=limit)
        return await dispatch("postgres_execute_query", container.sql.execute_query(req))

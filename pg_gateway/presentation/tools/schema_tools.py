from __future__ import annotations

from pydantic import Field

from pg_gateway.application.requests import PageRequest
from pg_gateway.container import Container
from pg_gateway.presentation.dispatch import dispatch
from pg_gateway.presentation.tools.annotations import INTROSPECTION_ANNOTATIONS


def register(mcp, container: Container) -> None:
    @mcp.tool(
        name="postgres_list_schemas",
        title="List PostgreSQL schemas",
        description="List the accessible schemas of the database. Filtered by DB_SCHEMAS when configured.",
        tags={"schema"},
        meta={"read": True},
        annotations=INTROSPECTION_ANNOTATIONS,
    )
    async def list_schemas() -> str:
        return await dispatch("postgres_list_schemas", container.schema.list_schemas())

    @mcp.tool(
        name="postgres_list_tables",
        title="List tables in schema",
        description="List the tables of a schema with column count and description. Paginated with limit/offset.",
        tags={"schema"},
        meta={"read": True},
        annotations=INTROSPECTION_ANNOTATIONS,
    )
    async def list_tables(
        schema: str = Field(min_length=1, description="Schema name (e.g. public)."),
        limit: int = Field(default=50, ge=1, le=500, description="Max tables to return (default: 50)."),
        offset: int = Field(default=0, ge=0, description="Tables to skip for pagination (default: 0)."),
    ) -> str:
        req = PageRequest(schema=schema, limit=limit, offset=offset)
        return await dispatch("postgres_list_tables", container.schema.list_tables(req))

    @mcp.tool(
        name="postgres_describe_table",
        title="Describe table structure",
        description="Full structure of a table: columns with types and defaults, constraints (PK/FK/UNIQUE) and indexes.",
        tags={"schema"},
        meta={"read": True},
        annotations=INTROSPECTION_ANNOTATIONS,
    )
    async def describe_table(
        schema: str = Field(min_length=1, description="Schema name."),
        table: str = Field(min_length=1, description="Table name."),
    ) -> str:
        return await dispatch("postgres_describe_table", container.schema.describe_table(schema, table))

from __future__ import annotations

from fastmcp import FastMCP

from pg_gateway.container import Container

from pg_gateway.presentation.tools.health_tools import register as register_health
from pg_gateway.presentation.tools.schema_tools import register as register_schema
from pg_gateway.presentation.tools.object_tools import register as register_objects
from pg_gateway.presentation.tools.sql_tools import register as register_sql

from pg_gateway.presentation.prompts.prompts import register as register_prompts


def build_mcp_server(container: Container) -> FastMCP:
    mcp = FastMCP(
        name="mcp-postgres",
        instructions=(
            "Read-only PostgreSQL introspection and query tools. "
            "Prefer the introspection and single-table tools; use postgres_execute_query only when needed."
        ),
    )

    register_health(mcp, container)
    register_schema(mcp, container)
    register_objects(mcp, container)
    register_sql(mcp, container)
    register_prompts(mcp, container)

    return mcp

from __future__ import annotations

from pydantic import Field

from pg_gateway.application.requests import PageRequest
from pg_gateway.container import Container
from pg_gateway.presentation.dispatch import dispatch
from pg_gateway.presentation.tools.annotations import INTROSPECTION_ANNOTATIONS


def register(mcp, container: Container) -> None:
    @mcp.tool(
        name="postgres_list_functions",
        title="List PostgreSQL functions",
        description="List the functions and procedures of a schema with arguments, return type and language. Paginated.",
        tags={"objects"},
        meta={"read": True},
        annotations=INTROSPECTION_ANNOTATIONS,
    )
    async def list_functions(
        schema: str = Field(min_length=1, description="Schema name."),
        limit: int = Field(default=50, ge=1, le=500, description="Max functions to return (default: 50)."),
        offset: int = Field(default=0, ge=0, description="Functions to skip for pagination (default: 0)."),
    ) -> str:
        req = PageRequest(schema=schema, limit=limit, offset=offset)
        return await dispatch("postgres_list_functions", container.objects.list_functions(req))

    @mcp.tool(
        name="postgres_get_function_definition",
        title="Get function source code",
        description="Full definition (source code) of a stored function or procedure.",
        tags={"objects"},
        meta={"read": True},
        annotations=INTROSPECTION_ANNOTATIONS,
    )
    async def get_function_definition(
        schema: str = Field(min_length=1, description="Schema name."),
        function_name: str = Field(min_length=1, description="Function name."),
    ) -> str:
        return await dispatch(
            "postgres_get_function_definition",
            container.objects.get_function_definition(schema, function_name),
        )

    @mcp.tool(
        name="postgres_list_triggers",
        title="List PostgreSQL triggers",
        description="List the triggers of a schema with their table, event and timing. Paginated.",
        tags={"objects"},
        meta={"read": True},
        annotations=INTROSPECTION_ANNOTATIONS,
    )
    async def list_triggers(
        schema: str = Field(min_length=1, description="Schema name."),
        limit: int = Field(default=50, ge=1, le=500, description="Max triggers to return (default: 50)."),
        offset: int = Field(default=0, ge=0, description="Triggers to skip for pagination (default: 0)."),
    ) -> str:
        req = PageRequest(schema=schema, limit=limit, offset=offset)
        return await dispatch("postgres_list_triggers", container.objects.list_triggers(req))

    @mcp.tool(
        name="postgres_get_trigger_definition",
        title="Get trigger definition",
        description="Full definition of a trigger and its action statement.",
        tags={"objects"},
        meta={"read": True},
        annotations=INTROSPECTION_ANNOTATIONS,
    )
    async def get_trigger_definition(
        schema: str = Field(min_length=1, description="Schema name."),
        trigger_name: str = Field(min_length=1, description="Trigger name."),
    ) -> str:
        return await dispatch(
            "postgres_get_trigger_definition",
            container.objects.get_trigger_definition(schema, trigger_name),
        )

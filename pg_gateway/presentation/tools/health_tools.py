from __future__ import annotations

from pg_gateway.container import Container
from pg_gateway.presentation.dispatch import dispatch
from pg_gateway.presentation.tools.annotations import INTROSPECTION_ANNOTATIONS


def register(mcp, container: Container) -> None:
    @mcp.tool(
        name="postgres_ping",
        title="DB ping",
        description="Connectivity check: current database, user, server time, version and allowed schemas.",
        tags={"health"},
        meta={"read": True},
        annotations=INTROSPECTION_ANNOTATIONS,
    )
    async def ping() -> str:
        return await dispatch("postgres_ping", container.health.ping())

from __future__ import annotations

from pg_gateway.container import Container


def register(mcp, container: Container) -> None:
    @mcp.prompt(
        name="explore_database",
        title="Explore database",
        description="Step-by-step guide for exploring a schema with the read-only Postgres tools.",
        tags={"schema"},
    )
    def explore_database(schema: str = "public") -> str:
        allowed = ", ".join(container.policy.allowed_schemas) or "all schemas"
        return f"""
Explore the `{schema}` schema of this PostgreSQL database (reachable: {allowed}).

Use tools, in this order:
1. postgres_list_schemas() to confirm `{schema}` is reachable
2. postgres_list_tables(schema="{schema}") and follow next_offset while has_more is true
3. postgres_describe_table(schema="{schema}", table=...) for the tables that matter
4. postgres_query_table(...) to sample rows (keep limit small, select only needed columns)
5. postgres_execute_query(...) only for JOINs, CTEs or aggregates

Rules: read-only, at most {container.policy.max_limit} rows per call; if a response is truncated,
narrow the columns, add a WHERE clause or paginate.
""".strip()

from __future__ import annotations

from pg_gateway.application.errors import NotFound
from pg_gateway.application.requests import PageRequest
from pg_gateway.application.services.pagination import page_result
from pg_gateway.infrastructure.db import catalog
from pg_gateway.infrastructure.db.reader import CatalogReader
from pg_gateway.infrastructure.db.schema_gate import SchemaGate


class ObjectService:
    """Functions, procedures and triggers of a schema."""

    def __init__(self, reader: CatalogReader, gate: SchemaGate):
        self.reader = reader
        self.gate = gate

    async def list_functions(self, req: PageRequest) -> dict:
        self.gate.assert_allowed(req.schema)

        total = await self.reader.fetch_scalar(catalog.COUNT_FUNCTIONS, {"schema": req.schema})
        rows = await self.reader.fetch_all(
            catalog.LIST_FUNCTIONS,
            {"schema": req.schema, "limit": req.limit, "offset": req.offset},
        )
        return page_result("functions", rows, int(total), req.offset, schema=req.schema)

    async def get_function_definition(self, schema: str, function_name: str) -> dict:
        self.gate.assert_allowed(schema)

        rows = await self.reader.fetch_all(catalog.FUNCTION_DEFINITION, {"schema": schema, "name": function_name})
        if not rows:
            raise NotFound(f"Function '{function_name}' not found in schema '{schema}'")

        out = dict(rows[0])
        if len(rows) > 1:
            # overloaded name: first definition plus the other signatures
            out["overloads"] = [r["arguments"] for r in rows]
        return out

    async def list_triggers(self, req: PageRequest) -> dict:
        self.gate.assert_allowed(req.schema)

        total = await self.reader.fetch_scalar(catalog.COUNT_TRIGGERS, {"schema": req.schema})
        rows = await self.reader.fetch_all(
            catalog.LIST_TRIGGERS,
            {"schema": req.schema, "limit": req.limit, "offset": req.offset},
        )
        return page_result("triggers", rows, int(total), req.offset, schema=req.schema)

    async def get_trigger_definition(self, schema: str, trigger_name: str) -> dict:
        self.gate.assert_allowed(schema)

        row = await self.reader.fetch_one(catalog.TRIGGER_DEFINITION, {"schema": schema, "name": trigger_name})
        if row is None:
            raise NotFound(f"Trigger '{trigger_name}' not found in schema '{schema}'")
        return row

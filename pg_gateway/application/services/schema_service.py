from __future__ import annotations

import asyncio
import logging

from pg_gateway.application.requests import PageRequest
from pg_gateway.application.services.pagination import page_result
from pg_gateway.infrastructure.db import catalog
from pg_gateway.infrastructure.db.reader import CatalogReader
from pg_gateway.infrastructure.db.schema_gate import SchemaGate

logger = logging.getLogger(__name__)


class SchemaService:
    def __init__(self, reader: CatalogReader, gate: SchemaGate):
        self.reader = reader
        self.gate = gate

    async def list_schemas(self) -> dict:
        rows = await self.reader.fetch_all(catalog.LIST_SCHEMAS)
        # listing is safe; only the visible result is restricted
        schemas = self.gate.filter_allowed(r["schema_name"] for r in rows)
        return {
            "schemas": schemas,
            "total": len(schemas),
            "configured_schemas": list(self.gate.allowed_schemas) if self.gate.allowed_schemas else "all",
        }

    async def list_tables(self, req: PageRequest) -> dict:
        self.gate.assert_allowed(req.schema)

        total = await self.reader.fetch_scalar(catalog.COUNT_TABLES, {"schema": req.schema})
        rows = await self.reader.fetch_all(
            catalog.LIST_TABLES,
            {"schema": req.schema, "limit": req.limit, "offset": req.offset},
        )
        return page_result("tables", rows, int(total), req.offset, schema=req.schema)

    async def describe_table(self, schema: str, table: str) -> dict:
        self.gate.assert_allowed(schema)

        params = {"schema": schema, "table": table}
        columns, constraints, indexes = await asyncio.gather(
            self.reader.fetch_all(catalog.TABLE_COLUMNS, params),
            self.reader.fetch_all(catalog.TABLE_CONSTRAINTS, params),
            self.reader.fetch_all(catalog.TABLE_INDEXES, params),
        )
        logger.debug(
            "described %s.%s: %d columns, %d constraints, %d indexes",
            schema,
            table,
            len(columns),
            len(constraints),
            len(indexes),
        )
        return {
            "schema": schema,
            "table": table,
            "columns": columns,
            "constraints": constraints,
            "indexes": indexes,
        }

from __future__ import annotations

from pg_gateway.infrastructure.db import catalog
from pg_gateway.infrastructure.db.reader import CatalogReader
from pg_gateway.infrastructure.db.schema_gate import SchemaGate


class HealthService:
    def __init__(self, reader: CatalogReader, gate: SchemaGate):
        self.reader = reader
        self.gate = gate

    async def ping(self) -> dict:
        row = await self.reader.fetch_one(catalog.SERVER_INFO) or {}
        version = str(row.get("version") or "")
        return {
            "db": row.get("db"),
            "user": row.get("usr"),
            "server_time": row.get("server_time"),
            "version": version.split(",")[0],
            "allowed_schemas": list(self.gate.allowed_schemas) if self.gate.allowed_schemas else "all",
        }

    async def check_connection(self) -> None:
        await self.reader.fetch_scalar("SELECT 1")

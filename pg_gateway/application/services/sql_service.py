from __future__ import annotations

import logging
from typing import Callable

from pg_gateway.application.requests import FreeformQueryRequest, TableReadRequest
from pg_gateway.config.policy import GatewayPolicy
from pg_gateway.infrastructure.db.reader import CatalogReader
from pg_gateway.infrastructure.db.schema_gate import SchemaGate
from pg_gateway.infrastructure.db.sql_safety import apply_row_limit, validate_readonly_sql
from pg_gateway.infrastructure.db.statements import build_table_select, display_sql
from pg_gateway.infrastructure.db.uow import ReadOnlyUnitOfWork

logger = logging.getLogger(__name__)


class SqlService:
    def __init__(
        self,
        reader: CatalogReader,
        gate: SchemaGate,
        policy: GatewayPolicy,
        uow_factory: Callable[[], ReadOnlyUnitOfWork],
    ):
        self.reader = reader
        self.gate = gate
        self.policy = policy
        self.uow_factory = uow_factory

    async def query_table(self, req: TableReadRequest) -> dict:
        self.gate.assert_allowed(req.schema)

        limit = self.policy.effective_limit(req.limit)
        query, params = build_table_select(req.schema, req.table, req.columns, req.where, limit)
        logger.debug("query_table: %s (limit=%d)", query, limit)

        rows = await self.reader.fetch_all(query, params)
        return {
            "schema": req.schema,
            "table": req.table,
            "query": display_sql(query),
            "rows": rows,
            "row_count": len(rows),
            "limit": limit,
        }

    async def execute_query(self, req: FreeformQueryRequest) -> dict:
        validate_readonly_sql(req.query)

        requested = self.policy.effective_limit(req.limit)
        final_query, _ = apply_row_limit(req.query, requested, self.policy.max_limit)
        logger.debug("execute_query: %s", final_query)

        async with self.uow_factory() as uow:
            result = await uow.execute(final_query)

        return {
            "query": final_query,
            "rows": result.rows,
            "row_count": len(result.rows),
            "fields": result.fields,
        }

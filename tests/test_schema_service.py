from __future__ import annotations

import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from pg_gateway.application.errors import PermissionDenied
from pg_gateway.application.requests import PageRequest
from pg_gateway.application.services.schema_service import SchemaService
from pg_gateway.infrastructure.db import catalog
from pg_gateway.infrastructure.db.schema_gate import SchemaGate
from tests._helpers.fakes import FakeReader

SCHEMAS = [{"schema_name": s} for s in ["audit", "public", "sales"]]
TABLES = [{"table_name": f"t{i}", "table_description": None, "column_count": 3} for i in range(5)]


def test_list_schemas_open_policy() -> None:
    svc = SchemaService(FakeReader(rows={catalog.LIST_SCHEMAS: SCHEMAS}), SchemaGate(()))
    out = asyncio.run(svc.list_schemas())
    assert out == {"schemas": ["audit", "public", "sales"], "total": 3, "configured_schemas": "all"}


def test_list_schemas_filters_to_allow_list() -> None:
    reader = FakeReader(rows={catalog.LIST_SCHEMAS: SCHEMAS})
    svc = SchemaService(reader, SchemaGate(["sales", "public", "missing"]))
    out = asyncio.run(svc.list_schemas())
    assert out["schemas"] == ["public", "sales"]
    assert out["total"] == 2
    assert out["configured_schemas"] == ["sales", "public", "missing"]
    # the catalog is still queried in full
    assert reader.calls == [(catalog.LIST_SCHEMAS, {})]


def test_list_tables_first_page() -> None:
    reader = FakeReader(rows={catalog.LIST_TABLES: TABLES[:2]}, scalars={catalog.COUNT_TABLES: 5})
    svc = SchemaService(reader, SchemaGate(()))
    out = asyncio.run(svc.list_tables(PageRequest(schema="public", limit=2, offset=0)))

    assert out["schema"] == "public"
    assert [t["table_name"] for t in out["tables"]] == ["t0", "t1"]
    assert out["count"] == 2
    assert out["total"] == 5
    assert out["offset"] == 0
    assert out["has_more"] is True
    assert out["next_offset"] == 2
    assert (catalog.LIST_TABLES, {"schema": "public", "limit": 2, "offset": 0}) in reader.calls


def test_list_tables_last_page_has_no_next_offset() -> None:
    reader = FakeReader(rows={catalog.LIST_TABLES: TABLES[4:]}, scalars={catalog.COUNT_TABLES: 5})
    svc = SchemaService(reader, SchemaGate(()))
    out = asyncio.run(svc.list_tables(PageRequest(schema="public", limit=2, offset=4)))
    assert out["count"] == 1
    assert out["has_more"] is False
    assert "next_offset" not in out


def test_list_tables_denied_before_any_query() -> None:
    reader = FakeReader()
    svc = SchemaService(reader, SchemaGate(["public"]))
    with pytest.raises(PermissionDenied):
        asyncio.run(svc.list_tables(PageRequest(schema="secret")))
    assert reader.calls == []


def test_describe_table_combines_three_lookups() -> None:
    reader = FakeReader(
        rows={
            catalog.TABLE_COLUMNS: [{"column_name": "id", "data_type": "integer"}],
            catalog.TABLE_CONSTRAINTS: [{"constraint_name": "users_pkey", "constraint_type": "PRIMARY KEY"}],
            catalog.TABLE_INDEXES: [{"index_name": "users_pkey", "is_primary": True}],
        }
    )
    svc = SchemaService(reader, SchemaGate(()))
    out = asyncio.run(svc.describe_table("public", "users"))

    assert out["schema"] == "public"
    assert out["table"] == "users"
    assert out["columns"][0]["column_name"] == "id"
    assert out["constraints"][0]["constraint_type"] == "PRIMARY KEY"
    assert out["indexes"][0]["is_primary"] is True
    assert {sql for sql, _ in reader.calls} == {
        catalog.TABLE_COLUMNS,
        catalog.TABLE_CONSTRAINTS,
        catalog.TABLE_INDEXES,
    }
    assert all(params == {"schema": "public", "table": "users"} for _, params in reader.calls)


def test_describe_table_fails_if_any_lookup_fails() -> None:
    reader = FakeReader(rows={catalog.TABLE_INDEXES: OperationalError("SELECT", {}, Exception("gone"))})
    svc = SchemaService(reader, SchemaGate(()))
    with pytest.raises(OperationalError):
        asyncio.run(svc.describe_table("public", "users"))


def test_describe_table_denied() -> None:
    reader = FakeReader()
    svc = SchemaService(reader, SchemaGate(["public"]))
    with pytest.raises(PermissionDenied):
        asyncio.run(svc.describe_table("private", "users"))
    assert reader.calls == []

from __future__ import annotations

import pytest

from pg_gateway.application.errors import PermissionDenied
from pg_gateway.infrastructure.db.schema_gate import SchemaGate


@pytest.mark.parametrize("schema", ["public", "Sales", "anything_at_all", ""])
def test_open_policy_allows_everything(schema: str) -> None:
    gate = SchemaGate(())
    assert gate.is_allowed(schema)
    gate.assert_allowed(schema)


def test_closed_policy_is_exact_and_case_sensitive() -> None:
    gate = SchemaGate(["public", "sales"])
    assert gate.is_allowed("public")
    assert gate.is_allowed("sales")
    assert not gate.is_allowed("Public")
    assert not gate.is_allowed("pub")
    assert not gate.is_allowed("sales_archive")
    assert not gate.is_allowed("public ")


def test_assert_allowed_names_the_schema() -> None:
    gate = SchemaGate(["public"])
    with pytest.raises(PermissionDenied, match="Schema 'secret' is not in the allowed schemas list"):
        gate.assert_allowed("secret")


def test_filter_keeps_source_order() -> None:
    gate = SchemaGate(["sales", "public"])
    assert gate.filter_allowed(["audit", "public", "sales", "tmp"]) == ["public", "sales"]


def test_search_path() -> None:
    assert SchemaGate(()).search_path() is None
    assert SchemaGate(["public", "sales"]).search_path() == '"public", "sales"'
    assert SchemaGate(['we"ird']).search_path() == '"we""ird"'

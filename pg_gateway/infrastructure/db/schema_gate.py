from __future__ import annotations

from collections.abc import Iterable

from pg_gateway.application.errors import PermissionDenied


class SchemaGate:
    """Allow-list check for schema names.

    An empty allow-list is the open policy: every schema passes. Otherwise a
    schema passes only on an exact, case-sensitive match.
    """

    def __init__(self, allowed_schemas: Iterable[str] = ()):
        self.allowed_schemas = tuple(allowed_schemas)

    def is_allowed(self, schema: str) -> bool:
        if not self.allowed_schemas:
            return True
        return schema in self.allowed_schemas

    def assert_allowed(self, schema: str) -> None:
        if not self.is_allowed(schema):
            raise PermissionDenied(f"Schema '{schema}' is not in the allowed schemas list")

    def filter_allowed(self, schemas: Iterable[str]) -> list[str]:
        return [s for s in schemas if self.is_allowed(s)]

    def search_path(self) -> str | None:
        if not self.allowed_schemas:
            return None
        return ", ".join('"' + s.replace('"', '""') + '"' for s in self.allowed_schemas)

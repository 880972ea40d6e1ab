from __future__ import annotations

from dataclasses import dataclass

from pg_gateway.config.settings import Settings

MAX_ROW_LIMIT = 100
STATEMENT_TIMEOUT_MS = 30_000
CHARACTER_LIMIT = 25_000


@dataclass(frozen=True)
class GatewayPolicy:
    """Immutable request policy shared by every operation.

    ``allowed_schemas`` empty means the open policy (all schemas reachable).
    ``default_limit`` is the row cap applied when a caller does not ask for one;
    ``max_limit`` is the absolute ceiling no call may exceed.
    """

    allowed_schemas: tuple[str, ...] = ()
    default_limit: int = 5
    max_limit: int = MAX_ROW_LIMIT
    statement_timeout_ms: int = STATEMENT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if self.max_limit < 1:
            raise ValueError("max_limit must be >= 1")
        if not 1 <= self.default_limit <= self.max_limit:
            raise ValueError(f"default_limit must be within [1, {self.max_limit}]")

    @property
    def restricted(self) -> bool:
        return bool(self.allowed_schemas)

    def effective_limit(self, requested: int | None = None) -> int:
        cap = self.default_limit if requested is None else requested
        return max(1, min(cap, self.max_limit))

    @classmethod
    def from_settings(cls, settings: Settings) -> "GatewayPolicy":
        default_limit = max(1, min(settings.default_limit, MAX_ROW_LIMIT))
        return cls(allowed_schemas=settings.allowed_schemas, default_limit=default_limit)

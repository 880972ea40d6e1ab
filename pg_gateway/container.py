from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncEngine

from pg_gateway.config.policy import GatewayPolicy
from pg_gateway.config.settings import Settings
from pg_gateway.infrastructure.db.engine import build_engine, build_url
from pg_gateway.infrastructure.db.reader import CatalogReader
from pg_gateway.infrastructure.db.schema_gate import SchemaGate
from pg_gateway.infrastructure.db.uow import ReadOnlyUnitOfWork

from pg_gateway.application.services.health_service import HealthService
from pg_gateway.application.services.object_service import ObjectService
from pg_gateway.application.services.schema_service import SchemaService
from pg_gateway.application.services.sql_service import SqlService


@dataclass(frozen=True)
class Container:
    settings: Settings
    policy: GatewayPolicy
    engine: AsyncEngine
    uow_factory: Callable[[], ReadOnlyUnitOfWork]

    schema: SchemaService
    objects: ObjectService
    sql: SqlService
    health: HealthService


def build_container(settings: Settings, engine: AsyncEngine | None = None) -> Container:
    policy = GatewayPolicy.from_settings(settings)
    if engine is None:
        engine = build_engine(build_url(settings), connect_timeout=settings.connect_timeout)

    gate = SchemaGate(policy.allowed_schemas)
    reader = CatalogReader(engine)

    def uow_factory() -> ReadOnlyUnitOfWork:
        return ReadOnlyUnitOfWork(
            engine,
            statement_timeout_ms=policy.statement_timeout_ms,
            search_path=gate.search_path(),
        )

    return Container(
        settings=settings,
        policy=policy,
        engine=engine,
        uow_factory=uow_factory,
        schema=SchemaService(reader, gate),
        objects=ObjectService(reader, gate),
        sql=SqlService(reader, gate, policy, uow_factory),
        health=HealthService(reader, gate),
    )

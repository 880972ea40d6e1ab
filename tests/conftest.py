from __future__ import annotations

import pytest

from pg_gateway.config.policy import GatewayPolicy
from tests._helpers.fakes import FakeReader, FakeUnitOfWork


@pytest.fixture
def open_policy() -> GatewayPolicy:
    return GatewayPolicy(allowed_schemas=(), default_limit=5)


@pytest.fixture
def closed_policy() -> GatewayPolicy:
    return GatewayPolicy(allowed_schemas=("public", "sales"), default_limit=5)


@pytest.fixture
def reader() -> FakeReader:
    return FakeReader()


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()

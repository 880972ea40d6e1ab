from __future__ import annotations

import pytest

from pg_gateway.config.policy import GatewayPolicy
from pg_gateway.config.settings import Settings
from pg_gateway.infrastructure.db.engine import build_url, normalize_sqlalchemy_dsn


def test_allowed_schemas_parsed_from_env(monkeypatch) -> None:
    monkeypatch.setenv("DB_SCHEMAS", " public, sales ,, ")
    monkeypatch.setenv("DEFAULT_LIMIT", "20")
    settings = Settings(_env_file=None)
    assert settings.allowed_schemas == ("public", "sales")

    policy = GatewayPolicy.from_settings(settings)
    assert policy.allowed_schemas == ("public", "sales")
    assert policy.default_limit == 20
    assert policy.restricted


def test_empty_schema_list_is_open(monkeypatch) -> None:
    monkeypatch.delenv("DB_SCHEMAS", raising=False)
    policy = GatewayPolicy.from_settings(Settings(_env_file=None))
    assert policy.allowed_schemas == ()
    assert not policy.restricted


def test_default_limit_clamped_into_range(monkeypatch) -> None:
    monkeypatch.setenv("DEFAULT_LIMIT", "1000")
    assert GatewayPolicy.from_settings(Settings(_env_file=None)).default_limit == 100
    monkeypatch.setenv("DEFAULT_LIMIT", "0")
    assert GatewayPolicy.from_settings(Settings(_env_file=None)).default_limit == 1


@pytest.mark.parametrize("requested, expected", [(None, 5), (1, 1), (50, 50), (100, 100), (500, 100), (0, 1)])
def test_effective_limit(requested, expected) -> None:
    assert GatewayPolicy(default_limit=5).effective_limit(requested) == expected


def test_policy_rejects_bad_default() -> None:
    with pytest.raises(ValueError):
        GatewayPolicy(default_limit=0)
    with pytest.raises(ValueError):
        GatewayPolicy(default_limit=101)


def test_policy_is_immutable() -> None:
    policy = GatewayPolicy()
    with pytest.raises(AttributeError):
        policy.default_limit = 10


@pytest.mark.parametrize(
    "dsn, expected",
    [
        ("postgresql://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("postgres://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("  postgresql+psycopg://u@h/db ", "postgresql+psycopg://u@h/db"),
    ],
)
def test_normalize_dsn(dsn, expected) -> None:
    assert normalize_sqlalchemy_dsn(dsn) == expected


def test_url_from_discrete_settings(monkeypatch) -> None:
    monkeypatch.delenv("POSTGRES_DSN", raising=False)
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_NAME", "shop")
    monkeypatch.setenv("DB_USER", "reader")
    monkeypatch.setenv("DB_PASSWORD", "s3cret")
    monkeypatch.setenv("DB_SSL", "true")

    url = build_url(Settings(_env_file=None))
    assert url.drivername == "postgresql+psycopg"
    assert url.host == "db.internal"
    assert url.port == 6543
    assert url.database == "shop"
    assert url.username == "reader"
    assert url.password == "s3cret"
    assert url.query["sslmode"] == "require"


def test_dsn_overrides_discrete_settings(monkeypatch) -> None:
    monkeypatch.setenv("POSTGRES_DSN", "postgres://u:p@h:5432/db")
    monkeypatch.setenv("DB_HOST", "ignored")
    assert build_url(Settings(_env_file=None)) == "postgresql+psycopg://u:p@h:5432/db"

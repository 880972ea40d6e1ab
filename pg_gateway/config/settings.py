from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    postgres_dsn: str | None = None

    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str | None = None
    db_user: str | None = None
    db_password: str | None = None
    db_ssl: bool = False
    connect_timeout: int = 10

    # comma-separated; empty means every schema is reachable
    db_schemas: str = ""
    default_limit: int = 5

    log_level: str = "INFO"

    @property
    def allowed_schemas(self) -> tuple[str, ...]:
        return tuple(s.strip() for s in self.db_schemas.split(",") if s.strip())

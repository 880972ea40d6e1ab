from __future__ import annotations

import asyncio
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from pg_gateway.config.logging import configure_logging
from pg_gateway.config.settings import Settings
from pg_gateway.container import Container, build_container
from pg_gateway.presentation.mcp_server import build_mcp_server

logger = logging.getLogger(__name__)


async def serve(container: Container) -> None:
    mcp = build_mcp_server(container)

    logger.info("checking database connection")
    try:
        await container.health.check_connection()
    except (SQLAlchemyError, OSError) as exc:
        logger.error("could not connect to PostgreSQL: %s", exc)
        await container.engine.dispose()
        raise SystemExit(1) from exc

    logger.info(
        "PostgreSQL reachable; allowed schemas: %s; default row cap: %d",
        ", ".join(container.policy.allowed_schemas) or "all",
        container.policy.default_limit,
    )
    try:
        await mcp.run_async(transport="stdio")
    finally:
        await container.engine.dispose()


def main() -> None:
    settings = Settings()  # loads .env automatically
    configure_logging(settings.log_level)

    container = build_container(settings)
    try:
        asyncio.run(serve(container))
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()

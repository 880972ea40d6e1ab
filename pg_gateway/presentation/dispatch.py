from __future__ import annotations

import logging
from typing import Any, Awaitable

from fastmcp.exceptions import ToolError
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from pg_gateway.application.errors import GatewayError, UpstreamFailure
from pg_gateway.presentation.formatting import FormattedResponse, format_error, format_result

logger = logging.getLogger(__name__)


def upstream_failure(exc: SQLAlchemyError) -> UpstreamFailure:
    # prefer the driver's own message over SQLAlchemy's wrapper text
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        message = str(exc.orig).strip()
    else:
        message = str(exc).strip()
    return UpstreamFailure(f"Database error: {message or type(exc).__name__}")


async def run_operation(name: str, operation: Awaitable[Any]) -> FormattedResponse:
    """Await one tool body and package whatever comes out of it.

    Failures never escape: they become an error-flagged response so one bad
    call cannot take down the session.
    """
    logger.debug("tool %s: start", name)
    try:
        data = await operation
        response = format_result(data)
    except GatewayError as exc:
        logger.warning("tool %s rejected: %s", name, exc)
        return format_error(str(exc))
    except SQLAlchemyError as exc:
        err = upstream_failure(exc)
        logger.error("tool %s failed upstream: %s", name, err)
        logger.debug("upstream traceback", exc_info=exc)
        return format_error(str(err))
    except Exception as exc:
        logger.exception("tool %s crashed", name)
        return format_error(f"{type(exc).__name__}: {exc}")

    if response.truncated:
        logger.info("tool %s: response truncated", name)
    return response


def unwrap(response: FormattedResponse) -> str:
    """Hand a response to FastMCP: text on success, ``ToolError`` (isError) otherwise."""
    if response.is_error:
        raise ToolError(response.text)
    return response.text


async def dispatch(name: str, operation: Awaitable[Any]) -> str:
    return unwrap(await run_operation(name, operation))

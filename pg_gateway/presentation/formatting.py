from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic_core import to_json

from pg_gateway.config.policy import CHARACTER_LIMIT

TRUNCATION_NOTICE = (
    "\n\n...[RESPONSE TRUNCATED: {total} total chars. "
    "Use column selection, a WHERE clause or pagination to reduce the result.]"
)


@dataclass(frozen=True)
class FormattedResponse:
    text: str
    truncated: bool = False
    is_error: bool = False


def serialize(data: Any) -> str:
    # datetimes, Decimals, UUIDs, bytes and timedeltas from the driver become
    # plain JSON values; driver types pydantic does not know (ranges, geometry)
    # fall back to their text form. Key order is the order the rows came in.
    return to_json(data, indent=2, bytes_mode="base64", fallback=str).decode("utf-8")


def format_result(data: Any, limit: int = CHARACTER_LIMIT) -> FormattedResponse:
    """Single exit point for every tool payload: serialize, then cap the size."""
    text = serialize(data)
    if len(text) <= limit:
        return FormattedResponse(text=text)
    return FormattedResponse(
        text=text[:limit] + TRUNCATION_NOTICE.format(total=len(text)),
        truncated=True,
    )


def format_error(message: str) -> FormattedResponse:
    text = f"Error: {message}"
    if len(text) > CHARACTER_LIMIT:
        text = text[:CHARACTER_LIMIT] + TRUNCATION_NOTICE.format(total=len(text))
        return FormattedResponse(text=text, truncated=True, is_error=True)
    return FormattedResponse(text=text, is_error=True)

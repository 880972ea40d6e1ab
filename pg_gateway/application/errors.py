from __future__ import annotations


class GatewayError(Exception):
    """Base class for failures reported back to the calling agent."""


class PermissionDenied(GatewayError):
    """The schema is not in the configured allow-list."""


class InvalidOperation(GatewayError):
    """A freeform statement failed the read-only gate."""


class NotFound(GatewayError):
    """A named catalog object does not exist."""


class UpstreamFailure(GatewayError):
    """The database rejected the statement, timed out, or was unreachable."""

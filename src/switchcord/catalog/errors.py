"""
Error taxonomy for catalog queries.

Every failure path of a query maps to exactly one of these
exceptions, so callers can branch on the cause.
"""

from datetime import datetime, timezone

from switchcord.catalog.contracts import RemoteError


class CatalogError(Exception):
    """Base exception for catalog query errors."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.original_error = original_error
        self.timestamp = datetime.now(timezone.utc)


class TransportError(CatalogError):
    """Raised when no HTTP response could be obtained (connect, DNS, timeout)."""

    pass


class QueryError(CatalogError):
    """
    Raised when the catalog service answers with a non-success status.

    Attributes:
        code: HTTP status code
        status: HTTP status line text, e.g. ``"404 Not Found"``
        cause: Structured error body sent by the service, if it could be parsed
    """

    def __init__(
        self,
        code: int,
        status: str,
        cause: RemoteError | None = None,
        *,
        endpoint: str | None = None,
    ) -> None:
        message = f"query error: {status}"
        if cause is not None and cause.description:
            message = f"{message}: {cause.description}"
        super().__init__(message, endpoint=endpoint)
        self.code = code
        self.status = status
        self.cause = cause


class ResponseReadError(CatalogError):
    """Raised when the body of a successful response cannot be read."""

    pass


class MalformedResponseError(CatalogError):
    """Raised when a successful response body does not match the expected shape."""

    pass

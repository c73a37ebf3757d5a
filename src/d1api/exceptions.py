"""
D1 Client Exception Hierarchy

Every failure raised by the client derives from ``D1Error``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from d1api.models import QueryError, QueryResponse


class D1Error(Exception):
    """Base exception for all D1 client errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dictionary."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class RemoteQueryError(D1Error):
    """The API answered with one or more error entries."""

    def __init__(
        self,
        body: QueryResponse,
        *,
        status_code: int | None = None,
    ) -> None:
        if body.errors:
            message = "D1 error: " + ", ".join(e.message for e in body.errors)
        else:
            message = "D1 error: request was not successful"
        super().__init__(
            message,
            error_code="REMOTE_QUERY_ERROR",
            details={
                "errors": [e.to_dict() for e in body.errors],
                "status_code": status_code,
            },
        )
        self.body = body
        self.errors: list[QueryError] = list(body.errors)
        self.status_code = status_code


class TransportError(D1Error):
    """The HTTP call or body decoding failed before an envelope was obtained."""

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        status_code: int | None = None,
        error_code: str = "TRANSPORT_ERROR",
    ) -> None:
        super().__init__(message, error_code=error_code)
        self.cause = cause
        self.status_code = status_code
        if status_code is not None:
            self.details["status_code"] = status_code


class TransportTimeoutError(TransportError):
    """The HTTP call timed out."""

    def __init__(self, message: str = "Request timed out", **kwargs: Any) -> None:
        super().__init__(message, error_code="TRANSPORT_TIMEOUT", **kwargs)


class EmptyResultSetError(D1Error):
    """The response carried no statement result to unwrap."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"No query passed to {operation}",
            error_code="EMPTY_RESULT_SET",
            details={"operation": operation},
        )
        self.operation = operation


class InvalidTemplateShapeError(D1Error, ValueError):
    """Fragment and value counts do not line up."""

    def __init__(self, fragment_count: int, value_count: int) -> None:
        super().__init__(
            f"Template expects {max(fragment_count - 1, 0)} value(s), got {value_count}",
            error_code="INVALID_TEMPLATE_SHAPE",
            details={"fragments": fragment_count, "values": value_count},
        )

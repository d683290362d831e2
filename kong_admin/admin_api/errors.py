"""Error types specific to the Kong Admin API layer.

Purpose:
- Provide typed exceptions raised by `KongAdminClient` and `AsyncKongAdminClient`.
- Expose HTTP-oriented context (status code, status text, response body) and
  the name of the failing operation for diagnosis.

Hierarchy::

    KongAdminError
    ├── RequestError
    │   ├── TransportError
    │   └── UnexpectedStatusError
    │       └── RouteNotFoundError
    ├── EncodeError
    └── DecodeError

Usage:
- Catch `KongAdminError` for any failure of a client call.
- Catch `UnexpectedStatusError` and inspect `status_code`, `reason` and `body`
  when the gateway answered with a status other than the expected one.
- Catch `RouteNotFoundError` when a route lookup or deletion returned 404.
"""

from __future__ import annotations

from typing import Any, Optional


class KongAdminError(Exception):
    """Base error for Kong Admin API failures.

    Args:
        message: Human-readable error description.
        operation: Name of the client call that failed (e.g. ``add_route``).
        status_code: Optional HTTP status code associated with the failure.
        details: Optional payload from the server (e.g. raw body).
    """

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(f"Kong Admin API {operation} failed: {message}" if operation else message)
        self.operation = operation
        self.status_code = status_code
        self.details = details


class RequestError(KongAdminError):
    """The HTTP round trip did not yield the expected response."""


class TransportError(RequestError):
    """Raised on connection, DNS, timeout or protocol failures."""


class UnexpectedStatusError(RequestError):
    """Raised when the response status differs from the expected one.

    Args:
        operation: Name of the client call that failed.
        status_code: Status code actually returned.
        reason: Status line text (e.g. ``Conflict``).
        body: Raw response body.
        expected: Status code the operation requires.
    """

    def __init__(
        self,
        operation: str,
        *,
        status_code: int,
        reason: str,
        body: str,
        expected: int,
    ) -> None:
        super().__init__(
            f"{status_code} {reason} (expected {expected}) {body}".rstrip(),
            operation=operation,
            status_code=status_code,
            details=body,
        )
        self.reason = reason
        self.body = body
        self.expected = expected


class RouteNotFoundError(UnexpectedStatusError):
    """Raised when the requested route does not exist (HTTP 404).

    Args:
        operation: Name of the client call that failed.
        route_name: The route name that was not found.
        reason: Status line text.
        body: Raw response body.
        expected: Status code the operation requires.
    """

    def __init__(self, operation: str, route_name: str, *, reason: str, body: str, expected: int) -> None:
        super().__init__(operation, status_code=404, reason=reason, body=body, expected=expected)
        self.route_name = route_name


class EncodeError(KongAdminError):
    """Raised when a request body cannot be built from the given route."""


class DecodeError(KongAdminError):
    """Raised when a response body cannot be parsed into the expected shape."""

"""Shared request/response handling for the Kong Admin API clients.

Both `KongAdminClient` and `AsyncKongAdminClient` only differ in how they
perform I/O. URI construction, the expected status per operation, request
body encoding and response decoding live here so the two stay identical.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .errors import (
    DecodeError,
    EncodeError,
    RouteNotFoundError,
    TransportError,
    UnexpectedStatusError,
)
from .models.dto import RouteDefinition

ModelT = TypeVar("ModelT", bound=BaseModel)

RouteInput = Union[RouteDefinition, Mapping[str, Any]]

# Status code each operation must receive; anything else is an UnexpectedStatusError.
EXPECTED_STATUS: Dict[str, int] = {
    "get_version": 200,
    "list_routes": 200,
    "get_route": 200,
    "add_route": 201,
    "delete_route": 204,
}

# Exceptions from httpx that mean no usable response was received.
TRANSPORT_EXCEPTIONS = (httpx.RequestError, httpx.InvalidURL)


def normalize_base_url(base_url: str) -> str:
    """Trim surrounding whitespace and slashes from an admin base URL.

    >>> normalize_base_url("http://192.168.99.100:30081/ ")
    'http://192.168.99.100:30081'
    """
    return base_url.strip("/ ")


class AdminApiCommonMixin:
    """Shared small utilities used by the sync and async admin clients."""

    base_url: str
    _logger: logging.Logger

    def _headers(self) -> Dict[str, str]:
        """Build standard JSON headers.

        Returns:
            A dictionary with `Content-Type` and `Accept` set to JSON.
        """
        return {"Content-Type": "application/json", "Accept": "application/json"}

    def _apis_url(self) -> str:
        return f"{self.base_url}/apis"

    def _api_url(self, name: str) -> str:
        """Build the URI of a single route, encoding the name as one path segment.

        Raises:
            ValueError: If ``name`` is empty.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("route name must be a non-empty string")
        return f"{self._apis_url()}/{quote(name, safe='')}"

    def _create_payload(self, route: RouteInput) -> Dict[str, Any]:
        """Turn a route (model or mapping) into the ``POST /apis`` body.

        Raises:
            EncodeError: If a mapping does not describe a valid route.
        """
        try:
            model = route if isinstance(route, RouteDefinition) else RouteDefinition.model_validate(route)
            return model.to_create_payload()
        except (ValidationError, TypeError, ValueError) as e:
            self._logger.warning("%s.add_route: cannot encode route: %s", type(self).__name__, e)
            raise EncodeError(f"cannot encode route as JSON: {e}", operation="add_route") from e

    def _transport_error(self, operation: str, method: str, url: str, exc: Exception) -> TransportError:
        self._logger.error("%s.%s: %s %s failed: %s", type(self).__name__, operation, method, url, exc)
        return TransportError(f"{method} {url}: {exc}", operation=operation)

    def _check_status(self, operation: str, response: httpx.Response, *, route_name: Optional[str] = None) -> None:
        """Require the single expected status for ``operation``.

        Raises:
            RouteNotFoundError: On 404 when the call targeted a named route.
            UnexpectedStatusError: On any other mismatching status.
        """
        expected = EXPECTED_STATUS[operation]
        if response.status_code == expected:
            return
        body = response.text
        reason = response.reason_phrase
        self._logger.warning(
            "%s.%s: %s %s returned %d %s (expected %d)",
            type(self).__name__,
            operation,
            response.request.method,
            response.request.url,
            response.status_code,
            reason,
            expected,
        )
        if response.status_code == 404 and route_name is not None:
            raise RouteNotFoundError(operation, route_name, reason=reason, body=body, expected=expected)
        raise UnexpectedStatusError(
            operation, status_code=response.status_code, reason=reason, body=body, expected=expected
        )

    def _decode(self, operation: str, response: httpx.Response, model: Type[ModelT]) -> ModelT:
        """Parse a JSON object body into ``model``.

        Raises:
            DecodeError: If the body is not JSON, not an object, or does not validate.
        """
        try:
            raw = response.json()
        except ValueError as e:
            raise DecodeError(
                f"response body is not valid JSON: {e}",
                operation=operation,
                status_code=response.status_code,
                details=response.text,
            ) from e
        if not isinstance(raw, dict):
            raise DecodeError(
                f"expected a JSON object, got {type(raw).__name__}",
                operation=operation,
                status_code=response.status_code,
                details=raw,
            )
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise DecodeError(
                f"unexpected {model.__name__} shape: {e}",
                operation=operation,
                status_code=response.status_code,
                details=raw,
            ) from e

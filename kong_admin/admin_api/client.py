"""Kong Admin API client

Overview
--------
Thin, synchronous HTTP client for the Kong gateway's administrative REST API.
It reads the gateway version and manages routing definitions ("APIs"):
list, fetch by name, create and delete. Every call is exactly one HTTP round
trip; nothing is cached, retried or paginated.

Errors
------
Transport failures raise ``TransportError``; a status other than the one the
operation expects raises ``UnexpectedStatusError`` (``RouteNotFoundError`` on
404 for named routes) carrying the status text and raw body; bodies that
cannot be built or parsed raise ``EncodeError`` / ``DecodeError``. All of them
derive from ``KongAdminError`` and name the failing operation.

Usage
-----
>>> with KongAdminClient("http://localhost:8001") as kong:
...     kong.get_version()
...     created = kong.add_route(
...         RouteDefinition(name="kong-test-api", request_path="/kong-test-api", upstream_url="http://example.com")
...     )
...     kong.delete_route(created.name)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from kong_admin.core.config import Settings, get_settings

from .base import TRANSPORT_EXCEPTIONS, AdminApiCommonMixin, RouteInput, normalize_base_url
from .models.dto import RouteDefinition, RouteList, VersionInfo


class KongAdminClient(AdminApiCommonMixin):
    """Thin HTTP client for the Kong Admin API.

    Responsibilities
    ----------------
    - get_version
    - list_routes
    - get_route
    - add_route
    - delete_route

    The client holds only the normalized base URI and the transport. It is
    safe to share between threads to the extent the ``httpx.Client`` is.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Create a Kong Admin API client.

        Args:
            base_url: Admin API root (e.g. ``http://localhost:8001``). Surrounding
                whitespace and slashes are trimmed.
            timeout: HTTP timeout for the internally created transport.
            client: Optional preconfigured ``httpx.Client``. It is used as-is and
                is not closed by :meth:`close`.
        """
        self.base_url = normalize_base_url(base_url)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "KongAdminClient":
        """Build a client from ``KONG_ADMIN_URL`` / ``KONG_ADMIN_TIMEOUT``."""
        config = (settings or get_settings()).kong_admin
        return cls(config.url, timeout=config.timeout)

    def _send(self, operation: str, method: str, url: str, *, json: Optional[Dict[str, Any]] = None) -> httpx.Response:
        self._logger.debug("KongAdminClient.%s: %s %s", operation, method, url)
        try:
            return self._client.request(method, url, headers=self._headers(), json=json)
        except TRANSPORT_EXCEPTIONS as e:
            raise self._transport_error(operation, method, url, e) from e

    def get_version(self) -> str:
        """Return the gateway release string.

        API
        ---
        - Method/Path: ``GET /``

        Raises:
            TransportError: The admin endpoint is unreachable.
            DecodeError: The body has no string ``version`` field.
        """
        r = self._send("get_version", "GET", self.base_url)
        self._check_status("get_version", r)
        info = self._decode("get_version", r, VersionInfo)
        self._logger.debug("KongAdminClient.get_version: version=%s", info.version)
        return info.version

    def list_routes(self) -> RouteList:
        """List routes.

        API
        ---
        - Method/Path: ``GET /apis``

        Returns:
            ``RouteList`` with the routes of the first response page and the
            total reported by the gateway.
        """
        r = self._send("list_routes", "GET", self._apis_url())
        self._check_status("list_routes", r)
        routes = self._decode("list_routes", r, RouteList)
        self._logger.debug("KongAdminClient.list_routes: got %d of %d routes", len(routes.data), routes.total)
        return routes

    def get_route(self, name: str) -> RouteDefinition:
        """Fetch a single route by name.

        API
        ---
        - Method/Path: ``GET /apis/{name}``

        Raises:
            RouteNotFoundError: No route with this name exists.
        """
        url = self._api_url(name)
        r = self._send("get_route", "GET", url)
        self._check_status("get_route", r, route_name=name)
        route = self._decode("get_route", r, RouteDefinition)
        self._logger.debug("KongAdminClient.get_route: resolved id=%s name=%s", route.id, route.name)
        return route

    def add_route(self, route: RouteInput) -> RouteDefinition:
        """Create a route.

        API
        ---
        - Method/Path: ``POST /apis``
        - Body: the route without ``id``; empty optional fields are omitted.
        - Expected status: ``201 Created``

        Args:
            route: ``RouteDefinition`` or a mapping with the same fields.

        Returns:
            The created route as echoed by the gateway, with ``id`` filled in.

        Raises:
            EncodeError: ``route`` does not describe a valid route.
            UnexpectedStatusError: The gateway rejected the route (e.g. 409 on a
                duplicate name, 400 on a schema violation).
        """
        payload = self._create_payload(route)
        r = self._send("add_route", "POST", self._apis_url(), json=payload)
        self._check_status("add_route", r)
        created = self._decode("add_route", r, RouteDefinition)
        self._logger.info("KongAdminClient.add_route: created id=%s name=%s", created.id, created.name)
        return created

    def delete_route(self, name: str) -> None:
        """Delete a route by name.

        API
        ---
        - Method/Path: ``DELETE /apis/{name}``
        - Expected status: ``204 No Content``

        Raises:
            RouteNotFoundError: No route with this name exists.
        """
        url = self._api_url(name)
        r = self._send("delete_route", "DELETE", url)
        self._check_status("delete_route", r, route_name=name)
        self._logger.info("KongAdminClient.delete_route: deleted name=%s", name)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "KongAdminClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

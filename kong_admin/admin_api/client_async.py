"""Async Kong Admin API client

Async variant of :class:`~kong_admin.admin_api.client.KongAdminClient` built
on ``httpx.AsyncClient``. URIs, expected status codes, encoding, decoding and
errors are shared with the sync client through ``AdminApiCommonMixin``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from kong_admin.core.config import Settings, get_settings

from .base import TRANSPORT_EXCEPTIONS, AdminApiCommonMixin, RouteInput, normalize_base_url
from .models.dto import RouteDefinition, RouteList, VersionInfo


class AsyncKongAdminClient(AdminApiCommonMixin):
    """Async thin HTTP client for the Kong Admin API.

    - Uses `httpx.AsyncClient` for HTTP operations.
    - Each coroutine performs exactly one request; concurrent calls are not
      ordered or locked against each other.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = normalize_base_url(base_url)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AsyncKongAdminClient":
        config = (settings or get_settings()).kong_admin
        return cls(config.url, timeout=config.timeout)

    async def _send(
        self, operation: str, method: str, url: str, *, json: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        self._logger.debug("AsyncKongAdminClient.%s: %s %s", operation, method, url)
        try:
            return await self._client.request(method, url, headers=self._headers(), json=json)
        except TRANSPORT_EXCEPTIONS as e:
            raise self._transport_error(operation, method, url, e) from e

    async def get_version(self) -> str:
        """``GET /``: return the gateway release string."""
        r = await self._send("get_version", "GET", self.base_url)
        self._check_status("get_version", r)
        return self._decode("get_version", r, VersionInfo).version

    async def list_routes(self) -> RouteList:
        """``GET /apis``: return the first page of routes."""
        r = await self._send("list_routes", "GET", self._apis_url())
        self._check_status("list_routes", r)
        routes = self._decode("list_routes", r, RouteList)
        self._logger.debug("AsyncKongAdminClient.list_routes: got %d of %d routes", len(routes.data), routes.total)
        return routes

    async def get_route(self, name: str) -> RouteDefinition:
        """``GET /apis/{name}``: fetch a single route."""
        url = self._api_url(name)
        r = await self._send("get_route", "GET", url)
        self._check_status("get_route", r, route_name=name)
        return self._decode("get_route", r, RouteDefinition)

    async def add_route(self, route: RouteInput) -> RouteDefinition:
        """``POST /apis``: create a route and return it with its assigned ``id``."""
        payload = self._create_payload(route)
        r = await self._send("add_route", "POST", self._apis_url(), json=payload)
        self._check_status("add_route", r)
        created = self._decode("add_route", r, RouteDefinition)
        self._logger.info("AsyncKongAdminClient.add_route: created id=%s name=%s", created.id, created.name)
        return created

    async def delete_route(self, name: str) -> None:
        """``DELETE /apis/{name}``: delete a route."""
        url = self._api_url(name)
        r = await self._send("delete_route", "DELETE", url)
        self._check_status("delete_route", r, route_name=name)
        self._logger.info("AsyncKongAdminClient.delete_route: deleted name=%s", name)

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncKongAdminClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

"""kong-admin-client.

A client library for the Kong gateway's administrative REST API.

Core subpackages
----------------

- ``kong_admin.admin_api``:

  - ``KongAdminClient`` / ``AsyncKongAdminClient``: one HTTP round trip per
    call for the gateway version and for listing, fetching, creating and
    deleting routing definitions ("APIs").
  - Pydantic DTOs covering both the legacy (0.9.x: ``request_path``,
    ``request_host``) and the modern (0.10.x: ``hosts``, ``uris``) matching
    fields.
  - A typed error hierarchy rooted at ``KongAdminError``.

- ``kong_admin.core``:

  - Settings loaded from ``KONG_ADMIN_*`` environment variables or ``.env``.
  - Logging setup for applications embedding the client.

Typical workflow
----------------

>>> from kong_admin import KongAdminClient, RouteDefinition
>>> with KongAdminClient.from_settings() as kong:
...     kong.add_route(RouteDefinition(name="orders", uris=["/orders"], upstream_url="http://orders:8080"))
...     kong.list_routes().names()
"""

from kong_admin.admin_api import (
    AsyncKongAdminClient,
    DecodeError,
    EncodeError,
    KongAdminClient,
    KongAdminError,
    RequestError,
    RouteDefinition,
    RouteList,
    RouteNotFoundError,
    TransportError,
    UnexpectedStatusError,
    VersionInfo,
)

__all__ = [
    "KongAdminClient",
    "AsyncKongAdminClient",
    "RouteDefinition",
    "RouteList",
    "VersionInfo",
    "KongAdminError",
    "RequestError",
    "TransportError",
    "UnexpectedStatusError",
    "RouteNotFoundError",
    "EncodeError",
    "DecodeError",
]

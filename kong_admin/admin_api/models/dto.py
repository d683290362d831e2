"""Kong Admin API DTO models

Pydantic models that define the request/response contracts for the Kong admin
API ``/`` and ``/apis`` endpoints. These DTOs centralize serialization and
deserialization so the clients only move bytes.

Guidelines:
- Keep field names identical to the gateway's JSON (snake_case, case-sensitive).
- Two schema generations coexist on ``RouteDefinition``: the legacy one
  (``request_path``, ``request_host``, ``strip_request_path``; gateway 0.9 and
  earlier) and the modern one (``hosts``, ``uris``, ``strip_uri``; 0.10 and
  later). Both are optional; the gateway decides which it requires.
- Normalize flexible wire formats in validators instead of in the clients.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, field_validator, model_validator

from ..schemas.base import BaseSchema

# Fields left out of request bodies when they hold no value.
_OMIT_IF_EMPTY = frozenset(
    {
        "upstream_url",
        "request_path",
        "request_host",
        "strip_request_path",
        "hosts",
        "uris",
        "strip_uri",
    }
)


class VersionInfo(BaseSchema):
    """Root document returned by ``GET /`` on the admin port.

    Only ``version`` is required; everything else the node reports (hostname,
    tagline, plugins, configuration) is kept as extra attributes.

    Examples:
        {
            'version': '0.10.3',
            'hostname': 'kong-1',
            'tagline': 'Welcome to kong',
            'lua_version': 'LuaJIT 2.1.0-beta2'
        }
    """

    model_config = ConfigDict(extra="allow")

    version: str = Field(..., description="Gateway release string.", examples=["0.10.3", "0.9.9"])


class RouteDefinition(BaseSchema):
    """A gateway "API" object: a named upstream mapping with matching rules.

    ``id`` is assigned by the gateway and stays ``None`` until the route has
    been created. ``created_at`` and any other server-side fields are ignored.

    Examples:
        Legacy (0.9.x) shape::

            {
                'id': '4d924084-1adb-40a5-c042-63b19db421d1',
                'name': 'kong-test-api',
                'request_path': '/kong-test-api',
                'strip_request_path': true,
                'upstream_url': 'http://example.com',
                'preserve_host': false,
                'created_at': 1488830759000
            }

        Modern (0.10.x) shape::

            {
                'id': '6378122c-a0a1-438d-a5c6-efabae9fb969',
                'name': 'example-api',
                'hosts': ['example.com'],
                'uris': ['/v1'],
                'strip_uri': true,
                'upstream_url': 'http://httpbin.org',
                'preserve_host': false
            }
    """

    id: Optional[str] = Field(
        default=None,
        description="Identifier assigned by the gateway on creation. Never sent by the client.",
        examples=["4d924084-1adb-40a5-c042-63b19db421d1"],
    )
    name: str = Field(..., description="Unique route name.", examples=["kong-test-api"])
    upstream_url: Optional[str] = Field(
        default=None, description="Target URL requests are proxied to.", examples=["http://example.com"]
    )
    preserve_host: bool = Field(
        default=False, description="Forward the client's Host header to the upstream instead of the upstream host."
    )
    request_path: Optional[str] = Field(
        default=None, description="Legacy path prefix matched against incoming requests.", examples=["/kong-test-api"]
    )
    request_host: Optional[str] = Field(
        default=None, description="Legacy Host header value matched against incoming requests.", examples=["example.com"]
    )
    strip_request_path: Optional[bool] = Field(
        default=None, description="Legacy flag: strip the matched request_path before proxying."
    )
    hosts: Optional[List[str]] = Field(
        default=None, description="Host patterns matched against incoming requests.", examples=[["example.com"]]
    )
    uris: Optional[List[str]] = Field(
        default=None, description="Path prefixes matched against incoming requests.", examples=[["/v1", "/v2"]]
    )
    strip_uri: Optional[bool] = Field(default=None, description="Strip the matched uri prefix before proxying.")

    @field_validator("hosts", "uris", mode="before")
    @classmethod
    def _normalize_patterns(cls, value: Any) -> Any:
        """Accept lists, sets, comma-separated strings and the gateway's ``{}`` empty array."""
        if value is None:
            return None
        if isinstance(value, dict):
            # cjson encodes an empty Lua table as an object
            if value:
                raise ValueError("expected a list of patterns")
            return None
        if isinstance(value, str):
            value = [part.strip() for part in value.split(",") if part.strip()]
        elif isinstance(value, (set, frozenset)):
            value = sorted(value)
        elif isinstance(value, tuple):
            value = list(value)
        return value or None

    def to_create_payload(self) -> Dict[str, Any]:
        """Serialize the route into a request body for ``POST /apis``.

        ``id`` is always left out; fields in the omit-if-empty set are dropped
        when ``None``, empty string or empty list. ``name`` and
        ``preserve_host`` are always present.
        """
        data = self.model_dump(mode="json", exclude={"id"})
        return {k: v for k, v in data.items() if k not in _OMIT_IF_EMPTY or v not in (None, "", [])}


class RouteList(BaseSchema):
    """One page of routes returned by ``GET /apis``.

    ``total`` falls back to the number of returned items when the gateway does
    not report it.
    """

    data: List[RouteDefinition] = Field(default_factory=list, description="Routes in gateway order.")
    total: int = Field(default=0, description="Total number of routes reported by the gateway.")

    @model_validator(mode="before")
    @classmethod
    def _default_total(cls, raw: Any) -> Any:
        if isinstance(raw, dict) and raw.get("total") is None:
            items = raw.get("data")
            raw = {**raw, "total": len(items) if isinstance(items, list) else 0}
        return raw

    @field_validator("data", mode="before")
    @classmethod
    def _empty_table_as_list(cls, value: Any) -> Any:
        if value is None or value == {}:
            return []
        return value

    def find(self, name: str) -> Optional[RouteDefinition]:
        """Return the route called ``name`` from this page, or ``None``."""
        return next((route for route in self.data if route.name == name), None)

    def names(self) -> List[str]:
        return [route.name for route in self.data]

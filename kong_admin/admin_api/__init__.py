"""Kong Admin API clients and models.

Exposes thin sync/async HTTP clients for the gateway's admin endpoints and
re-exports the DTOs and error types for convenience.
"""

from .client import KongAdminClient
from .client_async import AsyncKongAdminClient
from .errors import (
    DecodeError,
    EncodeError,
    KongAdminError,
    RequestError,
    RouteNotFoundError,
    TransportError,
    UnexpectedStatusError,
)
from .models import (
    RouteDefinition,
    RouteList,
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

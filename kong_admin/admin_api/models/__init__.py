"""Kong Admin API models.

Re-exports the DTOs (`RouteDefinition`, `RouteList`, `VersionInfo`) consumed
by `KongAdminClient` and `AsyncKongAdminClient`.
"""

from kong_admin.admin_api.models.dto import (
    RouteDefinition,
    RouteList,
    VersionInfo,
)

__all__ = [
    "RouteDefinition",
    "RouteList",
    "VersionInfo",
]

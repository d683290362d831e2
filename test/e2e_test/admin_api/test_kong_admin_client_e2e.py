from __future__ import annotations

import pytest

from kong_admin.admin_api import (
    KongAdminClient,
    RouteDefinition,
    RouteNotFoundError,
    UnexpectedStatusError,
)

E2E_ROUTE_NAME = "kong-test-api"


@pytest.mark.e2e
def test_gateway_version(live_kong: KongAdminClient) -> None:
    assert live_kong.get_version()


@pytest.mark.e2e
def test_route_lifecycle(live_kong: KongAdminClient) -> None:
    count = len(live_kong.list_routes().data)

    api = live_kong.add_route(
        RouteDefinition(name=E2E_ROUTE_NAME, request_path=f"/{E2E_ROUTE_NAME}", upstream_url="http://example.com")
    )
    assert api.id
    assert api.name == E2E_ROUTE_NAME

    routes = live_kong.list_routes()
    assert len(routes.data) == count + 1
    listed = routes.find(api.name)
    assert listed is not None and listed.id == api.id

    fetched = live_kong.get_route(api.name)
    assert (fetched.name, fetched.request_path, fetched.upstream_url) == (
        api.name,
        api.request_path,
        api.upstream_url,
    )

    with pytest.raises(UnexpectedStatusError):
        live_kong.add_route(RouteDefinition(name=E2E_ROUTE_NAME, request_path="/other", upstream_url="http://example.com"))

    live_kong.delete_route(api.name)
    assert len(live_kong.list_routes().data) == count


@pytest.mark.e2e
def test_delete_unknown_route(live_kong: KongAdminClient) -> None:
    with pytest.raises(RouteNotFoundError):
        live_kong.delete_route("kong-admin-client-does-not-exist")

from __future__ import annotations

import os
from typing import Iterator

import pytest

from kong_admin.admin_api import KongAdminClient, RouteNotFoundError

E2E_ROUTE_NAME = "kong-test-api"


@pytest.fixture(scope="session")
def kong_admin_e2e_url() -> str:
    url = os.getenv("KONG_ADMIN_E2E_URL")
    if not url:
        pytest.skip("KONG_ADMIN_E2E_URL is not set; no live gateway to test against")
    return url


@pytest.fixture
def live_kong(kong_admin_e2e_url: str) -> Iterator[KongAdminClient]:
    with KongAdminClient(kong_admin_e2e_url) as client:
        _drop(client, E2E_ROUTE_NAME)
        yield client
        _drop(client, E2E_ROUTE_NAME)


def _drop(client: KongAdminClient, name: str) -> None:
    try:
        client.delete_route(name)
    except RouteNotFoundError:
        pass

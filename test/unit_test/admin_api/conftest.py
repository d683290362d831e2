from __future__ import annotations

import httpx
import pytest
import pytest_asyncio
from kong_fakes import MOCK_BASE_URL, FakeKongAdmin

from kong_admin.admin_api import AsyncKongAdminClient, KongAdminClient


@pytest.fixture
def fake_kong() -> FakeKongAdmin:
    return FakeKongAdmin()


@pytest.fixture
def kong_client(fake_kong: FakeKongAdmin) -> KongAdminClient:
    http = httpx.Client(transport=httpx.MockTransport(fake_kong.handler))
    client = KongAdminClient(f"{MOCK_BASE_URL}/ ", client=http)
    yield client
    http.close()


@pytest_asyncio.fixture
async def async_kong_client(fake_kong: FakeKongAdmin) -> AsyncKongAdminClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(fake_kong.handler))
    client = AsyncKongAdminClient(MOCK_BASE_URL, client=http)
    yield client
    await http.aclose()

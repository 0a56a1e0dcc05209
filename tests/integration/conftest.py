"""Shared fixtures for integration tests.

Every client is backed by a fresh application instance so environment
changes made by a test are honoured.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from jsonresponse.api.main import create_app
from jsonresponse.core.config import Settings, get_settings

SettingsClientFactoryType = Callable[[Settings], Awaitable[AsyncClient]]


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create a test client for the demo application."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def client_with_settings() -> AsyncGenerator[SettingsClientFactoryType]:
    """Factory fixture for creating test clients with custom settings.

    Usage:
        async def test_something(client_with_settings):
            settings = Settings(app_name="Test", debug=False)
            client = await client_with_settings(settings)
    """
    clients = []

    async def _create_client(settings: Settings) -> AsyncClient:
        app = create_app(settings)
        app.dependency_overrides[get_settings] = lambda: settings

        transport = ASGITransport(app=app)
        client = AsyncClient(transport=transport, base_url="http://test")
        clients.append(client)
        return client

    yield _create_client

    for client in clients:
        await client.aclose()

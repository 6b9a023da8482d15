# Shared pytest configuration and fixtures for all test types
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from slowapi import Limiter
from slowapi.util import get_remote_address
from unittest.mock import patch

# Create test limiter with limits disabled and in-memory storage
test_limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[],
    storage_uri="memory://",
    enabled=False,
)

# Patch the limiter before importing the app so decorators use test limiter
with patch("common.providers.rate_limiter.limiter.limiter", test_limiter):
    from api.main import app


@pytest_asyncio.fixture(scope="function")
async def client():
    """Create a test client."""
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()

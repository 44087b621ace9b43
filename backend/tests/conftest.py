"""Shared test fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from bookshelf.config import Settings
from bookshelf.main import create_app
from bookshelf.registry import BookRegistry


@pytest.fixture
def registry() -> BookRegistry:
    """Fresh registry holding the seed books."""
    return BookRegistry.seeded()


@pytest.fixture
def app(registry: BookRegistry):
    return create_app(Settings(debug=False, log_level="WARNING"), registry=registry)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

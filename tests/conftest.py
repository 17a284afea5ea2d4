"""
Pytest configuration and fixtures.
"""
import pytest

from config.settings import Settings
from internal.infrastructure.memory.repository import create_repository
from internal.transport.http.app import create_app


API_KEY = "test-secret"


@pytest.fixture
def settings():
    """Settings with a known API key."""
    return Settings(API_KEY=API_KEY, DEFAULT_PAGE_LIMIT=5)


@pytest.fixture
def repository():
    """Fresh seeded repository."""
    return create_repository(seed=True)


@pytest.fixture
def app(settings, repository):
    """Application wired to the per-test repository."""
    return create_app(settings=settings, repository=repository)


@pytest.fixture
def auth_headers():
    """Headers carrying the valid API key."""
    return {"x-api-key": API_KEY}


@pytest.fixture
def product_data():
    """Sample product body for tests."""
    return {
        "name": "Desk Lamp",
        "description": "LED lamp with dimmer",
        "price": 35,
        "category": "Home",
        "inStock": True,
    }

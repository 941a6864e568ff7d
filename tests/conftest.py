"""
Pytest configuration and shared fixtures for backend tests.

This module provides test fixtures for:
- Database sessions (in-memory SQLite for fast tests)
- In-memory repositories
- FastAPI test client
- Test data factories
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

# Import app and models
from visited_places.main import app
from visited_places.core.dependencies import get_category_repository, get_location_repository
from visited_places.infrastructure.persistence.models import Base
from visited_places.infrastructure.persistence.repositories.in_memory_category_repository import (
    InMemoryCategoryRepository,
)
from visited_places.infrastructure.persistence.repositories.in_memory_location_repository import (
    InMemoryLocationRepository,
)


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign key support for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine
    )

    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.rollback()
        session.close()


# ==============================================================================
# REPOSITORY FIXTURES
# ==============================================================================

@pytest.fixture
def location_repo():
    """Fresh in-memory location repository."""
    return InMemoryLocationRepository()


@pytest.fixture
def category_repo():
    """Fresh in-memory category repository."""
    return InMemoryCategoryRepository()


@pytest.fixture(scope="function")
def client(location_repo, category_repo) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client backed by fresh in-memory repositories."""
    app.dependency_overrides[get_location_repository] = lambda: location_repo
    app.dependency_overrides[get_category_repository] = lambda: category_repo

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ==============================================================================
# TEST DATA FACTORIES
# ==============================================================================

@pytest.fixture
def sample_location_data():
    """Sample location payload for testing."""
    return {
        "name": "Prague Castle",
        "location": "Hradčany, Prague",
        "map_url": "https://mapy.cz/zakladni?x=14.4003&y=50.0911&z=16",
        "web_url": "https://www.hrad.cz",
        "instagram_url": None,
        "facebook_url": "https://facebook.com/prazskyhrad",
        "youtube_url": None,
        "visited": True,
        "photos": [
            {"photo_url": "https://example.com/castle-1.jpg", "is_main": False},
            {"photo_url": "https://example.com/castle-2.jpg", "is_main": True},
        ],
    }


# ==============================================================================
# AUTHENTICATION FIXTURES
# ==============================================================================

@pytest.fixture
def user_headers():
    """Headers identifying a signed-in user."""
    return {"X-User-Id": "user-1"}


@pytest.fixture
def other_user_headers():
    """Headers identifying a second user."""
    return {"X-User-Id": "user-2"}


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )

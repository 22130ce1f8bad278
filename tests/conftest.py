"""Pytest fixtures for testing."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from exam_blueprint.api.main import app
from exam_blueprint.db.mongo import get_database
from exam_blueprint.services.category_repository import COLLECTION_NAME


@pytest_asyncio.fixture
async def mock_db() -> AsyncGenerator[Any, None]:
    """Provide a mock MongoDB database for testing."""
    mock_client = AsyncMongoMockClient()
    mock_database = mock_client["test_exam_blueprint"]

    # Route handlers receive the mock instead of the app's client
    app.dependency_overrides[get_database] = lambda: mock_database

    yield mock_database

    # Cleanup
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(mock_db: Any) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sample_category_docs() -> list[dict[str, Any]]:
    """Blueprint categories as stored in MongoDB (weights sum to 100)."""
    weights = [15.0, 12.0, 10.0, 10.0, 8.0, 5.0, 15.0, 8.0, 10.0, 7.0]
    return [
        {
            "code": f"BC{i:02d}",
            "name": f"Category {i}",
            "description": "",
            "weight": weight,
            "isActive": True,
        }
        for i, weight in enumerate(weights, start=1)
    ]


@pytest_asyncio.fixture
async def seeded_db(mock_db: Any, sample_category_docs: list[dict[str, Any]]) -> Any:
    """Mock database pre-populated with the sample categories."""
    # Insert out of order to exercise sorting by code
    await mock_db[COLLECTION_NAME].insert_many(
        [dict(doc) for doc in reversed(sample_category_docs)]
    )
    return mock_db

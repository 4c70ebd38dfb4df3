"""API test fixtures — FastAPI test client over the in-memory test database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine (readiness probe reads it)

Design Decisions:
    - httpx ASGITransport does not run lifespan: no seeding, no setup_logging,
      tables come from the root test_engine fixture
"""

import pytest
from httpx import ASGITransport, AsyncClient

from notebox.infrastructure.database import get_db, DatabaseSessionManager
from notebox.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = None


@pytest.fixture
async def work_category(client):
    res = await client.post(
        "/api/categories", json={"name": "Work", "color": "#3b82f6"},
    )
    assert res.status_code == 201
    return res.json()

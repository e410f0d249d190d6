from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from skipsave.main import create_app
from skipsave.services.deps import get_db_service, get_scheduler_service
from skipsave.services.util import initialize_services, teardown_services


@pytest.fixture(autouse=True)
def settings_env(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    monkeypatch.setenv("RATE_LIMIT_MAX", "1000")
    monkeypatch.setenv("SANDBOX_COMPLETION_DELAY", "0")
    monkeypatch.setenv("SEED_DEMO_DATA", "false")


@pytest.fixture
async def services(settings_env) -> AsyncGenerator[None, None]:
    await initialize_services()
    yield
    await teardown_services()


@pytest.fixture
async def client(services) -> AsyncGenerator[AsyncClient, None]:
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def session(services):
    async with get_db_service().with_session() as db:
        yield db


@pytest.fixture
def scheduler(services):
    return get_scheduler_service()

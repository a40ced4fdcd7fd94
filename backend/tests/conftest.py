"""Root conftest — shared test configuration and DB/app fixtures.

Invariants:
    - Environment set before starter_api.main is imported (module-level app reads it)
    - Every test gets a fresh file-backed SQLite database under tmp_path
    - get_db dependency overridden to use the test session factory
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from starter_api.db.base import Base  # noqa: E402
from starter_api.db.session import create_session_factory  # noqa: E402
from starter_api.infrastructure.database import get_db  # noqa: E402
from starter_api.main import app as main_app  # noqa: E402
import starter_api.models  # noqa: E402,F401


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
async def test_engine_and_factory(database_url):
    engine, factory = create_session_factory(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine, factory
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine_and_factory):
    return test_engine_and_factory[1]


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def override_db(test_session_factory):
    """Return a function that points an app's get_db at the test database."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    apps = []

    def _apply(app):
        app.dependency_overrides[get_db] = override_get_db
        apps.append(app)
        return app

    yield _apply
    for app in apps:
        app.dependency_overrides.clear()


@pytest.fixture
async def client(override_db):
    """Test client for the module-level app with DB dependency overridden."""
    override_db(main_app)
    async with AsyncClient(
        transport=ASGITransport(app=main_app), base_url="http://test",
    ) as c:
        yield c

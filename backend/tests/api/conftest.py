"""API test fixtures — apps built by create_app() with the sample routes mounted.

Invariants:
    - handler_calls is cleared around every test
    - make_client overrides get_db on each app it builds
"""

import pytest
from httpx import ASGITransport, AsyncClient

from starter_api.config import Settings
from starter_api.main import create_app
from tests.api.sample_routes import handler_calls, router


@pytest.fixture(autouse=True)
def reset_handler_calls():
    handler_calls.clear()
    yield
    handler_calls.clear()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def make_client(override_db):
    """Build a client for create_app(settings) with the sample routes mounted."""
    def _make(settings: Settings, raise_app_exceptions: bool = True):
        app = create_app(settings)
        app.include_router(router)
        override_db(app)
        return AsyncClient(
            transport=ASGITransport(
                app=app, raise_app_exceptions=raise_app_exceptions,
            ),
            base_url="http://test",
        )

    return _make


@pytest.fixture
async def sample_client(make_client, settings):
    async with make_client(settings) as c:
        yield c

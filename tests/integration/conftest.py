import pytest
from httpx import ASGITransport, AsyncClient

from seigate.api.main import app


@pytest.fixture()
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture()
def override():
    """Register a dependency override: ``override(get_x, service)``."""

    def register(dependency, value):
        app.dependency_overrides[dependency] = lambda: value
        return value

    return register

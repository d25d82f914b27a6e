"""Integration-test fixtures.

Runs the real application lifespan against PostgreSQL and Redis from the
environment (see config/settings.py) after `alembic upgrade head`. All
integration tests share one event loop so the engine and Redis pools stay
valid for the whole session. Skipped when the services are unreachable.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app, lifespan


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def client() -> AsyncClient:  # type: ignore[override]
    """Session-scoped async HTTP client with the lifespan running."""
    context = lifespan(app)
    try:
        await context.__aenter__()
    except Exception as exc:  # noqa: BLE001
        pytest.skip(f"PostgreSQL/Redis not available: {exc}")
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        await context.__aexit__(None, None, None)

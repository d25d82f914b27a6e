"""Shared test fixtures."""

from collections import Counter

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.uc_cache.infrastructure.memory_cache import InMemoryCache
from src.uc_user.api.dependencies import get_user_repository
from src.uc_user.application.cached_repository import CachedUserRepository
from src.uc_user.domain.models import User

TTL_SECONDS = 300


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUserStore:
    """In-memory UserStoreProtocol that counts calls per operation."""

    def __init__(self) -> None:
        self.rows: dict[int, User] = {}
        self.calls: Counter[str] = Counter()
        self._next_id = 1

    async def list_all(self) -> list[User]:
        self.calls["list_all"] += 1
        return [self.rows[i] for i in sorted(self.rows)]

    async def get_by_id(self, user_id: int) -> User | None:
        self.calls["get_by_id"] += 1
        return self.rows.get(user_id)

    async def insert(self, name: str, email: str) -> User:
        self.calls["insert"] += 1
        user = User(id=self._next_id, name=name, email=email)
        self.rows[user.id] = user
        self._next_id += 1
        return user

    async def update(self, user_id: int, name: str, email: str) -> User | None:
        self.calls["update"] += 1
        if user_id not in self.rows:
            return None
        user = User(id=user_id, name=name, email=email)
        self.rows[user_id] = user
        return user

    async def delete_by_id(self, user_id: int) -> int | None:
        self.calls["delete_by_id"] += 1
        if self.rows.pop(user_id, None) is None:
            return None
        return user_id


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> FakeUserStore:
    return FakeUserStore()


@pytest.fixture
def cache(clock: FakeClock) -> InMemoryCache:
    return InMemoryCache(clock=clock)


@pytest.fixture
def repo(store: FakeUserStore, cache: InMemoryCache) -> CachedUserRepository:
    return CachedUserRepository(store=store, cache=cache, ttl_seconds=TTL_SECONDS)


@pytest.fixture
async def client(repo: CachedUserRepository) -> AsyncClient:
    """Async HTTP client against the app, backed by the fake store + memory cache."""
    app.dependency_overrides[get_user_repository] = lambda: repo
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

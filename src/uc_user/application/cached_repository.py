"""CachedUserRepository: cache-aside reads, invalidate-on-write.

Read path (list_all, get_by_id):
  1. cache.get(key). A hit is returned as is; the store is not consulted and
     the remaining TTL is not checked (expiry is the cache backend's job).
  2. On miss, read the store. A missing id returns None and leaves the cache
     untouched. Otherwise the fetched value is cached with the configured TTL.

Write path (create, update, delete):
  1. Mutate the store. The store commits before returning, so invalidation
     always follows the commit. A missing id returns None with no
     invalidation.
  2. Delete "users:{id}" (update/delete) and "users:all" (every write).
     Never write-through: the cache is only ever populated from a completed
     store read.

Cache failures never fail a request: a failed lookup is a miss, a failed
populate or invalidate is logged. Store failures (StoreError) propagate.
The repository holds no locks; the store serializes concurrent writes to a
row and repeated invalidations of a key are harmless.
"""

import logging

from pydantic import ValidationError

from src.uc_cache.domain.cache import CacheProtocol, user_key, users_all_key
from src.uc_common.errors import CacheError
from src.uc_user.domain.models import (
    User,
    dump_user,
    dump_users,
    load_user,
    load_users,
)
from src.uc_user.domain.repository import UserStoreProtocol

logger = logging.getLogger(__name__)


class CachedUserRepository:
    def __init__(
        self,
        store: UserStoreProtocol,
        cache: CacheProtocol,
        ttl_seconds: int,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._store = store
        self._cache = cache
        self._ttl = ttl_seconds

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_all(self) -> list[User]:
        key = users_all_key()
        cached = await self._cache_get(key)
        if cached is not None:
            try:
                users = load_users(cached)
            except ValidationError:
                logger.warning("Discarding undecodable cache entry %s", key)
            else:
                logger.debug("Cache hit for %s", key)
                return users

        logger.debug("Cache miss for %s", key)
        users = await self._store.list_all()
        await self._cache_set(key, dump_users(users))
        return users

    async def get_by_id(self, user_id: int) -> User | None:
        key = user_key(user_id)
        cached = await self._cache_get(key)
        if cached is not None:
            try:
                user = load_user(cached)
            except ValidationError:
                logger.warning("Discarding undecodable cache entry %s", key)
            else:
                logger.debug("Cache hit for %s", key)
                return user

        logger.debug("Cache miss for %s", key)
        user = await self._store.get_by_id(user_id)
        if user is None:
            return None
        await self._cache_set(key, dump_user(user))
        return user

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create(self, name: str, email: str) -> User:
        user = await self._store.insert(name, email)
        # a new id has no single-record entry yet
        await self._invalidate(users_all_key())
        return user

    async def update(self, user_id: int, name: str, email: str) -> User | None:
        user = await self._store.update(user_id, name, email)
        if user is None:
            return None
        await self._invalidate(user_key(user_id))
        await self._invalidate(users_all_key())
        return user

    async def delete(self, user_id: int) -> int | None:
        deleted_id = await self._store.delete_by_id(user_id)
        if deleted_id is None:
            return None
        await self._invalidate(user_key(user_id))
        await self._invalidate(users_all_key())
        return deleted_id

    # ------------------------------------------------------------------
    # Best-effort cache access
    # ------------------------------------------------------------------

    async def _cache_get(self, key: str) -> bytes | None:
        try:
            return await self._cache.get(key)
        except CacheError as exc:
            logger.warning("Cache lookup failed for %s, reading store: %s", key, exc)
            return None

    async def _cache_set(self, key: str, value: bytes) -> None:
        try:
            await self._cache.set(key, value, self._ttl)
        except CacheError as exc:
            logger.warning("Cache populate failed for %s: %s", key, exc)

    async def _invalidate(self, key: str) -> None:
        try:
            await self._cache.delete(key)
        except CacheError as exc:
            # stale until TTL expiry; the committed write stands
            logger.warning("Cache invalidation failed for %s: %s", key, exc)

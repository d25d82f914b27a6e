"""RedisCache: CacheProtocol over redis.asyncio.

GET / SET key value EX ttl / DEL. Every RedisError (connection refused,
timeout, protocol error) is re-raised as CacheError.
"""

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from src.uc_common.errors import CacheError


class RedisCache:
    def __init__(self, client: aioredis.Redis) -> None:
        self._client = client

    async def get(self, key: str) -> bytes | None:
        try:
            value = await self._client.get(key)
        except RedisError as exc:
            raise CacheError(f"GET {key} failed: {exc}") from exc
        if isinstance(value, str):
            return value.encode()
        return value

    async def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        try:
            await self._client.set(key, value, ex=ttl_seconds)
        except RedisError as exc:
            raise CacheError(f"SET {key} failed: {exc}") from exc

    async def delete(self, key: str) -> None:
        # DEL on a missing key returns 0, which is not an error
        try:
            await self._client.delete(key)
        except RedisError as exc:
            raise CacheError(f"DEL {key} failed: {exc}") from exc

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except RedisError as exc:
            raise CacheError(f"PING failed: {exc}") from exc

"""Lookaside cache contract and key scheme.

Implementations raise CacheError on any backend failure. delete() is
idempotent: deleting an absent key succeeds. No atomicity is promised
across keys.
"""

from typing import Protocol

USERS_KEY_PREFIX = "users"


def users_all_key() -> str:
    return f"{USERS_KEY_PREFIX}:all"


def user_key(user_id: int) -> str:
    return f"{USERS_KEY_PREFIX}:{user_id}"


class CacheProtocol(Protocol):
    async def get(self, key: str) -> bytes | None: ...

    async def set(self, key: str, value: bytes, ttl_seconds: int) -> None: ...

    async def delete(self, key: str) -> None: ...

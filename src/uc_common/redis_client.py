"""Redis client factory: backs the lookaside cache only.

The client returns raw bytes (decode_responses=False): cache values are
serialized JSON snapshots and are decoded by the repository.
"""

import redis.asyncio as aioredis

from config.settings import Settings


def create_redis(settings: Settings) -> aioredis.Redis:
    """Create a pooled Redis client. No connection is made until first use."""
    return aioredis.from_url(
        settings.redis_url,
        decode_responses=False,
        socket_timeout=5,
        socket_connect_timeout=5,
    )


async def close_redis(client: aioredis.Redis) -> None:
    """Close the client and release its connection pool."""
    await client.aclose()

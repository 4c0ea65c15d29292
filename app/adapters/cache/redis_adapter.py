"""Redis cache adapter — implements CachePort."""

from __future__ import annotations

import logging

from redis import asyncio as aioredis
from redis.exceptions import RedisError

from app.application.errors import CacheUnavailable, MalformedCacheEntry
from app.application.ports.cache_port import CachePort
from app.config import settings

logger = logging.getLogger(__name__)


class RedisCacheAdapter(CachePort):
    """String cache on Redis; every SET carries the configured TTL."""

    def __init__(
        self,
        url: str | None = None,
        ttl_seconds: int | None = None,
        client: aioredis.Redis | None = None,
    ):
        self._ttl = settings.cache_ttl_seconds if ttl_seconds is None else ttl_seconds
        self._client = client or aioredis.from_url(
            url or settings.redis_url, decode_responses=True
        )

    async def get(self, key: str) -> str | None:
        try:
            value = await self._client.get(key)
            if isinstance(value, bytes):
                value = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedCacheEntry(key, f"not valid UTF-8: {exc}") from exc
        except (RedisError, OSError) as exc:
            raise CacheUnavailable(f"Redis GET failed: {exc}") from exc
        return value

    async def set(self, key: str, value: str) -> None:
        try:
            await self._client.set(key, value, ex=self._ttl if self._ttl > 0 else None)
        except (RedisError, OSError) as exc:
            raise CacheUnavailable(f"Redis SET failed: {exc}") from exc

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except (RedisError, OSError):
            logger.warning("Redis ping failed", exc_info=True)
            return False

    async def close(self) -> None:
        await self._client.aclose()

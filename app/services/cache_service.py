"""
Redis Cache Service for the artist directory.

Wraps an async Redis client with JSON helpers and a prefix scan. By default point
reads and writes never raise: a Redis failure reads as a cache miss and a
failed write returns False. Strict reads and the prefix scan raise
``CacheUnavailableError`` so callers can tell an outage from a miss.
"""
import json
import logging
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from app.core.exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)

# Keys fetched per MGET round-trip during a prefix scan
SCAN_BATCH_SIZE = 200


class CacheService:
    """Redis cache service with async support."""

    def __init__(self, client: redis.Redis):
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "CacheService":
        """Create a service backed by a new Redis connection pool."""
        client = redis.from_url(
            url,
            encoding="utf-8",
            decode_responses=True,
        )
        return cls(client)

    async def get(self, key: str, strict: bool = False) -> str | None:
        """
        Get a value from cache.

        A Redis failure reads as a miss unless ``strict`` is set, in which
        case it raises ``CacheUnavailableError``.
        """
        try:
            return await self._client.get(key)
        except (RedisError, OSError) as e:
            if strict:
                raise CacheUnavailableError(f"Read of {key} failed: {e}") from e
            # If Redis fails, return None (cache miss)
            logger.warning(f"[CacheService] get {key} failed: {type(e).__name__}: {e}")
            return None

    async def set(self, key: str, value: str, ttl: int | None = None) -> bool:
        """
        Set a value in cache.

        Args:
            key: Cache key
            value: Value to store (string)
            ttl: Time to live in seconds, None to keep the key until overwritten

        Returns:
            True if successful, False otherwise
        """
        try:
            await self._client.set(key, value, ex=ttl)
            return True
        except (RedisError, OSError) as e:
            logger.warning(f"[CacheService] set {key} failed: {type(e).__name__}: {e}")
            return False

    async def get_json(self, key: str, strict: bool = False) -> Any | None:
        """Get a JSON value from cache. See ``get`` for ``strict``."""
        value = await self.get(key, strict=strict)
        if value:
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return None
        return None

    async def set_json(self, key: str, value: Any, ttl: int | None = None) -> bool:
        """Set a JSON value in cache."""
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            return False
        return await self.set(key, payload, ttl)

    async def get_by_prefix(self, prefix: str) -> list[Any]:
        """
        Load every JSON value whose key starts with ``prefix``.

        Undecodable values are skipped.

        Raises:
            CacheUnavailableError: if the scan or a batch read fails
        """
        values: list[Any] = []
        try:
            keys = [key async for key in self._client.scan_iter(match=f"{prefix}*", count=SCAN_BATCH_SIZE)]
            for start in range(0, len(keys), SCAN_BATCH_SIZE):
                batch = await self._client.mget(keys[start:start + SCAN_BATCH_SIZE])
                for raw in batch:
                    if not raw:
                        continue
                    try:
                        values.append(json.loads(raw))
                    except json.JSONDecodeError:
                        logger.warning("[CacheService] Skipping undecodable value during prefix scan")
        except (RedisError, OSError) as e:
            raise CacheUnavailableError(f"Prefix scan for {prefix!r} failed: {e}") from e
        return values

    async def close(self) -> None:
        """Close Redis connection."""
        await self._client.aclose()


# Cache key prefixes
class CacheKeys:
    """Cache key prefixes for different data types."""

    ARTIST_PROFILE = "artist_profile:"  # No TTL: cache is the live source once populated

    @classmethod
    def artist_profile(cls, artist_id: str) -> str:
        return f"{cls.ARTIST_PROFILE}{artist_id}"

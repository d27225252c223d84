"""Unit tests for the Redis-backed CacheService."""

from __future__ import annotations

import json

import pytest

from app.core.exceptions import CacheUnavailableError
from app.services.cache_service import CacheKeys, CacheService


class TestCacheService:
    @pytest.mark.asyncio
    async def test_set_json_and_get_json(self, cache: CacheService) -> None:
        assert await cache.set_json("k", {"name": "Alisa Nova", "plays": 3}) is True
        assert await cache.get_json("k") == {"name": "Alisa Nova", "plays": 3}

    @pytest.mark.asyncio
    async def test_get_missing_key_returns_none(self, cache: CacheService) -> None:
        assert await cache.get_json("missing") is None

    @pytest.mark.asyncio
    async def test_read_failure_is_a_miss(self, cache: CacheService, redis_client) -> None:
        redis_client.data["k"] = json.dumps({"a": 1})
        redis_client.fail_reads = True
        assert await cache.get_json("k") is None

    @pytest.mark.asyncio
    async def test_strict_read_failure_raises(self, cache: CacheService, redis_client) -> None:
        redis_client.data["k"] = json.dumps({"a": 1})
        redis_client.fail_reads = True
        with pytest.raises(CacheUnavailableError):
            await cache.get_json("k", strict=True)

    @pytest.mark.asyncio
    async def test_strict_read_of_missing_key_returns_none(self, cache: CacheService) -> None:
        assert await cache.get_json("missing", strict=True) is None

    @pytest.mark.asyncio
    async def test_write_failure_returns_false(self, cache: CacheService, redis_client) -> None:
        redis_client.fail_writes = True
        assert await cache.set_json("k", {"a": 1}) is False
        assert "k" not in redis_client.data

    @pytest.mark.asyncio
    async def test_unserializable_value_returns_false(self, cache: CacheService) -> None:
        assert await cache.set_json("k", {"a": object()}) is False

    @pytest.mark.asyncio
    async def test_get_json_ignores_invalid_json(self, cache: CacheService, redis_client) -> None:
        redis_client.data["k"] = "{not json"
        assert await cache.get_json("k") is None

    @pytest.mark.asyncio
    async def test_get_by_prefix_only_returns_matching_keys(self, cache: CacheService, redis_client) -> None:
        redis_client.data[CacheKeys.artist_profile("a")] = json.dumps({"id": "a"})
        redis_client.data[CacheKeys.artist_profile("b")] = json.dumps({"id": "b"})
        redis_client.data["other:c"] = json.dumps({"id": "c"})
        redis_client.data[CacheKeys.artist_profile("broken")] = "{oops"

        values = await cache.get_by_prefix(CacheKeys.ARTIST_PROFILE)

        assert sorted(v["id"] for v in values) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_get_by_prefix_raises_when_scan_fails(self, cache: CacheService, redis_client) -> None:
        redis_client.fail_scans = True
        with pytest.raises(CacheUnavailableError):
            await cache.get_by_prefix(CacheKeys.ARTIST_PROFILE)

    @pytest.mark.asyncio
    async def test_close_closes_client(self, cache: CacheService, redis_client) -> None:
        await cache.close()
        assert redis_client.closed is True


def test_artist_profile_key() -> None:
    assert CacheKeys.artist_profile("artist-4") == "artist_profile:artist-4"

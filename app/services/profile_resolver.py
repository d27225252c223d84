"""
Read-through artist profile resolution.

Profiles are resolved through an ordered list of tiers, fastest first:

1. cache     - the live profile, repaired from baseline when stale
2. merged    - authoritative store row layered over the baseline profile
3. baseline  - the hand-authored default

A tier returns None when it has no data. Store failures are handled inside
the tier that hit them. Hits below the cache are written back to it, unless
the cache read itself failed: the cache holds live edits, so a profile
resolved during a cache outage is served but never written over them.
"""
import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from pydantic import ValidationError

from app.core.exceptions import CacheUnavailableError, NotFoundException, StoreUnavailableError
from app.schemas.artist import ArtistProfile, ArtistSocials, ArtistStats
from app.services.artist_store import ArtistStore
from app.services.baseline_profiles import BaselineProfiles
from app.services.cache_service import CacheService, CacheKeys

logger = logging.getLogger(__name__)

# Store columns that override the baseline profile when set
MERGED_COLUMNS = (
    "full_name", "bio", "avatar_url", "location", "website", "phone",
    "total_plays", "total_followers", "total_concerts", "coins_balance", "created_at",
)

# Background cache writes, held until they complete
_pending_writes: set[asyncio.Task] = set()


class ProfileSource(str, Enum):
    CACHE = "cache"
    MERGED = "merged"
    BASELINE = "baseline"
    STORE = "store"


@dataclass
class Resolution:
    """A resolved profile and the tier it came from."""
    profile: ArtistProfile
    source: ProfileSource
    # True when the cache could not be read, so the profile may be stale
    cache_degraded: bool = False


async def save_profile(cache: CacheService, profile: ArtistProfile) -> bool:
    """Write a profile to its cache key."""
    return await cache.set_json(CacheKeys.artist_profile(profile.id), profile.model_dump(mode="json"))


def save_profile_in_background(cache: CacheService, profile: ArtistProfile) -> None:
    """Schedule a cache write without waiting for it."""
    task = asyncio.create_task(save_profile(cache, profile))
    _pending_writes.add(task)
    task.add_done_callback(_pending_writes.discard)


async def flush_pending_writes() -> None:
    """Wait for scheduled background writes. Used on shutdown and in tests."""
    if _pending_writes:
        await asyncio.gather(*list(_pending_writes), return_exceptions=True)


def merge_store_row(row: dict, baseline: ArtistProfile) -> ArtistProfile:
    """
    Layer an authoritative store row over a baseline profile.

    Empty or zero column values count as missing and keep the baseline value.
    Social handles merge per key so the result always has every platform.
    """
    data = baseline.model_dump()
    for column in MERGED_COLUMNS:
        if row.get(column):
            data[column] = row[column]
    if row.get("is_verified") is not None:
        data["is_verified"] = bool(row["is_verified"])
    data["socials"] = {
        key: row.get(key) or getattr(baseline.socials, key)
        for key in ArtistSocials.model_fields
    }
    return ArtistProfile.model_validate(data)


class ProfileTier(ABC):
    """One source of artist profiles in the resolution chain."""

    source: ProfileSource

    @abstractmethod
    async def lookup(self, artist_id: str) -> ArtistProfile | None:
        """Return the profile held by this tier, or None."""


class CacheTier(ProfileTier):
    source = ProfileSource.CACHE

    def __init__(self, cache: CacheService, baseline: BaselineProfiles):
        self._cache = cache
        self._baseline = baseline

    async def lookup(self, artist_id: str) -> ArtistProfile | None:
        raw = await self._cache.get_json(CacheKeys.artist_profile(artist_id), strict=True)
        profile = ArtistProfile.from_cache(raw)
        if profile is None:
            return None

        # Entries written before avatars were seeded lack one
        baseline_avatar = self._baseline.avatar_for(artist_id)
        if not profile.avatar_url and baseline_avatar:
            profile.avatar_url = baseline_avatar
            logger.info(f"[ProfileResolver] Repairing cached avatar for {artist_id}")
            save_profile_in_background(self._cache, profile)
        return profile


class MergedTier(ProfileTier):
    source = ProfileSource.MERGED

    def __init__(self, store: ArtistStore, baseline: BaselineProfiles):
        self._store = store
        self._baseline = baseline

    async def lookup(self, artist_id: str) -> ArtistProfile | None:
        baseline = self._baseline.get(artist_id)
        if baseline is None:
            return None
        try:
            row = await self._store.find_by_email(baseline.email)
        except StoreUnavailableError as e:
            logger.warning(f"[ProfileResolver] Store degraded for {artist_id}, using baseline: {e}")
            return None
        if row is None:
            return None
        try:
            return merge_store_row(row, baseline)
        except ValidationError as e:
            logger.warning(f"[ProfileResolver] Store row for {artist_id} is invalid, using baseline: {e.error_count()} errors")
            return None


class BaselineTier(ProfileTier):
    source = ProfileSource.BASELINE

    def __init__(self, baseline: BaselineProfiles):
        self._baseline = baseline

    async def lookup(self, artist_id: str) -> ArtistProfile | None:
        return self._baseline.get(artist_id)


class WriteBackTier(ProfileTier):
    """Decorates a slower tier so its hits are promoted into the cache."""

    def __init__(self, inner: ProfileTier, cache: CacheService):
        self.inner = inner
        self._cache = cache
        self.source = inner.source

    async def lookup(self, artist_id: str) -> ArtistProfile | None:
        profile = await self.inner.lookup(artist_id)
        if profile is not None and not await save_profile(self._cache, profile):
            logger.warning(f"[ProfileResolver] Could not cache {artist_id} from {self.source.value}")
        return profile


class ProfileResolver:
    """Resolves artist profiles through cache, store and baseline."""

    def __init__(self, cache: CacheService, store: ArtistStore, baseline: BaselineProfiles):
        self._cache = cache
        self._store = store
        self._baseline = baseline
        self._tiers: list[ProfileTier] = [
            CacheTier(cache, baseline),
            WriteBackTier(MergedTier(store, baseline), cache),
            WriteBackTier(BaselineTier(baseline), cache),
        ]

    async def get(self, artist_id: str) -> Resolution:
        """
        Resolve a profile, short-circuiting on the first tier with data.

        If the cache cannot be read, lower tiers still answer but nothing is
        written back and the resolution is flagged ``cache_degraded``.

        Raises:
            NotFoundException: if no tier knows the artist
        """
        cache_degraded = False
        for tier in self._tiers:
            if cache_degraded and isinstance(tier, WriteBackTier):
                tier = tier.inner
            try:
                profile = await tier.lookup(artist_id)
            except CacheUnavailableError as e:
                logger.warning(f"[ProfileResolver] Cache unreadable for {artist_id}, serving without write-back: {e}")
                cache_degraded = True
                continue
            if profile is not None:
                logger.debug(f"[ProfileResolver] {artist_id} resolved from {tier.source.value}")
                return Resolution(profile=profile, source=tier.source, cache_degraded=cache_degraded)
        raise NotFoundException(f"Artist not found: {artist_id}")

    async def get_stats(self, artist_id: str) -> tuple[ArtistStats, ProfileSource]:
        """
        Stats-only projection.

        Baseline artists read their aggregates straight from the store. When
        the store has no row or is down, the cached profile, then the
        baseline profile, supplies them.
        """
        baseline = self._baseline.get(artist_id)
        if baseline is not None:
            try:
                row = await self._store.find_by_email(baseline.email)
            except StoreUnavailableError as e:
                logger.warning(f"[ProfileResolver] Store degraded for {artist_id} stats: {e}")
                row = None
            if row is not None:
                stats = ArtistStats(
                    total_plays=row.get("total_plays") or 0,
                    total_followers=row.get("total_followers") or 0,
                    total_concerts=row.get("total_concerts") or 0,
                    coins_balance=row.get("coins_balance") or 0,
                )
                return stats, ProfileSource.STORE

        cached = ArtistProfile.from_cache(await self._cache.get_json(CacheKeys.artist_profile(artist_id)))
        profile, source = (cached, ProfileSource.CACHE) if cached else (baseline, ProfileSource.BASELINE)
        if profile is None:
            raise NotFoundException("Stats not found")
        stats = ArtistStats(
            total_plays=profile.total_plays,
            total_followers=profile.total_followers,
            total_concerts=profile.total_concerts,
            coins_balance=profile.coins_balance,
        )
        return stats, source

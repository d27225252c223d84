from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from app.database import AsyncSessionLocal
from app.services.artist_store import ArtistStore
from app.services.baseline_profiles import BaselineProfiles, default_baseline
from app.services.cache_service import CacheService
from app.services.popularity_service import PopularityIndex
from app.services.profile_resolver import ProfileResolver
from app.services.profile_writer import ProfileWriter
from app.services.similarity_service import SimilarityRecommender


@lru_cache
def get_cache_service() -> CacheService:
    """Shared Redis-backed cache (one connection pool per process)."""
    return CacheService.from_url(get_settings().redis_url)


@lru_cache
def get_artist_store() -> ArtistStore:
    """Shared authoritative store client."""
    return ArtistStore(AsyncSessionLocal, timeout=get_settings().store_timeout_seconds)


@lru_cache
def get_baseline_profiles() -> BaselineProfiles:
    return default_baseline()


Cache = Annotated[CacheService, Depends(get_cache_service)]
Store = Annotated[ArtistStore, Depends(get_artist_store)]
Baseline = Annotated[BaselineProfiles, Depends(get_baseline_profiles)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_profile_resolver(cache: Cache, store: Store, baseline: Baseline) -> ProfileResolver:
    return ProfileResolver(cache, store, baseline)


Resolver = Annotated[ProfileResolver, Depends(get_profile_resolver)]


def get_profile_writer(resolver: Resolver, cache: Cache, store: Store) -> ProfileWriter:
    return ProfileWriter(resolver, cache, store)


def get_popularity_index(cache: Cache, baseline: Baseline) -> PopularityIndex:
    return PopularityIndex(cache, baseline)


def get_similarity_recommender(
    resolver: Resolver,
    cache: Cache,
    baseline: Baseline,
    settings: AppSettings,
) -> SimilarityRecommender:
    return SimilarityRecommender(
        resolver,
        cache,
        baseline,
        require_genre_affinity=settings.similar_require_genre_affinity,
    )


# Type aliases for cleaner dependency injection
Writer = Annotated[ProfileWriter, Depends(get_profile_writer)]
Popularity = Annotated[PopularityIndex, Depends(get_popularity_index)]
Recommender = Annotated[SimilarityRecommender, Depends(get_similarity_recommender)]

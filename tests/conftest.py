"""Shared pytest fixtures for the artist directory test suite."""

from __future__ import annotations

import pytest

from app.services.baseline_profiles import BaselineProfiles, default_baseline
from app.services.cache_service import CacheService
from app.services.popularity_service import PopularityIndex
from app.services.profile_resolver import ProfileResolver
from app.services.profile_writer import ProfileWriter
from app.services.similarity_service import SimilarityRecommender
from tests.fakes import FakeArtistStore, FakeRedis


@pytest.fixture
def redis_client() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def cache(redis_client: FakeRedis) -> CacheService:
    return CacheService(redis_client)


@pytest.fixture
def store() -> FakeArtistStore:
    return FakeArtistStore()


@pytest.fixture
def baseline() -> BaselineProfiles:
    return default_baseline()


@pytest.fixture
def resolver(cache: CacheService, store: FakeArtistStore, baseline: BaselineProfiles) -> ProfileResolver:
    return ProfileResolver(cache, store, baseline)


@pytest.fixture
def writer(resolver: ProfileResolver, cache: CacheService, store: FakeArtistStore) -> ProfileWriter:
    return ProfileWriter(resolver, cache, store)


@pytest.fixture
def popularity(cache: CacheService, baseline: BaselineProfiles) -> PopularityIndex:
    return PopularityIndex(cache, baseline)


@pytest.fixture
def recommender(resolver: ProfileResolver, cache: CacheService, baseline: BaselineProfiles) -> SimilarityRecommender:
    return SimilarityRecommender(resolver, cache, baseline)

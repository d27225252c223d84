"""Popular artists listing ranked by total plays."""
import logging

from app.schemas.artist import FALLBACK_GENRE, ArtistProfile, PopularArtist
from app.services.artist_pool import load_artist_pool
from app.services.baseline_profiles import BaselineProfiles
from app.services.cache_service import CacheService

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 12


def to_popular_artist(profile: ArtistProfile) -> PopularArtist:
    return PopularArtist(
        id=profile.id,
        name=profile.full_name,
        genre=profile.primary_genre or FALLBACK_GENRE,
        genres=profile.genres,
        city=profile.city,
        followers=profile.total_followers,
        plays=profile.total_plays,
        tracks=profile.total_tracks,
        rating=profile.rating,
        avatar_url=profile.avatar_url,
        is_verified=profile.is_verified,
    )


def rank_by_plays(profiles: list[ArtistProfile], limit: int) -> list[PopularArtist]:
    """Sort by total plays, descending. Ties keep their pool order."""
    ranked = sorted(profiles, key=lambda p: p.total_plays, reverse=True)
    return [to_popular_artist(p) for p in ranked[:limit]]


class PopularityIndex:
    """Public listing of the most played artists."""

    def __init__(self, cache: CacheService, baseline: BaselineProfiles):
        self._cache = cache
        self._baseline = baseline

    async def list(self, limit: int = DEFAULT_LIMIT) -> list[PopularArtist]:
        pool = await load_artist_pool(self._cache, self._baseline)
        popular = rank_by_plays(list(pool.values()), limit)
        logger.info(f"[PopularityIndex] Popular: {len(popular)} artists")
        return popular

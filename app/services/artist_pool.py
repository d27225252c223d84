"""Candidate pool shared by the popular listing and the similarity recommender."""
import logging

from app.core.exceptions import CacheUnavailableError
from app.schemas.artist import ArtistProfile
from app.services.baseline_profiles import BaselineProfiles
from app.services.cache_service import CacheService, CacheKeys

logger = logging.getLogger(__name__)


async def load_artist_pool(cache: CacheService, baseline: BaselineProfiles) -> dict[str, ArtistProfile]:
    """
    Every known artist keyed by id.

    Baseline profiles are loaded first and cached profiles overlay them, so
    live data wins on id collision. Cached entries missing an avatar borrow
    the baseline one. If the cache cannot be scanned the baseline set is
    returned on its own.
    """
    pool = {profile.id: profile for profile in baseline.all()}

    try:
        cached_values = await cache.get_by_prefix(CacheKeys.ARTIST_PROFILE)
    except CacheUnavailableError as e:
        logger.warning(f"[ArtistPool] Cache scan failed, using baseline only: {e}")
        return pool

    for raw in cached_values:
        profile = ArtistProfile.from_cache(raw)
        if profile is None:
            continue
        if not profile.avatar_url:
            profile.avatar_url = baseline.avatar_for(profile.id)
        pool[profile.id] = profile

    logger.debug(f"[ArtistPool] {len(pool)} artists ({len(cached_values)} cached)")
    return pool

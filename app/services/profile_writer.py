"""Validated partial updates of artist profiles."""
import logging

from app.core.exceptions import ServiceUnavailableException, StoreUnavailableError, ValidationException
from app.schemas.artist import ArtistProfile, ArtistProfileUpdate
from app.services.artist_store import ArtistStore
from app.services.cache_service import CacheService
from app.services.profile_resolver import ProfileResolver, save_profile

logger = logging.getLogger(__name__)


def apply_update(current: ArtistProfile, changes: dict) -> ArtistProfile:
    """
    Merge patch values into a profile.

    Top-level fields are replaced wholesale. Social handles merge per key:
    platforms missing from the patch keep their current handle.
    """
    changes = dict(changes)
    socials = current.socials.model_copy(update=changes.pop("socials", {}))
    return current.model_copy(update={**changes, "socials": socials})


def store_columns(profile: ArtistProfile) -> dict:
    """Profile values for the store-backed columns."""
    return {
        "full_name": profile.full_name,
        "bio": profile.bio,
        "avatar_url": profile.avatar_url,
        "location": profile.location,
        "website": profile.website,
        "phone": profile.phone,
        **profile.socials.model_dump(),
    }


class ProfileWriter:
    """Applies allow-listed patches to the cached profile and mirrors them to the store."""

    def __init__(self, resolver: ProfileResolver, cache: CacheService, store: ArtistStore):
        self._resolver = resolver
        self._cache = cache
        self._store = store

    async def update(self, artist_id: str, patch: ArtistProfileUpdate) -> ArtistProfile:
        """
        Update a profile with a partial patch.

        Raises:
            ValidationException: if the patch carries no allow-listed field
            NotFoundException: if the artist cannot be resolved
            ServiceUnavailableException: if the cache cannot be read or written
        """
        changes = patch.changes()
        if not changes:
            raise ValidationException()

        resolution = await self._resolver.get(artist_id)
        if resolution.cache_degraded:
            logger.error(f"[ProfileWriter] Cache unreadable, refusing to update {artist_id} from {resolution.source.value}")
            raise ServiceUnavailableException("Profile could not be loaded, try again later")
        current = resolution.profile
        updated = apply_update(current, changes)

        if not await save_profile(self._cache, updated):
            logger.error(f"[ProfileWriter] Cache write failed for {artist_id}")
            raise ServiceUnavailableException("Profile could not be saved, try again later")

        try:
            matched = await self._store.update_by_email(current.email, store_columns(updated))
            if not matched:
                logger.debug(f"[ProfileWriter] No store row for {current.email}, cache only")
        except StoreUnavailableError as e:
            logger.warning(f"[ProfileWriter] Store update skipped for {artist_id}: {e}")

        logger.info(f"[ProfileWriter] Updated {artist_id}: {sorted(changes)}")
        return updated

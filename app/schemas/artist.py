"""Artist profile schemas for cache storage and API responses."""

import json
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError

logger = logging.getLogger(__name__)

# Genre shown by public projections when a profile lists none
FALLBACK_GENRE = "Music"


class ArtistSocials(BaseModel):
    """Social handles. Every platform key is always present."""
    instagram: str = ""
    twitter: str = ""
    facebook: str = ""
    youtube: str = ""
    spotify: str = ""
    apple_music: str = ""


class ArtistProfile(BaseModel):
    """Full artist profile as stored in the cache."""

    model_config = ConfigDict(extra="ignore")

    id: str
    email: str
    full_name: str
    username: str = ""
    bio: str = ""
    avatar_url: str = ""
    location: str = ""
    city: str = ""
    country: str = ""
    website: str = ""
    phone: str = ""
    genres: list[str] = []
    rating: float = Field(0, ge=0)
    total_plays: int = Field(0, ge=0)
    total_followers: int = Field(0, ge=0)
    total_concerts: int = Field(0, ge=0)
    total_tracks: int = Field(0, ge=0)
    coins_balance: int = Field(0, ge=0)
    is_verified: bool = False
    socials: ArtistSocials = Field(default_factory=ArtistSocials)
    career_start: str = ""
    label: str = ""
    manager: str = ""
    booking_email: str = ""
    languages: list[str] = []
    created_at: str = ""

    @property
    def primary_genre(self) -> str | None:
        return self.genres[0] if self.genres else None

    @classmethod
    def from_cache(cls, raw: Any) -> Optional["ArtistProfile"]:
        """Parse a cached value (JSON string or dict). Returns None if unusable."""
        if not raw:
            return None
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError:
                return None
        if not isinstance(raw, dict):
            return None
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            logger.warning(f"[ArtistProfile] Skipping malformed cache entry {raw.get('id')!r}: {e.error_count()} errors")
            return None


class ArtistSocialsUpdate(BaseModel):
    """Partial social handles; only keys sent by the client are applied."""

    model_config = ConfigDict(extra="ignore")

    instagram: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    youtube: Optional[str] = None
    spotify: Optional[str] = None
    apple_music: Optional[str] = None


class ArtistProfileUpdate(BaseModel):
    """Schema for updating an artist profile.

    The declared fields are the complete allow-list; any other key in the
    request body is dropped.
    """

    model_config = ConfigDict(extra="ignore")

    username: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    bio: Optional[str] = Field(None, max_length=2000)
    avatar_url: Optional[str] = None
    location: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    genres: Optional[list[str]] = None
    label: Optional[str] = None
    manager: Optional[str] = None
    booking_email: Optional[str] = None
    career_start: Optional[str] = None
    languages: Optional[list[str]] = None
    socials: Optional[ArtistSocialsUpdate] = None

    def changes(self) -> dict[str, Any]:
        """Fields explicitly sent with a non-null value."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ArtistStats(BaseModel):
    """Stats-only projection of a profile."""
    total_plays: int = 0
    total_followers: int = 0
    total_concerts: int = 0
    coins_balance: int = 0


class PopularArtist(BaseModel):
    """Public projection used by the popular listing."""
    id: str
    name: str
    genre: str
    genres: list[str] = []
    city: str = ""
    followers: int = 0
    plays: int = 0
    tracks: int = 0
    rating: float = 0
    avatar_url: str = ""
    is_verified: bool = False


class SimilarArtist(BaseModel):
    """Public projection of a recommended artist with its match score."""
    id: str
    name: str
    genre: str
    genres: list[str] = []
    city: str = ""
    plays: int = 0
    followers: int = 0
    avatar_url: str = ""
    is_verified: bool = False
    rating: float = 0
    match_score: float


class CatalogTrack(BaseModel):
    """A generated track. Never persisted."""
    id: str
    title: str
    artist: str
    artist_id: str
    duration: str
    plays: int
    likes: int
    genre: str
    release_date: str
    is_explicit: bool


# ============== Response envelopes ==============

class ArtistProfileResponse(BaseModel):
    success: bool = True
    source: Optional[str] = None
    data: ArtistProfile


class ArtistStatsResponse(BaseModel):
    success: bool = True
    source: Optional[str] = None
    data: ArtistStats


class PopularArtistsResponse(BaseModel):
    success: bool = True
    data: list[PopularArtist]


class ArtistTracksResponse(BaseModel):
    success: bool = True
    data: list[CatalogTrack]


class SimilarArtistsResponse(BaseModel):
    success: bool = True
    data: list[SimilarArtist]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str

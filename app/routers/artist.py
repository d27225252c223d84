"""Artist profile router: profiles, stats, popular listing, catalog and similar artists."""

import logging

from fastapi import APIRouter, Query

from app.dependencies import AppSettings, Popularity, Recommender, Resolver, Writer
from app.schemas.artist import (
    ArtistProfileResponse,
    ArtistProfileUpdate,
    ArtistStatsResponse,
    ArtistTracksResponse,
    ErrorResponse,
    PopularArtistsResponse,
    SimilarArtistsResponse,
)
from app.services.catalog_service import generate_tracks

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get(
    "/profile/{artist_id}",
    response_model=ArtistProfileResponse,
    responses=NOT_FOUND,
    summary="Get artist profile",
)
async def get_profile(artist_id: str, resolver: Resolver):
    """
    Get an artist profile.

    Resolution order: cache, then authoritative store merged over the
    baseline profile, then the baseline profile alone. `source` reports
    which tier answered.
    """
    logger.info(f"[ArtistProfile] GET {artist_id}")
    resolution = await resolver.get(artist_id)
    return ArtistProfileResponse(source=resolution.source.value, data=resolution.profile)


@router.put(
    "/profile/{artist_id}",
    response_model=ArtistProfileResponse,
    responses={400: {"model": ErrorResponse}, **NOT_FOUND, 503: {"model": ErrorResponse}},
    summary="Update artist profile",
)
async def update_profile(artist_id: str, updates: ArtistProfileUpdate, writer: Writer):
    """
    Update an artist profile with a partial field map.

    Only allow-listed fields are applied; unknown keys are ignored.
    Social handles merge per platform.
    """
    logger.info(f"[ArtistProfile] PUT {artist_id}")
    profile = await writer.update(artist_id, updates)
    return ArtistProfileResponse(data=profile)


@router.get(
    "/profile/{artist_id}/stats",
    response_model=ArtistStatsResponse,
    responses=NOT_FOUND,
    summary="Get artist stats",
)
async def get_profile_stats(artist_id: str, resolver: Resolver):
    """Lightweight stats-only view of a profile."""
    stats, source = await resolver.get_stats(artist_id)
    return ArtistStatsResponse(source=source.value, data=stats)


@router.get(
    "/popular",
    response_model=PopularArtistsResponse,
    summary="Get popular artists",
)
async def get_popular(
    popularity: Popularity,
    settings: AppSettings,
    limit: int | None = Query(None, ge=1, le=50, description="Number of artists to return"),
):
    """
    Most played artists for the landing page.

    Baseline and cached profiles are merged (cached data wins) and ranked by
    total plays.
    """
    logger.info("[ArtistProfile] GET /popular")
    artists = await popularity.list(limit or settings.popular_default_limit)
    return PopularArtistsResponse(data=artists)


@router.get(
    "/profile/{artist_id}/tracks",
    response_model=ArtistTracksResponse,
    responses=NOT_FOUND,
    summary="Get artist tracks",
)
async def get_profile_tracks(artist_id: str, resolver: Resolver):
    """Genre-themed catalog generated from the artist profile."""
    logger.info(f"[ArtistProfile] GET /profile/{artist_id}/tracks")
    resolution = await resolver.get(artist_id)
    return ArtistTracksResponse(data=generate_tracks(resolution.profile))


@router.get(
    "/profile/{artist_id}/similar",
    response_model=SimilarArtistsResponse,
    responses=NOT_FOUND,
    summary="Get similar artists",
)
async def get_similar_artists(
    artist_id: str,
    recommender: Recommender,
    settings: AppSettings,
    top_n: int | None = Query(None, ge=1, le=20, description="Number of artists to return"),
):
    """Artists ranked by genre overlap, genre family and popularity."""
    logger.info(f"[ArtistProfile] GET /profile/{artist_id}/similar")
    similar = await recommender.similar(artist_id, top_n or settings.similar_default_top_n)
    return SimilarArtistsResponse(data=similar)

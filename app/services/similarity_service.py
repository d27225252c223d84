"""
Related-artist recommendations by genre similarity.

Each candidate is scored as::

    2 * exact genre matches + 0.5 per shared genre family + 0.1 * log10(plays)

Exact matches are case-insensitive. A genre may sit in several families and
each shared family counts separately.
"""
import logging
import math
from dataclasses import dataclass

from app.schemas.artist import FALLBACK_GENRE, ArtistProfile, SimilarArtist
from app.services.artist_pool import load_artist_pool
from app.services.baseline_profiles import BaselineProfiles
from app.services.cache_service import CacheService
from app.services.profile_resolver import ProfileResolver

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 6

EXACT_MATCH_WEIGHT = 2.0
FAMILY_BONUS = 0.5
POPULARITY_WEIGHT = 0.1

GENRE_FAMILIES: dict[str, frozenset[str]] = {
    "electronic": frozenset({"electronic", "synth-pop", "techno", "house", "ambient", "dream pop"}),
    "rock": frozenset({"rock", "alternative", "post-rock", "pop-rock", "punk", "shoegaze"}),
    "urban": frozenset({"hip-hop", "trap", "r&b", "soul", "neo-soul"}),
    "acoustic": frozenset({"folk", "indie", "jazz"}),
    "chill": frozenset({"lo-fi", "chillhop", "ambient", "dream pop"}),
}


@dataclass
class ScoredCandidate:
    profile: ArtistProfile
    score: float
    overlap: int
    family_bonus: float

    @property
    def has_genre_affinity(self) -> bool:
        return self.overlap > 0 or self.family_bonus > 0


def score_candidate(query_genres: list[str], candidate: ArtistProfile) -> ScoredCandidate:
    """Score one candidate against the query artist's genres."""
    mine = {genre.lower() for genre in query_genres}
    theirs = [genre.lower() for genre in candidate.genres]

    overlap = sum(1 for genre in theirs if genre in mine)
    family_bonus = sum(
        FAMILY_BONUS
        for members in GENRE_FAMILIES.values()
        if not mine.isdisjoint(members) and not members.isdisjoint(theirs)
    )
    popularity = POPULARITY_WEIGHT * math.log10(max(candidate.total_plays, 1))
    score = EXACT_MATCH_WEIGHT * overlap + family_bonus + popularity
    return ScoredCandidate(profile=candidate, score=score, overlap=overlap, family_bonus=family_bonus)


def to_similar_artist(candidate: ScoredCandidate) -> SimilarArtist:
    profile = candidate.profile
    return SimilarArtist(
        id=profile.id,
        name=profile.full_name,
        genre=profile.primary_genre or FALLBACK_GENRE,
        genres=profile.genres,
        city=profile.city,
        plays=profile.total_plays,
        followers=profile.total_followers,
        avatar_url=profile.avatar_url,
        is_verified=profile.is_verified,
        rating=profile.rating,
        match_score=round(candidate.score, 1),
    )


def rank_similar(
    query: ArtistProfile,
    candidates: list[ArtistProfile],
    top_n: int,
    require_genre_affinity: bool = False,
) -> list[SimilarArtist]:
    """Score, filter and rank candidates. The query artist is never included."""
    scored = [
        score_candidate(query.genres, candidate)
        for candidate in candidates
        if candidate.id != query.id
    ]
    eligible = [
        c for c in scored
        if c.score > 0 and (c.has_genre_affinity or not require_genre_affinity)
    ]
    eligible.sort(key=lambda c: c.score, reverse=True)
    return [to_similar_artist(c) for c in eligible[:top_n]]


class SimilarityRecommender:
    """Recommends artists that share genres with a given artist."""

    def __init__(
        self,
        resolver: ProfileResolver,
        cache: CacheService,
        baseline: BaselineProfiles,
        require_genre_affinity: bool = False,
    ):
        self._resolver = resolver
        self._cache = cache
        self._baseline = baseline
        self._require_genre_affinity = require_genre_affinity

    async def similar(self, artist_id: str, top_n: int = DEFAULT_TOP_N) -> list[SimilarArtist]:
        """
        Raises:
            NotFoundException: if the query artist cannot be resolved
        """
        query = (await self._resolver.get(artist_id)).profile
        pool = await load_artist_pool(self._cache, self._baseline)
        similar = rank_similar(query, list(pool.values()), top_n, self._require_genre_affinity)
        logger.info(f"[SimilarityRecommender] Similar for {artist_id}: {len(similar)} results")
        return similar

"""Tests for ProfileWriter partial updates."""

from __future__ import annotations

import pytest

from app.core.exceptions import NotFoundException, ServiceUnavailableException, ValidationException
from app.schemas.artist import ArtistProfileUpdate
from app.services.profile_resolver import ProfileResolver, ProfileSource
from app.services.profile_writer import ProfileWriter, apply_update
from tests.fakes import cached_profile


def _patch(**fields) -> ArtistProfileUpdate:
    return ArtistProfileUpdate.model_validate(fields)


class TestProfileWriter:
    @pytest.mark.asyncio
    async def test_update_changes_only_patched_fields(
        self, writer: ProfileWriter, resolver: ProfileResolver, baseline
    ) -> None:
        before = baseline.get("artist-1")

        await writer.update("artist-1", _patch(bio="New bio", genres=["Pop"], socials={"twitter": "@new"}))
        after = await resolver.get("artist-1")

        assert after.source == ProfileSource.CACHE
        assert after.profile.bio == "New bio"
        assert after.profile.genres == ["Pop"]
        assert after.profile.socials.twitter == "@new"
        assert after.profile.socials.instagram == before.socials.instagram
        assert after.profile.socials.apple_music == before.socials.apple_music
        unchanged = after.profile.model_dump(exclude={"bio", "genres", "socials"})
        assert unchanged == before.model_dump(exclude={"bio", "genres", "socials"})

    @pytest.mark.asyncio
    async def test_disallowed_fields_are_dropped(self, writer: ProfileWriter) -> None:
        updated = await writer.update(
            "artist-2",
            _patch(id="hijacked", total_plays=1, is_verified=False, city="Sochi"),
        )

        assert updated.id == "artist-2"
        assert updated.total_plays == 189000
        assert updated.is_verified is True
        assert updated.city == "Sochi"

    @pytest.mark.asyncio
    async def test_only_disallowed_fields_raises_and_leaves_cache_untouched(
        self, writer: ProfileWriter, redis_client
    ) -> None:
        with pytest.raises(ValidationException):
            await writer.update("artist-1", _patch(id="x", total_plays=5, coins_balance=10**6))

        assert redis_client.data == {}

    @pytest.mark.asyncio
    async def test_null_values_are_ignored(self, writer: ProfileWriter) -> None:
        with pytest.raises(ValidationException):
            await writer.update("artist-1", _patch(bio=None))

    @pytest.mark.asyncio
    async def test_unknown_artist_raises_not_found(self, writer: ProfileWriter) -> None:
        with pytest.raises(NotFoundException):
            await writer.update("artist-404", _patch(bio="hello"))

    @pytest.mark.asyncio
    async def test_cache_write_failure_fails_update(self, writer: ProfileWriter, redis_client) -> None:
        redis_client.fail_writes = True
        with pytest.raises(ServiceUnavailableException):
            await writer.update("artist-1", _patch(bio="hello"))

    @pytest.mark.asyncio
    async def test_cache_read_failure_keeps_prior_edits(
        self, writer: ProfileWriter, store, redis_client
    ) -> None:
        await writer.update("artist-1", _patch(bio="Live edit"))
        redis_client.fail_reads = True

        with pytest.raises(ServiceUnavailableException):
            await writer.update("artist-1", _patch(city="Tver"))

        cached = cached_profile(redis_client, "artist-1")
        assert cached.bio == "Live edit"
        assert cached.city == "Moscow"
        assert len(store.updates) == 1

    @pytest.mark.asyncio
    async def test_update_propagates_to_store_by_current_email(self, writer: ProfileWriter, store) -> None:
        store.rows["ivanov@promo.fm"] = {"email": "ivanov@promo.fm"}

        await writer.update("artist-1", _patch(email="new@promo.fm", phone="+7 000", socials={"spotify": "ivanov"}))

        email, fields = store.updates[-1]
        assert email == "ivanov@promo.fm"
        assert fields["phone"] == "+7 000"
        assert fields["spotify"] == "ivanov"
        assert fields["instagram"] == "@aleksandr_ivanov"

    @pytest.mark.asyncio
    async def test_store_failure_does_not_fail_update(
        self, writer: ProfileWriter, store, redis_client
    ) -> None:
        store.unreachable = True

        updated = await writer.update("artist-3", _patch(label="Thunder Records"))

        assert updated.label == "Thunder Records"
        assert cached_profile(redis_client, "artist-3").label == "Thunder Records"


def test_apply_update_merges_socials_per_key(baseline) -> None:
    current = baseline.get("artist-5")

    updated = apply_update(current, {"socials": {"twitter": "@volkov"}, "city": "Perm"})

    assert updated.socials.twitter == "@volkov"
    assert updated.socials.instagram == "@nikita_volkov"
    assert updated.socials.youtube == "@VolkovBeats"
    assert updated.city == "Perm"
    assert current.socials.twitter == ""


def test_patch_changes_excludes_unset_and_unknown_fields() -> None:
    patch = _patch(bio="x", unknown="y", socials={"youtube": "@yt", "myspace": "old"})

    assert patch.changes() == {"bio": "x", "socials": {"youtube": "@yt"}}

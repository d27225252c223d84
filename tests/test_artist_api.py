"""HTTP tests for the artist profile endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_artist_store, get_cache_service, get_popularity_index
from app.main import app
from app.services.cache_service import CacheService
from tests.fakes import FakeArtistStore, FakeRedis

BASE = "/api/v1/artist-profile"


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def fake_store() -> FakeArtistStore:
    return FakeArtistStore()


@pytest.fixture
def client(fake_redis: FakeRedis, fake_store: FakeArtistStore):
    cache = CacheService(fake_redis)
    app.dependency_overrides[get_cache_service] = lambda: cache
    app.dependency_overrides[get_artist_store] = lambda: fake_store
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestProfileEndpoints:
    def test_get_profile(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/profile/artist-1")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["source"] == "baseline"
        assert body["data"]["id"] == "artist-1"
        assert set(body["data"]["socials"]) == {
            "instagram", "twitter", "facebook", "youtube", "spotify", "apple_music",
        }

    def test_second_read_served_from_cache(self, client: TestClient) -> None:
        client.get(f"{BASE}/profile/artist-2")
        response = client.get(f"{BASE}/profile/artist-2")

        assert response.json()["source"] == "cache"

    def test_store_row_is_merged(self, client: TestClient, fake_store: FakeArtistStore) -> None:
        fake_store.rows["gromov@promo.fm"] = {"full_name": "Daniil Gromov Band", "total_plays": 160000}

        body = client.get(f"{BASE}/profile/artist-3").json()

        assert body["source"] == "merged"
        assert body["data"]["full_name"] == "Daniil Gromov Band"
        assert body["data"]["total_plays"] == 160000

    def test_unknown_profile_returns_404(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/profile/artist-404")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Artist not found: artist-404"}

    def test_update_then_read(self, client: TestClient, fake_store: FakeArtistStore) -> None:
        response = client.put(
            f"{BASE}/profile/artist-1",
            json={"bio": "Back in the studio", "socials": {"twitter": "@ivanov"}, "total_plays": 1},
        )

        assert response.status_code == 200
        assert response.json()["data"]["bio"] == "Back in the studio"

        body = client.get(f"{BASE}/profile/artist-1").json()
        assert body["source"] == "cache"
        assert body["data"]["bio"] == "Back in the studio"
        assert body["data"]["socials"]["twitter"] == "@ivanov"
        assert body["data"]["socials"]["instagram"] == "@aleksandr_ivanov"
        assert body["data"]["total_plays"] == 245000
        assert fake_store.updates[0][0] == "ivanov@promo.fm"

    def test_update_without_allowed_fields_returns_400(self, client: TestClient, fake_redis: FakeRedis) -> None:
        response = client.put(f"{BASE}/profile/artist-1", json={"total_plays": 10, "id": "x"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "No valid fields to update"}
        assert fake_redis.data == {}

    def test_update_unknown_artist_returns_404(self, client: TestClient) -> None:
        response = client.put(f"{BASE}/profile/artist-404", json={"bio": "hi"})

        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_update_when_cache_down_returns_503(self, client: TestClient, fake_redis: FakeRedis) -> None:
        fake_redis.fail_writes = True

        response = client.put(f"{BASE}/profile/artist-1", json={"bio": "hi"})

        assert response.status_code == 503
        assert response.json()["success"] is False

    def test_stats(self, client: TestClient) -> None:
        body = client.get(f"{BASE}/profile/artist-1/stats").json()

        assert body["success"] is True
        assert body["data"] == {
            "total_plays": 245000,
            "total_followers": 12500,
            "total_concerts": 34,
            "coins_balance": 1250,
        }


class TestListingEndpoints:
    def test_popular_default_limit(self, client: TestClient) -> None:
        body = client.get(f"{BASE}/popular").json()

        assert body["success"] is True
        assert len(body["data"]) == 12
        assert body["data"][0]["id"] == "artist-4"
        assert body["data"][0]["genre"] == "Electronic"

    def test_popular_with_limit(self, client: TestClient) -> None:
        body = client.get(f"{BASE}/popular", params={"limit": 2}).json()
        assert [artist["id"] for artist in body["data"]] == ["artist-4", "artist-5"]

    @pytest.mark.parametrize("limit", [0, 51])
    def test_popular_rejects_out_of_range_limit(self, client: TestClient, limit: int) -> None:
        response = client.get(f"{BASE}/popular", params={"limit": limit})
        assert response.status_code == 422
        assert response.json()["success"] is False
        assert "limit" in response.json()["error"]

    def test_tracks(self, client: TestClient) -> None:
        body = client.get(f"{BASE}/profile/artist-4/tracks").json()

        assert body["success"] is True
        assert len(body["data"]) == 10
        assert body["data"][0]["title"] == "Digital Dream"
        assert body["data"][0]["duration"] == "4:30"

    def test_tracks_unknown_artist(self, client: TestClient) -> None:
        assert client.get(f"{BASE}/profile/artist-404/tracks").status_code == 404

    def test_similar(self, client: TestClient) -> None:
        body = client.get(f"{BASE}/profile/artist-4/similar", params={"top_n": 3}).json()

        assert body["success"] is True
        assert [artist["id"] for artist in body["data"]] == ["artist-8", "artist-6", "artist-9"]
        assert all("match_score" in artist for artist in body["data"])

    def test_similar_unknown_artist(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/profile/artist-404/similar")

        assert response.status_code == 404
        assert response.json()["error"] == "Artist not found: artist-404"


class _BrokenPopularity:
    async def list(self, limit: int):
        raise RuntimeError("index exploded")


class TestErrorEnvelope:
    def test_invalid_body_uses_envelope(self, client: TestClient) -> None:
        response = client.put(f"{BASE}/profile/artist-1", json={"genres": "Pop"})

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert "genres" in body["error"]
        assert "detail" not in body

    def test_invalid_email_uses_envelope(self, client: TestClient) -> None:
        response = client.put(f"{BASE}/profile/artist-1", json={"email": "not-an-email"})

        assert response.status_code == 422
        assert response.json()["success"] is False

    def test_unknown_route_uses_envelope(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/nowhere")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}

    def test_unhandled_error_uses_envelope(self, client: TestClient) -> None:
        app.dependency_overrides[get_popularity_index] = lambda: _BrokenPopularity()

        response = TestClient(app, raise_server_exceptions=False).get(f"{BASE}/popular")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}

    def test_cache_outage_blocks_update(self, client: TestClient, fake_redis: FakeRedis) -> None:
        client.put(f"{BASE}/profile/artist-1", json={"bio": "Live edit"})
        fake_redis.fail_reads = True

        update = client.put(f"{BASE}/profile/artist-1", json={"bio": "Second edit"})
        read = client.get(f"{BASE}/profile/artist-1")

        assert update.status_code == 503
        assert update.json()["success"] is False
        assert read.status_code == 200
        assert read.json()["source"] == "baseline"
        fake_redis.fail_reads = False
        assert client.get(f"{BASE}/profile/artist-1").json()["data"]["bio"] == "Live edit"


def test_health() -> None:
    response = TestClient(app).get("/health")
    assert response.json() == {"status": "healthy"}

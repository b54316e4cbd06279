"""Tests for the HTTP routes."""

from __future__ import annotations

import pytest
from app.dependencies import (
    get_announcements,
    get_cams,
    get_league_service,
    get_spiffs,
    get_suggestions,
)
from app.main import app
from fastapi.testclient import TestClient

from mffl.content.announcements import AnnouncementStore
from mffl.content.cams import CamsBoard
from mffl.content.spiffs import SpiffLedger
from mffl.content.suggestions import SuggestionStore

LEAGUE_URL = "https://sleeper.test/v1/league/L1"


@pytest.fixture
def client(service, tmp_path):
    app.dependency_overrides[get_league_service] = lambda: service
    app.dependency_overrides[get_announcements] = lambda: AnnouncementStore(tmp_path / "mffl.json")
    app.dependency_overrides[get_suggestions] = lambda: SuggestionStore(tmp_path / "suggestions.json")
    app.dependency_overrides[get_cams] = lambda: CamsBoard(tmp_path / "cams.json")
    app.dependency_overrides[get_spiffs] = lambda: SpiffLedger(tmp_path / "spiffs.json")
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.mark.unit
def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


@pytest.mark.unit
class TestLeagueRoutes:
    def test_league_merges_live_roster(self, client, sleeper_league):
        body = client.get("/api/league").json()
        assert body["leagueName"] == "Monday Night Misfits"
        assert body["announcements"][0]["id"] == "welcome"
        assert len(body["roster"]) == 5
        assert body["error"] is None

    def test_league_falls_back_to_local_document(self, client, mocked_upstream):
        mocked_upstream.get(LEAGUE_URL, status=500)
        mocked_upstream.get(f"{LEAGUE_URL}/users", json=[])
        mocked_upstream.get(f"{LEAGUE_URL}/rosters", json=[])

        response = client.get("/api/league")
        assert response.status_code == 200
        body = response.json()
        assert body["leagueName"] == "MFFL"
        assert body["roster"] == []
        assert "HTTP 500" in body["error"]

    def test_rosters(self, client, sleeper_league):
        items = client.get("/api/sleeper/rosters").json()["items"]
        assert items[0]["team"] == "Bob"
        assert items[-1]["avatarFull"] == "https://sleepercdn.com/avatars/av1"

    def test_roster_detail_and_404(self, client, sleeper_league):
        detail = client.get("/api/sleeper/roster/1").json()
        assert [p["id"] for p in detail["bench"]] == ["103"]

        response = client.get("/api/sleeper/roster/42")
        assert response.status_code == 404
        assert "42" in response.json()["detail"]

    def test_matchups_explicit_week(self, client, sleeper_league):
        sleeper_league.get(
            f"{LEAGUE_URL}/matchups/3",
            json=[{"roster_id": 1, "matchup_id": 1, "points": 10}],
        )
        body = client.get("/api/sleeper/matchups", params={"week": 3}).json()
        assert body["week"] == 3
        assert body["meta"] == {"source": "explicit", "count": 1}
        assert body["matchups"][0]["b"] is None

    def test_matchups_bad_date_is_400(self, client, sleeper_league):
        response = client.get("/api/sleeper/matchups", params={"date": "soon"})
        assert response.status_code == 400

    def test_upstream_failure_is_500(self, client, mocked_upstream):
        mocked_upstream.get(f"{LEAGUE_URL}/users", status=502)
        mocked_upstream.get(f"{LEAGUE_URL}/rosters", json=[])
        mocked_upstream.get("https://sleeper.test/v1/state/nfl", json={"week": 2})
        mocked_upstream.get(f"{LEAGUE_URL}/transactions/2", json=[])
        mocked_upstream.get("https://sleeper.test/v1/players/nfl", json={})

        response = client.get("/api/sleeper/transactions")
        assert response.status_code == 500
        assert "HTTP 502" in response.json()["detail"]

    def test_transactions_uses_from_key(self, client, sleeper_league):
        sleeper_league.get(
            f"{LEAGUE_URL}/transactions/4",
            json=[{"transaction_id": "1", "drops": {"101": 1}, "adds": {}}],
        )
        item = client.get("/api/sleeper/transactions", params={"round": 4}).json()["items"][0]
        assert item["drops"][0]["from"]["team"] == "Zebra Stripes"
        assert "from_team" not in item["drops"][0]

    def test_cache_clear(self, client, sleeper_league):
        client.get("/api/sleeper/rosters")
        body = client.delete("/api/cache", params={"prefix": "sleeper:"}).json()
        assert body == {"removed": 3, "prefix": "sleeper:"}


@pytest.mark.unit
class TestContentRoutes:
    def test_announcement_lifecycle(self, client):
        created = client.post("/api/announcements", json={"title": "Dues", "body": "Pay up"}).json()
        assert client.get("/api/announcements").json()[0]["id"] == created["id"]

        assert client.delete(f"/api/announcements/{created['id']}").json() == {"ok": True}
        assert client.delete(f"/api/announcements/{created['id']}").status_code == 404

    def test_announcement_validation(self, client):
        assert client.post("/api/announcements", json={"title": "", "body": "x"}).status_code == 400

    def test_suggestions(self, client):
        client.post("/api/suggestions", json={"text": "Add a taco trophy", "name": "Sam"})
        assert client.get("/api/suggestions").json()[0]["name"] == "Sam"

    def test_cams(self, client):
        block = client.post("/api/cams/blocks", json={"type": "image", "url": "https://img.test/a.png"}).json()
        assert client.get("/api/cams").json()["items"][0]["id"] == block["id"]
        assert client.put("/api/cams/layout", json={"order": ["nope"]}).status_code == 400
        assert client.post("/api/cams/blocks", json={"type": "video"}).status_code == 400

    def test_spiffs(self, client):
        body = client.put("/api/spiffs", json={"banks": {"Alice": 3.457, "Bob": "-4"}}).json()
        assert body["banks"] == {"Alice": 3.46, "Bob": 0.0}
        assert client.get("/api/spiffs").json() == {"banks": {"Alice": 3.46, "Bob": 0.0}}

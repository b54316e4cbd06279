"""Tests for the upstream HTTP clients."""

from __future__ import annotations

import pytest
import requests
import responses
from responses import matchers

from mffl.errors import UpstreamError
from mffl.utils.upstream import (
    EspnClient,
    SleeperClient,
    UpstreamClient,
    avatar_full,
    avatar_thumb,
)

SLEEPER_URL = "https://sleeper.test/v1"
SCOREBOARD_URL = "https://espn.test/nfl/scoreboard"


@pytest.mark.unit
def test_avatar_urls():
    assert avatar_thumb("abc") == "https://sleepercdn.com/avatars/thumbs/abc"
    assert avatar_full("abc") == "https://sleepercdn.com/avatars/abc"
    assert avatar_thumb(None) is None
    assert avatar_full("") is None


@pytest.mark.unit
class TestUpstreamClient:
    @responses.activate
    def test_fetch_json(self):
        responses.get("https://api.test/ok", json={"ok": True})
        assert UpstreamClient().fetch_json("https://api.test/ok") == {"ok": True}

    @responses.activate
    def test_non_2xx_raises_with_status(self):
        responses.get("https://api.test/missing", status=404, json={})
        with pytest.raises(UpstreamError) as excinfo:
            UpstreamClient().fetch_json("https://api.test/missing")
        assert excinfo.value.status == 404
        assert "HTTP 404" in str(excinfo.value)

    @responses.activate
    def test_invalid_json_raises_decode_failure(self):
        responses.get("https://api.test/html", body="<html>", status=200)
        with pytest.raises(UpstreamError) as excinfo:
            UpstreamClient().fetch_json("https://api.test/html")
        assert excinfo.value.decode_failure is True
        assert excinfo.value.status is None

    @responses.activate
    def test_transport_error_raises(self):
        responses.get(
            "https://api.test/down", body=requests.ConnectionError("refused")
        )
        with pytest.raises(UpstreamError) as excinfo:
            UpstreamClient().fetch_json("https://api.test/down")
        assert "refused" in str(excinfo.value)

    @responses.activate
    def test_no_retry_on_failure(self):
        responses.get("https://api.test/flaky", status=503)
        with pytest.raises(UpstreamError):
            UpstreamClient().fetch_json("https://api.test/flaky")
        assert len(responses.calls) == 1


@pytest.mark.unit
class TestSleeperClient:
    def test_responses_are_cached_per_path(self, mocked_upstream, cache):
        mocked_upstream.get(f"{SLEEPER_URL}/league/L1/users", json=[{"user_id": "u1"}])
        client = SleeperClient(UpstreamClient(), cache, base_url=SLEEPER_URL)

        assert client.users("L1") == [{"user_id": "u1"}]
        assert client.users("L1") == [{"user_id": "u1"}]
        assert len(mocked_upstream.calls) == 1
        assert cache.get("sleeper:/league/L1/users") == [{"user_id": "u1"}]

    def test_state_and_players_use_their_namespaces(self, mocked_upstream, cache, clock):
        mocked_upstream.get(f"{SLEEPER_URL}/state/nfl", json={"week": 4})
        mocked_upstream.get(f"{SLEEPER_URL}/players/nfl", json={"1": {}})
        client = SleeperClient(UpstreamClient(), cache, base_url=SLEEPER_URL)

        client.state()
        client.players()
        clock.advance(3600)
        client.state()
        client.players()

        urls = [call.request.url for call in mocked_upstream.calls]
        assert urls.count(f"{SLEEPER_URL}/state/nfl") == 2
        assert urls.count(f"{SLEEPER_URL}/players/nfl") == 1

    def test_null_body_becomes_empty(self, mocked_upstream, cache):
        mocked_upstream.get(f"{SLEEPER_URL}/league/L1/matchups/3", body="null")
        client = SleeperClient(UpstreamClient(), cache, base_url=SLEEPER_URL)
        assert client.matchups("L1", 3) == []

    def test_failure_is_not_cached(self, mocked_upstream, cache):
        mocked_upstream.get(f"{SLEEPER_URL}/league/L1", status=500)
        client = SleeperClient(UpstreamClient(), cache, base_url=SLEEPER_URL)
        with pytest.raises(UpstreamError):
            client.league("L1")
        assert cache.stats()["entries"] == 0


@pytest.mark.unit
def test_scoreboard_is_keyed_by_day(mocked_upstream, cache, scoreboard_raw):
    mocked_upstream.get(
        SCOREBOARD_URL,
        json=scoreboard_raw,
        match=[matchers.query_param_matcher({"dates": "20250907"})],
    )
    client = EspnClient(UpstreamClient(), cache, scoreboard_url=SCOREBOARD_URL)

    assert client.scoreboard("20250907")["week"]["number"] == 1
    client.scoreboard("20250907")
    assert len(mocked_upstream.calls) == 1
    assert cache.get("scoreboard:20250907") is not None

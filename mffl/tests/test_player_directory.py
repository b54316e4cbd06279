"""Tests for player resolution."""

from __future__ import annotations

import pytest

from mffl.player.player_directory import (
    UNKNOWN_PLAYER,
    PlayerDirectory,
    PlayerResolver,
    pick_name,
    pick_position,
)
from mffl.utils.upstream import SleeperClient, UpstreamClient

SLEEPER_URL = "https://sleeper.test/v1"


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [
        ({"full_name": "Patrick Mahomes", "first_name": "P"}, "Patrick Mahomes"),
        ({"first_name": "Tom", "last_name": "Brady"}, "Tom Brady"),
        ({"first_name": "Tom"}, "Tom"),
        ({"last_name": "Kelce"}, "Kelce"),
        ({"full_name": "  "}, UNKNOWN_PLAYER),
        ({}, UNKNOWN_PLAYER),
    ],
)
def test_pick_name(raw, expected):
    assert pick_name(raw) == expected


@pytest.mark.unit
def test_pick_position():
    assert pick_position({"position": "WR", "fantasy_positions": ["TE"]}) == "WR"
    assert pick_position({"fantasy_positions": ["TE", "WR"]}) == "TE"
    assert pick_position({"fantasy_positions": []}) == ""


@pytest.mark.unit
class TestPlayerResolver:
    def test_resolves_known_player(self, players_raw):
        player = PlayerResolver(players_raw).resolve("101")
        assert player.to_dict() == {
            "id": "101",
            "name": "Patrick Mahomes",
            "pos": "QB",
            "team": "KC",
        }

    def test_null_team_becomes_empty(self, players_raw):
        assert PlayerResolver(players_raw).resolve("102").team == ""

    def test_unknown_id_is_a_placeholder(self, players_raw):
        player = PlayerResolver(players_raw).resolve("999")
        assert player.id == "999"
        assert player.name == UNKNOWN_PLAYER
        assert player.pos == ""

    def test_resolve_many_keeps_order(self, players_raw):
        names = [p.name for p in PlayerResolver(players_raw).resolve_many(["103", "101"])]
        assert names == ["Kelce", "Patrick Mahomes"]


@pytest.mark.unit
class TestPlayerDirectory:
    @pytest.fixture
    def directory(self, cache):
        return PlayerDirectory(SleeperClient(UpstreamClient(timeout=5), cache, base_url=SLEEPER_URL))

    def test_snapshot_fetches_once_per_window(self, directory, mocked_upstream, players_raw, clock):
        mocked_upstream.get(f"{SLEEPER_URL}/players/nfl", json=players_raw)

        first = directory.snapshot()
        second = directory.snapshot()

        assert len(first) == len(players_raw)
        assert second.resolve("201").name == "Justin Jefferson"
        assert len(mocked_upstream.calls) == 1

        clock.advance(86401)
        directory.snapshot()
        assert len(mocked_upstream.calls) == 2

    def test_resolve_uses_cached_directory(self, directory, mocked_upstream, players_raw):
        mocked_upstream.get(f"{SLEEPER_URL}/players/nfl", json=players_raw)

        assert directory.resolve("101").name == "Patrick Mahomes"
        assert directory.resolve("999").name == UNKNOWN_PLAYER
        assert len(mocked_upstream.calls) == 1

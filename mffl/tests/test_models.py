"""Tests for payload ingestion, fallbacks and team resolution."""

from __future__ import annotations

import pytest

from mffl.league.bundle import NO_MANAGER, TeamDirectory, resolve_team, sort_by_team_name
from mffl.league.models import (
    BracketRecord,
    LeagueInfo,
    MatchupRecord,
    ResolvedTeam,
    Roster,
    TransactionRecord,
    User,
    as_int,
)
from mffl.utils.fallback import first_non_empty


@pytest.mark.unit
def test_first_non_empty():
    assert first_non_empty(None, "", "  ", "Mahomes", default="Unknown") == "Mahomes"
    assert first_non_empty(None, " ", default="Unknown") == "Unknown"
    assert first_non_empty(" padded ") == "padded"
    assert first_non_empty() is None


@pytest.mark.unit
def test_as_int():
    assert as_int("7") == 7
    assert as_int(7.0) == 7
    assert as_int("7.5") is None
    assert as_int(True) is None
    assert as_int(None) is None
    assert as_int("abc") is None


@pytest.mark.unit
class TestTeamResolution:
    def test_team_name_prefers_metadata(self):
        user = User.from_json(
            {"user_id": "u", "display_name": "D", "username": "n", "metadata": {"team_name": "T"}}
        )
        team = resolve_team(1, user)
        assert team.team == "T"
        assert team.manager == "D"

    def test_username_only(self):
        team = resolve_team(3, User.from_json({"user_id": "u", "username": "just_me"}))
        assert team.team == "just_me"
        assert team.manager == "just_me"

    def test_no_names_falls_back_to_roster_id(self):
        team = resolve_team(9, User.from_json({"user_id": "u"}))
        assert team.team == "Team 9"
        assert team.manager == NO_MANAGER

    def test_missing_user(self):
        team = resolve_team(4, None)
        assert team.team == "Team 4"
        assert team.avatar_thumb is None

    def test_avatar_urls(self):
        team = resolve_team(1, User.from_json({"user_id": "u", "avatar": "abc"}))
        assert team.avatar_id == "abc"
        assert team.avatar_thumb.endswith("/avatars/thumbs/abc")
        assert team.avatar_full.endswith("/avatars/abc")

    def test_directory_resolution(self, users_raw, rosters_raw):
        directory = TeamDirectory.from_json(users_raw, rosters_raw)

        assert directory.resolve(1).team == "Zebra Stripes"
        assert directory.resolve("2").team == "Bob"
        assert directory.resolve(3).team == "Carol"
        assert directory.resolve(4).team == "Team 4"
        assert directory.resolve(None) is None
        assert directory.resolve(99).team == "Team 99"
        assert len(directory.teams()) == 5

    def test_sort_by_team_name(self):
        teams = [ResolvedTeam(i, name, "m") for i, name in enumerate(["Charlie", "Alpha", "Bravo"])]
        assert [t.team for t in sort_by_team_name(teams)] == ["Alpha", "Bravo", "Charlie"]

    def test_sort_by_team_name_ignores_case_first(self):
        names = ["Bravo", "alpha", "Alpha", "\u00e9clair", "Echo", "charlie"]
        teams = [ResolvedTeam(i, name, "m") for i, name in enumerate(names)]
        assert [t.team for t in sort_by_team_name(teams)] == [
            "alpha",
            "Alpha",
            "Bravo",
            "charlie",
            "Echo",
            "\u00e9clair",
        ]


@pytest.mark.unit
class TestIngestion:
    def test_roster_id_lists_drop_empty_slots(self):
        roster = Roster.from_json(
            {"roster_id": "2", "starters": ["1", None, "", "3"], "players": None}
        )
        assert roster.roster_id == 2
        assert roster.starters == ["1", "3"]
        assert roster.players == []
        assert roster.reserve == []

    def test_league_playoff_start(self):
        assert LeagueInfo.from_json({"settings": {"playoff_week_start": 15}}).playoff_start_week == 15
        assert LeagueInfo.from_json({"playoff_start_week": 14}).playoff_start_week == 14
        assert LeagueInfo.from_json({}).playoff_start_week is None

    def test_matchup_group_key(self):
        assert MatchupRecord.from_json({"roster_id": 1, "matchup_id": 3}).group_key == ("matchup", 3)
        assert MatchupRecord.from_json({"roster_id": 1, "matchup_id": None}).group_key == ("roster", 1)
        assert MatchupRecord.from_json({"roster_id": 1, "points": None}).points == 0.0

    def test_transaction_waiver_bid_fallback(self):
        assert TransactionRecord.from_json({"waiver_bid": 12}).waiver_bid == 12
        assert TransactionRecord.from_json({"settings": {"waiver_bid": 7}}).waiver_bid == 7
        assert TransactionRecord.from_json({}).waiver_bid == 0

    def test_transaction_maps(self):
        tx = TransactionRecord.from_json(
            {"transaction_id": 55, "adds": {"101": 1}, "drops": None, "roster_ids": [1, "2"]}
        )
        assert tx.transaction_id == "55"
        assert tx.adds == {"101": 1}
        assert tx.drops == {}
        assert tx.roster_ids == [1, 2]

    def test_bracket_field_aliases(self):
        record = BracketRecord.from_json(
            {"round": 2, "matchup_id": 5, "t1": None, "t2": 4, "winner": 4, "t1_from": {"w": 1}}
        )
        assert (record.r, record.m, record.t1, record.t2, record.w) == (2, 5, None, 4, 4)
        assert record.t1_from == {"w": 1}
        assert record.l is None

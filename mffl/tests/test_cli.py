"""Tests for the interactive command layer."""

from __future__ import annotations

import pytest
from rich.console import Console

from commands.league_context import LeagueContext
from commands.main import build_registry
from mffl.errors import WeekResolutionError
from mffl.views.matchups import Matchup, MatchupSide, MatchupsResult


class StubService:
    def __init__(self):
        self.matchup_calls = []

    def matchups(self, week=None, date_value=None):
        self.matchup_calls.append((week, date_value))
        if date_value == "bad":
            raise WeekResolutionError("Invalid date 'bad'")
        side = MatchupSide(1, "Zebra Stripes", "Alice", None, 101.5)
        return MatchupsResult(week or 2, "explicit", [Matchup(1, side, None)])

    def close(self):
        pass


@pytest.fixture
def cli():
    console = Console(record=True, width=120)
    service = StubService()
    registry, aliases = build_registry(console, LeagueContext(console, service))
    return console, service, registry, aliases


@pytest.mark.unit
def test_registry_knows_aliases(cli):
    _, _, registry, aliases = cli
    assert "/quit" in registry.names()
    assert "/teams" in registry.names()
    assert aliases["/exit"] == ("/quit",)


@pytest.mark.unit
def test_unknown_command_is_not_dispatched(cli):
    _, _, registry, _ = cli
    assert registry.dispatch("/nope") is False
    assert registry.dispatch("") is False


@pytest.mark.unit
def test_matchups_argument_parsing(cli):
    console, service, registry, _ = cli
    registry.dispatch("/matchups 5")
    registry.dispatch("/matchups 2025-09-07")

    assert service.matchup_calls == [(5, None), (None, "2025-09-07")]
    assert "Zebra Stripes" in console.export_text()


@pytest.mark.unit
def test_domain_errors_are_printed(cli):
    console, _, registry, _ = cli
    registry.dispatch("/matchups bad")
    assert "Invalid date 'bad'" in console.export_text()


@pytest.mark.unit
def test_command_help(cli):
    console, service, registry, _ = cli
    registry.dispatch("/matchups -h")
    assert service.matchup_calls == []
    assert "[week|YYYY-MM-DD]" in console.export_text()

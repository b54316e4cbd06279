"""Pytest configuration and fixtures for mffl tests."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest
import responses

from mffl.service import build_service
from mffl.utils.ttl_cache import TTLCache

LEAGUE_ID = "L1"
SLEEPER_URL = "https://sleeper.test/v1"
SCOREBOARD_URL = "https://espn.test/nfl/scoreboard"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> TTLCache:
    return TTLCache(
        ttls={"sleeper": 300, "scoreboard": 300, "state": 120, "players": 86400},
        clock=clock,
    )


@pytest.fixture
def league_raw() -> Dict[str, Any]:
    return {
        "league_id": LEAGUE_ID,
        "name": "Monday Night Misfits",
        "season": "2025",
        "status": "in_season",
        "settings": {"playoff_week_start": 15},
    }


@pytest.fixture
def users_raw() -> List[Dict[str, Any]]:
    return [
        {
            "user_id": "u1",
            "display_name": "Alice",
            "username": "alice_u",
            "avatar": "av1",
            "metadata": {"team_name": "Zebra Stripes"},
        },
        {
            "user_id": "u2",
            "display_name": "Bob",
            "username": "bobby",
            "avatar": None,
            "metadata": {},
        },
        {
            "user_id": "u3",
            "display_name": "",
            "username": "Carol",
            "metadata": {"team_name": "   "},
        },
        {
            "user_id": "u5",
            "display_name": "Eve",
            "username": "eve",
            "metadata": {"team_name": "Eagle Eyes"},
        },
    ]


@pytest.fixture
def rosters_raw() -> List[Dict[str, Any]]:
    return [
        {
            "roster_id": 1,
            "owner_id": "u1",
            "starters": ["101", "102"],
            "players": ["101", "102", "103"],
            "reserve": ["104"],
        },
        {
            "roster_id": 2,
            "owner_id": "u2",
            "starters": ["201"],
            "players": ["201", "202"],
            "reserve": None,
        },
        {"roster_id": 3, "owner_id": "u3", "starters": [], "players": []},
        {"roster_id": 4, "owner_id": None, "starters": None, "players": None},
        {"roster_id": 5, "owner_id": "u5", "starters": [], "players": []},
    ]


@pytest.fixture
def players_raw() -> Dict[str, Dict[str, Any]]:
    return {
        "101": {"full_name": "Patrick Mahomes", "position": "QB", "team": "KC"},
        "102": {"first_name": "Tom", "last_name": "Brady", "position": "QB", "team": None},
        "103": {"last_name": "Kelce", "fantasy_positions": ["TE"], "team": "KC"},
        "104": {"full_name": "Injured Guy", "position": "RB", "team": "NYJ"},
        "201": {"full_name": "Justin Jefferson", "position": "WR", "team": "MIN"},
        "202": {},
    }


@pytest.fixture
def state_raw() -> Dict[str, Any]:
    return {"season": "2025", "season_type": "regular", "week": 6}


@pytest.fixture
def scoreboard_raw() -> Dict[str, Any]:
    return {
        "week": {"number": 1},
        "season": {"type": 2},
        "events": [
            {
                "id": "401",
                "date": "2025-09-07T17:00Z",
                "status": {"type": {"name": "STATUS_FINAL"}},
                "competitions": [
                    {
                        "date": "2025-09-07T17:00Z",
                        "venue": {"fullName": "Arrowhead Stadium"},
                        "broadcasts": [{"names": ["CBS"]}],
                        "competitors": [
                            {
                                "homeAway": "home",
                                "score": "27",
                                "team": {
                                    "displayName": "Kansas City Chiefs",
                                    "abbreviation": "KC",
                                    "logo": "https://a.espncdn.com/kc.png",
                                },
                            },
                            {
                                "homeAway": "away",
                                "score": "20",
                                "team": {"displayName": "Baltimore Ravens", "abbreviation": "BAL"},
                            },
                        ],
                    }
                ],
            },
            {"id": "402", "competitions": [{}]},
        ],
    }


@pytest.fixture
def mocked_upstream():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def sleeper_league(mocked_upstream, league_raw, users_raw, rosters_raw, players_raw, state_raw):
    """Register the league-wide Sleeper endpoints on the mocked transport."""
    base = f"{SLEEPER_URL}/league/{LEAGUE_ID}"
    mocked_upstream.get(base, json=league_raw)
    mocked_upstream.get(f"{base}/users", json=users_raw)
    mocked_upstream.get(f"{base}/rosters", json=rosters_raw)
    mocked_upstream.get(f"{SLEEPER_URL}/players/nfl", json=players_raw)
    mocked_upstream.get(f"{SLEEPER_URL}/state/nfl", json=state_raw)
    return mocked_upstream


@pytest.fixture
def service(cache):
    svc = build_service(
        LEAGUE_ID,
        sleeper_base_url=SLEEPER_URL,
        espn_scoreboard_url=SCOREBOARD_URL,
        tz_name="America/New_York",
        fetch_workers=4,
        upstream_timeout=5,
        cache=cache,
    )
    yield svc
    svc.close()

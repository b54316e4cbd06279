"""NFL games for a calendar day, flattened from the ESPN scoreboard."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import pytz

from mffl.league.models import as_int
from mffl.schedule.week_resolver import LEAGUE_TIMEZONE

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "STATUS_SCHEDULED"


def _dig(raw: Any, *path: Any) -> Any:
    """Follow dict keys / list indexes, returning None at the first gap."""
    current = raw
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or len(current) <= step:
                return None
        elif not isinstance(current, dict):
            return None
        current = current[step] if isinstance(step, int) else current.get(step)
        if current is None:
            return None
    return current


def local_start(start_utc: Optional[str], tz_name: str = LEAGUE_TIMEZONE) -> Optional[str]:
    """Convert an ESPN UTC timestamp ("2025-09-07T17:00Z") to league-local ISO."""
    if not start_utc:
        return None
    try:
        parsed = datetime.fromisoformat(start_utc.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable game time %s", start_utc)
        return None
    if parsed.tzinfo is None:
        parsed = pytz.utc.localize(parsed)
    return parsed.astimezone(pytz.timezone(tz_name)).isoformat()


def _competitor(competitors: List[Dict[str, Any]], home_away: str) -> Dict[str, Any]:
    side = next((c for c in competitors if c.get("homeAway") == home_away), {})
    team = side.get("team") or {}
    score = side.get("score")
    return {
        "name": team.get("displayName") or team.get("name"),
        "abbrev": team.get("abbreviation"),
        "score": as_int(score) if score not in (None, "") else None,
        "logo": team.get("logo"),
    }


def parse_games(scoreboard: Dict[str, Any], tz_name: str = LEAGUE_TIMEZONE) -> List[Dict[str, Any]]:
    """Flatten scoreboard events into the game cards the client renders."""
    week = _dig(scoreboard, "week", "number")
    season_type = _dig(scoreboard, "season", "type")
    games = []

    for event in scoreboard.get("events") or []:
        competition = _dig(event, "competitions", 0) or {}
        competitors = competition.get("competitors") or []
        start_utc = competition.get("date") or event.get("date")
        games.append(
            {
                "id": event.get("id"),
                "status": _dig(event, "status", "type", "name")
                or _dig(competition, "status", "type", "name")
                or DEFAULT_STATUS,
                "startUTC": start_utc,
                "startLocal": local_start(start_utc, tz_name),
                "week": week,
                "seasonType": season_type,
                "venue": _dig(competition, "venue", "fullName"),
                "network": _dig(competition, "broadcasts", 0, "names", 0)
                or _dig(competition, "broadcasts", 0, "shortName"),
                "home": _competitor(competitors, "home"),
                "away": _competitor(competitors, "away"),
            }
        )

    return games

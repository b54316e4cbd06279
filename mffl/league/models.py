"""Typed views of Sleeper payloads.

Each ``from_json`` does explicit field-by-field extraction with defaults so the
joiners and assemblers never touch raw upstream dictionaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from mffl.utils.fallback import clean


def as_int(value: Any) -> Optional[int]:
    """Coerce an upstream ID or number to int, or None when not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            as_float = float(value)
        except (TypeError, ValueError):
            return None
        return int(as_float) if as_float.is_integer() else None


def _id_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item not in (None, "", 0)]


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class User:
    user_id: str
    display_name: str = ""
    username: str = ""
    avatar: Optional[str] = None
    team_name: Optional[str] = None

    @classmethod
    def from_json(cls, raw: Dict[str, Any]) -> "User":
        raw = _as_dict(raw)
        metadata = _as_dict(raw.get("metadata"))
        return cls(
            user_id=clean(raw.get("user_id")),
            display_name=clean(raw.get("display_name")),
            username=clean(raw.get("username")),
            avatar=clean(raw.get("avatar")) or None,
            team_name=clean(metadata.get("team_name")) or None,
        )


@dataclass(frozen=True)
class Roster:
    roster_id: int
    owner_id: Optional[str] = None
    starters: List[str] = field(default_factory=list)
    players: List[str] = field(default_factory=list)
    reserve: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, raw: Dict[str, Any]) -> "Roster":
        raw = _as_dict(raw)
        return cls(
            roster_id=as_int(raw.get("roster_id")) or 0,
            owner_id=clean(raw.get("owner_id")) or None,
            starters=_id_list(raw.get("starters")),
            players=_id_list(raw.get("players")),
            reserve=_id_list(raw.get("reserve")),
        )


@dataclass(frozen=True)
class LeagueInfo:
    league_id: str
    name: str = ""
    season: str = ""
    status: str = ""
    playoff_start_week: Optional[int] = None

    @classmethod
    def from_json(cls, raw: Dict[str, Any]) -> "LeagueInfo":
        raw = _as_dict(raw)
        settings = _as_dict(raw.get("settings"))
        playoff_start = as_int(settings.get("playoff_week_start")) or as_int(
            raw.get("playoff_start_week")
        )
        return cls(
            league_id=clean(raw.get("league_id")),
            name=clean(raw.get("name")),
            season=clean(raw.get("season")),
            status=clean(raw.get("status")),
            playoff_start_week=playoff_start,
        )


@dataclass(frozen=True)
class MatchupRecord:
    roster_id: Optional[int]
    matchup_id: Optional[int]
    points: float = 0.0

    @property
    def group_key(self) -> Tuple[str, Optional[int]]:
        """Matchup and roster IDs both count from 1, so they are keyed apart."""
        if self.matchup_id is not None:
            return ("matchup", self.matchup_id)
        return ("roster", self.roster_id)

    @classmethod
    def from_json(cls, raw: Dict[str, Any]) -> "MatchupRecord":
        raw = _as_dict(raw)
        points = raw.get("points")
        if isinstance(points, bool) or not isinstance(points, (int, float)):
            points = 0.0
        return cls(
            roster_id=as_int(raw.get("roster_id")),
            matchup_id=as_int(raw.get("matchup_id")),
            points=float(points),
        )


@dataclass(frozen=True)
class TransactionRecord:
    transaction_id: str
    type: str = ""
    status: str = ""
    status_updated: Optional[int] = None
    created: Optional[int] = None
    adds: Dict[str, Optional[int]] = field(default_factory=dict)
    drops: Dict[str, Optional[int]] = field(default_factory=dict)
    roster_ids: List[Optional[int]] = field(default_factory=list)
    waiver_bid: int = 0
    draft_picks: List[Any] = field(default_factory=list)

    @classmethod
    def from_json(cls, raw: Dict[str, Any]) -> "TransactionRecord":
        raw = _as_dict(raw)
        settings = _as_dict(raw.get("settings"))
        waiver_bid = raw.get("waiver_bid")
        if waiver_bid is None:
            waiver_bid = settings.get("waiver_bid")
        roster_ids = raw.get("roster_ids")
        draft_picks = raw.get("draft_picks")
        return cls(
            transaction_id=clean(raw.get("transaction_id")),
            type=clean(raw.get("type")),
            status=clean(raw.get("status")),
            status_updated=as_int(raw.get("status_updated")) or None,
            created=as_int(raw.get("created")) or None,
            adds={
                str(pid): as_int(rid)
                for pid, rid in _as_dict(raw.get("adds")).items()
            },
            drops={
                str(pid): as_int(rid)
                for pid, rid in _as_dict(raw.get("drops")).items()
            },
            roster_ids=[as_int(rid) for rid in roster_ids]
            if isinstance(roster_ids, list)
            else [],
            waiver_bid=as_int(waiver_bid) or 0,
            draft_picks=list(draft_picks) if isinstance(draft_picks, list) else [],
        )


def _first_present(raw: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if raw.get(key) is not None:
            return raw[key]
    return None


@dataclass(frozen=True)
class BracketRecord:
    """One playoff slot; team references may be None until a prior match ends."""

    r: Optional[int]
    m: Optional[int]
    t1: Optional[int] = None
    t2: Optional[int] = None
    t1_from: Optional[Dict[str, Any]] = None
    t2_from: Optional[Dict[str, Any]] = None
    w: Optional[int] = None
    l: Optional[int] = None  # noqa: E741

    @classmethod
    def from_json(cls, raw: Dict[str, Any]) -> "BracketRecord":
        raw = _as_dict(raw)
        return cls(
            r=as_int(_first_present(raw, "r", "round")),
            m=as_int(_first_present(raw, "m", "matchup_id")),
            t1=as_int(raw.get("t1")),
            t2=as_int(raw.get("t2")),
            t1_from=raw.get("t1_from") if isinstance(raw.get("t1_from"), dict) else None,
            t2_from=raw.get("t2_from") if isinstance(raw.get("t2_from"), dict) else None,
            w=as_int(_first_present(raw, "w", "winner")),
            l=as_int(_first_present(raw, "l", "loser")),
        )


@dataclass(frozen=True)
class ResolvedTeam:
    """A roster joined with its owner's display attributes."""

    roster_id: Optional[int]
    team: str
    manager: str
    owner_id: Optional[str] = None
    username: str = ""
    avatar_id: Optional[str] = None
    avatar_thumb: Optional[str] = None
    avatar_full: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roster_id": self.roster_id,
            "owner_id": self.owner_id,
            "team": self.team,
            "manager": self.manager,
            "username": self.username,
            "avatarId": self.avatar_id,
            "avatarThumb": self.avatar_thumb,
            "avatarFull": self.avatar_full,
        }

"""Weekly head-to-head matchups grouped from raw Sleeper records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from mffl.league.bundle import TeamDirectory
from mffl.league.models import MatchupRecord


@dataclass(frozen=True)
class MatchupSide:
    roster_id: Optional[int]
    team: str
    manager: str
    avatar_thumb: Optional[str]
    points: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roster_id": self.roster_id,
            "team": self.team,
            "manager": self.manager,
            "avatarThumb": self.avatar_thumb,
            "points": self.points,
        }


@dataclass(frozen=True)
class Matchup:
    id: Any
    a: Optional[MatchupSide]
    b: Optional[MatchupSide]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "a": self.a.to_dict() if self.a else None,
            "b": self.b.to_dict() if self.b else None,
        }


@dataclass
class MatchupsResult:
    week: int
    source: str
    matchups: List[Matchup] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "week": self.week,
            "meta": {"source": self.source, "count": len(self.matchups)},
            "matchups": [m.to_dict() for m in self.matchups],
        }


def round_points(points: Any) -> float:
    """One decimal place, halves rounded up (12.25 -> 12.3)."""
    if isinstance(points, bool) or not isinstance(points, (int, float)):
        return 0.0
    return math.floor(float(points) * 10 + 0.5) / 10


def group_records(records: Iterable[MatchupRecord]) -> List[Tuple[Any, List[MatchupRecord]]]:
    """Group records by matchup_id, upstream order kept.

    A record without a matchup_id gets a single-sided group of its own, shown
    under its roster_id. A group never holds more than two records; any
    overflow record starts its own group shown as ``"{id}:{n}"`` so nothing
    is dropped.
    """
    groups: Dict[Tuple[Any, ...], Tuple[Any, List[MatchupRecord]]] = {}
    overflow: Dict[Tuple[Any, ...], int] = {}

    for record in records:
        key = record.group_key
        display_id = key[1]
        if key in groups and len(groups[key][1]) >= 2:
            overflow[key] = overflow.get(key, 0) + 1
            display_id = f"{display_id}:{overflow[key]}"
            key = key + (overflow[key],)
        groups.setdefault(key, (display_id, []))[1].append(record)

    return list(groups.values())


def side_from(record: MatchupRecord, teams: TeamDirectory) -> Optional[MatchupSide]:
    team = teams.resolve(record.roster_id)
    if team is None:
        return None
    return MatchupSide(
        roster_id=team.roster_id,
        team=team.team,
        manager=team.manager,
        avatar_thumb=team.avatar_thumb,
        points=round_points(record.points),
    )


def assemble_matchups(
    week: int,
    source: str,
    raw_matchups: Iterable[Dict[str, Any]],
    teams: TeamDirectory,
) -> MatchupsResult:
    records = [MatchupRecord.from_json(raw) for raw in raw_matchups or []]
    matchups = []

    for group_id, group in group_records(records):
        a = side_from(group[0], teams) if len(group) > 0 else None
        b = side_from(group[1], teams) if len(group) > 1 else None
        if a or b:
            matchups.append(Matchup(id=group_id, a=a, b=b))

    return MatchupsResult(week=week, source=source, matchups=matchups)

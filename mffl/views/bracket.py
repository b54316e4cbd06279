"""Winners and losers playoff brackets with team references resolved."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from mffl.league.bundle import TeamDirectory
from mffl.league.models import BracketRecord, LeagueInfo, ResolvedTeam


def _bracket_team(team: Optional[ResolvedTeam]) -> Optional[Dict[str, Any]]:
    if team is None:
        return None
    return {
        "roster_id": team.roster_id,
        "team": team.team,
        "manager": team.manager,
        "avatarThumb": team.avatar_thumb,
    }


@dataclass(frozen=True)
class BracketNode:
    r: Optional[int]
    m: Optional[int]
    t1: Optional[ResolvedTeam]
    t2: Optional[ResolvedTeam]
    t1_from: Optional[Dict[str, Any]]
    t2_from: Optional[Dict[str, Any]]
    w: Optional[int]
    l: Optional[int] = None  # noqa: E741

    def to_dict(self) -> Dict[str, Any]:
        return {
            "r": self.r,
            "m": self.m,
            "t1": _bracket_team(self.t1),
            "t2": _bracket_team(self.t2),
            "t1_from": self.t1_from,
            "t2_from": self.t2_from,
            "w": self.w,
            "l": self.l,
        }


@dataclass
class BracketResult:
    playoff_start_week: Optional[int]
    winners: List[BracketNode] = field(default_factory=list)
    losers: List[BracketNode] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "playoff_start_week": self.playoff_start_week,
            "winners": [node.to_dict() for node in self.winners],
            "losers": [node.to_dict() for node in self.losers],
        }


def map_bracket(raw_nodes: Iterable[Dict[str, Any]], teams: TeamDirectory) -> List[BracketNode]:
    """Undecided slots (null t1/t2) stay None rather than raising."""
    nodes = []
    for raw in raw_nodes or []:
        record = BracketRecord.from_json(raw)
        nodes.append(
            BracketNode(
                r=record.r,
                m=record.m,
                t1=teams.resolve(record.t1),
                t2=teams.resolve(record.t2),
                t1_from=record.t1_from,
                t2_from=record.t2_from,
                w=record.w,
                l=record.l,
            )
        )
    return nodes


def assemble_bracket(
    league_raw: Dict[str, Any],
    winners_raw: Iterable[Dict[str, Any]],
    losers_raw: Iterable[Dict[str, Any]],
    teams: TeamDirectory,
) -> BracketResult:
    league = LeagueInfo.from_json(league_raw)
    return BracketResult(
        playoff_start_week=league.playoff_start_week,
        winners=map_bracket(winners_raw, teams),
        losers=map_bracket(losers_raw, teams),
    )

"""Starters, bench and reserve for one roster."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from mffl.errors import NotFoundError
from mffl.league.models import Roster, as_int
from mffl.player.player_directory import Player, PlayerResolver


@dataclass
class RosterDetail:
    roster_id: int
    starters: List[Player] = field(default_factory=list)
    bench: List[Player] = field(default_factory=list)
    reserve: List[Player] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roster_id": self.roster_id,
            "starters": [p.to_dict() for p in self.starters],
            "bench": [p.to_dict() for p in self.bench],
            "reserve": [p.to_dict() for p in self.reserve],
        }


def find_roster(rosters: Iterable[Roster], roster_id: Any) -> Optional[Roster]:
    wanted = as_int(roster_id)
    if wanted is None:
        return None
    return next((r for r in rosters if r.roster_id == wanted), None)


def assemble_roster_detail(
    rosters: Iterable[Roster], roster_id: Any, players: PlayerResolver
) -> RosterDetail:
    """Resolve a roster's lineup.

    Starters keep lineup-slot order; bench is every rostered player that is
    not a starter, in ``players`` order.

    Raises:
        NotFoundError: if no roster has ``roster_id``
    """
    roster = find_roster(rosters, roster_id)
    if roster is None:
        raise NotFoundError(f"Roster {roster_id} not found")

    starter_ids = set(roster.starters)
    return RosterDetail(
        roster_id=roster.roster_id,
        starters=players.resolve_many(roster.starters),
        bench=players.resolve_many(pid for pid in roster.players if pid not in starter_ids),
        reserve=players.resolve_many(roster.reserve),
    )

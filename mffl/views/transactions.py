"""Adds, drops and trades for one round with teams and players resolved."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from mffl.league.bundle import TeamDirectory
from mffl.league.models import ResolvedTeam, TransactionRecord
from mffl.player.player_directory import PlayerResolver


def _team_summary(team: Optional[ResolvedTeam]) -> Optional[Dict[str, Any]]:
    if team is None:
        return None
    return {
        "roster_id": team.roster_id,
        "team": team.team,
        "manager": team.manager,
        "avatarThumb": team.avatar_thumb,
    }


def iso_from_millis(millis: Optional[int], now: Callable[[], datetime]) -> str:
    """Sleeper timestamps are epoch milliseconds; fall back to ``now``."""
    if millis:
        moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    else:
        moment = now()
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


@dataclass
class TransactionItem:
    id: str
    type: str
    status: str
    when: str
    round: int
    adds: List[Dict[str, Any]] = field(default_factory=list)
    drops: List[Dict[str, Any]] = field(default_factory=list)
    rosters: List[Optional[Dict[str, Any]]] = field(default_factory=list)
    waiver_bid: int = 0
    draft_picks: List[Any] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "status": self.status,
            "when": self.when,
            "round": self.round,
            "adds": self.adds,
            "drops": self.drops,
            "rosters": self.rosters,
            "waiver_bid": self.waiver_bid,
            "draft_picks": self.draft_picks,
        }


@dataclass
class TransactionsResult:
    round: int
    items: List[TransactionItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round": self.round,
            "count": len(self.items),
            "items": [item.to_dict() for item in self.items],
        }


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def assemble_transactions(
    round_: int,
    raw_transactions: Iterable[Dict[str, Any]],
    teams: TeamDirectory,
    players: PlayerResolver,
    now: Callable[[], datetime] = _utc_now,
) -> TransactionsResult:
    items = []

    for raw in raw_transactions or []:
        tx = TransactionRecord.from_json(raw)
        adds = [
            {**players.resolve(pid).to_dict(), "to": _team_summary(teams.resolve(rid))}
            for pid, rid in tx.adds.items()
        ]
        drops = [
            {**players.resolve(pid).to_dict(), "from": _team_summary(teams.resolve(rid))}
            for pid, rid in tx.drops.items()
        ]
        items.append(
            TransactionItem(
                id=tx.transaction_id,
                type=tx.type,
                status=tx.status,
                when=iso_from_millis(tx.status_updated or tx.created, now),
                round=round_,
                adds=adds,
                drops=drops,
                rosters=[_team_summary(teams.resolve(rid)) for rid in tx.roster_ids],
                waiver_bid=tx.waiver_bid,
                draft_picks=tx.draft_picks,
            )
        )

    return TransactionsResult(round=round_, items=items)

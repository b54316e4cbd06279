"""Resolve Sleeper player IDs against the cached NFL player directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping

from mffl.utils.fallback import clean, first_non_empty
from mffl.utils.upstream import SleeperClient

logger = logging.getLogger(__name__)

UNKNOWN_PLAYER = "Unknown"


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    pos: str = ""
    team: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "pos": self.pos, "team": self.team}


def pick_name(raw: Mapping[str, Any]) -> str:
    """Player name: full_name -> "first last" -> last_name -> "Unknown"."""
    joined = " ".join(
        part for part in (clean(raw.get("first_name")), clean(raw.get("last_name"))) if part
    )
    return first_non_empty(
        raw.get("full_name"), joined, raw.get("last_name"), default=UNKNOWN_PLAYER
    )


def pick_position(raw: Mapping[str, Any]) -> str:
    fantasy_positions = raw.get("fantasy_positions")
    fallback = None
    if isinstance(fantasy_positions, list) and fantasy_positions:
        fallback = fantasy_positions[0]
    return first_non_empty(raw.get("position"), fallback, default="")


def player_from_json(player_id: str, raw: Any) -> Player:
    raw = raw if isinstance(raw, dict) else {}
    return Player(
        id=str(player_id),
        name=pick_name(raw),
        pos=pick_position(raw),
        team=clean(raw.get("team")),
    )


class PlayerResolver:
    """Resolves IDs against one fixed directory snapshot."""

    def __init__(self, directory: Mapping[str, Any]) -> None:
        self._directory = directory or {}

    def resolve(self, player_id: str) -> Player:
        """Unknown IDs resolve to a placeholder instead of failing."""
        raw = self._directory.get(str(player_id))
        if raw is None:
            logger.debug("Player %s not in directory", player_id)
        return player_from_json(player_id, raw)

    def resolve_many(self, player_ids: Iterable[str]) -> List[Player]:
        return [self.resolve(pid) for pid in player_ids]

    def __len__(self) -> int:
        return len(self._directory)


class PlayerDirectory:
    """The large player dump, fetched at most once per cache window (24h)."""

    def __init__(self, sleeper: SleeperClient, sport: str = "nfl") -> None:
        self._sleeper = sleeper
        self._sport = sport

    def raw(self) -> Dict[str, Any]:
        return self._sleeper.players(self._sport)

    def snapshot(self) -> PlayerResolver:
        """A resolver bound to the current directory so one view sees one dump."""
        return PlayerResolver(self.raw())

    def resolve(self, player_id: str) -> Player:
        return self.snapshot().resolve(player_id)

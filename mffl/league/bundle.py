"""Join Sleeper league, users and rosters into resolved team views."""

from __future__ import annotations

import locale
import logging
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from mffl.league.models import LeagueInfo, ResolvedTeam, Roster, User, as_int
from mffl.utils.concurrency import FetchGroup
from mffl.utils.fallback import first_non_empty
from mffl.utils.upstream import SleeperClient, avatar_full, avatar_thumb

logger = logging.getLogger(__name__)

DEFAULT_LEAGUE_NAME = "MFFL"
NO_MANAGER = "—"


def resolve_team(
    roster_id: Optional[int],
    user: Optional[User],
    owner_id: Optional[str] = None,
) -> ResolvedTeam:
    """Build the display view of one roster.

    Team name priority: ``metadata.team_name`` -> ``display_name`` ->
    ``username`` -> ``"Team {roster_id}"``.
    """
    user = user or User(user_id="")
    avatar_id = user.avatar
    return ResolvedTeam(
        roster_id=roster_id,
        owner_id=owner_id,
        team=first_non_empty(
            user.team_name,
            user.display_name,
            user.username,
            default=f"Team {roster_id}",
        ),
        manager=first_non_empty(user.display_name, user.username, default=NO_MANAGER),
        username=user.username,
        avatar_id=avatar_id,
        avatar_thumb=avatar_thumb(avatar_id),
        avatar_full=avatar_full(avatar_id),
    )


def collation_key(name: str) -> tuple:
    """Case-insensitive first, accents second, lowercase before uppercase last.

    Each level goes through ``locale.strxfrm`` so a configured collation
    locale still refines the order.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (
        locale.strxfrm(base.casefold()),
        locale.strxfrm(name.casefold()),
        locale.strxfrm(name.swapcase()),
    )


def sort_by_team_name(teams: Iterable[ResolvedTeam]) -> List[ResolvedTeam]:
    """Ascending by team name, ``"alpha"`` before ``"Bravo"``."""
    return sorted(teams, key=lambda team: collation_key(team.team or ""))


class TeamDirectory:
    """Lookup from roster ID to ``ResolvedTeam`` for one users/rosters snapshot."""

    def __init__(self, users: Iterable[User], rosters: Iterable[Roster]) -> None:
        self._users: Dict[str, User] = {u.user_id: u for u in users if u.user_id}
        self._rosters: Dict[int, Roster] = {r.roster_id: r for r in rosters}
        self._teams: Dict[int, ResolvedTeam] = {
            roster.roster_id: resolve_team(
                roster.roster_id,
                self._users.get(roster.owner_id or ""),
                roster.owner_id,
            )
            for roster in self._rosters.values()
        }

    @classmethod
    def from_json(
        cls,
        users_raw: Iterable[Dict[str, Any]],
        rosters_raw: Iterable[Dict[str, Any]],
    ) -> "TeamDirectory":
        return cls(
            [User.from_json(u) for u in users_raw or []],
            [Roster.from_json(r) for r in rosters_raw or []],
        )

    def roster(self, roster_id: Any) -> Optional[Roster]:
        rid = as_int(roster_id)
        return self._rosters.get(rid) if rid is not None else None

    def resolve(self, roster_id: Any) -> Optional[ResolvedTeam]:
        """Resolve a roster reference; None (an undecided slot) stays None.

        A reference to an unknown roster still yields a placeholder team so a
        stale bracket or matchup record does not abort the whole view.
        """
        rid = as_int(roster_id)
        if rid is None:
            return None
        team = self._teams.get(rid)
        if team is None:
            team = resolve_team(rid, None)
        return team

    def teams(self) -> List[ResolvedTeam]:
        return sort_by_team_name(self._teams.values())


@dataclass
class RosterBundle:
    league_name: str
    roster: List[ResolvedTeam] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "leagueName": self.league_name,
            "roster": [team.to_dict() for team in self.roster],
        }


class BundleJoiner:
    """Fetches league, users and rosters concurrently and joins them."""

    def __init__(
        self,
        sleeper: SleeperClient,
        fetcher: FetchGroup,
        league_id: str,
        default_league_name: str = DEFAULT_LEAGUE_NAME,
    ) -> None:
        self._sleeper = sleeper
        self._fetcher = fetcher
        self._league_id = league_id
        self._default_league_name = default_league_name

    @property
    def league_id(self) -> str:
        return self._league_id

    def core_tasks(self) -> Dict[str, Any]:
        """Fetch callables for the users and rosters shared by every view."""
        return {
            "users": lambda: self._sleeper.users(self._league_id),
            "rosters": lambda: self._sleeper.rosters(self._league_id),
        }

    def fetch(self, **extra_tasks: Any) -> Dict[str, Any]:
        """Fetch users, rosters and any ``extra_tasks`` in one concurrent group."""
        return self._fetcher.run({**self.core_tasks(), **extra_tasks})

    def directory(self, fetched: Dict[str, Any]) -> TeamDirectory:
        return TeamDirectory.from_json(fetched["users"], fetched["rosters"])

    def league_bundle(self) -> RosterBundle:
        """League name plus every roster resolved and sorted by team name.

        Raises:
            UpstreamError: if any of the three fetches fails
        """
        fetched = self.fetch(league=lambda: self._sleeper.league(self._league_id))
        league = LeagueInfo.from_json(fetched["league"])
        directory = self.directory(fetched)
        logger.debug(
            "Joined %d rosters for league %s", len(directory.teams()), self._league_id
        )
        return RosterBundle(
            league_name=first_non_empty(league.name, default=self._default_league_name),
            roster=directory.teams(),
        )

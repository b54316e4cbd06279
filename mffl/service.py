"""Wires the cache, upstream clients, resolvers and assemblers together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from mffl.league.bundle import DEFAULT_LEAGUE_NAME, BundleJoiner, RosterBundle
from mffl.league.models import Roster, User
from mffl.player.player_directory import PlayerDirectory
from mffl.schedule.scoreboard import parse_games
from mffl.schedule.week_resolver import (
    LEAGUE_TIMEZONE,
    DateLike,
    WeekResolver,
    provider_day,
)
from mffl.utils.concurrency import FetchGroup
from mffl.utils.ttl_cache import TTLCache
from mffl.utils.upstream import (
    ESPN_SCOREBOARD_URL,
    SLEEPER_BASE_URL,
    EspnClient,
    SleeperClient,
    UpstreamClient,
)
from mffl.views.bracket import BracketResult, assemble_bracket
from mffl.views.matchups import MatchupsResult, assemble_matchups
from mffl.views.roster_detail import RosterDetail, assemble_roster_detail
from mffl.views.transactions import TransactionsResult, assemble_transactions

logger = logging.getLogger(__name__)


@dataclass
class LeagueService:
    """Entry point for every league view; one instance per process."""

    league_id: str
    cache: TTLCache
    sleeper: SleeperClient
    espn: EspnClient
    fetcher: FetchGroup
    joiner: BundleJoiner
    players: PlayerDirectory
    weeks: WeekResolver
    tz_name: str = LEAGUE_TIMEZONE
    http: Optional[UpstreamClient] = None

    def league_bundle(self) -> RosterBundle:
        return self.joiner.league_bundle()

    def roster_detail(self, roster_id: Any) -> RosterDetail:
        """Raises NotFoundError when the league has no such roster."""
        fetched = self.fetcher.run(
            {
                "rosters": lambda: self.sleeper.rosters(self.league_id),
                "players": self.players.snapshot,
            }
        )
        rosters = [Roster.from_json(r) for r in fetched["rosters"]]
        return assemble_roster_detail(
            rosters, roster_id, fetched["players"]
        )

    def matchups(
        self, week: Optional[Any] = None, date_value: Optional[DateLike] = None
    ) -> MatchupsResult:
        resolution = self.weeks.resolve(week=week, date_value=date_value)
        logger.debug("Matchups week %d via %s", resolution.week, resolution.source)
        fetched = self.joiner.fetch(
            matchups=lambda: self.sleeper.matchups(self.league_id, resolution.week)
        )
        return assemble_matchups(
            resolution.week,
            resolution.source,
            fetched["matchups"],
            self.joiner.directory(fetched),
        )

    def transactions(self, round_: Optional[Any] = None) -> TransactionsResult:
        resolved_round = self.weeks.resolve_round(round_)
        fetched = self.joiner.fetch(
            transactions=lambda: self.sleeper.transactions(
                self.league_id, resolved_round
            ),
            players=self.players.snapshot,
        )
        return assemble_transactions(
            resolved_round,
            fetched["transactions"],
            self.joiner.directory(fetched),
            fetched["players"],
        )

    def bracket(self) -> BracketResult:
        fetched = self.joiner.fetch(
            league=lambda: self.sleeper.league(self.league_id),
            winners=lambda: self.sleeper.winners_bracket(self.league_id),
            losers=lambda: self.sleeper.losers_bracket(self.league_id),
        )
        return assemble_bracket(
            fetched["league"],
            fetched["winners"],
            fetched["losers"],
            self.joiner.directory(fetched),
        )

    def users(self) -> List[Dict[str, Any]]:
        """Raw-ish user list for checking avatars and team names."""
        return [
            {
                "user_id": user.user_id,
                "username": user.username,
                "display_name": user.display_name,
                "avatar": user.avatar,
                "team_name": user.team_name,
            }
            for user in (User.from_json(u) for u in self.sleeper.users(self.league_id))
        ]

    def nfl_games(self, date_value: Optional[DateLike] = None) -> Dict[str, Any]:
        """Scoreboard games for a day (today in the league time zone by default)."""
        if date_value:
            yyyymmdd = provider_day(date_value, self.tz_name)
        else:
            yyyymmdd = self.weeks.today()
        games = parse_games(self.espn.scoreboard(yyyymmdd), self.tz_name)
        return {"date": yyyymmdd, "count": len(games), "games": games}

    def clear_cache(self, prefix: Optional[str] = None) -> int:
        removed = self.cache.invalidate(prefix)
        logger.info("Invalidated %d cache entries (prefix=%s)", removed, prefix)
        return removed

    def close(self) -> None:
        self.fetcher.shutdown()
        if self.http is not None:
            self.http.close()


def build_service(
    league_id: str,
    *,
    sleeper_base_url: str = SLEEPER_BASE_URL,
    espn_scoreboard_url: str = ESPN_SCOREBOARD_URL,
    tz_name: str = LEAGUE_TIMEZONE,
    league_display_name: str = DEFAULT_LEAGUE_NAME,
    http_timeout: Optional[float] = None,
    upstream_timeout: Optional[float] = None,
    fetch_workers: Optional[int] = None,
    ttls: Optional[Mapping[str, float]] = None,
    cache: Optional[TTLCache] = None,
    http: Optional[UpstreamClient] = None,
) -> LeagueService:
    """Construct a service with one shared cache and HTTP session."""
    cache = cache or TTLCache(ttls=ttls)
    http = http or UpstreamClient(timeout=http_timeout)
    sleeper = SleeperClient(http, cache, base_url=sleeper_base_url)
    espn = EspnClient(http, cache, scoreboard_url=espn_scoreboard_url)
    fetcher = FetchGroup(max_workers=fetch_workers, timeout=upstream_timeout)
    return LeagueService(
        league_id=league_id,
        cache=cache,
        sleeper=sleeper,
        espn=espn,
        fetcher=fetcher,
        joiner=BundleJoiner(sleeper, fetcher, league_id, league_display_name),
        players=PlayerDirectory(sleeper),
        weeks=WeekResolver(sleeper, espn, tz_name=tz_name),
        tz_name=tz_name,
        http=http,
    )

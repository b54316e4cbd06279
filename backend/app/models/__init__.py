"""Pydantic models for API responses."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class TeamSummary(BaseModel):
    """Resolved team as shown on matchup, transaction and bracket cards."""

    roster_id: Optional[int] = None
    team: str
    manager: str
    avatarThumb: Optional[str] = None


class ResolvedTeam(TeamSummary):
    """Roster joined with its owner."""

    owner_id: Optional[str] = None
    username: str = ""
    avatarId: Optional[str] = None
    avatarFull: Optional[str] = None


class AnnouncementItem(BaseModel):
    """Commissioner announcement."""

    id: str
    title: str
    body: str
    date: str
    image: Optional[str] = None


class LeagueResponse(BaseModel):
    """Local announcements merged with the live roster."""

    leagueName: str
    announcements: List[Dict[str, Any]] = []
    roster: List[Dict[str, Any]] = []
    error: Optional[str] = None


class RosterListResponse(BaseModel):
    """Response for the Teams tab."""

    items: List[ResolvedTeam]


class PlayerInfo(BaseModel):
    """Player resolved from the directory."""

    id: str
    name: str
    pos: str = ""
    team: str = ""


class RosterDetailResponse(BaseModel):
    """Starters, bench and reserve for one roster."""

    roster_id: int
    starters: List[PlayerInfo]
    bench: List[PlayerInfo]
    reserve: List[PlayerInfo]


class MatchupSide(TeamSummary):
    """One side of a matchup."""

    points: float = 0.0


class Matchup(BaseModel):
    """Head-to-head pairing; either side may be missing."""

    id: Any
    a: Optional[MatchupSide] = None
    b: Optional[MatchupSide] = None


class MatchupsMeta(BaseModel):
    """How the week was chosen."""

    source: str
    count: int


class MatchupsResponse(BaseModel):
    """Response for weekly matchups."""

    week: int
    meta: MatchupsMeta
    matchups: List[Matchup]


class TransactionPlayer(PlayerInfo):
    """Player moved by a transaction with the team on the other end."""

    to: Optional[TeamSummary] = None
    from_team: Optional[TeamSummary] = Field(default=None, alias="from")

    model_config = {"populate_by_name": True}


class TransactionItem(BaseModel):
    """Single resolved transaction."""

    id: str
    type: str
    status: str
    when: str
    round: int
    adds: List[TransactionPlayer] = []
    drops: List[TransactionPlayer] = []
    rosters: List[Optional[TeamSummary]] = []
    waiver_bid: int = 0
    draft_picks: List[Any] = []


class TransactionsResponse(BaseModel):
    """Response for transactions in one round."""

    round: int
    count: int
    items: List[TransactionItem]


class BracketNode(BaseModel):
    """One playoff match slot."""

    r: Optional[int] = None
    m: Optional[int] = None
    t1: Optional[TeamSummary] = None
    t2: Optional[TeamSummary] = None
    t1_from: Optional[Dict[str, Any]] = None
    t2_from: Optional[Dict[str, Any]] = None
    w: Optional[int] = None
    l: Optional[int] = None  # noqa: E741


class BracketResponse(BaseModel):
    """Winners and losers brackets."""

    playoff_start_week: Optional[int] = None
    winners: List[BracketNode]
    losers: List[BracketNode]


class GameTeam(BaseModel):
    """Team line on a game card."""

    name: Optional[str] = None
    abbrev: Optional[str] = None
    score: Optional[int] = None
    logo: Optional[str] = None


class Game(BaseModel):
    """NFL game from the scoreboard."""

    id: Optional[str] = None
    status: str
    startUTC: Optional[str] = None
    startLocal: Optional[str] = None
    week: Optional[int] = None
    seasonType: Optional[int] = None
    venue: Optional[str] = None
    network: Optional[str] = None
    home: GameTeam
    away: GameTeam


class GamesResponse(BaseModel):
    """Response for NFL games on a day."""

    date: str
    count: int
    games: List[Game]


class SleeperUser(BaseModel):
    """User summary for checking avatars and team names."""

    user_id: str
    username: str = ""
    display_name: str = ""
    avatar: Optional[str] = None
    team_name: Optional[str] = None


class CacheClearResponse(BaseModel):
    """Result of clearing the upstream cache."""

    removed: int
    prefix: Optional[str] = None

"""Sleeper league views: rosters, matchups, transactions and the bracket.

Domain errors propagate to the handlers registered in ``app.main``:
upstream failures become 500s, unresolvable weeks 400s, unknown rosters 404s.
"""

import logging
from typing import List, Optional

from app.dependencies import get_league_service
from app.models import (
    BracketResponse,
    MatchupsResponse,
    RosterDetailResponse,
    RosterListResponse,
    SleeperUser,
    TransactionsResponse,
)
from fastapi import APIRouter, Depends, Query

from mffl.service import LeagueService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/rosters", response_model=RosterListResponse)
def get_rosters(service: LeagueService = Depends(get_league_service)):
    """Every team in the league, sorted by team name."""
    bundle = service.league_bundle()
    return {"items": [team.to_dict() for team in bundle.roster]}


@router.get("/roster/{roster_id}", response_model=RosterDetailResponse)
def get_roster_detail(
    roster_id: int, service: LeagueService = Depends(get_league_service)
):
    """Starters (lineup order), bench and reserve for one roster."""
    return service.roster_detail(roster_id).to_dict()


@router.get("/matchups", response_model=MatchupsResponse)
def get_matchups(
    week: Optional[int] = Query(None, description="NFL week; wins over date"),
    date: Optional[str] = Query(
        None, description="Calendar day (YYYY-MM-DD) used to look up the week"
    ),
    service: LeagueService = Depends(get_league_service),
):
    """Weekly matchups.

    Week priority: ``week`` -> week of ``date`` on the NFL scoreboard ->
    current week from league state.
    """
    return service.matchups(week=week, date_value=date).to_dict()


@router.get("/transactions", response_model=TransactionsResponse)
def get_transactions(
    round: Optional[int] = Query(  # noqa: A002
        None, description="Sleeper round (NFL week); defaults to the current week"
    ),
    service: LeagueService = Depends(get_league_service),
):
    """Adds, drops and trades for one round."""
    return service.transactions(round).to_dict()


@router.get("/bracket", response_model=BracketResponse)
def get_bracket(service: LeagueService = Depends(get_league_service)):
    """Winners and losers playoff brackets."""
    return service.bracket().to_dict()


@router.get("/users", response_model=List[SleeperUser])
def get_users(service: LeagueService = Depends(get_league_service)):
    """User summaries, useful for checking avatars and team names."""
    return service.users()

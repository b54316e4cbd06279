"""NFL scoreboard endpoints."""

from typing import Optional

from app.dependencies import get_league_service
from app.models import GamesResponse
from fastapi import APIRouter, Depends, Query

from mffl.service import LeagueService

router = APIRouter()


@router.get("/games", response_model=GamesResponse)
def get_games(
    date: Optional[str] = Query(
        None, description="YYYY-MM-DD or YYYYMMDD; defaults to today in the league time zone"
    ),
    service: LeagueService = Depends(get_league_service),
):
    """NFL games on a day."""
    return service.nfl_games(date)

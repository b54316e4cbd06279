"""League home: local announcements merged with the live roster."""

import logging

from app.dependencies import get_announcements, get_league_service
from app.models import LeagueResponse
from fastapi import APIRouter, Depends

from mffl.content.announcements import AnnouncementStore
from mffl.errors import UpstreamError
from mffl.league.bundle import DEFAULT_LEAGUE_NAME
from mffl.service import LeagueService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=LeagueResponse)
def get_league(
    service: LeagueService = Depends(get_league_service),
    announcements: AnnouncementStore = Depends(get_announcements),
):
    """League name, announcements and roster.

    The roster comes from Sleeper. When Sleeper is unreachable the locally
    stored roster is returned instead, with the failure in ``error``, so
    the home page still renders.
    """
    local = announcements.league_document()

    try:
        bundle = service.league_bundle()
    except UpstreamError as e:
        logger.warning("Serving local league document: %s", e)
        return LeagueResponse(
            leagueName=local.get("leagueName") or DEFAULT_LEAGUE_NAME,
            announcements=local["announcements"],
            roster=local["roster"],
            error=str(e),
        )

    return LeagueResponse(
        leagueName=bundle.league_name,
        announcements=local["announcements"],
        roster=[team.to_dict() for team in bundle.roster],
    )

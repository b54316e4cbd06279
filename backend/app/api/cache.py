"""Upstream cache administration."""

import logging
from typing import Any, Dict, Optional

from app.dependencies import get_league_service
from app.models import CacheClearResponse
from fastapi import APIRouter, Depends

from mffl.service import LeagueService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def get_cache_stats(service: LeagueService = Depends(get_league_service)) -> Dict[str, Any]:
    """Entry counts per namespace plus hit/miss totals."""
    return service.cache.stats()


@router.delete("", response_model=CacheClearResponse)
def clear_cache(
    prefix: Optional[str] = None,
    service: LeagueService = Depends(get_league_service),
):
    """Drop cached upstream responses so the next request refetches.

    Args:
        prefix: Only drop keys starting with this (e.g. ``sleeper:``)
    """
    removed = service.clear_cache(prefix)
    return CacheClearResponse(removed=removed, prefix=prefix)

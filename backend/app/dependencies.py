"""Process-wide service instances shared by the routers."""

from functools import lru_cache

from app.config import settings

from mffl.content.announcements import AnnouncementStore
from mffl.content.cams import CamsBoard
from mffl.content.spiffs import SpiffLedger
from mffl.content.suggestions import SuggestionStore
from mffl.service import LeagueService, build_service


@lru_cache(maxsize=1)
def get_league_service() -> LeagueService:
    """One cache, one HTTP session and one fetch pool for the whole process."""
    return build_service(
        settings.sleeper_league_id,
        sleeper_base_url=settings.sleeper_base_url,
        espn_scoreboard_url=settings.espn_scoreboard_url,
        tz_name=settings.league_timezone,
        league_display_name=settings.league_display_name,
        http_timeout=settings.http_timeout,
        upstream_timeout=settings.upstream_timeout,
        fetch_workers=settings.fetch_workers,
        ttls=settings.cache_ttls,
    )


def get_announcements() -> AnnouncementStore:
    return AnnouncementStore(settings.data_dir / "mffl.json")


def get_suggestions() -> SuggestionStore:
    return SuggestionStore(settings.data_dir / "suggestions.json")


def get_cams() -> CamsBoard:
    return CamsBoard(settings.data_dir / "cams.json")


def get_spiffs() -> SpiffLedger:
    return SpiffLedger(settings.data_dir / "spiffs.json")

"""HTTP clients for the Sleeper league API and the ESPN NFL scoreboard.

Raw fetch-and-decode only: every call is routed through the shared TTL cache
and failures surface as ``UpstreamError`` without retries.

Configuration via environment variables:
    SLEEPER_BASE_URL: Sleeper API root (default: https://api.sleeper.app/v1)
    ESPN_SCOREBOARD_URL: ESPN NFL scoreboard endpoint
    MFFL_HTTP_TIMEOUT: Per-request timeout in seconds (default: 10)
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from mffl.errors import UpstreamError
from mffl.utils.ttl_cache import TTLCache

logger = logging.getLogger(__name__)

SLEEPER_BASE_URL = os.environ.get("SLEEPER_BASE_URL", "https://api.sleeper.app/v1")
ESPN_SCOREBOARD_URL = os.environ.get(
    "ESPN_SCOREBOARD_URL",
    "https://site.api.espn.com/apis/site/v2/sports/football/nfl/scoreboard",
)
HTTP_TIMEOUT = float(os.environ.get("MFFL_HTTP_TIMEOUT", 10.0))

AVATAR_THUMB_URL = "https://sleepercdn.com/avatars/thumbs/{avatar_id}"
AVATAR_FULL_URL = "https://sleepercdn.com/avatars/{avatar_id}"


def avatar_thumb(avatar_id: Optional[str]) -> Optional[str]:
    return AVATAR_THUMB_URL.format(avatar_id=avatar_id) if avatar_id else None


def avatar_full(avatar_id: Optional[str]) -> Optional[str]:
    return AVATAR_FULL_URL.format(avatar_id=avatar_id) if avatar_id else None


class UpstreamClient:
    """Performs JSON GET requests and normalizes failures to ``UpstreamError``."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._timeout = timeout if timeout is not None else HTTP_TIMEOUT
        self._session = session or requests.Session()
        self._session.headers.setdefault("Accept", "application/json")

    def fetch_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET ``url`` and decode the JSON body.

        Raises:
            UpstreamError: on transport failure, non-2xx status or invalid JSON
        """
        try:
            response = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("[UPSTREAM] Request failed for %s: %s", url, e)
            raise UpstreamError(url, reason=str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.warning("[UPSTREAM] HTTP %d for %s", response.status_code, url)
            raise UpstreamError(url, status=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("[UPSTREAM] Invalid JSON from %s", url)
            raise UpstreamError(url, decode_failure=True) from e

        logger.debug("[FETCH] %s", url)
        return data

    def close(self) -> None:
        self._session.close()


class SleeperClient:
    """Cache-checked access to the Sleeper league-data endpoints."""

    def __init__(
        self,
        http: UpstreamClient,
        cache: TTLCache,
        base_url: str = SLEEPER_BASE_URL,
    ) -> None:
        self._http = http
        self._cache = cache
        self._base_url = base_url.rstrip("/")

    def get(self, path: str, namespace: str = "sleeper") -> Any:
        """Fetch ``path`` through the cache, keyed by namespace and full path."""
        path = "/" + path.lstrip("/")
        url = f"{self._base_url}{path}"
        return self._cache.get_or_fetch(
            f"{namespace}:{path}", lambda: self._http.fetch_json(url)
        )

    def league(self, league_id: str) -> Dict[str, Any]:
        return self.get(f"/league/{league_id}") or {}

    def users(self, league_id: str) -> List[Dict[str, Any]]:
        return self.get(f"/league/{league_id}/users") or []

    def rosters(self, league_id: str) -> List[Dict[str, Any]]:
        return self.get(f"/league/{league_id}/rosters") or []

    def matchups(self, league_id: str, week: int) -> List[Dict[str, Any]]:
        return self.get(f"/league/{league_id}/matchups/{week}") or []

    def transactions(self, league_id: str, round_: int) -> List[Dict[str, Any]]:
        return self.get(f"/league/{league_id}/transactions/{round_}") or []

    def winners_bracket(self, league_id: str) -> List[Dict[str, Any]]:
        return self.get(f"/league/{league_id}/winners_bracket") or []

    def losers_bracket(self, league_id: str) -> List[Dict[str, Any]]:
        return self.get(f"/league/{league_id}/losers_bracket") or []

    def state(self, sport: str = "nfl") -> Dict[str, Any]:
        """League state ({season, week, season_type, ...}), cached for two minutes."""
        return self.get(f"/state/{sport}", namespace="state") or {}

    def players(self, sport: str = "nfl") -> Dict[str, Dict[str, Any]]:
        """Full player directory keyed by player ID, cached for a day."""
        return self.get(f"/players/{sport}", namespace="players") or {}


class EspnClient:
    """Cache-checked access to the ESPN NFL scoreboard, keyed by calendar day."""

    def __init__(
        self,
        http: UpstreamClient,
        cache: TTLCache,
        scoreboard_url: str = ESPN_SCOREBOARD_URL,
    ) -> None:
        self._http = http
        self._cache = cache
        self._scoreboard_url = scoreboard_url

    def scoreboard(self, yyyymmdd: str) -> Dict[str, Any]:
        """Scoreboard for one day in the provider's YYYYMMDD format."""
        return self._cache.get_or_fetch(
            f"scoreboard:{yyyymmdd}",
            lambda: self._http.fetch_json(
                self._scoreboard_url, params={"dates": yyyymmdd}
            ),
        ) or {}

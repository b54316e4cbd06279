"""Resolve which NFL week a week-scoped request refers to."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Optional, Union

import pytz

from mffl.errors import WeekResolutionError
from mffl.league.models import as_int
from mffl.utils.upstream import EspnClient, SleeperClient

logger = logging.getLogger(__name__)

LEAGUE_TIMEZONE = os.environ.get("LEAGUE_TIMEZONE", "America/New_York")

SOURCE_EXPLICIT = "explicit"
SOURCE_DATE = "derived-from-date"
SOURCE_STATE = "league-state"

_DAY_PATTERN = re.compile(r"^(\d{4})-?(\d{2})-?(\d{2})$")

DateLike = Union[str, date, datetime]


@dataclass(frozen=True)
class WeekResolution:
    week: int
    source: str


def provider_day(value: DateLike, tz_name: str = LEAGUE_TIMEZONE) -> str:
    """Format a calendar day the way the scoreboard expects it (YYYYMMDD).

    Strings are ``YYYY-MM-DD`` or ``YYYYMMDD`` and name a day in the league
    time zone already. Aware datetimes are converted into that zone first;
    naive datetimes are taken to be in it.

    Raises:
        WeekResolutionError: if a string is not a valid calendar day
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(pytz.timezone(tz_name))
        return value.strftime("%Y%m%d")
    if isinstance(value, date):
        return value.strftime("%Y%m%d")

    match = _DAY_PATTERN.match(str(value).strip())
    if not match:
        raise WeekResolutionError(f"Invalid date '{value}'; expected YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day).strftime("%Y%m%d")
    except ValueError as err:
        raise WeekResolutionError(f"Invalid date '{value}': {err}") from err


def today_in_league_tz(
    tz_name: str = LEAGUE_TIMEZONE,
    now: Optional[Callable[[], datetime]] = None,
) -> str:
    """Today's provider day as observed in the league time zone."""
    current = now() if now else datetime.now(pytz.utc)
    if current.tzinfo is None:
        current = pytz.utc.localize(current)
    return provider_day(current, tz_name)


def _positive(value: Any) -> Optional[int]:
    number = as_int(value)
    return number if number is not None and number > 0 else None


class WeekResolver:
    """Maps ``week=N`` / ``date=YYYY-MM-DD`` / nothing to one canonical week.

    Priority:
        1. explicit positive week
        2. week number on the scoreboard for the given day
        3. current week from the league state endpoint
    """

    def __init__(
        self,
        sleeper: SleeperClient,
        espn: EspnClient,
        tz_name: str = LEAGUE_TIMEZONE,
    ) -> None:
        self._sleeper = sleeper
        self._espn = espn
        self._tz_name = tz_name

    def resolve(
        self, week: Optional[Any] = None, date_value: Optional[DateLike] = None
    ) -> WeekResolution:
        """Resolve the week for a matchups-style request.

        Raises:
            WeekResolutionError: if no step yields a positive week
            UpstreamError: if a provider call fails
        """
        explicit = _positive(week)
        if explicit is not None:
            return WeekResolution(explicit, SOURCE_EXPLICIT)
        if week not in (None, ""):
            logger.warning("Ignoring non-positive week %r", week)

        if date_value:
            derived = self.week_for_day(date_value)
            if derived is not None:
                return WeekResolution(derived, SOURCE_DATE)
            logger.info("Scoreboard for %s has no week; using league state", date_value)

        return WeekResolution(self.current_week(), SOURCE_STATE)

    def resolve_round(self, round_: Optional[Any] = None) -> int:
        """Resolve a transactions round: explicit value or league state only."""
        explicit = _positive(round_)
        if explicit is not None:
            return explicit
        if round_ not in (None, ""):
            logger.warning("Ignoring non-positive round %r", round_)
        return self.current_week()

    def week_for_day(self, date_value: DateLike) -> Optional[int]:
        """Week number embedded in that day's scoreboard, if any."""
        yyyymmdd = provider_day(date_value, self._tz_name)
        scoreboard = self._espn.scoreboard(yyyymmdd)
        week_block = scoreboard.get("week") if isinstance(scoreboard, dict) else None
        if not isinstance(week_block, dict):
            return None
        return _positive(week_block.get("number"))

    def current_week(self) -> int:
        state = self._sleeper.state()
        week = _positive(state.get("week") if isinstance(state, dict) else None)
        if week is None:
            raise WeekResolutionError("Could not resolve NFL week from league state")
        return week

    def today(self) -> str:
        return today_in_league_tz(self._tz_name)

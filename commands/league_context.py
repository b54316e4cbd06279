"""Shared context for league-related commands."""

from __future__ import annotations

import os
from typing import Optional

from rich.console import Console

from mffl.errors import MfflError
from mffl.league.bundle import DEFAULT_LEAGUE_NAME
from mffl.service import LeagueService, build_service

DEFAULT_LEAGUE_ID = "1180723525824606208"


class LeagueContext:
    """Owns the league service the commands share.

    The service is built on first use from ``SLEEPER_LEAGUE_ID``,
    ``LEAGUE_TIMEZONE`` and ``LEAGUE_DISPLAY_NAME`` so ``/help`` works
    offline.
    """

    def __init__(self, console: Console, service: Optional[LeagueService] = None) -> None:
        self.console = console
        self._service = service

    @property
    def league_id(self) -> str:
        return os.environ.get("SLEEPER_LEAGUE_ID", DEFAULT_LEAGUE_ID)

    @property
    def service(self) -> LeagueService:
        if self._service is None:
            kwargs = {}
            if os.environ.get("LEAGUE_TIMEZONE"):
                kwargs["tz_name"] = os.environ["LEAGUE_TIMEZONE"]
            self._service = build_service(
                self.league_id,
                league_display_name=os.environ.get("LEAGUE_DISPLAY_NAME", DEFAULT_LEAGUE_NAME),
                **kwargs,
            )
        return self._service

    @property
    def started(self) -> bool:
        return self._service is not None

    def report(self, action: str, err: MfflError) -> None:
        self.console.print(f"Error {action}: {err}", style="red")

    def close(self) -> None:
        if self._service is not None:
            self._service.close()
            self._service = None

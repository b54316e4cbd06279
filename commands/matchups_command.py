"""Weekly matchups command for the MFFL CLI."""

from __future__ import annotations

from typing import Dict, List

from rich.console import Console

from commands import Command
from commands.league_context import LeagueContext
from mffl.errors import MfflError
from mffl.utils.render import render_matchups_table


class MatchupsCommand(Command):
    """Display head-to-head scores for a week."""

    def __init__(self, console: Console, league_context: LeagueContext) -> None:
        super().__init__(console)
        self.league_context = league_context

    @property
    def name(self) -> str:
        return "/matchups"

    @property
    def description(self) -> str:
        return "Display the matchups and scores for a week."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "[week|YYYY-MM-DD]",
                "required": False,
                "default": "current week",
                "description": "Week number, or a day whose NFL week is used",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return

        argument = self.first_argument(command)
        week = date_value = None
        if argument and argument.isdigit():
            week = int(argument)
        elif argument:
            date_value = argument

        with self.console.status("[cyan]Fetching matchups...", spinner="dots"):
            try:
                result = self.league_context.service.matchups(
                    week=week, date_value=date_value
                )
            except MfflError as err:
                self.league_context.report("fetching matchups", err)
                return

        if not result.matchups:
            self.console.print(
                f"No matchups for week {result.week}.", style="yellow"
            )
            return
        self.console.print(render_matchups_table(result.to_dict()))

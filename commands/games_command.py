"""NFL scoreboard command for the MFFL CLI."""

from __future__ import annotations

from typing import Dict, List

from rich.console import Console

from commands import Command
from commands.league_context import LeagueContext
from mffl.errors import MfflError
from mffl.utils.render import render_games_table


class GamesCommand(Command):
    """Display NFL games for a day."""

    def __init__(self, console: Console, league_context: LeagueContext) -> None:
        super().__init__(console)
        self.league_context = league_context

    @property
    def name(self) -> str:
        return "/games"

    @property
    def description(self) -> str:
        return "Display NFL games, kickoff times and scores for a day."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "[YYYY-MM-DD]",
                "required": False,
                "default": "today (league time zone)",
                "description": "Calendar day",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return

        with self.console.status("[cyan]Fetching NFL scoreboard...", spinner="dots"):
            try:
                games = self.league_context.service.nfl_games(self.first_argument(command))
            except MfflError as err:
                self.league_context.report("fetching games", err)
                return

        if not games["count"]:
            self.console.print(f"No NFL games on {games['date']}.", style="yellow")
            return
        self.console.print(render_games_table(games))

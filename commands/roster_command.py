"""Team list and roster detail commands for the MFFL CLI."""

from __future__ import annotations

from typing import Dict, List, Sequence

from rich.console import Console

from commands import Command
from commands.league_context import LeagueContext
from mffl.errors import MfflError
from mffl.utils.render import render_roster_detail, render_roster_table


class RostersCommand(Command):
    """List every team in the league."""

    def __init__(self, console: Console, league_context: LeagueContext) -> None:
        super().__init__(console)
        self.league_context = league_context

    @property
    def name(self) -> str:
        return "/rosters"

    @property
    def aliases(self) -> Sequence[str]:
        return ("/teams",)

    @property
    def description(self) -> str:
        return "List every team with its manager."

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return

        with self.console.status("[cyan]Fetching league rosters...", spinner="dots"):
            try:
                bundle = self.league_context.service.league_bundle()
            except MfflError as err:
                self.league_context.report("fetching rosters", err)
                return

        teams = [team.to_dict() for team in bundle.roster]
        if not teams:
            self.console.print("No rosters found.", style="yellow")
            return
        self.console.print(render_roster_table(teams, bundle.league_name))


class RosterCommand(Command):
    """Show starters, bench and reserve for one roster."""

    def __init__(self, console: Console, league_context: LeagueContext) -> None:
        super().__init__(console)
        self.league_context = league_context

    @property
    def name(self) -> str:
        return "/roster"

    @property
    def description(self) -> str:
        return "Show the starters, bench and reserve of one roster."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "<roster_id>",
                "required": True,
                "description": "Roster ID as listed by /rosters",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return

        roster_id = self.first_argument(command)
        if not roster_id:
            self.console.print("Usage: /roster <roster_id>", style="yellow")
            return

        with self.console.status("[cyan]Loading roster...", spinner="dots"):
            try:
                detail = self.league_context.service.roster_detail(roster_id)
            except MfflError as err:
                self.league_context.report("loading roster", err)
                return

        for table in render_roster_detail(detail.to_dict()):
            self.console.print(table)

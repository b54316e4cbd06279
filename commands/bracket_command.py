"""Playoff bracket command for the MFFL CLI."""

from __future__ import annotations

from rich.console import Console

from commands import Command
from commands.league_context import LeagueContext
from mffl.errors import MfflError
from mffl.utils.render import render_bracket_tables


class BracketCommand(Command):
    def __init__(self, console: Console, league_context: LeagueContext) -> None:
        super().__init__(console)
        self.league_context = league_context

    @property
    def name(self) -> str:
        return "/bracket"

    @property
    def description(self) -> str:
        return "Display the winners and losers playoff brackets."

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return

        with self.console.status("[cyan]Fetching brackets...", spinner="dots"):
            try:
                result = self.league_context.service.bracket()
            except MfflError as err:
                self.league_context.report("fetching brackets", err)
                return

        if not result.winners and not result.losers:
            self.console.print("Playoff brackets are not set yet.", style="yellow")
            return
        for table in render_bracket_tables(result.to_dict()):
            self.console.print(table)

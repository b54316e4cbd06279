"""Transactions command for the MFFL CLI."""

from __future__ import annotations

from typing import Dict, List, Sequence

from rich.console import Console

from commands import Command
from commands.league_context import LeagueContext
from mffl.errors import MfflError
from mffl.utils.render import render_transactions_table


class TransactionsCommand(Command):
    """Display adds, drops and trades for a round."""

    def __init__(self, console: Console, league_context: LeagueContext) -> None:
        super().__init__(console)
        self.league_context = league_context

    @property
    def name(self) -> str:
        return "/transactions"

    @property
    def aliases(self) -> Sequence[str]:
        return ("/tx",)

    @property
    def description(self) -> str:
        return "Display waiver, free-agent and trade activity for a round."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "[round]",
                "required": False,
                "default": "current week",
                "description": "Transaction round (NFL week)",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return

        argument = self.first_argument(command)
        if argument and not argument.isdigit():
            self.console.print("Round must be a number.", style="yellow")
            return

        with self.console.status("[cyan]Fetching transactions...", spinner="dots"):
            try:
                result = self.league_context.service.transactions(
                    int(argument) if argument else None
                )
            except MfflError as err:
                self.league_context.report("fetching transactions", err)
                return

        if not result.items:
            self.console.print(
                f"No transactions in round {result.round}.", style="yellow"
            )
            return
        self.console.print(render_transactions_table(result.to_dict()))

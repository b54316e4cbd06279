"""Help command for the MFFL CLI."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from rich.console import Console

from commands import Command
from commands.league_context import LeagueContext
from mffl.utils.cli_common import CommandRegistry, show_capabilities


class HelpCommand(Command):
    """Display available commands."""

    def __init__(
        self,
        console: Console,
        registry: CommandRegistry,
        league_context: LeagueContext,
        aliases: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        super().__init__(console)
        self.registry = registry
        self.league_context = league_context
        self._alias_map = aliases

    @property
    def name(self) -> str:
        return "/help"

    @property
    def description(self) -> str:
        return "Display available commands."

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return
        stats = (
            self.league_context.service.cache.stats()
            if self.league_context.started
            else None
        )
        show_capabilities(self.registry, self.console, self._alias_map, stats)

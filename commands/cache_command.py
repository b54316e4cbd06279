"""Cache inspection command for the MFFL CLI."""

from __future__ import annotations

from typing import Dict, List

from rich.console import Console

from commands import Command
from commands.league_context import LeagueContext
from mffl.utils.render import render_cache_stats


class CacheCommand(Command):
    """Show or clear the upstream response cache."""

    def __init__(self, console: Console, league_context: LeagueContext) -> None:
        super().__init__(console)
        self.league_context = league_context

    @property
    def name(self) -> str:
        return "/cache"

    @property
    def description(self) -> str:
        return "Show cached upstream responses, or clear them."

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        return [
            {
                "name": "[clear [prefix]]",
                "required": False,
                "description": "Drop cached entries, optionally only keys starting with prefix",
            },
        ]

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()
            return

        parts = command.split()
        service = self.league_context.service
        if len(parts) > 1 and parts[1] == "clear":
            prefix = parts[2] if len(parts) > 2 else None
            removed = service.clear_cache(prefix)
            self.console.print(f"Cleared {removed} cache entries.", style="green")
            return

        self.console.print(render_cache_stats(service.cache.stats()))

"""Interactive MFFL console."""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, List, Optional, Sequence

from dotenv import load_dotenv
from rich.console import Console

from commands import Command
from commands.bracket_command import BracketCommand
from commands.cache_command import CacheCommand
from commands.exit_command import ExitCommand
from commands.games_command import GamesCommand
from commands.help_command import HelpCommand
from commands.league_context import LeagueContext
from commands.matchups_command import MatchupsCommand
from commands.roster_command import RosterCommand, RostersCommand
from commands.transactions_command import TransactionsCommand
from mffl.utils.cli_common import CommandRegistry, prompt_with_completion


def build_registry(
    console: Console, league_context: LeagueContext
) -> tuple[CommandRegistry, Dict[str, Sequence[str]]]:
    """Register every command under its name and aliases."""
    registry = CommandRegistry()
    aliases: Dict[str, Sequence[str]] = {}

    commands: List[Command] = [
        RostersCommand(console, league_context),
        RosterCommand(console, league_context),
        MatchupsCommand(console, league_context),
        TransactionsCommand(console, league_context),
        BracketCommand(console, league_context),
        GamesCommand(console, league_context),
        CacheCommand(console, league_context),
        HelpCommand(console, registry, league_context, aliases),
        ExitCommand(console),
    ]

    for command in commands:
        registry.register(command.name, command.execute, command.description)
        for alias in command.aliases:
            registry.register(alias, command.execute, command.description)
        if command.aliases:
            aliases[command.name] = tuple(command.aliases)

    return registry, aliases


def main(argv: Optional[Sequence[str]] = None) -> None:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, os.environ.get("LOG_LEVEL", "WARNING").upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    console = Console()
    league_context = LeagueContext(console)
    registry, _ = build_registry(console, league_context)
    exit_names = {"/exit", "/quit"}

    # One-shot mode: `mffl-cli /matchups 3`
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        line = " ".join(argv)
        if not registry.dispatch(line):
            console.print(f"Unknown command: {argv[0]}. Try /help.", style="yellow")
        league_context.close()
        return

    console.print(
        f"[bold green]MFFL[/bold green] league {league_context.league_id}. "
        "Type /help for commands."
    )
    try:
        while True:
            try:
                line = prompt_with_completion(registry.names())
            except (EOFError, KeyboardInterrupt):
                break
            if not line:
                continue
            if line.split()[0].lower() in exit_names:
                break
            if not registry.dispatch(line):
                console.print(
                    f"Unknown command: {line.split()[0]}. Try /help.", style="yellow"
                )
    finally:
        league_context.close()
        console.print("Bye.")


if __name__ == "__main__":
    main()

"""Common interactive CLI utilities for the MFFL console."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence

from prompt_toolkit import prompt as pt_prompt
from prompt_toolkit.completion import FuzzyWordCompleter
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings
from rich.console import Console
from rich.markup import escape
from rich.table import Table

HISTORY_FILE = Path.home() / ".mffl" / "history"


def _stdin_isatty() -> bool:
    return sys.stdin.isatty()


@dataclass
class CommandContext:
    """Holds CLI command metadata."""

    name: str
    handler: Callable[[str], None]
    description: str


class CommandRegistry:
    """Registers and dispatches CLI commands."""

    def __init__(self) -> None:
        self._commands: Dict[str, CommandContext] = {}

    def register(
        self, command: str, handler: Callable[[str], None], description: str
    ) -> None:
        self._commands[command] = CommandContext(command, handler, description)

    def get(self, command: str) -> Optional[CommandContext]:
        return self._commands.get(command)

    def descriptions(self) -> Iterable[CommandContext]:
        return self._commands.values()

    def names(self) -> Sequence[str]:
        return tuple(sorted(self._commands))

    def dispatch(self, line: str) -> bool:
        """Run the handler for the first word of ``line``; False if unknown."""
        parts = line.split()
        if not parts:
            return False
        ctx = self.get(parts[0].lower())
        if ctx is None:
            return False
        ctx.handler(line)
        return True


def prompt_with_completion(
    commands: Sequence[str],
    base_prompt: str = "mffl>",
    history_file: Path = HISTORY_FILE,
) -> str:
    kb = KeyBindings()

    @kb.add("escape")
    def _(event) -> None:  # pragma: no cover - interactive
        event.app.exit(result="")

    if not _stdin_isatty():
        return input(f"{base_prompt} ").strip()

    history_file.parent.mkdir(parents=True, exist_ok=True)
    history = FileHistory(str(history_file))

    return pt_prompt(
        f"{base_prompt} ",
        completer=FuzzyWordCompleter(list(commands)) if commands else None,
        complete_while_typing=True,
        key_bindings=kb,
        history=history,
    ).strip()


def show_capabilities(
    registry: CommandRegistry,
    console: Console,
    aliases: Optional[Mapping[str, Sequence[str]]] = None,
    cache_stats: Optional[Mapping[str, Any]] = None,
) -> None:
    table = Table(title="MFFL CLI Capabilities")
    table.add_column("Command", justify="left")
    table.add_column("Description", justify="left")

    already_rendered: set[str] = set()
    alias_lookup = aliases or {}

    for ctx in registry.descriptions():
        if ctx.name in already_rendered:
            continue

        alias_list = list(alias_lookup.get(ctx.name, ()))
        label = " , ".join([ctx.name, *alias_list]) if alias_list else ctx.name
        table.add_row(label, ctx.description)

        already_rendered.add(ctx.name)
        already_rendered.update(alias_list)

    console.print(table)

    if cache_stats and cache_stats.get("entries"):
        console.print()
        console.print(
            f"[dim]Cache: {cache_stats['entries']} entries, "
            f"{cache_stats.get('hits', 0)} hits / {cache_stats.get('misses', 0)} misses[/dim]"
        )


def render_command_help(
    command_name: str,
    description: str,
    arguments: Sequence[Mapping[str, str | bool]],
    console: Console,
) -> None:
    """Render help information for a command.

    Args:
        command_name: The command name (e.g., '/matchups')
        description: Command description
        arguments: List of argument definitions with 'name', 'required', 'description', 'default'
        console: Rich Console instance to print to
    """
    console.print(f"[bold cyan]{command_name}[/bold cyan] - {description}\n")

    if not arguments:
        console.print("This command takes no arguments.\n")
        return

    table = Table(title=f"{command_name} Arguments", show_header=True)
    table.add_column("Argument", justify="left", style="cyan")
    table.add_column("Required", justify="center", style="yellow")
    table.add_column("Default", justify="left", style="green")
    table.add_column("Description", justify="left")

    for arg in arguments:
        name = escape(str(arg.get("name", "")))
        required = "Yes" if arg.get("required") else "No"
        default = escape(str(arg["default"])) if arg.get("default") else "-"
        desc = str(arg.get("description", ""))
        table.add_row(name, required, default, desc)

    console.print(table)

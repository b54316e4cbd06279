"""Command modules for the MFFL CLI."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from rich.console import Console

from mffl.utils.cli_common import render_command_help


class Command(ABC):
    """Base class for CLI commands."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @property
    @abstractmethod
    def name(self) -> str:
        """Primary command name (e.g., '/help')."""

    @property
    def aliases(self) -> Sequence[str]:
        """Additional aliases for this command (e.g., ['/quit'] for '/exit')."""
        return ()

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this command does."""

    @property
    def arguments(self) -> List[Dict[str, str | bool]]:
        """Argument definitions shown by ``-h``.

        Each argument is a dict with keys ``name``, ``required``,
        ``description`` and optionally ``default``.
        """
        return []

    def should_show_help(self, command: str) -> bool:
        """Check if help flag (-h or --help) is present in command string."""
        parts = command.split()
        return "-h" in parts or "--help" in parts

    def show_help(self) -> None:
        render_command_help(self.name, self.description, self.arguments, self.console)

    @staticmethod
    def first_argument(command: str) -> Optional[str]:
        parts = command.split()
        return parts[1] if len(parts) > 1 else None

    @abstractmethod
    def execute(self, command: str) -> None:
        """Execute the command with the full command string."""

"""Exit command for the MFFL CLI."""

from __future__ import annotations

from typing import Sequence

from commands import Command


class ExitCommand(Command):
    """Leave the REPL; the main loop checks for this name."""

    @property
    def name(self) -> str:
        return "/exit"

    @property
    def aliases(self) -> Sequence[str]:
        return ("/quit",)

    @property
    def description(self) -> str:
        return "Exit the CLI."

    def execute(self, command: str) -> None:
        if self.should_show_help(command):
            self.show_help()

"""
Console wrapper with terminal auto-detection.

Command output (tables, resolved config, URLs) goes through this console;
diagnostics go through the logger.
"""

from __future__ import annotations

import os
import sys
from typing import Any

from rich.console import Console as RichConsole
from rich.theme import Theme


def _is_interactive(file: Any) -> bool:
    isatty = getattr(file, "isatty", None)
    return bool(isatty and isatty())


def _should_use_color(file: Any) -> bool:
    """Determine if color output should be used."""
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return _is_interactive(file)


NAMHATTA_THEME = {
    "info": "cyan",
    "warning": "yellow",
    "error": "red bold",
    "success": "green",
    "muted": "dim",
    "key": "bold blue",
    "value": "white",
}


class Console:
    """
    Console wrapper around rich with plain output for pipes.

    Example:
        console = Console()
        console.print_success("seed completed")

        table = Table(title="Migration config")
        table.add_column("Key")
        console.print(table)
    """

    def __init__(
        self,
        *,
        no_color: bool | None = None,
        quiet: bool = False,
        file: Any = None,
    ):
        """
        Initialize the console.

        Args:
            no_color: Disable color output (True/False) or auto-detect (None)
            quiet: Suppress non-essential output
            file: Output file (default: sys.stdout)
        """
        self._quiet = quiet
        self._file = file or sys.stdout
        if no_color is None:
            no_color = not _should_use_color(self._file)
        self._no_color = no_color

        self._rich_console = RichConsole(
            file=self._file,
            no_color=no_color,
            force_terminal=None if not no_color else False,
            highlight=False,
            soft_wrap=True,
            theme=Theme(NAMHATTA_THEME),
        )

    @property
    def quiet(self) -> bool:
        return self._quiet

    @property
    def rich(self) -> RichConsole:
        """Underlying rich console."""
        return self._rich_console

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print renderables or markup text."""
        if self._quiet:
            return
        self._rich_console.print(*args, **kwargs)

    def print_plain(self, text: str) -> None:
        """Print text verbatim (no markup interpretation), even in quiet mode."""
        self._rich_console.print(text, markup=False, highlight=False)

    def print_success(self, message: str) -> None:
        if self._quiet:
            return
        self.print(f"[success]{message}[/success]")

    def print_warning(self, message: str) -> None:
        self._rich_console.print(f"[warning]Warning:[/warning] {message}")

    def print_error(self, message: str) -> None:
        self._rich_console.print(f"[error]Error:[/error] {message}")

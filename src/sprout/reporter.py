"""Rich terminal reporter for sprout.

A thin layer over a stderr Console with leveled helpers. Workflows
import the module-level ``report`` instance; the CLI toggles verbose
mode and renders fatal errors with ``panic``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from sprout.errors import SproutError


class Reporter:
    """Leveled terminal output.

    Args:
        console: Rich Console to write to. Defaults to a stderr console
            so stdout stays free for child processes.
        verbose: If True, debug messages are shown.
    """

    def __init__(self, console: Console | None = None, verbose: bool = False) -> None:
        self.console = console or Console(stderr=True)
        self.verbose = verbose

    def info(self, message: str) -> None:
        self.console.print(f"[bold blue]info[/bold blue] {escape(message)}")

    def log(self, message: str) -> None:
        self.console.print(escape(message))

    def success(self, message: str) -> None:
        self.console.print(f"[bold green]success[/bold green] {escape(message)}")

    def warn(self, message: str) -> None:
        self.console.print(f"[bold yellow]warn[/bold yellow] {escape(message)}")

    def debug(self, message: str) -> None:
        if self.verbose:
            self.console.print(f"[dim]verbose {escape(message)}[/dim]")

    def panic(self, error: SproutError) -> None:
        """Render a fatal error with its id and context.

        Produces output like:
            error[E104]: destination is already a project
              "my-site" already contains a package.json. ...
              root_path: my-site
        """
        heading = escape(f"error[{error.error_id}]")
        self.console.print(
            f"[bold red]{heading}[/bold red]: {escape(error.description)}"
        )
        self.console.print(f"  {escape(str(error))}")
        for key, value in error.context.items():
            if value is None:
                continue
            self.console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")


report = Reporter()

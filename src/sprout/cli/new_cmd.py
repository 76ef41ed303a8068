"""sprout new CLI command for creating a project from a starter."""

from __future__ import annotations

from typing import Optional

import typer

from sprout.errors import SproutError
from sprout.reporter import report
from sprout.scaffold.init import InitOutcome, init_starter


def new(
    starter: Optional[str] = typer.Argument(
        None, help="Local starter directory or hosted git repo (e.g. owner/repo)"
    ),
    destination: Optional[str] = typer.Argument(
        None, help="Directory to create the project in"
    ),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Show debug output"),
) -> None:
    """Create a new project from a starter.

    With no arguments, asks for a project name and a starter. A hosted
    starter is cloned and committed as a fresh git repository; a local
    starter is copied. Dependencies are installed with yarn or npm.
    """
    report.verbose = verbose

    try:
        outcome = init_starter(starter, destination)
    except SproutError as e:
        report.panic(e)
        raise typer.Exit(code=1)

    if outcome is InitOutcome.CREATED:
        report.success("Your new project is ready")

"""Sprout CLI entry point."""

import typer

from sprout import __version__
from sprout.cli.new_cmd import new

app = typer.Typer(
    name="sprout",
    help="Scaffold new projects from starter templates",
    no_args_is_help=True,
)

# Register subcommands
app.command()(new)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"sprout {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Scaffold new projects from starter templates."""

"""Interactive collection of the project name and starter.

Only used when `sprout new` is called with neither a starter nor a
destination. Blocks on user input with no timeout; Ctrl+C is the only
way out.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.prompt import Prompt

from sprout.errors import PromptAborted

STARTER_ORG = "sproutjs"
DEFAULT_STARTER = f"{STARTER_ORG}/sprout-starter-default"
DEFAULT_PROJECT_NAME = "my-sprout-project"
DIFFERENT_STARTER = "different"

# (title, value) pairs shown in the starter menu
STARTER_CHOICES: list[tuple[str, str]] = [
    ("sprout-starter-default", "sprout-starter-default"),
    ("sprout-starter-hello-world", "sprout-starter-hello-world"),
    ("sprout-starter-blog", "sprout-starter-blog"),
    ("(Use a different starter)", DIFFERENT_STARTER),
]


@dataclass(frozen=True)
class ResolvedPaths:
    """Starter and destination after prompting and defaults."""

    starter: str
    root_path: str
    selected_other_starter: bool = False


def ask_project(console: Console | None = None) -> tuple[str, str]:
    """Ask for the project directory and a starter from the curated list.

    Returns:
        Tuple of (project path, starter value).
    """
    console = console or Console()
    path = Prompt.ask(
        "What is your project called?",
        default=DEFAULT_PROJECT_NAME,
        console=console,
    )

    console.print("What starter would you like to use?")
    for index, (title, _) in enumerate(STARTER_CHOICES, 1):
        console.print(f"  [cyan]{index}[/cyan]. {title}")
    choice = Prompt.ask(
        "Starter",
        choices=[str(i) for i in range(1, len(STARTER_CHOICES) + 1)],
        default="1",
        console=console,
    )
    _, starter = STARTER_CHOICES[int(choice) - 1]
    return path, starter


def get_paths(starter: str | None, root_path: str | None, cwd: str) -> ResolvedPaths:
    """Fill in missing starter/destination, prompting if both are absent.

    Args:
        starter: Starter reference from the command line, or None.
        root_path: Destination from the command line, or None.
        cwd: Directory used when no destination is given.

    Raises:
        PromptAborted: If the prompt produced an empty project name.
    """
    selected_other_starter = False

    if not starter and not root_path:
        path, choice = ask_project()
        if not choice or not (path or "").strip():
            raise PromptAborted()
        selected_other_starter = choice == DIFFERENT_STARTER
        starter = f"{STARTER_ORG}/{choice}"
        root_path = path

    return ResolvedPaths(
        starter=starter or DEFAULT_STARTER,
        root_path=root_path or cwd,
        selected_other_starter=selected_other_starter,
    )

"""Git helpers for freshly cloned starters."""

from __future__ import annotations

from pathlib import Path

from sprout.errors import ProcessFailure
from sprout.execution.process import run
from sprout.reporter import report

GITIGNORE_ENTRIES: list[str] = [".cache", "node_modules", "public"]


def is_inside_work_tree(path: Path) -> bool:
    """Check whether path is inside a git working tree.

    Checks from path itself, so a repository in any ancestor directory
    counts. A missing git binary counts as "not a repository".
    """
    try:
        output = run(["git", "rev-parse", "--is-inside-work-tree"], cwd=path, capture=True)
    except ProcessFailure:
        return False
    return output == "true"


def git_init(path: Path) -> None:
    report.info(f"Initialising git in {path}")
    run(["git", "init"], cwd=path)


def maybe_create_gitignore(path: Path) -> bool:
    """Write a minimal .gitignore unless one exists. Returns True if written."""
    gitignore_path = path / ".gitignore"
    if gitignore_path.exists():
        return False
    report.info(f"Creating minimal .gitignore in {path}")
    gitignore_path.write_text("\n".join(GITIGNORE_ENTRIES) + "\n", encoding="utf-8")
    return True


def create_initial_commit(path: Path, starter_url: str) -> None:
    """Stage everything and commit, naming the starter in the message.

    The commit runs with inherited stdio so signing prompts still work.
    """
    report.info(f"Create initial git commit in {path}")
    run(["git", "add", "-A"], cwd=path)
    run(["git", "commit", "-m", f"Initial commit from sprout: ({starter_url})"], cwd=path)

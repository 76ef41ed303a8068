"""Create a project by copying a starter from the local file system."""

from __future__ import annotations

import shutil
from pathlib import Path

from sprout.errors import InvalidSelfCopy, StarterNotFound
from sprout.execution.package_manager import install
from sprout.reporter import report

# Version control metadata left out of the copy (top level only)
IGNORED_NAMES: frozenset[str] = frozenset({".git", ".hg"})

DIRECTORY_MODE = 0o755


def copy_starter(starter_path: str, root_path: str) -> None:
    """Copy a local starter into root_path and install its dependencies.

    Args:
        starter_path: Directory holding the starter.
        root_path: Destination directory; created if missing.

    Raises:
        InvalidSelfCopy: If starter_path is the current directory (".").
        StarterNotFound: If starter_path does not exist.
        ProcessFailure: If installing dependencies fails.
    """
    if starter_path == ".":
        raise InvalidSelfCopy(starter_path)

    source = Path(starter_path)
    if not source.exists():
        raise StarterNotFound(starter_path)

    destination = Path(root_path)
    destination.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)

    report.info(f"Creating new project from local starter: {starter_path}")
    report.log(f"Copying local starter to {root_path} ...")

    root = source.resolve()

    def _ignore(directory: str, names: list[str]) -> set[str]:
        if Path(directory).resolve() != root:
            return set()
        return {name for name in names if name in IGNORED_NAMES}

    shutil.copytree(source, destination, ignore=_ignore, dirs_exist_ok=True)

    report.success("Created starter directory layout")

    install(destination)

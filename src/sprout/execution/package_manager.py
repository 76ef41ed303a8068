"""Package manager selection and dependency installation.

Yarn is used when its binary is reachable and the user has not chosen
npm. The binary is checked as ``yarnpkg`` rather than ``yarn`` to avoid
Hadoop's unrelated ``yarn`` command.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path

from rich.prompt import Prompt

from sprout.errors import ProcessFailure
from sprout.execution.process import run, working_directory
from sprout.models.config import ConfigStore, PackageManager
from sprout.reporter import report

DEFAULT_PACKAGE_MANAGER = PackageManager.YARN

# Lockfile written by each package manager
LOCKFILES: dict[PackageManager, str] = {
    PackageManager.NPM: "package-lock.json",
    PackageManager.YARN: "yarn.lock",
}

INSTALL_COMMANDS: dict[PackageManager, list[str]] = {
    PackageManager.NPM: ["npm", "install"],
    PackageManager.YARN: ["yarnpkg"],
}


def is_tty() -> bool:
    """True when attached to an interactive terminal outside CI."""
    if os.environ.get("CI", "").lower() in ("true", "1", "yes"):
        return False
    return sys.stdin.isatty() and sys.stdout.isatty()


def yarn_available() -> bool:
    """Run ``yarnpkg --version`` with output discarded."""
    try:
        run(["yarnpkg", "--version"], quiet=True)
    except ProcessFailure:
        return False
    return True


def resolve_preference(
    persisted: PackageManager | None,
    is_interactive: bool,
    prompt_fn: Callable[[], PackageManager | None],
    default: PackageManager = DEFAULT_PACKAGE_MANAGER,
) -> PackageManager:
    """Pick a package manager: persisted value, else prompt, else default.

    The prompt is only consulted in an interactive session; an empty
    answer falls back to the default.
    """
    if persisted is not None:
        return persisted
    if is_interactive:
        return prompt_fn() or default
    return default


def prompt_package_manager(store: ConfigStore | None = None) -> PackageManager:
    """Ask which package manager to use and remember the answer."""
    store = store or ConfigStore()
    answer = Prompt.ask(
        "Which package manager would you like to use?",
        choices=[pm.value for pm in PackageManager],
        default=DEFAULT_PACKAGE_MANAGER.value,
    )
    manager = PackageManager(answer)
    store.set_package_manager(manager)
    report.info(f"Preferred package manager set to {manager.value}")
    return manager


def select_package_manager(store: ConfigStore | None = None) -> PackageManager:
    """Choose npm or yarn for this invocation.

    Falls back to npm whenever yarn is not installed.
    """
    if not yarn_available():
        return PackageManager.NPM
    store = store or ConfigStore()
    return resolve_preference(
        store.get_package_manager(),
        is_tty(),
        lambda: prompt_package_manager(store),
    )


def install(root_path: Path | str) -> PackageManager:
    """Install dependencies in root_path with the selected package manager.

    Removes the other manager's lockfile first so the project never ends
    up with both. The working directory is restored afterwards whether
    or not the install succeeds.

    Returns:
        The package manager that was used.

    Raises:
        ProcessFailure: If the install command fails.
    """
    report.info("Installing packages...")
    with working_directory(root_path):
        manager = select_package_manager()
        other = PackageManager.NPM if manager is PackageManager.YARN else PackageManager.YARN
        Path(LOCKFILES[other]).unlink(missing_ok=True)
        run(INSTALL_COMMANDS[manager])
    return manager

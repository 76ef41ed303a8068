"""External process invocation.

Commands run synchronously with inherited stdio so the user sees git
and package manager output live. A non-zero exit, or a missing
executable, becomes a ProcessFailure carrying the command and its
exit code. Nothing is retried.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sprout.errors import ProcessFailure
from sprout.reporter import report

# Exit codes reported when the executable could not be started
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


def run(
    command: list[str],
    cwd: Path | str | None = None,
    capture: bool = False,
    quiet: bool = False,
) -> str | None:
    """Run a command and wait for it to finish.

    Args:
        command: Executable followed by its arguments.
        cwd: Working directory for the child. Defaults to ours.
        capture: If True, return stripped stdout instead of inheriting it.
        quiet: If True, discard stdout and stderr.

    Returns:
        Captured stdout when capture is True, otherwise None.

    Raises:
        ProcessFailure: If the command exits non-zero or cannot be started.
    """
    report.debug(f"running: {' '.join(command)}" + (f" (in {cwd})" if cwd else ""))

    kwargs: dict = {"cwd": cwd, "check": True}
    if capture:
        kwargs.update(stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, text=True)
    elif quiet:
        kwargs.update(stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)

    try:
        result = subprocess.run(command, **kwargs)
    except subprocess.CalledProcessError as exc:
        raise ProcessFailure(command, exc.returncode) from exc
    except FileNotFoundError as exc:
        raise ProcessFailure(command, COMMAND_NOT_FOUND) from exc
    except OSError as exc:
        raise ProcessFailure(command, COMMAND_NOT_EXECUTABLE) from exc

    if capture:
        return result.stdout.strip()
    return None


@contextmanager
def working_directory(path: Path | str) -> Iterator[Path]:
    """Change the process working directory, restoring it on exit.

    The previous directory is restored even when the body raises.
    """
    previous = Path.cwd()
    os.chdir(path)
    try:
        yield Path.cwd()
    finally:
        os.chdir(previous)

"""Destination validation and starter classification.

Runs before any filesystem or process side effect: a destination that
is a URL, is not a legal path, or already holds a package.json stops
the workflow here.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from urllib.parse import urlparse

from sprout.errors import AlreadyAProject, InvalidDestination, InvalidPath
from sprout.telemetry import track_error

# Characters that are illegal in file names on at least one major
# platform. Checked everywhere so projects stay portable.
_INVALID_PATH_CHARS = re.compile(r'[<>:"|?*]')
_DRIVE_PREFIX = re.compile(r"^[a-zA-Z]:[\\/]")


def looks_like_url(value: str | None) -> bool:
    """True when value parses with both a scheme and a host."""
    if not value:
        return False
    parsed = urlparse(value)
    return bool(parsed.scheme and parsed.netloc)


def is_valid_path(path: str) -> bool:
    """Check that path is a syntactically legal file system path.

    A leading Windows drive (``C:\\``) is allowed; NUL bytes and any of
    ``<>:"|?*`` elsewhere are not.
    """
    if not path or "\x00" in path:
        return False
    body = _DRIVE_PREFIX.sub("", path, count=1)
    return _INVALID_PATH_CHARS.search(body) is None


def check_destination(starter: str | None, root_path: str) -> None:
    """Validate the destination before anything touches the disk.

    Args:
        starter: Starter reference as typed by the user (may be None).
        root_path: Destination directory.

    Raises:
        InvalidDestination: If root_path is a URL.
        InvalidPath: If root_path contains illegal characters.
        AlreadyAProject: If root_path already contains package.json.
    """
    if looks_like_url(root_path):
        track_error("NEW_PROJECT_NAME_MISSING")
        # A starter-looking URL in the destination slot next to a plain
        # name in the starter slot means the arguments were swapped.
        if starter and not looks_like_url(starter) and re.search(
            "starter", root_path, re.IGNORECASE
        ):
            raise InvalidDestination(root_path, starter, reason="starter_slug")
        raise InvalidDestination(root_path, starter, reason="url")

    if not is_valid_path(root_path):
        raise InvalidPath(os.path.abspath(root_path))

    if (Path(root_path) / "package.json").exists():
        track_error("NEW_PROJECT_IS_NPM_PROJECT")
        raise AlreadyAProject(root_path)

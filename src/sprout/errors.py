"""Error taxonomy for sprout.

Every failure the CLI reports is a SproutError subclass carrying a
stable error id, a context mapping, and a human-readable message.
The CLI layer renders them via Reporter.panic and exits non-zero.
"""

from __future__ import annotations

from typing import Any

# Human-readable descriptions for error ids
ERROR_DESCRIPTIONS: dict[str, str] = {
    "E101": "destination looks like a starter",
    "E102": "destination is a URL",
    "E103": "invalid destination path",
    "E104": "destination is already a project",
    "E105": "starter not found",
    "E106": "cannot copy the current directory",
    "E107": "external command failed",
    "E108": "prompt aborted",
}


class SproutError(Exception):
    """Base class for all errors reported by sprout.

    Args:
        error_id: Stable error code (see ERROR_DESCRIPTIONS).
        message: Human-readable explanation.
        context: Structured fields shown alongside the message.
    """

    error_id: str = "E999"

    def __init__(self, message: str, **context: Any) -> None:
        self.context = context
        super().__init__(message)

    @property
    def description(self) -> str:
        return ERROR_DESCRIPTIONS.get(self.error_id, "error")


class InvalidDestination(SproutError):
    """Raised when the destination parses as a URL (scheme and host)."""

    def __init__(self, root_path: str, starter: str | None, reason: str) -> None:
        self.reason = reason
        if reason == "starter_slug":
            self.error_id = "E101"
            message = (
                f'It looks like you gave the starter "{root_path}" as the '
                f'destination and "{starter}" as the starter. Starter comes '
                f"first: sprout new {root_path} {starter}"
            )
        else:
            self.error_id = "E102"
            message = (
                f'The destination "{root_path}" is a URL. Pass a directory '
                f"name for the new project, for example: "
                f"sprout new {root_path} my-project"
            )
        super().__init__(message, starter=starter, root_path=root_path)


class InvalidPath(SproutError):
    """Raised when the destination is not a syntactically valid path."""

    error_id = "E103"

    def __init__(self, path: str) -> None:
        super().__init__(
            f'Could not create a project at "{path}". The path contains '
            f'characters that are not allowed in file names (<>:"|?*).',
            path=path,
        )


class AlreadyAProject(SproutError):
    """Raised when the destination already contains a package.json."""

    error_id = "E104"

    def __init__(self, root_path: str) -> None:
        super().__init__(
            f'"{root_path}" already contains a package.json. Choose a new '
            f"directory for the project.",
            root_path=root_path,
        )


class StarterNotFound(SproutError):
    """Raised when a local starter path does not exist."""

    error_id = "E105"

    def __init__(self, starter: str) -> None:
        super().__init__(f"Starter {starter} doesn't exist", starter=starter)


class InvalidSelfCopy(SproutError):
    """Raised when the starter is the current directory."""

    error_id = "E106"

    def __init__(self, starter: str) -> None:
        super().__init__(
            "You can't create a starter from the existing directory. If you "
            "want to create a new project in the current directory, the "
            "trailing dot isn't necessary. If you want to create a new project "
            'from a local starter, run something like "sprout new '
            '../my-starter my-project"',
            starter=starter,
        )


class ProcessFailure(SproutError):
    """Raised when an external command exits non-zero or cannot start."""

    error_id = "E107"

    def __init__(self, command: list[str], returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"Command `{' '.join(command)}` failed with exit code {returncode}",
            command=" ".join(command),
            returncode=returncode,
        )


class PromptAborted(SproutError):
    """Raised when the interactive prompt yields no usable answer."""

    error_id = "E108"

    def __init__(self) -> None:
        super().__init__(
            "Please provide both a starter and a project name along with "
            "the path (if it's not in the current directory)"
        )

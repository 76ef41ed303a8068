"""Project creation for `sprout new`.

Resolves the starter and destination (prompting when both are missing),
validates the destination, then clones a hosted starter or copies a
local one. Every validation error is raised before anything is written.
"""

from __future__ import annotations

import os
from enum import Enum

import typer

from sprout.reporter import report
from sprout.scaffold.clone import clone_starter
from sprout.scaffold.copy import copy_starter
from sprout.starter.classify import check_destination
from sprout.starter.hosted import parse_hosted_git
from sprout.starter.prompts import get_paths
from sprout.telemetry import track_cli

STARTER_LIBRARY_URL = "https://sprout.dev/starters"
EXAMPLE_STARTER_URL = "https://github.com/sproutjs/sprout-starter-default"
LOCAL_STARTER_TAG = "local:starter"


class InitOutcome(str, Enum):
    """How an init_starter call finished."""

    CREATED = "created"
    OPENED_STARTER_LIBRARY = "opened_starter_library"


def open_starter_library(root_path: str) -> None:
    """Point the user at the starter library and open it in a browser."""
    report.info(
        f"Opening the starter library at {STARTER_LIBRARY_URL}...\n"
        "The starter library has a variety of options for starters you can browse\n\n"
        "You can then use the sprout new command with the link to a repository "
        "of a starter you'd like to use, for example:\n"
        f"sprout new {EXAMPLE_STARTER_URL} {root_path}"
    )
    typer.launch(STARTER_LIBRARY_URL)


def init_starter(starter: str | None = None, root_path: str | None = None) -> InitOutcome:
    """Create a new project from a starter.

    Args:
        starter: Local path or hosted git reference. Defaults to the
            default starter when only the destination is given.
        root_path: Destination directory. Defaults to the current
            directory when only the starter is given.

    Returns:
        InitOutcome.CREATED once the project exists, or
        InitOutcome.OPENED_STARTER_LIBRARY if the user asked to pick a
        different starter from the prompt.

    Raises:
        SproutError: On any validation or process failure. Files already
            copied or cloned are left in place.
    """
    paths = get_paths(starter, root_path, os.getcwd())

    if paths.selected_other_starter:
        open_starter_library(paths.root_path)
        return InitOutcome.OPENED_STARTER_LIBRARY

    check_destination(starter, paths.root_path)

    hosted_info = parse_hosted_git(paths.starter)

    track_cli(
        "NEW_PROJECT",
        {"starter_name": hosted_info.shortcut() if hosted_info else LOCAL_STARTER_TAG},
    )
    if hosted_info:
        clone_starter(hosted_info, paths.root_path)
    else:
        copy_starter(paths.starter, paths.root_path)
    track_cli("NEW_PROJECT_END")

    return InitOutcome.CREATED

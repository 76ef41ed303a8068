"""Create a project by cloning a starter from a hosted git repository.

The clone is a template, not a fork: its history is dropped and, unless
the destination already sits inside a git working tree, a new
repository is started with a single commit.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from sprout.execution.package_manager import install
from sprout.execution.process import run
from sprout.reporter import report
from sprout.scaffold.git import (
    create_initial_commit,
    git_init,
    is_inside_work_tree,
    maybe_create_gitignore,
)
from sprout.starter.hosted import HostedRepoInfo


def build_clone_args(info: HostedRepoInfo, root_path: str) -> list[str]:
    """Arguments for ``git`` that clone the starter's single branch."""
    branch = ["-b", info.committish] if info.committish else []
    return ["clone", *branch, info.clone_url(), root_path, "--single-branch"]


def clone_starter(info: HostedRepoInfo, root_path: str) -> None:
    """Clone a hosted starter into root_path and turn it into a new project.

    Raises:
        ProcessFailure: If cloning, installing, or any git step fails.
            Nothing already written to root_path is removed.
    """
    url = info.clone_url()
    report.info(f"Creating new project from git: {url}")

    run(["git", *build_clone_args(info, root_path)])

    report.success("Created starter directory layout")

    destination = Path(root_path)
    git_dir = destination / ".git"
    if git_dir.exists():
        shutil.rmtree(git_dir)

    install(destination)

    is_git = is_inside_work_tree(destination)
    if not is_git:
        git_init(destination)
    maybe_create_gitignore(destination)
    if not is_git:
        create_initial_commit(destination, url)

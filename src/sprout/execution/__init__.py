"""Sprout execution utilities - process running and dependency install."""

from sprout.execution.package_manager import install, resolve_preference, select_package_manager
from sprout.execution.process import run, working_directory

__all__ = [
    "install",
    "resolve_preference",
    "run",
    "select_package_manager",
    "working_directory",
]

"""Starter resolution - prompting, classification, and hosted git parsing."""

from sprout.starter.classify import check_destination, is_valid_path, looks_like_url
from sprout.starter.hosted import HostedRepoInfo, parse_hosted_git
from sprout.starter.prompts import ResolvedPaths, get_paths

__all__ = [
    "HostedRepoInfo",
    "ResolvedPaths",
    "check_destination",
    "get_paths",
    "is_valid_path",
    "looks_like_url",
    "parse_hosted_git",
]

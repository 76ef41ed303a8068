"""Hosted git reference parsing.

Recognizes the ways people point at a starter on GitHub, GitLab or
Bitbucket -- ``owner/repo`` shorthand, ``github:owner/repo`` shortcuts,
https/git/ssh URLs, and scp-style ``git@host:owner/repo`` -- and turns
them into a HostedRepoInfo that knows how to render clone URLs.
Anything unrecognized is a local path.
"""

from __future__ import annotations

import re
from typing import Literal
from urllib.parse import unquote, urlparse

from pydantic import BaseModel

HostName = Literal["github", "gitlab", "bitbucket"]
Representation = Literal["shortcut", "https", "sshurl", "git"]

# Short host name -> domain
HOST_DOMAINS: dict[str, str] = {
    "github": "github.com",
    "gitlab": "gitlab.com",
    "bitbucket": "bitbucket.org",
}
_DOMAIN_HOSTS: dict[str, str] = {domain: name for name, domain in HOST_DOMAINS.items()}

# URL scheme -> how the user chose to address the repo
_SCHEME_REPRESENTATIONS: dict[str, Representation] = {
    "https": "https",
    "http": "https",
    "git+https": "https",
    "git+http": "https",
    "ssh": "sshurl",
    "git+ssh": "sshurl",
    "git": "git",
}

# owner/repo[#committish]; owner may not start with '.', '-' or '/'
_SHORTHAND_RE = re.compile(r"^([^:@%/\s.\-][^:@%/\s]*)/([^:@\s/%]+?)(?:#(.*))?$")
_SHORTCUT_RE = re.compile(r"^(github|gitlab|bitbucket):([^/\s]+)/([^/\s#]+?)(?:#(.*))?$")
_SCP_RE = re.compile(r"^(?:git\+ssh://)?[^@\s/]+@([^:/\s]+):([^/\s]+)/([^/\s#]+?)(?:#(.*))?$")


class HostedRepoInfo(BaseModel):
    """A repository on a known git host.

    Attributes:
        host: Short host name (github, gitlab, bitbucket).
        owner: Account or organization owning the repo.
        repo: Repository name without a trailing .git.
        committish: Optional branch, tag, or commit to check out.
        default_representation: How the reference was written; "sshurl"
            means the user asked for SSH transport (private repos).
    """

    model_config = {"extra": "forbid", "frozen": True}

    host: HostName
    owner: str
    repo: str
    committish: str | None = None
    default_representation: Representation = "shortcut"

    @property
    def domain(self) -> str:
        return HOST_DOMAINS[self.host]

    def ssh_url(self) -> str:
        """SSH clone URL, without committish."""
        return f"git@{self.domain}:{self.owner}/{self.repo}.git"

    def https_url(self) -> str:
        """Plain https clone URL (no git+ prefix), without committish."""
        return f"https://{self.domain}/{self.owner}/{self.repo}.git"

    def clone_url(self) -> str:
        if self.default_representation == "sshurl":
            return self.ssh_url()
        return self.https_url()

    def shortcut(self) -> str:
        """Canonical short identifier, e.g. ``github:owner/repo#v2``."""
        value = f"{self.host}:{self.owner}/{self.repo}"
        if self.committish:
            value += f"#{self.committish}"
        return value


def _strip_git_suffix(repo: str) -> str:
    return repo[:-4] if repo.endswith(".git") else repo


def _build(
    host: str,
    owner: str,
    repo: str,
    committish: str | None,
    representation: Representation,
) -> HostedRepoInfo | None:
    repo = _strip_git_suffix(repo)
    if not owner or not repo:
        return None
    return HostedRepoInfo(
        host=host,
        owner=owner,
        repo=repo,
        committish=unquote(committish) if committish else None,
        default_representation=representation,
    )


def _parse_url(value: str) -> HostedRepoInfo | None:
    parsed = urlparse(value)
    representation = _SCHEME_REPRESENTATIONS.get(parsed.scheme)
    if representation is None:
        return None
    host = _DOMAIN_HOSTS.get((parsed.hostname or "").removeprefix("www."))
    if host is None:
        return None
    segments = [s for s in parsed.path.split("/") if s]
    if len(segments) < 2:
        return None
    owner, repo = segments[0], segments[1]
    # /owner/repo/tree/<branch> as copied from the browser
    committish = parsed.fragment or None
    if committish is None and len(segments) >= 4 and segments[2] == "tree":
        committish = "/".join(segments[3:])
    elif len(segments) > 2:
        return None
    return _build(host, owner, repo, committish, representation)


def parse_hosted_git(value: str) -> HostedRepoInfo | None:
    """Parse a starter reference as a hosted git repository.

    Args:
        value: Starter string from the command line.

    Returns:
        HostedRepoInfo, or None if the string is not a hosted git
        reference (and should be treated as a local path).
    """
    value = value.strip()
    if not value:
        return None

    match = _SHORTCUT_RE.match(value)
    if match:
        host, owner, repo, committish = match.groups()
        return _build(host, owner, repo, committish, "shortcut")

    match = _SCP_RE.match(value)
    if match:
        domain, owner, repo, committish = match.groups()
        host = _DOMAIN_HOSTS.get(domain)
        if host is None:
            return None
        return _build(host, owner, repo, committish, "sshurl")

    if "://" in value:
        return _parse_url(value)

    match = _SHORTHAND_RE.match(value)
    if match:
        owner, repo, committish = match.groups()
        return _build("github", owner, repo, committish, "shortcut")

    return None

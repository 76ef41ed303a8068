"""Tests for sprout.scaffold.clone and sprout.scaffold.git."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from unittest.mock import call, patch

import pytest

from sprout.errors import ProcessFailure
from sprout.scaffold.clone import build_clone_args, clone_starter
from sprout.scaffold.git import (
    GITIGNORE_ENTRIES,
    create_initial_commit,
    is_inside_work_tree,
    maybe_create_gitignore,
)
from sprout.starter.hosted import HostedRepoInfo, parse_hosted_git


def _fake_clone(dest: Path):
    """side_effect for run() that materializes a cloned repo on `git clone`."""

    def _run(command, **kwargs):
        if command[:2] == ["git", "clone"]:
            (dest / ".git").mkdir(parents=True)
            (dest / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
            (dest / "package.json").write_text("{}", encoding="utf-8")
        return None

    return _run


class TestBuildCloneArgs:
    def test_https_without_branch(self):
        info = parse_hosted_git("owner/starter-repo")
        assert build_clone_args(info, "new-app") == [
            "clone",
            "https://github.com/owner/starter-repo.git",
            "new-app",
            "--single-branch",
        ]

    def test_branch_selector(self):
        info = parse_hosted_git("owner/starter-repo#v2")
        args = build_clone_args(info, "new-app")
        assert args[:3] == ["clone", "-b", "v2"]
        assert "https://github.com/owner/starter-repo.git" in args

    def test_ssh_for_private_repos(self):
        info = parse_hosted_git("git@github.com:owner/private.git")
        assert "git@github.com:owner/private.git" in build_clone_args(info, "new-app")


class TestCloneStarter:
    def test_fresh_repository_outside_work_tree(self, tmp_path: Path):
        dest = tmp_path / "new-app"
        info = HostedRepoInfo(host="github", owner="owner", repo="starter-repo")
        with (
            patch("sprout.scaffold.clone.run", side_effect=_fake_clone(dest)) as mock_run,
            patch("sprout.scaffold.clone.install") as mock_install,
            patch("sprout.scaffold.clone.is_inside_work_tree", return_value=False),
            patch("sprout.scaffold.clone.git_init") as mock_init,
            patch("sprout.scaffold.clone.create_initial_commit") as mock_commit,
        ):
            clone_starter(info, str(dest))

        mock_run.assert_called_once_with(
            ["git", "clone", "https://github.com/owner/starter-repo.git", str(dest), "--single-branch"]
        )
        assert not (dest / ".git").exists()
        mock_install.assert_called_once_with(dest)
        mock_init.assert_called_once_with(dest)
        mock_commit.assert_called_once_with(dest, "https://github.com/owner/starter-repo.git")
        assert (dest / ".gitignore").read_text(encoding="utf-8") == ".cache\nnode_modules\npublic\n"

    def test_inside_existing_work_tree_skips_init(self, tmp_path: Path):
        dest = tmp_path / "new-app"
        info = HostedRepoInfo(host="github", owner="owner", repo="starter-repo")
        with (
            patch("sprout.scaffold.clone.run", side_effect=_fake_clone(dest)),
            patch("sprout.scaffold.clone.install"),
            patch("sprout.scaffold.clone.is_inside_work_tree", return_value=True),
            patch("sprout.scaffold.clone.git_init") as mock_init,
            patch("sprout.scaffold.clone.create_initial_commit") as mock_commit,
        ):
            clone_starter(info, str(dest))

        mock_init.assert_not_called()
        mock_commit.assert_not_called()
        assert (dest / ".gitignore").exists()

    def test_clone_failure_aborts(self, tmp_path: Path):
        info = HostedRepoInfo(host="github", owner="owner", repo="missing")
        failure = ProcessFailure(["git", "clone"], 128)
        with (
            patch("sprout.scaffold.clone.run", side_effect=failure),
            patch("sprout.scaffold.clone.install") as mock_install,
        ):
            with pytest.raises(ProcessFailure):
                clone_starter(info, str(tmp_path / "new-app"))
        mock_install.assert_not_called()

    def test_install_failure_skips_git(self, tmp_path: Path):
        dest = tmp_path / "new-app"
        info = HostedRepoInfo(host="github", owner="owner", repo="starter-repo")
        with (
            patch("sprout.scaffold.clone.run", side_effect=_fake_clone(dest)),
            patch(
                "sprout.scaffold.clone.install",
                side_effect=ProcessFailure(["npm", "install"], 1),
            ),
            patch("sprout.scaffold.clone.git_init") as mock_init,
        ):
            with pytest.raises(ProcessFailure):
                clone_starter(info, str(dest))
        mock_init.assert_not_called()
        # Partial clone stays on disk
        assert (dest / "package.json").exists()


class TestGitHelpers:
    def test_gitignore_not_overwritten(self, tmp_path: Path):
        (tmp_path / ".gitignore").write_text("dist\n", encoding="utf-8")
        assert maybe_create_gitignore(tmp_path) is False
        assert (tmp_path / ".gitignore").read_text(encoding="utf-8") == "dist\n"

    def test_gitignore_entries(self, tmp_path: Path):
        assert maybe_create_gitignore(tmp_path) is True
        lines = (tmp_path / ".gitignore").read_text(encoding="utf-8").splitlines()
        assert lines == GITIGNORE_ENTRIES

    def test_initial_commit_message(self, tmp_path: Path):
        with patch("sprout.scaffold.git.run") as mock_run:
            create_initial_commit(tmp_path, "https://github.com/owner/starter-repo.git")
        assert mock_run.call_args_list == [
            call(["git", "add", "-A"], cwd=tmp_path),
            call(
                [
                    "git",
                    "commit",
                    "-m",
                    "Initial commit from sprout: (https://github.com/owner/starter-repo.git)",
                ],
                cwd=tmp_path,
            ),
        ]

    def test_git_failure_means_not_a_repo(self, tmp_path: Path):
        with patch(
            "sprout.scaffold.git.run",
            side_effect=ProcessFailure(["git", "rev-parse"], 128),
        ):
            assert is_inside_work_tree(tmp_path) is False

    @pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
    def test_detects_ancestor_repository(self, tmp_path: Path):
        subprocess.run(["git", "init", "-q"], cwd=tmp_path, check=True)
        nested = tmp_path / "packages" / "site"
        nested.mkdir(parents=True)
        assert is_inside_work_tree(nested) is True

    @pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
    def test_outside_repository(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
        assert is_inside_work_tree(tmp_path) is False

    @pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
    def test_clone_leaves_single_initial_commit(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ):
        for var in ("GIT_AUTHOR", "GIT_COMMITTER"):
            monkeypatch.setenv(f"{var}_NAME", "Sprout Test")
            monkeypatch.setenv(f"{var}_EMAIL", "sprout@example.com")
        monkeypatch.setenv("GIT_CONFIG_GLOBAL", os.devnull)
        monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))

        starter = tmp_path / "starter"
        starter.mkdir()
        (starter / "package.json").write_text("{}", encoding="utf-8")
        subprocess.run(["git", "init", "-q"], cwd=starter, check=True)
        subprocess.run(["git", "add", "-A"], cwd=starter, check=True)
        subprocess.run(["git", "commit", "-q", "-m", "starter history"], cwd=starter, check=True)

        dest = tmp_path / "my-site"

        # A local repository stands in for the hosted one
        def _run(command, **kwargs):
            if command[:2] == ["git", "clone"]:
                subprocess.run(["git", "clone", "-q", str(starter), str(dest)], check=True)

        info = HostedRepoInfo(host="github", owner="owner", repo="starter-repo")
        with (
            patch("sprout.scaffold.clone.run", side_effect=_run),
            patch("sprout.scaffold.clone.install"),
        ):
            clone_starter(info, str(dest))

        log = subprocess.run(
            ["git", "log", "--format=%s"],
            cwd=dest,
            check=True,
            capture_output=True,
            text=True,
        )
        assert log.stdout.splitlines() == [
            "Initial commit from sprout: (https://github.com/owner/starter-repo.git)"
        ]
        assert (dest / ".gitignore").exists()

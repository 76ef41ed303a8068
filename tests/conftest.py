"""Shared fixtures: keep user config and telemetry out of the real home dir."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_user_dirs(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point SPROUT_CONFIG_DIR and SPROUT_DATA_DIR at a throwaway directory."""
    base = tmp_path_factory.mktemp("sprout-home")
    monkeypatch.setenv("SPROUT_CONFIG_DIR", str(base / "config"))
    monkeypatch.setenv("SPROUT_DATA_DIR", str(base / "data"))
    monkeypatch.delenv("SPROUT_TELEMETRY_DISABLED", raising=False)
    return base

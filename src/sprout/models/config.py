"""User configuration model for sprout.

Holds the per-user preferences that survive between invocations:
the preferred package manager and the telemetry opt-in. Stored as
config.yaml in the platform's user config directory.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

import yaml
from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from sprout.reporter import report

CONFIG_FILENAME = "config.yaml"


class PackageManager(str, Enum):
    """Package managers sprout can install dependencies with."""

    NPM = "npm"
    YARN = "yarn"


class UserConfig(BaseModel):
    """User-level preferences loaded from config.yaml."""

    model_config = {"extra": "forbid"}

    package_manager: PackageManager | None = None
    telemetry_enabled: bool = False


def config_dir() -> Path:
    """Return the directory holding config.yaml.

    SPROUT_CONFIG_DIR overrides the platform default.
    """
    override = os.environ.get("SPROUT_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("sprout"))


class ConfigStore:
    """Read and write UserConfig as YAML.

    Writes are atomic (write to .tmp, then rename) so an interrupted
    prompt never leaves a truncated config behind.
    """

    def __init__(self, directory: Path | None = None) -> None:
        self.directory = directory or config_dir()
        self.path = self.directory / CONFIG_FILENAME

    def load(self) -> UserConfig:
        """Load the config, returning defaults if the file is missing or empty.

        A file that is not valid YAML or does not match UserConfig is
        reported as a warning and ignored; the next save replaces it.
        """
        if not self.path.exists():
            return UserConfig()
        try:
            raw = yaml.safe_load(self.path.read_text(encoding="utf-8"))
            if raw is None:
                return UserConfig()
            return UserConfig.model_validate(raw)
        except (yaml.YAMLError, ValidationError) as exc:
            report.warn(f"Ignoring invalid config file {self.path}: {exc}")
            return UserConfig()

    def save(self, config: UserConfig) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        content = yaml.safe_dump(config.model_dump(mode="json"), sort_keys=True)
        tmp_path = self.path.with_suffix(".yaml.tmp")
        tmp_path.write_text(content, encoding="utf-8")
        tmp_path.replace(self.path)

    def get_package_manager(self) -> PackageManager | None:
        return self.load().package_manager

    def set_package_manager(self, manager: PackageManager) -> None:
        config = self.load().model_copy(update={"package_manager": manager})
        self.save(config)

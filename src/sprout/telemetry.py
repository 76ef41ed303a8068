"""Fire-and-forget usage telemetry.

Events are always kept in memory for the lifetime of the process.
When the user has opted in (telemetry_enabled in config.yaml) and
SPROUT_TELEMETRY_DISABLED is not set, each event is also appended as
a JSON line to events.jsonl in the user data directory. Write failures
are reported at debug level and never interrupt the workflow.
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

from sprout import __version__
from sprout.models.config import ConfigStore
from sprout.models.telemetry import TelemetryEvent
from sprout.reporter import report

EVENTS_FILENAME = "events.jsonl"


def data_dir() -> Path:
    """Return the directory holding events.jsonl (SPROUT_DATA_DIR overrides)."""
    override = os.environ.get("SPROUT_DATA_DIR")
    if override:
        return Path(override)
    return Path(user_data_dir("sprout"))


def _disabled_by_env() -> bool:
    return os.environ.get("SPROUT_TELEMETRY_DISABLED", "").lower() in ("true", "1", "yes")


class Telemetry:
    """Collects CLI and error events.

    Args:
        enabled: Persist events to disk. If None, read the opt-in from
            the user config store.
        directory: Where events.jsonl lives. Defaults to data_dir().
    """

    def __init__(self, enabled: bool | None = None, directory: Path | None = None) -> None:
        self._enabled = enabled
        self._directory = directory
        self.events: list[TelemetryEvent] = []

    @property
    def enabled(self) -> bool:
        if _disabled_by_env():
            return False
        if self._enabled is None:
            try:
                self._enabled = ConfigStore().load().telemetry_enabled
            except OSError as exc:
                report.debug(f"telemetry: could not read config, disabling: {exc}")
                self._enabled = False
        return self._enabled

    @property
    def events_path(self) -> Path:
        return (self._directory or data_dir()) / EVENTS_FILENAME

    def track_cli(self, name: str, tags: dict[str, str] | None = None) -> None:
        self._record(TelemetryEvent(name=name, tags=tags or {}, sprout_version=__version__))

    def track_error(self, tag: str) -> None:
        self._record(
            TelemetryEvent(name="ERROR", tags={"error": tag}, sprout_version=__version__)
        )

    def _record(self, event: TelemetryEvent) -> None:
        self.events.append(event)
        report.debug(f"telemetry: {event.name} {event.tags}")
        if not self.enabled:
            return
        try:
            self.events_path.parent.mkdir(parents=True, exist_ok=True)
            with self.events_path.open("a", encoding="utf-8") as fh:
                fh.write(event.model_dump_json() + "\n")
        except OSError as exc:
            report.debug(f"telemetry: could not write {self.events_path}: {exc}")


telemetry = Telemetry()


def track_cli(name: str, tags: dict[str, str] | None = None) -> None:
    telemetry.track_cli(name, tags)


def track_error(tag: str) -> None:
    telemetry.track_error(tag)

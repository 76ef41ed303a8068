"""Sprout data models - re-exports all public model classes."""

from sprout.models.config import ConfigStore, PackageManager, UserConfig
from sprout.models.telemetry import TelemetryEvent

__all__ = [
    "ConfigStore",
    "PackageManager",
    "TelemetryEvent",
    "UserConfig",
]

"""reduxrc - locate, scaffold, read and write a project's ``.reduxrc`` settings."""

__version__ = "0.1.0"

from .config import ProjectConfig
from .errors import (
    SettingsError,
    SettingsIOError,
    SettingsNotFoundError,
    SettingsParseError,
)
from .models import ProjectSettings, SettingsSource

__all__ = [
    "ProjectConfig",
    "ProjectSettings",
    "SettingsError",
    "SettingsIOError",
    "SettingsNotFoundError",
    "SettingsParseError",
    "SettingsSource",
]

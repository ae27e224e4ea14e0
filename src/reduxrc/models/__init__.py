"""Settings models - the project settings dotfile and its sources."""

from .project_settings import ProjectSettings, SettingsSource

__all__ = [
    "ProjectSettings",
    "SettingsSource",
]

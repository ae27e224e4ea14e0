"""Per-project settings backed by a ``.reduxrc`` dotfile."""

from __future__ import annotations

import copy
import json
import logging
import shutil
from enum import Enum
from pathlib import Path, PurePath
from typing import Any, Final

from reduxrc.config import DEFAULT_TEMPLATE_NAME, ProjectConfig
from reduxrc.errors import SettingsIOError, SettingsParseError
from reduxrc.utils.fs import file_exists, read_file

SETTINGS_FILE_NAME: Final = ".reduxrc"
MANIFEST_FILE_NAME: Final = "package.json"
MANIFEST_KEY: Final = "redux"
TEMPLATES_DIR_NAME: Final = "templates"

logger: Final = logging.getLogger(__name__)


class SettingsSource(Enum):
    """Where the settings of a ProjectSettings instance were loaded from."""

    DOTFILE = "dotfile"
    MANIFEST = "manifest"
    TEMPLATE = "template"


def _parse_object(content: str, path: Path) -> dict[str, Any]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise SettingsParseError("Malformed JSON", path, exc) from exc
    if not isinstance(data, dict):
        raise SettingsParseError("Settings must be a JSON object", path)
    return data


def template_path_for(base_path: Path, template_name: str) -> Path:
    """Resolve a template name to its file under ``base_path/templates``."""
    return Path(base_path) / TEMPLATES_DIR_NAME / PurePath(template_name).name


def copy_template(template_path: Path, settings_path: Path) -> None:
    """Copy a template file byte for byte to the dotfile, overwriting it.

    Args:
        template_path: Template to copy
        settings_path: Dotfile to create or replace

    Raises:
        SettingsIOError: If the template is not a regular file or the copy fails
    """
    if not Path(template_path).is_file():
        raise SettingsIOError("Template not found", template_path)
    try:
        shutil.copyfile(template_path, settings_path)
    except OSError as exc:
        raise SettingsIOError(
            f"Unable to copy template {template_path}", settings_path, exc
        ) from exc
    logger.info("Created %s from %s", settings_path, template_path)


class ProjectSettings:
    """Settings for a single project.

    On construction the settings are resolved once, in this order:

    1. the ``.reduxrc`` dotfile in ``base_path``, if present;
    2. the ``redux`` key of ``base_path/package.json``, if present
       (nothing is written to disk in this case);
    3. otherwise the template is copied to the dotfile and loaded.

    From then on the in-memory mapping is authoritative. Changes made with
    :meth:`set_setting` and :meth:`set_all_settings` reach the dotfile only
    when :meth:`save` is called.

    Examples:
        settings = ProjectSettings(Path("/path/to/project"))
        settings.set_setting("sourceBase", "app")
        settings.save()
    """

    _settings: dict[str, Any]
    source: SettingsSource

    def __init__(self, base_path: Path, template_name: str | None = None):
        """Resolve paths and load settings.

        Args:
            base_path: Project directory
            template_name: Template location; only its file name is used
                and it is looked up under ``base_path/templates``

        Raises:
            SettingsIOError: If the template is needed but missing
            SettingsParseError: If the chosen source is not a JSON object
        """
        self._base_path = Path(base_path)
        self._template_name = template_name or DEFAULT_TEMPLATE_NAME
        self._settings_path = self._base_path / SETTINGS_FILE_NAME
        self._manifest_path = self._base_path / MANIFEST_FILE_NAME
        self._template_path = template_path_for(self._base_path, self._template_name)
        self._load_settings()

    @classmethod
    def from_config(cls, config: ProjectConfig) -> ProjectSettings:
        """Create settings for the project described by a ProjectConfig."""
        return cls(config.base_path, config.template_name)

    @property
    def base_path(self) -> Path:
        """Project directory."""
        return self._base_path

    @property
    def template_name(self) -> str:
        """Template location given at construction."""
        return self._template_name

    @property
    def settings(self) -> dict[str, Any]:
        """Copy of the current settings."""
        return self.get_all_settings()

    def settings_path(self) -> Path:
        """Path of the ``.reduxrc`` dotfile."""
        return self._settings_path

    def settings_exist(self) -> bool:
        """Check whether the dotfile is present on disk."""
        return file_exists(self._settings_path)

    def template_path(self) -> Path:
        """Path of the template used to scaffold the dotfile."""
        return self._template_path

    def build_from_template(self) -> None:
        """Copy the template to the dotfile, overwriting it.

        Raises:
            SettingsIOError: If the template is not a file or the copy fails
        """
        copy_template(self._template_path, self._settings_path)

    def _load_settings(self) -> None:
        if self.settings_exist():
            self._settings = _parse_object(read_file(self._settings_path), self._settings_path)
            self.source = SettingsSource.DOTFILE
        else:
            manifest_settings = self._read_manifest_settings()
            if manifest_settings is not None:
                self._settings = manifest_settings
                self.source = SettingsSource.MANIFEST
            else:
                self.build_from_template()
                self._settings = _parse_object(
                    read_file(self._settings_path), self._settings_path
                )
                self.source = SettingsSource.TEMPLATE
        logger.debug("Loaded %d settings from %s", len(self._settings), self.source.value)

    def _read_manifest_settings(self) -> dict[str, Any] | None:
        if not file_exists(self._manifest_path):
            return None
        manifest = _parse_object(read_file(self._manifest_path), self._manifest_path)
        if MANIFEST_KEY not in manifest:
            return None
        section = manifest[MANIFEST_KEY]
        if not isinstance(section, dict):
            raise SettingsParseError(
                f"'{MANIFEST_KEY}' key must be a JSON object", self._manifest_path
            )
        return section

    # ---- queries and mutations ----
    def get_setting(self, key: str, default: Any = None) -> Any:
        """Look up a single setting.

        Args:
            key: Setting name
            default: Value returned when the key is absent

        Returns:
            A copy of the setting value, or ``default``
        """
        return copy.deepcopy(self._settings.get(key, default))

    def get_all_settings(self) -> dict[str, Any]:
        """Return a deep copy of every setting.

        Mutating the result does not change this instance.
        """
        return copy.deepcopy(self._settings)

    def set_setting(self, key: str, value: Any) -> None:
        """Set one setting in memory to a copy of ``value``."""
        self._settings[key] = copy.deepcopy(value)

    def set_all_settings(self, new_settings: dict[str, Any]) -> None:
        """Replace every setting in memory with a copy of ``new_settings``."""
        self._settings = copy.deepcopy(dict(new_settings))

    def save(self) -> None:
        """Write the current settings to the dotfile, replacing its contents.

        Raises:
            SettingsIOError: If the dotfile cannot be written
        """
        content = json.dumps(self._settings, indent=2) + "\n"
        try:
            self._settings_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise SettingsIOError("Unable to write settings", self._settings_path, exc) from exc
        logger.info("Saved %d settings to %s", len(self._settings), self._settings_path)

"""Where a project's settings live, resolved from arguments or environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_TEMPLATE_NAME = ".reduxrc"


class ProjectConfig(BaseModel):
    """Location inputs for a ProjectSettings instance.

    ``base_path`` is the project directory holding the dotfile, the
    ``package.json`` manifest and the ``templates/`` directory.
    ``template_name`` selects which template scaffolds a missing dotfile.
    """

    BASE_PATH_ENV: ClassVar[str] = "REDUXRC_BASE_PATH"
    TEMPLATE_ENV: ClassVar[str] = "REDUXRC_TEMPLATE"

    base_path: Path = Field(default_factory=Path.cwd, description="Project directory")
    template_name: str = Field(
        DEFAULT_TEMPLATE_NAME,
        min_length=1,
        description="Template file name, looked up under <base_path>/templates",
    )

    # ---- validators ----
    @field_validator("base_path")
    @classmethod
    def validate_base_path(cls, v: Path) -> Path:
        """Ensure base_path is an existing directory and make it absolute."""
        v = v.expanduser().resolve()
        if not v.is_dir():
            raise ValueError(f"base_path is not a directory: {v}")
        return v

    @classmethod
    def load(
        cls, base_path: Path | None = None, template_name: str | None = None
    ) -> ProjectConfig:
        """Build a config from explicit values, falling back to the environment.

        Args:
            base_path: Project directory (optional, REDUXRC_BASE_PATH or cwd if None)
            template_name: Template name (optional, REDUXRC_TEMPLATE or default if None)

        Returns:
            Validated ProjectConfig object

        Raises:
            RuntimeError: If the resulting configuration is invalid
        """
        load_dotenv()

        data: dict[str, object] = {}
        env_base = os.environ.get(cls.BASE_PATH_ENV)
        if base_path is not None:
            data["base_path"] = base_path
        elif env_base:
            data["base_path"] = Path(env_base)

        env_template = os.environ.get(cls.TEMPLATE_ENV)
        if template_name is not None:
            data["template_name"] = template_name
        elif env_template:
            data["template_name"] = env_template

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err

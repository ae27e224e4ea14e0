"""Command-line interface for reading and writing project settings."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer

from reduxrc.config import ProjectConfig
from reduxrc.errors import SettingsError
from reduxrc.models.project_settings import (
    SETTINGS_FILE_NAME,
    ProjectSettings,
    copy_template,
    template_path_for,
)

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Project .reduxrc settings CLI", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "reduxrc.cli"

BASE_PATH_OPTION = typer.Option(
    None, "--base-path", "-b", file_okay=False, help="Project directory (default: cwd)"
)
TEMPLATE_OPTION = typer.Option(None, "--template", "-t", help="Template name under templates/")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
FORCE_OPTION = typer.Option(False, "--force", "-f", help="Overwrite an existing .reduxrc")
KEY_ARGUMENT = typer.Argument(..., help="Setting name")
VALUE_ARGUMENT = typer.Argument(..., help="Setting value, parsed as JSON when possible")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _fail(exc: Exception) -> typer.Exit:
    typer.secho(str(exc), fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def _load_config(base_path: Path | None, template: str | None) -> ProjectConfig:
    try:
        return ProjectConfig.load(base_path, template)
    except RuntimeError as exc:
        raise _fail(exc) from exc


def _open_settings(base_path: Path | None, template: str | None) -> ProjectSettings:
    config = _load_config(base_path, template)
    try:
        return ProjectSettings.from_config(config)
    except SettingsError as exc:
        raise _fail(exc) from exc


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@app.command()
def path(
    base_path: Path | None = BASE_PATH_OPTION,
    template: str | None = TEMPLATE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show where the settings and template files live."""
    _configure_logging(debug)
    settings = _open_settings(base_path, template)
    typer.echo(f"settings: {settings.settings_path()}")
    typer.echo(f"template: {settings.template_path()}")
    typer.echo(f"source:   {settings.source.value}")


@app.command("get")
def get_setting(
    key: str = KEY_ARGUMENT,
    base_path: Path | None = BASE_PATH_OPTION,
    template: str | None = TEMPLATE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print one setting as JSON."""
    _configure_logging(debug)
    settings = _open_settings(base_path, template)
    if key not in settings.get_all_settings():
        typer.secho(f"No such setting: {key}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(settings.get_setting(key)))


@app.command("set")
def set_setting(
    key: str = KEY_ARGUMENT,
    value: str = VALUE_ARGUMENT,
    base_path: Path | None = BASE_PATH_OPTION,
    template: str | None = TEMPLATE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Change one setting and save it to .reduxrc."""
    _configure_logging(debug)
    settings = _open_settings(base_path, template)
    settings.set_setting(key, _parse_value(value))
    try:
        settings.save()
    except SettingsError as exc:
        raise _fail(exc) from exc
    typer.secho(f"{key} saved to {settings.settings_path()}", fg=typer.colors.GREEN)


@app.command("list")
def list_settings(
    base_path: Path | None = BASE_PATH_OPTION,
    template: str | None = TEMPLATE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print all settings as JSON."""
    _configure_logging(debug)
    settings = _open_settings(base_path, template)
    typer.echo(json.dumps(settings.get_all_settings(), indent=2))


@app.command()
def init(
    base_path: Path | None = BASE_PATH_OPTION,
    template: str | None = TEMPLATE_OPTION,
    force: bool = FORCE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Create .reduxrc from the template."""
    _configure_logging(debug)
    config = _load_config(base_path, template)
    target = config.base_path / SETTINGS_FILE_NAME
    if target.exists() and not force:
        typer.secho(f"{target} already exists (use --force)", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    # The existing dotfile is never parsed here.
    try:
        copy_template(template_path_for(config.base_path, config.template_name), target)
    except SettingsError as exc:
        raise _fail(exc) from exc
    typer.secho(f"Created {target}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()

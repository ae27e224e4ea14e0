"""Filesystem helpers used to probe and read settings files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

from reduxrc.errors import SettingsNotFoundError

logger: Final = logging.getLogger(__name__)


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Check whether anything exists at a path.

    Args:
        path: Path to check

    Returns:
        True if a filesystem entry exists, False otherwise
    """
    return Path(path).exists()


def read_file(path: str | os.PathLike[str]) -> str:
    """Read a text file in full.

    Relative paths are resolved against the current working directory.

    Args:
        path: Path to read

    Returns:
        File contents decoded as UTF-8

    Raises:
        SettingsNotFoundError: If the path is not a readable file
    """
    target = Path(path)
    if not target.is_absolute():
        target = Path.cwd() / target

    try:
        content = target.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsNotFoundError("File not found", target, exc) from exc

    logger.debug("Read %d characters from %s", len(content), target)
    return content

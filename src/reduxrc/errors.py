"""Exception classes for project settings handling.

This module defines a small hierarchy of exception classes for the
failure conditions met while locating, reading and writing settings.
Each subclass also derives from the matching built-in exception so
callers can catch either.
"""

from __future__ import annotations

from pathlib import Path


class SettingsError(Exception):
    """Error while reading or writing project settings.

    Includes the offending path and the underlying exception when one
    was caught.
    """

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: File the error relates to, if any
            original_error: The original exception that was caught
        """
        text = f"{message}: {path}" if path is not None else message
        super().__init__(text)
        self.message: str = message
        self.path: Path | None = Path(path) if path is not None else None
        self.original_error: Exception | None = original_error


class SettingsNotFoundError(SettingsError, FileNotFoundError):
    """Raised when a file cannot be opened for reading."""

    pass


class SettingsIOError(SettingsError, OSError):
    """Raised when the template is missing or the dotfile cannot be written."""

    pass


class SettingsParseError(SettingsError, ValueError):
    """Raised when a settings source is not a valid JSON object."""

    pass

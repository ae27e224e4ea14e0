"""Common utility functions for the reduxrc package."""

from reduxrc.utils.fs import file_exists, read_file

__all__ = [
    "file_exists",
    "read_file",
]

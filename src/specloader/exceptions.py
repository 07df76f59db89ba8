"""Custom exceptions for specloader."""

from pathlib import Path


class SpecLoaderError(Exception):
    """Base exception for specloader."""


class FilesystemAccessError(SpecLoaderError):
    """A path could not be listed or stat'ed during a scan.

    The underlying OSError is available as __cause__.
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot access {path}: {reason}")


class SettingsValidationError(SpecLoaderError):
    """Settings file is invalid or malformed."""


class SettingsVersionError(SpecLoaderError):
    """Settings file version is unsupported."""

"""Tests for specloader exceptions."""

from pathlib import Path

from specloader.exceptions import FilesystemAccessError
from specloader.exceptions import SpecLoaderError


class TestFilesystemAccessError:
    """Tests for FilesystemAccessError."""

    def test_formats_message_with_path_and_reason(self):
        """Test that the message names the path and the reason."""
        error = FilesystemAccessError(Path("/specs/locked"), "Permission denied")

        assert str(error) == "Cannot access /specs/locked: Permission denied"
        assert error.path == Path("/specs/locked")
        assert error.reason == "Permission denied"

    def test_is_spec_loader_error(self):
        """Test that callers can catch the base class."""
        assert issubclass(FilesystemAccessError, SpecLoaderError)

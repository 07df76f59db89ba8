"""Spec file loading entry points."""

from pathlib import Path

from specloader.files import is_spec_file
from specloader.files import list_matching_files
from specloader.ordering import promote_named_file_first

LOGIN_SPEC_FILENAME = "LoginTest.js"


def get_all_spec_files(root: Path | str) -> list[Path]:
    """Find every spec (.js) file under root.

    Args:
        root: Directory containing spec files

    Returns:
        Absolute paths in traversal order (not sorted); empty if none found

    Raises:
        FilesystemAccessError: If root or anything below it is unreadable
    """
    return list_matching_files(root, is_spec_file)


def get_all_spec_files_with_specified_file(
    root: Path | str, login_filename: str
) -> list[Path]:
    """Find every spec file under root, with login_filename's matches first.

    Args:
        root: Directory containing spec files
        login_filename: Substring of the path(s) to list first

    Raises:
        FilesystemAccessError: If root or anything below it is unreadable
        ValueError: If login_filename is empty
    """
    return promote_named_file_first(get_all_spec_files(root), login_filename)


def get_all_spec_files_with_login_first(root: Path | str) -> list[Path]:
    """Find every spec file under root, with LoginTest.js first."""
    return get_all_spec_files_with_specified_file(root, LOGIN_SPEC_FILENAME)

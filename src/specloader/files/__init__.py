"""Filesystem operations for specloader."""

from specloader.files.discover import SPEC_FILE_SUFFIX
from specloader.files.discover import is_spec_file
from specloader.files.discover import list_matching_files

__all__ = [
    "SPEC_FILE_SUFFIX",
    "is_spec_file",
    "list_matching_files",
]

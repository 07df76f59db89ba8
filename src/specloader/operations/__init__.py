"""High-level operations for specloader."""

from specloader.operations.load import LOGIN_SPEC_FILENAME
from specloader.operations.load import get_all_spec_files
from specloader.operations.load import get_all_spec_files_with_login_first
from specloader.operations.load import get_all_spec_files_with_specified_file

__all__ = [
    "LOGIN_SPEC_FILENAME",
    "get_all_spec_files",
    "get_all_spec_files_with_login_first",
    "get_all_spec_files_with_specified_file",
]

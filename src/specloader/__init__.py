"""Recursive discovery of JavaScript spec files for test runners."""

from specloader.operations import LOGIN_SPEC_FILENAME
from specloader.operations import get_all_spec_files
from specloader.operations import get_all_spec_files_with_login_first
from specloader.operations import get_all_spec_files_with_specified_file

__version__ = "0.1.0"

__all__ = [
    "LOGIN_SPEC_FILENAME",
    "__version__",
    "get_all_spec_files",
    "get_all_spec_files_with_login_first",
    "get_all_spec_files_with_specified_file",
]

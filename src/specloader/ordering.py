"""Reordering of discovered spec files."""

from collections.abc import Sequence
from pathlib import Path


def promote_named_file_first(files: Sequence[Path], target: str) -> list[Path]:
    """Move every path containing target to the front of the list.

    This is a stable partition: matching paths keep their relative order,
    and so do the rest. Containment is a plain substring test on the whole
    path, so a directory named after target also promotes its files.

    Args:
        files: Paths as returned by list_matching_files()
        target: Substring identifying the file(s) to promote, e.g. "LoginTest.js"

    Returns:
        New list with the same elements. Equal to files if nothing matches.

    Raises:
        ValueError: If target is empty (it would match every path)
    """
    if not target:
        raise ValueError("Filename to promote must not be empty")

    # sorted() is stable, so False (match) sorts first without other reordering
    return sorted(files, key=lambda path: target not in str(path))

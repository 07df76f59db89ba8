"""Spec file discovery."""

import logging
import os
import stat
from collections.abc import Callable
from pathlib import Path

from specloader.exceptions import FilesystemAccessError

logger = logging.getLogger(__name__)

SPEC_FILE_SUFFIX = ".js"


def is_spec_file(filename: str) -> bool:
    """Check whether a base filename names a spec file.

    Matching is a case-insensitive suffix check, so "Test.JS" and
    "test.spec.js" match while "test.json" and "test_js" do not.
    """
    return filename.lower().endswith(SPEC_FILE_SUFFIX)


def list_matching_files(
    root: Path | str, predicate: Callable[[str], bool]
) -> list[Path]:
    """Recursively collect files under root whose name satisfies predicate.

    Args:
        root: Directory to scan. A relative root is taken relative to the
            current working directory.
        predicate: Called with each file's base name (not its path)

    Returns:
        Absolute paths of matching files, in directory listing order.
        Subdirectories are walked depth-first where they are encountered,
        so their matches are contiguous. The order is not sorted.

    Raises:
        FilesystemAccessError: If root or any path below it cannot be
            listed or stat'ed. The scan is aborted, no partial result.
    """
    # Lexical normalization: ".." is collapsed, symlinks are not resolved
    root = Path(os.path.normpath(Path(root).absolute()))
    logger.debug("Scanning for spec files under %s", root)

    matches: list[Path] = []
    _collect(root, predicate, matches)

    logger.info("Found %s matching files under %s", len(matches), root)
    return matches


def _collect(
    directory: Path, predicate: Callable[[str], bool], matches: list[Path]
) -> None:
    for entry in _list_directory(directory):
        if _is_directory(entry):
            _collect(entry, predicate, matches)
        elif predicate(entry.name):
            logger.debug("Matched %s", entry)
            matches.append(entry)


def _list_directory(directory: Path) -> list[Path]:
    try:
        # iterdir() is lazy; materialize so listing errors surface here
        return list(directory.iterdir())
    except OSError as e:
        raise FilesystemAccessError(directory, e.strerror or str(e)) from e


def _is_directory(path: Path) -> bool:
    # stat() follows symlinks, and a dangling symlink is an error
    try:
        return stat.S_ISDIR(path.stat().st_mode)
    except OSError as e:
        raise FilesystemAccessError(path, e.strerror or str(e)) from e

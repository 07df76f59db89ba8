"""Output formatting for specloader commands."""

from collections.abc import Sequence
from pathlib import Path

import typer

from specloader.exceptions import FilesystemAccessError
from specloader.settings import Settings


def print_spec_files(files: Sequence[Path], root: Path) -> None:
    """Print spec file paths to stdout, one per line.

    Paths go to stdout unadorned so the output can be piped to a runner.
    The notice for an empty result goes to stderr.

    Args:
        files: Absolute spec file paths, in the order to print them
        root: Directory that was scanned, for the empty-result notice
    """
    if not files:
        typer.secho(
            f"No spec files found under {_display_path(root)}",
            fg=typer.colors.YELLOW,
            err=True,
        )
        return

    for path in files:
        typer.echo(str(path))


def print_settings(settings: Settings, path: Path) -> None:
    """Print current settings to stdout."""
    typer.secho(f"Settings file: {_display_path(path)}", fg=typer.colors.BRIGHT_BLACK)
    root = _display_path(settings.default_root) if settings.default_root else "(cwd)"
    typer.echo(f"  login_filename: {settings.login_filename}")
    typer.echo(f"  default_root:   {root}")


def print_access_error(error: FilesystemAccessError) -> None:
    """Print a filesystem access error to stderr."""
    typer.secho(
        f"✗ Cannot read {_display_path(error.path)}: {error.reason}",
        fg=typer.colors.RED,
        bold=True,
        err=True,
    )
    typer.secho("   Scan aborted; no spec files were listed.", err=True)


def _display_path(path: Path) -> str:
    """Abbreviate paths under the home directory as ~/..."""
    home = Path.home()
    if not path.is_absolute() or not path.is_relative_to(home):
        return str(path)
    return str(Path("~", path.relative_to(home)))

"""Command-line interface for specloader."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from specloader import __version__
from specloader.exceptions import FilesystemAccessError
from specloader.exceptions import SettingsValidationError
from specloader.exceptions import SettingsVersionError
from specloader.exceptions import SpecLoaderError
from specloader.operations import get_all_spec_files
from specloader.operations import get_all_spec_files_with_specified_file
from specloader.output import print_access_error
from specloader.output import print_settings
from specloader.output import print_spec_files
from specloader.settings import Settings

app = typer.Typer(help="Find JavaScript spec files for a test runner")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"specloader {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log scan details to stderr")
    ] = False,
) -> None:
    """Find JavaScript spec files for a test runner."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("list")
def list_specs(
    root: Annotated[
        Path | None,
        typer.Argument(help="Directory to scan (default: settings, then cwd)"),
    ] = None,
    login_first: Annotated[
        bool, typer.Option("--login-first", "-l", help="List the login spec first")
    ] = False,
    login_file: Annotated[
        str | None,
        typer.Option(help="Filename to list first (implies --login-first)"),
    ] = None,
) -> None:
    """List spec files under a directory, one absolute path per line."""
    promote = login_first or login_file is not None
    try:
        # Settings only supply defaults; skip them when everything was given
        if root is None or (promote and not login_file):
            settings = Settings.load(Settings.default_path())
            if root is None:
                root = settings.default_root or Path.cwd()
            if promote and not login_file:
                login_file = settings.login_filename

        if promote:
            files = get_all_spec_files_with_specified_file(root, login_file)
        else:
            files = get_all_spec_files(root)

        print_spec_files(files, root)
    except FilesystemAccessError as e:
        print_access_error(e)
        raise typer.Exit(1) from None
    except (SettingsValidationError, SettingsVersionError) as e:
        typer.secho(f"✗ Settings error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except ValueError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except SpecLoaderError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None


@app.command()
def config(
    login_file: Annotated[
        str | None, typer.Option(help="Default filename for --login-first")
    ] = None,
    default_root: Annotated[
        Path | None, typer.Option(help="Directory scanned when none is given")
    ] = None,
) -> None:
    """Show or update saved settings."""
    path = Settings.default_path()
    try:
        settings = Settings.load(path)

        if login_file is None and default_root is None:
            print_settings(settings, path)
            return

        if login_file is not None:
            if not login_file:
                raise ValueError("Login filename must not be empty")
            settings.login_filename = login_file
        if default_root is not None:
            settings.default_root = default_root.absolute()

        settings.save(path)
        typer.secho(f"✓ Saved settings to {path}", fg=typer.colors.GREEN, bold=True)
    except (SettingsValidationError, SettingsVersionError) as e:
        typer.secho(f"✗ Settings error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except ValueError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except PermissionError as e:
        typer.secho(
            f"✗ Permission denied: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except OSError as e:
        typer.secho(
            f"✗ Cannot write settings: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None


def main() -> None:
    """Main entry point for the specloader CLI."""
    app()


if __name__ == "__main__":
    main()

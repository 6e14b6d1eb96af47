"""Command-line interface for project root location.

Usage:
    modroot root
    modroot root --marker pyproject.toml --start src/pkg/module.py
    modroot module
    modroot relpath /home/me/project /home/me/project/pkg/sub/file.go
    modroot import-path pkg/destination/file.go
    modroot --config modroot.yaml --verbose root
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml

from modroot import __version__
from modroot.config import LocatorConfig, load_config
from modroot.errors import LocatorError
from modroot.locator import Locator
from modroot.utils.logging import setup_logging

app = typer.Typer(
    add_completion=False,
    help="Locate project roots and derive package paths relative to them.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Optional[list[Path]] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML config file (repeatable, later files override earlier ones)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable DEBUG logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write every DEBUG event as JSON lines to this file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
    ),
) -> None:
    """Locate project roots from the filesystem."""
    if version:
        typer.echo(f"modroot version {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    setup_logging(verbose=verbose, log_file=log_file)
    try:
        ctx.obj = load_config(config) if config else LocatorConfig.from_env()
    except (OSError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: invalid config: {e}", err=True)
        raise typer.Exit(code=1)


def _locator(ctx: typer.Context, **overrides) -> Locator:
    """Build a Locator from the loaded config and non-empty command overrides.

    Overrides are validated like config file values; invalid ones end the
    command with exit code 1.
    """
    config: LocatorConfig = ctx.obj if ctx.obj is not None else LocatorConfig.from_env()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        try:
            config = LocatorConfig.model_validate({**config.model_dump(), **updates})
        except ValueError as e:
            _fail(e)
    return Locator(config)


def _search_start(path: Path, marker_file: str) -> Path:
    # The search begins at the parent of the start path; for a directory,
    # start from an entry inside it so the directory itself is examined.
    if path.is_dir():
        return path / marker_file
    return path


def _fail(error: Exception, exit_code: int = 1) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=exit_code)


@app.command("root")
def root(
    ctx: typer.Context,
    marker: Optional[str] = typer.Option(
        None, "--marker", "-m", help="Marker file name (default from config)"
    ),
    start: Path = typer.Option(
        Path("."), "--start", "-s", help="File or directory to start searching from"
    ),
    boundary: Optional[str] = typer.Option(
        None, "--boundary", "-b", help="Directory the search must not go beyond"
    ),
) -> None:
    """Print the nearest ancestor directory containing the marker file."""
    locator = _locator(ctx, boundary=boundary, marker_file=marker)
    marker_file = locator.config.marker_file
    try:
        found = locator.find_root_dir(marker_file, _search_start(start, marker_file))
    except LocatorError as e:
        _fail(e, e.exit_code)
    typer.echo(str(found))


@app.command("module")
def module(
    ctx: typer.Context,
    root_dir: Optional[Path] = typer.Argument(
        None, help="Project root (default: discovered from the current directory)"
    ),
) -> None:
    """Print the module identity declared in the root's declaration file."""
    locator = _locator(ctx)
    try:
        if root_dir is None:
            marker_file = locator.config.marker_file
            root_dir = locator.find_root_dir(marker_file, _search_start(Path("."), marker_file))
        identity = locator.read_module_identity(root_dir)
    except LocatorError as e:
        _fail(e, e.exit_code)
    except OSError as e:
        _fail(e)
    typer.echo(identity)


@app.command("relpath")
def relpath(
    ctx: typer.Context,
    root_dir: Path = typer.Argument(..., help="Project root"),
    full_path: Path = typer.Argument(..., help="Path below the root"),
) -> None:
    """Print the containing directory of PATH relative to ROOT."""
    locator = _locator(ctx)
    try:
        result = locator.relative_package_path(root_dir, full_path)
    except LocatorError as e:
        _fail(e, e.exit_code)
    typer.echo(result.as_posix())


@app.command("import-path")
def import_path(
    ctx: typer.Context,
    full_path: Path = typer.Argument(..., help="File inside a package"),
) -> None:
    """Print the import path of the package containing PATH."""
    locator = _locator(ctx)
    try:
        result = locator.module_import_path(full_path)
    except LocatorError as e:
        _fail(e, e.exit_code)
    except OSError as e:
        _fail(e)
    typer.echo(result)


def main() -> None:
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()

"""Command line interface for file organizer.

Every command writes exactly one JSON document to stdout. Diagnostics go
to stderr through logging.
"""

import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .core.organizer import DirectoryOrganizer
from .core.populator import DirectoryPopulator
from .core.reporter import Reporter
from .core.workspace import list_workspace
from .exceptions import ConfigurationError, FileOrganizerError
from .models.config import OrganizerConfig, load_config
from .utils.security import PathValidationError, resolve_in_workspace

err_console = Console(stderr=True)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _build_config(config_path: Optional[Path], **overrides: Any) -> OrganizerConfig:
    config = load_config(config_path) if config_path else OrganizerConfig()
    return config.with_overrides(**overrides)


def _emit(payload: Dict[str, Any], exit_code: int = EXIT_OK) -> None:
    stdout = click.get_binary_stream('stdout')
    stdout.write(Reporter.to_bytes(payload))
    stdout.flush()
    if exit_code != EXIT_OK:
        sys.exit(exit_code)


def _fail(message: str, exit_code: int) -> None:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    _emit(Reporter.error_payload(message), exit_code)


config_option = click.option(
    '--config',
    'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='JSON configuration file'
)
seed_option = click.option(
    '--seed',
    type=int,
    help='Seed for demo asset and template selection'
)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', is_flag=True, help='Log every operation to stderr')
def cli(verbose: bool):
    """Sort files into category folders and report every filesystem action as JSON."""
    _configure_logging(verbose)


@cli.command('create-dir')
@click.argument('workspace', type=click.Path(file_okay=False, path_type=Path))
@click.argument('dir_name')
@click.argument('filenames', nargs=-1)
@click.option(
    '--assets',
    type=click.Path(file_okay=False, path_type=Path),
    help='Asset pool to copy from when no filenames are given'
)
@config_option
@seed_option
def create_dir(
    workspace: Path,
    dir_name: str,
    filenames: Tuple[str, ...],
    assets: Optional[Path],
    config_path: Optional[Path],
    seed: Optional[int]
):
    """Create DIR_NAME inside WORKSPACE with an empty file per FILENAME.

    Without FILENAMES one random asset per category is copied in from the
    asset pool instead.
    """
    try:
        cfg = _build_config(config_path, assets_root=assets, seed=seed)
        if not filenames and cfg.assets_root is None:
            raise ConfigurationError("create-dir needs filenames or an assets root")

        populator = DirectoryPopulator(workspace, cfg, random.Random(cfg.seed))
        if filenames:
            outcome = populator.create(dir_name, filenames)
        else:
            outcome = populator.populate_from_assets(dir_name)
    except (ConfigurationError, PathValidationError) as e:
        _fail(str(e), EXIT_USAGE)
        return
    except FileOrganizerError as e:
        _fail(str(e), EXIT_FAILURE)
        return

    _emit(Reporter.populate_payload(outcome), EXIT_OK if outcome.ok else EXIT_FAILURE)


@cli.command()
@click.argument('workspace', type=click.Path(file_okay=False, path_type=Path))
@click.argument('subpath', required=False, default='')
@click.argument('assets', required=False, type=click.Path(file_okay=False, path_type=Path))
@config_option
@seed_option
def organize(
    workspace: Path,
    subpath: str,
    assets: Optional[Path],
    config_path: Optional[Path],
    seed: Optional[int]
):
    """Move the files of WORKSPACE/SUBPATH into category folders.

    With ASSETS given, files that were empty are filled with demo content.
    """
    try:
        cfg = _build_config(config_path, assets_root=assets, seed=seed)
        base_path = resolve_in_workspace(workspace, subpath, allow_empty=True)
        outcome = DirectoryOrganizer(base_path, cfg, random.Random(cfg.seed)).run()
    except (ConfigurationError, PathValidationError) as e:
        _fail(str(e), EXIT_USAGE)
        return

    _emit(Reporter.organize_payload(outcome), EXIT_OK if outcome.ok else EXIT_FAILURE)


@cli.command('list-workspace')
@click.argument('workspace', type=click.Path(file_okay=False, path_type=Path))
def list_workspace_command(workspace: Path):
    """List the directories directly inside WORKSPACE."""
    try:
        listing = list_workspace(workspace)
    except OSError as e:
        _fail(str(e), EXIT_FAILURE)
        return

    _emit(listing)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()

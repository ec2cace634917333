"""
Command-line interface for license-headers.

Adds or updates license headers in the files matched by ``--glob``, or in
the git changed & untracked files when no glob is given.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.text import Text

from license_headers import __version__, config
from license_headers.discovery import resolve_files
from license_headers.exceptions import LicenseHeaderError
from license_headers.headers import validate_license_headers
from license_headers.processor import FileStatus, process_files

console = Console(highlight=False, soft_wrap=True)
logger = logging.getLogger(__name__)

STATUS_STYLES = {
    FileStatus.UNCHANGED: "bright_blue",
    FileStatus.ADDED: "green",
    FileStatus.UPDATED: "yellow",
    FileStatus.ERROR: "red",
    FileStatus.UNTOUCHED: "bright_black",
}


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose or config.DEBUG else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@click.command()
@click.version_option(__version__, prog_name="license-headers")
@click.option(
    "--glob",
    "globs",
    multiple=True,
    metavar="PATTERN",
    help=(
        "If presented, add/update license header to the matched files from the "
        "current directory. Otherwise, process the current git changed & unstaged files."
    ),
)
@click.option(
    "--no-add",
    is_flag=True,
    default=False,
    help="If presented, only update existing license headers.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(globs, no_add, verbose) -> None:
    """Add or update license headers in source files."""
    setup_logging(verbose)
    try:
        validate_license_headers()
        filenames = resolve_files(list(globs))
    except LicenseHeaderError as e:
        raise click.ClickException(str(e)) from e

    logger.debug(f"Processing {len(filenames)} files")
    for report in process_files(filenames, add=not no_add):
        console.print(Text(report.label, style=STATUS_STYLES[report.status]))


def main() -> None:
    cli()

"""
fabricmod CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
import shutil

import typer

from fabricmod._version import get_version


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        git_path = shutil.which("git")
        git_status = git_path if git_path else "✗ Not found (required to clone templates)"

        typer.echo(f"fabricmod version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Git:           {git_status}")

        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send debug records to stderr when ``--verbose`` is given."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

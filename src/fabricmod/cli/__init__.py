"""
fabricmod CLI Package.

- project.py: Mod creation commands
- utils.py: Shared utilities
"""

import typer

from fabricmod.cli.project import new_command
from fabricmod.cli.utils import version_callback

app = typer.Typer(
    help="fabricmod – create Fabric mods from the example template",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """fabricmod CLI main callback for global options."""
    pass


app.command(name="new")(new_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]

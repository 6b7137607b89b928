"""
Project commands for fabricmod CLI.

- new: Create a new mod from the Fabric example template
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from fabricmod.cli.utils import configure_logging
from fabricmod.core.errors import EXIT_CODES, FabricmodError
from fabricmod.core.init import DEFAULT_ENTRYPOINT, build_options, create_mod

console = Console()
err_console = Console(stderr=True)


def new_command(
    path: Path = typer.Argument(..., help="Directory to create the mod in (must not exist)"),
    mod_id: str | None = typer.Option(
        None, "--id", "-i", help="Mod id (defaults to the directory name)"
    ),
    name: str | None = typer.Option(
        None, "--name", "-n", help="Display name (defaults to the mod id in title case)"
    ),
    mc_version: str | None = typer.Option(
        None, "--mc-version", "-V", help="Minecraft version of the template, e.g. 1.19"
    ),
    kotlin: bool = typer.Option(False, "--kotlin", "-k", help="Use Kotlin instead of Java"),
    main_class: str = typer.Option(
        DEFAULT_ENTRYPOINT, "--main", "-m", help="Package and class name of the main class"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
) -> None:
    """
    Create a new Fabric mod.

    Clones the example mod, resets its git history and renames the package,
    main class, mod id and assets.

    Examples:
        fabricmod new ./my-mod
        fabricmod new ./my-mod --mc-version 1.19 --main com.example.MyMod
        fabricmod new ./my-mod --kotlin --name "My Mod"
    """
    configure_logging(verbose)

    try:
        options = build_options(
            target_dir=path,
            mod_id=mod_id,
            display_name=name,
            minecraft_version=mc_version,
            kotlin=kotlin,
            entrypoint=main_class,
        )

        def progress(msg: str) -> None:
            typer.echo(msg)

        project_dir = create_mod(options, progress_callback=progress)

    except FabricmodError as e:
        err_console.print(
            f"[red]Mod creation failed:[/red] {escape(e.message)}",
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(code=EXIT_CODES[e.kind])

    console.print(
        f"\n[green]✓ Mod created at: {escape(str(project_dir))}[/green]",
        highlight=False,
        soft_wrap=True,
    )
    typer.echo("\nNext steps:")
    typer.echo(f"  cd {path}")
    typer.echo("  ./gradlew runClient")

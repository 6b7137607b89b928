"""
Package and class renaming inside a cloned template.

A dotted name such as ``net.fabricmc.example.ExampleMod`` maps onto
``<project>/src/main/<module>/net/fabricmc/example/ExampleMod.<ext>``.
Renames move the directory or file, prune the directories left empty,
then rewrite textual references across the whole module.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from .errors import FileSystemError, RefactorError, ValidationError
from .files import prune_upward, replace_all
from .language import Language

logger = logging.getLogger(__name__)


# =============================================================================
# Dotted names
# =============================================================================


def dotted_to_path(name: str) -> PurePath:
    """
    Convert a dotted name to a relative path.

    Examples:
        dotted_to_path("com.example.mod")  # -> PurePath("com/example/mod")
    """
    segments = name.split(".")
    if not all(segments):
        raise ValidationError(f"Invalid dotted name: '{name}'")
    return PurePath(*segments)


def path_to_dotted(path: PurePath) -> str:
    """Inverse of :func:`dotted_to_path`."""
    return ".".join(path.parts)


def simple_name(dotted_class: str) -> str:
    """Return the class name without its package (last segment)."""
    return dotted_class.rsplit(".", 1)[-1]


def package_name(dotted_class: str) -> str:
    """Return the package containing ``dotted_class`` (empty for the default package)."""
    head, _, _ = dotted_class.rpartition(".")
    return head


def class_path(project_dir: Path, language: Language, dotted_class: str) -> Path:
    """Return the source file path for ``dotted_class`` in ``language``'s module."""
    relative = dotted_to_path(dotted_class)
    base = language.source_root(project_dir)
    return base / relative.with_name(f"{relative.name}.{language.extension}")


def class_exists(project_dir: Path, language: Language, dotted_class: str) -> bool:
    return class_path(project_dir, language, dotted_class).is_file()


# =============================================================================
# Moves
# =============================================================================


def _move(source: Path, destination: Path) -> None:
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        source.rename(destination)
    except OSError as e:
        raise FileSystemError(
            f"Failed to move {source} to {destination}: {e.strerror or e}", path=source
        ) from e


def _move_package(old_path: Path, new_path: Path) -> None:
    # A directory cannot be renamed into itself, so moving into a sub-package
    # goes through a hidden sibling first
    if old_path in new_path.parents:
        staging = old_path.with_name(f".{old_path.name}.tmp")
        _move(old_path, staging)
        _move(staging, new_path)
    else:
        _move(old_path, new_path)


def _prune(vacated: Path, base: Path) -> None:
    # Leftover empty directories are harmless, so a failure here only warns
    try:
        prune_upward(vacated, stop_at=base)
    except FileSystemError as e:
        logger.warning("Could not prune empty directories above %s: %s", vacated, e)


def rename_package(
    project_dir: Path,
    language: Language,
    old_package: str,
    new_package: str,
) -> None:
    """
    Move a package directory and update references to it.

    Every occurrence of the old dotted package in the module's text files is
    replaced, which covers package declarations, imports and string literals.

    Args:
        project_dir: Project root
        language: Module to operate on
        old_package: Existing dotted package (e.g. "net.fabricmc.example")
        new_package: Target dotted package (e.g. "com.example")

    Raises:
        RefactorError: If the old package directory does not exist or the
            new one already does
        FileSystemError: If the move or rewrite fails
    """
    base = language.source_root(project_dir)
    old_path = base / dotted_to_path(old_package)
    new_path = base / dotted_to_path(new_package)

    if not old_path.is_dir():
        raise RefactorError(f"Package '{old_package}' not found at {old_path}", path=old_path)

    if old_path != new_path:
        if new_path.exists():
            raise RefactorError(
                f"Cannot move package '{old_package}' to '{new_package}': "
                f"{new_path} already exists",
                path=new_path,
            )
        logger.debug("Moving package %s -> %s", old_path, new_path)
        _move_package(old_path, new_path)
        _prune(old_path, base)

    replace_all(base, old_package, new_package)


def rename_class(
    project_dir: Path,
    language: Language,
    old_class: str,
    new_class: str,
) -> None:
    """
    Move a class file and update references to its simple name.

    Only the simple name is rewritten; the package declaration inside the
    file is left to :func:`rename_package`, which must run first when the
    package changes too.

    Args:
        project_dir: Project root
        language: Module to operate on
        old_class: Existing dotted class (e.g. "com.example.ExampleMod")
        new_class: Target dotted class (e.g. "com.example.MyMod")

    Raises:
        RefactorError: If the old class file does not exist or the new one
            already does
        FileSystemError: If the move or rewrite fails
    """
    base = language.source_root(project_dir)
    old_path = class_path(project_dir, language, old_class)
    new_path = class_path(project_dir, language, new_class)

    if not old_path.is_file():
        raise RefactorError(f"Class '{old_class}' not found at {old_path}", path=old_path)

    if old_path != new_path:
        if new_path.exists():
            raise RefactorError(
                f"Cannot rename class '{old_class}' to '{new_class}': {new_path} already exists",
                path=new_path,
            )
        logger.debug("Moving class %s -> %s", old_path, new_path)
        _move(old_path, new_path)
        _prune(old_path, base)

    replace_all(base, simple_name(old_class), simple_name(new_class))

"""
Template acquisition.

Clones the Fabric example mod for the requested language and replaces its
history with a fresh, empty repository.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..errors import FileSystemError, GitFailedError, UnsupportedVersionError
from ..git import GitContext
from ..language import Language

logger = logging.getLogger(__name__)

CLONE_DEPTH = 1


def clone_template(
    language: Language,
    target_dir: Path,
    minecraft_version: str | None = None,
) -> None:
    """
    Clone the template for ``language`` into ``target_dir``.

    Args:
        language: Primary language of the mod
        target_dir: Destination (must not exist or be empty)
        minecraft_version: Template branch to check out

    Raises:
        UnsupportedVersionError: If git fails with a version branch requested
        GitNotFoundError: If git is not installed
        GitFailedError: If cloning the default branch fails
    """
    url = language.template_url
    logger.debug("Cloning %s (branch %s) into %s", url, minecraft_version, target_dir)

    git = GitContext()
    try:
        git.clone(url, target_dir, depth=CLONE_DEPTH, branch=minecraft_version)
    except GitFailedError as e:
        if minecraft_version is None:
            raise
        raise UnsupportedVersionError(minecraft_version, detail=e.stderr) from e


def reset_history(target_dir: Path) -> None:
    """Drop the template's ``.git`` directory and start an empty repository."""
    git_dir = target_dir / ".git"
    try:
        shutil.rmtree(git_dir)
    except OSError as e:
        raise FileSystemError.from_os_error(e, "remove", git_dir) from e

    GitContext(target_dir).init()

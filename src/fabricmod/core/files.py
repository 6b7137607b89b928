"""
Filesystem helpers for rewriting a freshly cloned template.

- replace_all: literal substitution in every text file under a directory
- prune_upward: remove the empty parents left behind by a move
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import FileSystemError

logger = logging.getLogger(__name__)

# Extensions that may be rewritten. Anything else (icons, jars, ...) is
# copied through byte-for-byte.
TEXT_EXTENSIONS = {".gradle", ".java", ".json", ".kt", ".kts", ".properties"}


def is_text_file(path: Path) -> bool:
    """Return True if ``path`` has an extension we rewrite."""
    return path.suffix.lower() in TEXT_EXTENSIONS


def _decode_text(data: bytes) -> str | None:
    """Decode file content, or return None if it looks binary."""
    if b"\x00" in data:
        return None
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def replace_in_file(path: Path, old: str, new: str) -> bool:
    """
    Replace every literal occurrence of ``old`` with ``new`` in one file.

    Files that are not text, or that do not contain ``old``, are left alone.

    Returns:
        True if the file was rewritten
    """
    if not old or not is_text_file(path):
        return False

    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileSystemError.from_os_error(e, "read", path) from e

    content = _decode_text(data)
    if content is None:
        logger.debug("Skipping binary content in %s", path)
        return False
    if old not in content:
        return False

    try:
        path.write_bytes(content.replace(old, new).encode("utf-8"))
    except OSError as e:
        raise FileSystemError.from_os_error(e, "write", path) from e

    logger.debug("Replaced '%s' with '%s' in %s", old, new, path)
    return True


def replace_all(root: Path, old: str, new: str) -> int:
    """
    Recursively replace ``old`` with ``new`` in every text file under ``root``.

    Symbolic links are skipped, whether they point at files or directories.
    The walk stops at the first I/O failure; files already rewritten stay
    rewritten.

    Args:
        root: Directory to walk
        old: Literal text to find
        new: Replacement text

    Returns:
        Number of files rewritten

    Raises:
        FileSystemError: If a directory cannot be listed or a file read/written
    """
    try:
        entries = sorted(root.iterdir())
    except OSError as e:
        raise FileSystemError.from_os_error(e, "list", root) from e

    changed = 0
    for entry in entries:
        if entry.is_symlink():
            # Links may point outside the module or back up the tree
            logger.debug("Skipping symlink %s", entry)
            continue
        if entry.is_dir():
            changed += replace_all(entry, old, new)
        elif replace_in_file(entry, old, new):
            changed += 1
    return changed


def is_directory_empty(directory: Path) -> bool:
    """Check if ``directory`` has no entries at all."""
    try:
        return next(directory.iterdir(), None) is None
    except OSError as e:
        raise FileSystemError.from_os_error(e, "list", directory) from e


def prune_upward(vacated: Path, stop_at: Path | None = None) -> list[Path]:
    """
    Remove empty directories above a path that was just moved away.

    Starts at the parent of ``vacated`` and walks upward, deleting each
    directory that has no entries. Stops at the first non-empty directory,
    at ``stop_at`` (which is never removed), or at the filesystem root.

    Args:
        vacated: File or directory that no longer exists at this location
        stop_at: Boundary directory; nothing at or above it is touched

    Returns:
        Directories removed, nearest first

    Raises:
        FileSystemError: If a directory cannot be listed or removed
    """
    boundary = stop_at.resolve() if stop_at is not None else None
    removed: list[Path] = []

    current = vacated.parent
    while current != current.parent:
        if boundary is not None:
            resolved = current.resolve()
            if resolved == boundary or boundary not in resolved.parents:
                break
        if not current.is_dir() or not is_directory_empty(current):
            break

        try:
            current.rmdir()
        except OSError as e:
            raise FileSystemError.from_os_error(e, "remove", current) from e

        logger.debug("Removed empty directory %s", current)
        removed.append(current)
        current = current.parent

    return removed

"""
Field-level patching of the template's configuration documents.

JSON documents are addressed with dotted field paths where integer segments
index into lists, e.g. ``entrypoints.main.0``. Properties files are patched
line by line so comments and layout survive.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import DocumentError, FileSystemError

logger = logging.getLogger(__name__)

_PROPERTY_LINE = re.compile(r"^(?P<key>[^#!=:\s][^=:\s]*)(?P<sep>\s*[=:]\s*|\s+)(?P<value>.*)$")


# =============================================================================
# JSON
# =============================================================================


def load_json(path: Path) -> dict[str, Any]:
    """
    Load a JSON document whose root is an object.

    Raises:
        FileSystemError: If the file cannot be read
        DocumentError: If the content is not a JSON object
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileSystemError.from_os_error(e, "read", path) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentError(f"invalid JSON ({e.msg} at line {e.lineno})", path) from e

    if not isinstance(data, dict):
        raise DocumentError("expected a JSON object at the top level", path)
    return data


def save_json(path: Path, data: Mapping[str, Any]) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        raise FileSystemError.from_os_error(e, "write", path) from e


def _step(container: Any, segment: str, field_path: str) -> tuple[Any, str | int]:
    """Resolve one path segment to a (container, key) pair."""
    if isinstance(container, list):
        if not segment.isdigit() or int(segment) >= len(container):
            raise DocumentError(f"no list element '{segment}' in field '{field_path}'")
        return container, int(segment)
    if isinstance(container, dict):
        return container, segment
    raise DocumentError(f"cannot descend into '{segment}' of field '{field_path}'")


def _resolve_parent(data: Any, field_path: str) -> tuple[Any, str | int]:
    segments = field_path.split(".")
    container = data
    for segment in segments[:-1]:
        container, key = _step(container, segment, field_path)
        if isinstance(container, dict) and key not in container:
            raise DocumentError(f"missing field '{segment}' in '{field_path}'")
        container = container[key]
    return _step(container, segments[-1], field_path)


def get_field(data: Mapping[str, Any], field_path: str) -> Any:
    """
    Read the value at ``field_path``.

    Examples:
        get_field({"a": {"b": [1, 2]}}, "a.b.1")  # -> 2
    """
    container, key = _resolve_parent(data, field_path)
    if isinstance(container, dict) and key not in container:
        raise DocumentError(f"missing field '{field_path}'")
    return container[key]


def set_field(data: Mapping[str, Any], field_path: str, value: Any) -> None:
    """Set the value at ``field_path``; parents must already exist."""
    container, key = _resolve_parent(data, field_path)
    container[key] = value


def patch_json(path: Path, updates: Mapping[str, Any]) -> dict[str, Any]:
    """
    Apply field updates to a JSON document in place.

    Fields not named in ``updates`` keep their values and order.

    Args:
        path: JSON file to patch
        updates: Mapping of dotted field path to new value

    Returns:
        The patched document

    Raises:
        DocumentError: If the document is invalid or a path does not resolve
    """
    data = load_json(path)
    for field_path, value in updates.items():
        try:
            set_field(data, field_path, value)
        except DocumentError as e:
            raise DocumentError(e.message, path) from e
        logger.debug("Set %s in %s", field_path, path)
    save_json(path, data)
    return data


# =============================================================================
# Properties
# =============================================================================


def patch_properties(path: Path, updates: Mapping[str, str]) -> None:
    """
    Replace values of ``key = value`` lines in a properties file.

    Comments, blank lines, ordering and each line's separator are kept.

    Raises:
        FileSystemError: If the file cannot be read or written
        DocumentError: If a key in ``updates`` is not present
    """
    try:
        lines = path.read_text(encoding="utf-8").splitlines(keepends=True)
    except OSError as e:
        raise FileSystemError.from_os_error(e, "read", path) from e

    pending = dict(updates)
    for index, line in enumerate(lines):
        body = line.rstrip("\r\n")
        match = _PROPERTY_LINE.match(body.lstrip())
        if not match or match.group("key") not in pending:
            continue

        key = match.group("key")
        indent = body[: len(body) - len(body.lstrip())]
        ending = line[len(body) :]
        lines[index] = f"{indent}{key}{match.group('sep')}{pending.pop(key)}{ending}"
        logger.debug("Set %s in %s", key, path)

    if pending:
        missing = ", ".join(sorted(pending))
        raise DocumentError(f"missing properties: {missing}", path)

    try:
        path.write_text("".join(lines), encoding="utf-8")
    except OSError as e:
        raise FileSystemError.from_os_error(e, "write", path) from e

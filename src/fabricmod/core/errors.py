"""
Error types for fabricmod project creation.

Every error carries an :class:`ErrorKind` tag so the CLI can pick an exit
code and message without inspecting strings.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    """Classification of a failure, independent of the layer that raised it."""

    VALIDATION = "validation"
    TOOL_MISSING = "tool_missing"
    TOOL_FAILED = "tool_failed"
    UNSUPPORTED_VERSION = "unsupported_version"
    IO = "io"
    DOCUMENT = "document"


class FabricmodError(Exception):
    """Base exception for all fabricmod errors."""

    kind: ErrorKind = ErrorKind.IO

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(FabricmodError):
    """
    Raised when user input is rejected before anything touches the disk.

    Examples:
    - Minecraft version not of the form ``<major>.<minor>``
    - Mod id that Fabric would refuse
    - Destination directory that already has content
    """

    kind = ErrorKind.VALIDATION


class GitNotFoundError(FabricmodError):
    """Raised when the ``git`` executable cannot be located or executed."""

    kind = ErrorKind.TOOL_MISSING

    def __init__(self, executable: str = "git"):
        self.executable = executable
        super().__init__(f"Git not found (tried '{executable}'). Install git and retry.")


class GitFailedError(FabricmodError):
    """Raised when git ran but exited with a non-zero status."""

    kind = ErrorKind.TOOL_FAILED

    def __init__(self, args: list[str], returncode: int, stderr: str):
        self.args_list = args
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"git {' '.join(args)} failed: {detail}")


class UnsupportedVersionError(FabricmodError):
    """
    Raised when the template cannot be cloned for the requested version.

    The template repositories publish one branch per Minecraft version, so a
    failing clone with a pinned branch almost always means the version has no
    template.
    """

    kind = ErrorKind.UNSUPPORTED_VERSION

    def __init__(self, version: str, detail: str | None = None):
        self.version = version
        self.detail = detail
        super().__init__(f"Minecraft version {version} is not supported by the template")


class FileSystemError(FabricmodError):
    """Raised when a filesystem operation fails."""

    kind = ErrorKind.IO

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(message)

    @classmethod
    def from_os_error(cls, error: OSError, action: str, path: Path) -> FileSystemError:
        reason = error.strerror or str(error)
        return cls(f"Failed to {action} {path}: {reason}", path=path)


class RefactorError(FileSystemError):
    """
    Raised when a package or class cannot be moved.

    Examples:
    - Template does not contain the expected starting package
    - Entrypoint class file missing from the module
    """

    pass


class DocumentError(FabricmodError):
    """Raised when a JSON or properties document is malformed or lacks a field."""

    kind = ErrorKind.DOCUMENT

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


# Exit codes used by the CLI, keyed by error kind
EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 2,
    ErrorKind.TOOL_MISSING: 3,
    ErrorKind.UNSUPPORTED_VERSION: 4,
    ErrorKind.TOOL_FAILED: 5,
    ErrorKind.IO: 6,
    ErrorKind.DOCUMENT: 7,
}

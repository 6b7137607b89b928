"""Core building blocks: errors, git, file rewriting, refactoring and documents."""

from .errors import (
    DocumentError,
    ErrorKind,
    FabricmodError,
    FileSystemError,
    GitFailedError,
    GitNotFoundError,
    RefactorError,
    UnsupportedVersionError,
    ValidationError,
)
from .language import Language, modules_for

__all__ = [
    "DocumentError",
    "ErrorKind",
    "FabricmodError",
    "FileSystemError",
    "GitFailedError",
    "GitNotFoundError",
    "Language",
    "RefactorError",
    "UnsupportedVersionError",
    "ValidationError",
    "modules_for",
]

"""
Thin wrapper around the ``git`` command line.

A :class:`GitContext` is bound to one working directory and built fresh for
each use; nothing about git is kept in module state.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import FileSystemError, GitFailedError, GitNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitContext:
    """
    Run git commands in a working directory.

    Attributes:
        path: Working directory (defaults to the current directory)
        executable: Name or path of the git binary
    """

    path: Path | None = None
    executable: str = "git"

    @property
    def cwd(self) -> Path:
        return self.path if self.path is not None else Path(".")

    def run(self, *args: str) -> str:
        """
        Run ``git <args>`` and return its standard output.

        Raises:
            GitNotFoundError: If the git executable cannot be run
            GitFailedError: If git exits with a non-zero status
            FileSystemError: If the working directory does not exist
        """
        if not self.cwd.is_dir():
            raise FileSystemError(f"Git working directory does not exist: {self.cwd}", path=self.cwd)

        command = [self.executable, *args]
        logger.debug("Running %s in %s", " ".join(command), self.cwd)
        try:
            result = subprocess.run(
                command,
                cwd=self.cwd,
                capture_output=True,
                text=True,
            )
        except (FileNotFoundError, PermissionError) as e:
            raise GitNotFoundError(self.executable) from e
        except OSError as e:
            raise FileSystemError.from_os_error(e, "run git in", self.cwd) from e

        if result.returncode != 0:
            raise GitFailedError(list(args), result.returncode, result.stderr)
        return result.stdout

    def clone(
        self,
        url: str,
        destination: Path,
        depth: int | None = None,
        branch: str | None = None,
    ) -> str:
        """Clone ``url`` into ``destination``."""
        args = ["clone"]
        if depth is not None:
            args += ["--depth", str(depth)]
        if branch is not None:
            args += ["--branch", branch]
        args += [url, str(destination)]
        return self.run(*args)

    def init(self) -> str:
        """Create an empty repository in the working directory."""
        return self.run("init")

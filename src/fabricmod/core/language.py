"""
Source languages supported by the Fabric templates.

A Java mod has a single ``src/main/java`` module. A Kotlin mod keeps its
entrypoint in ``src/main/kotlin`` and still carries ``src/main/java`` for
mixins, which must be written in Java.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

_TEMPLATE_URLS = {
    "java": "https://github.com/FabricMC/fabric-example-mod.git",
    "kotlin": "https://github.com/clabe45/fabric-example-mod-kotlin.git",
}


class Language(str, Enum):
    """Language of a source module under ``src/main``."""

    JAVA = "java"
    KOTLIN = "kotlin"

    @property
    def module_name(self) -> str:
        return self.value

    @property
    def extension(self) -> str:
        return "kt" if self is Language.KOTLIN else "java"

    @property
    def template_url(self) -> str:
        """Template repository URL, overridable with ``FABRICMOD_<LANG>_TEMPLATE``."""
        env_var = f"FABRICMOD_{self.name}_TEMPLATE"
        return os.environ.get(env_var) or _TEMPLATE_URLS[self.value]

    def source_root(self, project_dir: Path) -> Path:
        return project_dir / "src" / "main" / self.module_name


def modules_for(language: Language) -> list[Language]:
    """Return the source modules a project in ``language`` contains, primary first."""
    if language is Language.KOTLIN:
        return [Language.KOTLIN, Language.JAVA]
    return [Language.JAVA]

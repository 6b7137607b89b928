"""
fabricmod - create a new Fabric mod from the official example template.

Clones the Java or Kotlin example mod, drops its history and renames the
package, entrypoint class, mod id and assets to match the new mod.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import FabricmodError
from .core.init import build_options, create_mod
from .core.language import Language

__version__ = get_version()

__all__ = [
    "__version__",
    "FabricmodError",
    "Language",
    "build_options",
    "create_mod",
]

"""
Mod creation utilities for fabricmod.

This module re-exports from the init_impl/ package.
For implementation details, see the init_impl/ package.
"""

from .init_impl import (
    DEFAULT_ENTRYPOINT,
    ModOptions,
    build_options,
    create_mod,
    validate_version,
)

__all__ = [
    "DEFAULT_ENTRYPOINT",
    "ModOptions",
    "build_options",
    "create_mod",
    "validate_version",
]

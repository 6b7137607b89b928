"""
Mod creation utilities for fabricmod.

This package contains modular implementations for mod creation:
- validation.py - Input validation and option defaults
- templates.py - Template cloning and history reset
- project.py - Main create_mod logic
"""

from __future__ import annotations

from .validation import (
    DEFAULT_ENTRYPOINT,
    ModOptions,
    build_options,
    check_destination,
    validate_entrypoint,
    validate_mod_id,
    validate_version,
)
from .templates import CLONE_DEPTH, clone_template, reset_history
from .project import PLACEHOLDER, create_mod, refactor_module, relocate_assets, update_configs

__all__ = [
    # Validation
    "DEFAULT_ENTRYPOINT",
    "ModOptions",
    "build_options",
    "check_destination",
    "validate_entrypoint",
    "validate_mod_id",
    "validate_version",
    # Templates
    "CLONE_DEPTH",
    "clone_template",
    "reset_history",
    # Mod creation
    "PLACEHOLDER",
    "create_mod",
    "refactor_module",
    "relocate_assets",
    "update_configs",
]

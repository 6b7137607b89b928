"""
Input validation for new mods.

All checks run before anything is cloned or written, so a bad argument never
leaves a half-created directory behind.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError
from ..language import Language

DEFAULT_ENTRYPOINT = "net.fabricmc.example.ExampleMod"

_VERSION_PATTERN = re.compile(r"^\d+\.\d+$")
# Fabric loader's rule for mod ids
_MOD_ID_PATTERN = re.compile(r"^[a-z][a-z0-9_-]{1,63}$")
_JAVA_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def validate_version(version: str) -> str:
    """
    Check a Minecraft version of the form ``<major>.<minor>``.

    Examples:
        validate_version("1.19")    # -> "1.19"
        validate_version("1.19.1")  # raises ValidationError
    """
    if not _VERSION_PATTERN.match(version):
        raise ValidationError(
            f"Invalid Minecraft version '{version}'. Expected <major>.<minor>, e.g. 1.19"
        )
    return version


def validate_mod_id(mod_id: str) -> str:
    if not _MOD_ID_PATTERN.match(mod_id):
        raise ValidationError(
            f"Invalid mod id '{mod_id}'. Use 2-64 characters: lowercase letters, digits, "
            "'-' or '_', starting with a letter"
        )
    return mod_id


def validate_entrypoint(entrypoint: str) -> str:
    """Check a fully qualified class name such as ``com.example.MyMod``."""
    segments = entrypoint.split(".")
    if len(segments) < 2 or not all(_JAVA_IDENTIFIER.match(s) for s in segments):
        raise ValidationError(
            f"Invalid entrypoint '{entrypoint}'. Expected a package and class, e.g. com.example.MyMod"
        )
    return entrypoint


def check_destination(target_dir: Path) -> None:
    """Refuse to create a mod where something already exists."""
    if target_dir.is_file():
        raise ValidationError(f"Destination is a file: {target_dir}")
    if target_dir.is_dir() and any(target_dir.iterdir()):
        raise ValidationError(f"Directory already exists and is not empty: {target_dir}")


def default_title(mod_id: str) -> str:
    return mod_id.replace("_", " ").replace("-", " ").title()


class ModOptions(BaseModel):
    """
    Validated parameters for one mod creation run.

    Attributes:
        target_dir: Directory the template is cloned into
        mod_id: Fabric mod id, also used for asset and mixin file names
        display_name: Human-readable mod name
        minecraft_version: Template branch to clone (None for the default branch)
        language: Primary source language
        entrypoint: Fully qualified main class
    """

    target_dir: Path
    mod_id: str
    display_name: str
    minecraft_version: str | None = None
    language: Language = Language.JAVA
    entrypoint: str = DEFAULT_ENTRYPOINT

    model_config = ConfigDict(frozen=True)

    @field_validator("mod_id")
    @classmethod
    def _check_mod_id(cls, v: str) -> str:
        return _as_value_error(validate_mod_id, v)

    @field_validator("minecraft_version")
    @classmethod
    def _check_version(cls, v: str | None) -> str | None:
        return None if v is None else _as_value_error(validate_version, v)

    @field_validator("entrypoint")
    @classmethod
    def _check_entrypoint(cls, v: str) -> str:
        return _as_value_error(validate_entrypoint, v)

    @field_validator("display_name")
    @classmethod
    def _check_display_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Display name cannot be empty")
        return v

    @property
    def package(self) -> str:
        return self.entrypoint.rpartition(".")[0]


def _as_value_error(check: Callable[[str], str], value: str) -> str:
    # pydantic only collects ValueError/AssertionError from validators
    try:
        return check(value)
    except ValidationError as e:
        raise ValueError(e.message) from e


def build_options(
    target_dir: Path,
    mod_id: str | None = None,
    display_name: str | None = None,
    minecraft_version: str | None = None,
    kotlin: bool = False,
    entrypoint: str = DEFAULT_ENTRYPOINT,
) -> ModOptions:
    """
    Build :class:`ModOptions` from CLI-style arguments, filling in defaults.

    Args:
        target_dir: Destination directory
        mod_id: Mod id (defaults to the destination's base name)
        display_name: Display name (defaults to the mod id in title case)
        minecraft_version: Optional ``<major>.<minor>`` version
        kotlin: Use the Kotlin template instead of Java
        entrypoint: Fully qualified main class

    Raises:
        ValidationError: Listing every invalid parameter
    """
    target_dir = Path(target_dir).expanduser().resolve()
    if mod_id is None:
        mod_id = target_dir.name
    if display_name is None:
        display_name = default_title(mod_id)

    try:
        return ModOptions(
            target_dir=target_dir,
            mod_id=mod_id,
            display_name=display_name,
            minecraft_version=minecraft_version,
            language=Language.KOTLIN if kotlin else Language.JAVA,
            entrypoint=entrypoint,
        )
    except PydanticValidationError as e:
        problems = [_describe(error) for error in e.errors()]
        raise ValidationError("; ".join(problems)) from e


def _describe(error: dict) -> str:
    message = str(error.get("msg", "invalid value"))
    # pydantic prefixes messages raised as ValueError
    return message.removeprefix("Value error, ")

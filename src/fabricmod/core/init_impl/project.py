"""
Main mod creation logic.

Turns a cloned Fabric example mod into a uniquely named project:
clone, reset history, rename package and class in each source module,
replace the ``modid`` placeholder, move assets and patch the configuration
documents.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Any

from ..documents import get_field, load_json, patch_json, patch_properties
from ..errors import DocumentError, FileSystemError
from ..files import replace_all
from ..language import Language, modules_for
from ..refactor import class_exists, package_name, rename_class, rename_package, simple_name
from .templates import clone_template, reset_history
from .validation import ModOptions, check_destination

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Token the templates use wherever the mod id belongs
PLACEHOLDER = "modid"

MANIFEST = "fabric.mod.json"
PROPERTIES = "gradle.properties"
MAIN_ENTRYPOINT = "entrypoints.main.0"


def resources_dir(project_dir: Path) -> Path:
    return project_dir / "src" / "main" / "resources"


def read_entrypoint(manifest: dict[str, Any]) -> tuple[str, str]:
    """
    Return the main entrypoint class and the field path holding it.

    Kotlin templates declare entrypoints as ``{"adapter": "kotlin", "value": ...}``
    objects, Java templates as plain strings.
    """
    entry = get_field(manifest, MAIN_ENTRYPOINT)
    if isinstance(entry, dict):
        value = entry.get("value")
        field_path = f"{MAIN_ENTRYPOINT}.value"
    else:
        value = entry
        field_path = MAIN_ENTRYPOINT
    if not isinstance(value, str):
        raise DocumentError("main entrypoint is not a class name")
    return value, field_path


def refactor_module(
    project_dir: Path,
    language: Language,
    old_entrypoint: str,
    new_entrypoint: str,
    mod_id: str,
) -> None:
    """
    Rename the entrypoint package and class in one source module.

    The package is renamed in every module so namespaces stay consistent;
    the class is renamed only where its file lives.
    """
    old_package = package_name(old_entrypoint)
    new_package = package_name(new_entrypoint)

    rename_package(project_dir, language, old_package, new_package)

    # The class now sits in the new package under its old name
    moved_class = f"{new_package}.{simple_name(old_entrypoint)}"
    if class_exists(project_dir, language, moved_class):
        rename_class(project_dir, language, moved_class, new_entrypoint)
    else:
        logger.debug("No %s in %s module, skipping class rename", moved_class, language.value)

    replace_all(language.source_root(project_dir), PLACEHOLDER, mod_id)


def relocate_assets(project_dir: Path, mod_id: str) -> Path:
    """Move ``assets/modid`` to ``assets/<mod_id>``."""
    assets = resources_dir(project_dir) / "assets"
    source = assets / PLACEHOLDER
    destination = assets / mod_id
    if source == destination:
        return destination

    try:
        source.rename(destination)
    except OSError as e:
        raise FileSystemError.from_os_error(e, "move", source) from e
    return destination


def _rename_mixins(
    project_dir: Path,
    mixins_name: str,
    mod_id: str,
    old_package: str,
    new_package: str,
) -> str:
    """Rename the mixin config file and re-root its Java package. Returns the new name."""
    resources = resources_dir(project_dir)
    new_name = f"{mod_id}.mixins.json"
    source = resources / mixins_name
    destination = resources / new_name

    if source != destination:
        try:
            source.rename(destination)
        except OSError as e:
            raise FileSystemError.from_os_error(e, "move", source) from e

    config = load_json(destination)
    mixin_package = config.get("package")
    if not isinstance(mixin_package, str):
        raise DocumentError("missing string field 'package'", destination)
    if mixin_package == old_package or mixin_package.startswith(f"{old_package}."):
        patch_json(destination, {"package": new_package + mixin_package[len(old_package) :]})
    return new_name


def update_configs(project_dir: Path, options: ModOptions, old_entrypoint: str) -> None:
    """Patch the manifest, the mixin config and ``gradle.properties``."""
    manifest_path = resources_dir(project_dir) / MANIFEST
    manifest = load_json(manifest_path)
    _, entrypoint_field = read_entrypoint(manifest)
    old_package = package_name(old_entrypoint)

    updates: dict[str, Any] = {
        "id": options.mod_id,
        "name": options.display_name,
        entrypoint_field: options.entrypoint,
    }

    icon = manifest.get("icon")
    if isinstance(icon, str):
        updates["icon"] = f"assets/{options.mod_id}/{PurePosixPath(icon).name}"

    mixins = manifest.get("mixins")
    if isinstance(mixins, list) and mixins and isinstance(mixins[0], str):
        updates["mixins.0"] = _rename_mixins(
            project_dir, mixins[0], options.mod_id, old_package, options.package
        )

    patch_json(manifest_path, updates)
    patch_properties(
        project_dir / PROPERTIES,
        {
            "maven_group": options.package,
            "archives_base_name": options.mod_id,
        },
    )


def create_mod(
    options: ModOptions,
    progress_callback: Callable[[str], None] | None = None,
) -> Path:
    """
    Create a new Fabric mod from the example template.

    Steps run strictly in order and the first failure aborts the run; a
    partially created directory is left in place for inspection.

    Args:
        options: Validated parameters (see :func:`build_options`)
        progress_callback: Optional callback for progress messages

    Returns:
        The project directory

    Raises:
        FabricmodError: Any subclass, depending on the failing step
    """

    def log(msg: str) -> None:
        """Log progress message if callback provided."""
        if progress_callback:
            progress_callback(msg)

    target = options.target_dir
    check_destination(target)

    log(f"Creating mod '{options.mod_id}' ({options.display_name})...")
    version_label = options.minecraft_version or "latest"
    log(f"Cloning {options.language.value} template (Minecraft {version_label})...")
    clone_template(options.language, target, options.minecraft_version)

    log("  Resetting git history...")
    reset_history(target)

    manifest = load_json(resources_dir(target) / MANIFEST)
    old_entrypoint, _ = read_entrypoint(manifest)

    for language in modules_for(options.language):
        log(f"Refactoring {language.value} sources...")
        refactor_module(target, language, old_entrypoint, options.entrypoint, options.mod_id)

    log("Moving assets...")
    relocate_assets(target, options.mod_id)

    log("Updating configuration...")
    update_configs(target, options, old_entrypoint)

    logger.info("Created mod %s at %s", options.mod_id, target)
    return target

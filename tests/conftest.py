"""Shared pytest fixtures for fabricmod tests."""

from __future__ import annotations

import json
import shutil
import subprocess
from pathlib import Path

import pytest

from fabricmod.core.language import Language

ICON_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDRmodid\x00\xff"

GRADLE_PROPERTIES = """\
# Done to increase the memory available to gradle.
org.gradle.jvmargs=-Xmx1G

# Fabric Properties
minecraft_version=1.19
loader_version=0.14.8

# Mod Properties
mod_version = 1.0.0
maven_group = com.example
archives_base_name = fabric-example-mod
"""

JAVA_MAIN = """\
package net.fabricmc.example;

import net.fabricmc.api.ModInitializer;
import org.slf4j.Logger;
import org.slf4j.LoggerFactory;

public class ExampleMod implements ModInitializer {
\tpublic static final Logger LOGGER = LoggerFactory.getLogger("modid");

\t@Override
\tpublic void onInitialize() {
\t\tLOGGER.info("Hello Fabric world!");
\t}
}
"""

JAVA_MIXIN = """\
package net.fabricmc.example.mixin;

import net.fabricmc.example.ExampleMod;
import net.minecraft.client.gui.screen.TitleScreen;
import org.spongepowered.asm.mixin.Mixin;

@Mixin(TitleScreen.class)
public class ExampleMixin {
\tprivate void init(CallbackInfo info) {
\t\tExampleMod.LOGGER.info("This line is printed by an example mod mixin!");
\t}
}
"""

KOTLIN_MAIN = """\
package net.fabricmc.example

import net.fabricmc.api.ModInitializer
import org.slf4j.LoggerFactory

object ExampleMod : ModInitializer {
    private val logger = LoggerFactory.getLogger("modid")

    override fun onInitialize() {
        logger.info("Hello Fabric world!")
    }
}
"""

KOTLIN_MIXIN = """\
package net.fabricmc.example.mixin;

import net.minecraft.client.gui.screen.TitleScreen;
import org.spongepowered.asm.mixin.Mixin;

@Mixin(TitleScreen.class)
public class ExampleMixin {
\tprivate void init(CallbackInfo info) {
\t\tSystem.out.println("This line is printed by an example mod mixin!");
\t}
}
"""


def write_file(path: Path, content: str | bytes) -> Path:
    """Create ``path`` (and its parents) with ``content``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


_GIT_IDENTITY = [
    "-c", "user.name=Test",
    "-c", "user.email=test@example.com",
    "-c", "commit.gpgsign=false",
]  # fmt: skip


def _git(cwd: Path, *args: str) -> None:
    subprocess.run(
        ["git", *_GIT_IDENTITY, *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )


def build_template(root: Path, language: Language) -> Path:
    """Lay out a miniature Fabric example mod for ``language`` under ``root``."""
    resources = root / "src" / "main" / "resources"
    entrypoint: str | dict[str, str] = "net.fabricmc.example.ExampleMod"

    write_file(root / "gradle.properties", GRADLE_PROPERTIES)
    write_file(root / "build.gradle", "archivesBaseName = project.archives_base_name\n")

    mixin = root / "src/main/java/net/fabricmc/example/mixin/ExampleMixin.java"
    if language is Language.KOTLIN:
        write_file(root / "src/main/kotlin/net/fabricmc/example/ExampleMod.kt", KOTLIN_MAIN)
        write_file(mixin, KOTLIN_MIXIN)
        entrypoint = {"adapter": "kotlin", "value": "net.fabricmc.example.ExampleMod"}
    else:
        write_file(root / "src/main/java/net/fabricmc/example/ExampleMod.java", JAVA_MAIN)
        write_file(mixin, JAVA_MIXIN)

    manifest = {
        "schemaVersion": 1,
        "id": "modid",
        "version": "${version}",
        "name": "Example Mod",
        "description": "This is an example description!",
        "icon": "assets/modid/icon.png",
        "environment": "*",
        "entrypoints": {"main": [entrypoint]},
        "mixins": ["modid.mixins.json"],
        "depends": {"fabricloader": ">=0.14.8"},
    }
    write_file(resources / "fabric.mod.json", json.dumps(manifest, indent="\t"))
    write_file(
        resources / "modid.mixins.json",
        json.dumps(
            {
                "required": True,
                "package": "net.fabricmc.example.mixin",
                "compatibilityLevel": "JAVA_17",
                "client": ["ExampleMixin"],
            },
            indent="\t",
        ),
    )
    write_file(resources / "assets/modid/icon.png", ICON_BYTES)
    return root


@pytest.fixture
def template_repos(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> dict[Language, str]:
    """
    Create local git template repositories and point fabricmod at them.

    Each repository has its default branch plus a ``1.19`` branch.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    urls: dict[Language, str] = {}
    for language in Language:
        repo = build_template(tmp_path / "templates" / language.value, language)
        _git(repo, "init")
        _git(repo, "add", ".")
        _git(repo, "commit", "-m", "Initial template")
        _git(repo, "branch", "1.19")
        urls[language] = repo.as_uri()
        monkeypatch.setenv(f"FABRICMOD_{language.name}_TEMPLATE", urls[language])
    return urls


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory that new mods are created in."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def make_file():
    """Return a helper that writes a file, creating parent directories."""
    return write_file

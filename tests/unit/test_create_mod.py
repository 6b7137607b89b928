"""End-to-end tests for mod creation against local template repositories."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fabricmod.core.errors import (
    ErrorKind,
    FileSystemError,
    GitNotFoundError,
    RefactorError,
    UnsupportedVersionError,
    ValidationError,
)
from fabricmod.core.init_impl import build_options, create_mod, relocate_assets

ICON_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDRmodid\x00\xff"


def _resources(project: Path) -> Path:
    return project / "src" / "main" / "resources"


def _manifest(project: Path) -> dict:
    return json.loads((_resources(project) / "fabric.mod.json").read_text())


class TestCreateJavaMod:
    @pytest.fixture
    def project(self, template_repos, workspace: Path) -> Path:
        options = build_options(
            workspace / "mymod",
            display_name="My Mod",
            entrypoint="com.example.mymod.MyMod",
        )
        return create_mod(options)

    def test_history_is_fresh(self, project: Path) -> None:
        assert (project / ".git").is_dir()
        # A shallow clone leaves this file behind; a fresh init does not
        assert not (project / ".git" / "shallow").exists()

    def test_main_class_moved_and_renamed(self, project: Path) -> None:
        base = project / "src" / "main" / "java"
        main = base / "com" / "example" / "mymod" / "MyMod.java"

        content = main.read_text()
        assert "package com.example.mymod;" in content
        assert "public class MyMod implements ModInitializer" in content
        assert 'LoggerFactory.getLogger("mymod")' in content
        assert not (base / "net").exists()

    def test_mixin_follows_package(self, project: Path) -> None:
        mixin = project / "src/main/java/com/example/mymod/mixin/ExampleMixin.java"

        content = mixin.read_text()
        assert "package com.example.mymod.mixin;" in content
        assert "import com.example.mymod.MyMod;" in content
        assert "MyMod.LOGGER.info" in content

    def test_assets_relocated(self, project: Path) -> None:
        assets = _resources(project) / "assets"

        assert (assets / "mymod" / "icon.png").read_bytes() == ICON_BYTES
        assert not (assets / "modid").exists()

    def test_manifest_patched(self, project: Path) -> None:
        manifest = _manifest(project)

        assert manifest["id"] == "mymod"
        assert manifest["name"] == "My Mod"
        assert manifest["icon"] == "assets/mymod/icon.png"
        assert manifest["entrypoints"]["main"] == ["com.example.mymod.MyMod"]
        assert manifest["mixins"] == ["mymod.mixins.json"]
        assert manifest["description"] == "This is an example description!"
        assert manifest["version"] == "${version}"

    def test_mixin_config_renamed_and_patched(self, project: Path) -> None:
        resources = _resources(project)
        config = json.loads((resources / "mymod.mixins.json").read_text())

        assert config["package"] == "com.example.mymod.mixin"
        assert config["client"] == ["ExampleMixin"]
        assert not (resources / "modid.mixins.json").exists()

    def test_gradle_properties_patched(self, project: Path) -> None:
        properties = (project / "gradle.properties").read_text()

        assert "maven_group = com.example.mymod\n" in properties
        assert "archives_base_name = mymod\n" in properties
        assert "minecraft_version=1.19\n" in properties
        assert "# Mod Properties\n" in properties


class TestCreateKotlinMod:
    @pytest.fixture
    def project(self, template_repos, workspace: Path) -> Path:
        options = build_options(
            workspace / "kotmod",
            minecraft_version="1.19",
            kotlin=True,
            entrypoint="io.github.dev.KotMod",
        )
        return create_mod(options)

    def test_kotlin_entrypoint(self, project: Path) -> None:
        base = project / "src" / "main" / "kotlin"
        main = base / "io" / "github" / "dev" / "KotMod.kt"

        content = main.read_text()
        assert content.startswith("package io.github.dev\n")
        assert "object KotMod : ModInitializer" in content
        assert 'getLogger("kotmod")' in content
        assert not (base / "net").exists()

    def test_java_module_package_renamed_without_class(self, project: Path) -> None:
        base = project / "src" / "main" / "java"
        mixin = base / "io" / "github" / "dev" / "mixin" / "ExampleMixin.java"

        assert mixin.read_text().startswith("package io.github.dev.mixin;")
        assert not (base / "io" / "github" / "dev" / "KotMod.java").exists()
        assert not (base / "net").exists()

    def test_manifest_keeps_adapter(self, project: Path) -> None:
        manifest = _manifest(project)

        assert manifest["id"] == "kotmod"
        assert manifest["name"] == "Kotmod"
        assert manifest["entrypoints"]["main"] == [
            {"adapter": "kotlin", "value": "io.github.dev.KotMod"}
        ]


class TestCreateModNestedPackage:
    """Entrypoints inside or above the template package."""

    def test_sub_package_of_template(self, template_repos, workspace: Path) -> None:
        project = create_mod(
            build_options(workspace / "mymod", entrypoint="net.fabricmc.example.mymod.MyMod")
        )

        example = project / "src" / "main" / "java" / "net" / "fabricmc" / "example"
        main = example / "mymod" / "MyMod.java"
        mixin = example / "mymod" / "mixin" / "ExampleMixin.java"
        assert "package net.fabricmc.example.mymod;" in main.read_text()
        assert mixin.read_text().startswith("package net.fabricmc.example.mymod.mixin;")
        assert [p.name for p in example.iterdir()] == ["mymod"]

        manifest = _manifest(project)
        assert manifest["entrypoints"]["main"] == ["net.fabricmc.example.mymod.MyMod"]
        config = json.loads((_resources(project) / "mymod.mixins.json").read_text())
        assert config["package"] == "net.fabricmc.example.mymod.mixin"

    def test_parent_of_template_package_rejected(self, template_repos, workspace: Path) -> None:
        options = build_options(workspace / "mymod", entrypoint="net.fabricmc.MyMod")

        with pytest.raises(RefactorError, match="already exists") as exc_info:
            create_mod(options)

        assert exc_info.value.kind is ErrorKind.IO


class TestCreateModFailures:
    def test_unsupported_version(self, template_repos, workspace: Path) -> None:
        options = build_options(workspace / "mymod", minecraft_version="9.99")

        with pytest.raises(UnsupportedVersionError) as exc_info:
            create_mod(options)

        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_VERSION
        assert exc_info.value.version == "9.99"

    def test_existing_directory_rejected_before_clone(
        self, monkeypatch: pytest.MonkeyPatch, workspace: Path
    ) -> None:
        target = workspace / "mymod"
        target.mkdir()
        (target / "keep.txt").write_text("mine")
        monkeypatch.setenv("FABRICMOD_JAVA_TEMPLATE", str(workspace / "no-template"))

        with pytest.raises(ValidationError):
            create_mod(build_options(target))

        assert [p.name for p in target.iterdir()] == ["keep.txt"]

    def test_missing_git(self, monkeypatch: pytest.MonkeyPatch, workspace: Path) -> None:
        monkeypatch.setenv("PATH", str(workspace / "empty-bin"))

        with pytest.raises(GitNotFoundError):
            create_mod(build_options(workspace / "mymod"))

    def test_progress_messages(self, template_repos, workspace: Path) -> None:
        messages: list[str] = []

        create_mod(build_options(workspace / "mymod"), progress_callback=messages.append)

        assert messages[0] == "Creating mod 'mymod' (Mymod)..."
        assert "Refactoring java sources..." in messages
        assert messages[-1] == "Updating configuration..."


class TestRelocateAssets:
    def test_missing_sentinel_directory(self, tmp_path: Path) -> None:
        (_resources(tmp_path) / "assets").mkdir(parents=True)

        with pytest.raises(FileSystemError):
            relocate_assets(tmp_path, "mymod")

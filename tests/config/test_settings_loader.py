# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered settings resolution."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pysarif.config import ConfigError, ContinuationPolicy, ConversionSettings, NotePolicy, SettingsLoader
from pysarif.config.sources import OverrideConfigSource, PyProjectConfigSource, TomlConfigSource, expand_env


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_project_files(tmp_path: Path) -> None:
    result = SettingsLoader.for_root(tmp_path).load_with_trace()

    assert result.settings == ConversionSettings()
    assert result.sources == ["defaults"]
    assert result.updates == []
    assert result.warnings == []


def test_layer_precedence(tmp_path: Path) -> None:
    _write(
        tmp_path / "pyproject.toml",
        '[project]\nname = "demo"\n\n[tool.pysarif]\nbase-dir = "/from/pyproject"\nindent = 4\ninclude_snippets = false\n',
    )
    _write(tmp_path / ".pysarif.toml", 'base_dir = "/from/project-file"\nclang-tidy-notes = "related"\n')
    explicit = _write(tmp_path / "ci.toml", 'clang_tidy_continuation = "message"\n')

    result = SettingsLoader.for_root(
        tmp_path,
        config_file=explicit,
        overrides={"indent": 0, "hadolint_default_file": None},
    ).load_with_trace()

    settings = result.settings
    assert settings.base_dir == "/from/project-file"
    assert settings.indent == 0
    assert settings.include_snippets is False
    assert settings.clang_tidy_notes is NotePolicy.RELATED
    assert settings.clang_tidy_continuation is ContinuationPolicy.MESSAGE
    assert settings.hadolint_default_file == "Dockerfile"
    assert result.sources == ["defaults", str(tmp_path / "pyproject.toml"), str(tmp_path / ".pysarif.toml"), str(explicit), "cli"]
    assert [(update.field, update.source) for update in result.updates if update.field == "indent"] == [
        ("indent", str(tmp_path / "pyproject.toml")),
        ("indent", "cli"),
    ]


def test_pyproject_without_section_contributes_nothing(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')

    result = SettingsLoader.for_root(tmp_path).load_with_trace()

    assert result.sources == ["defaults"]


def test_environment_references_are_expanded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CI_WORKSPACE", "/builds/demo")
    _write(tmp_path / ".pysarif.toml", 'base_dir = "${CI_WORKSPACE}/src"\nuri_base_id = "$UNSET_PYSARIF_VAR"\n')

    settings = SettingsLoader.for_root(tmp_path).load_with_trace().settings

    assert settings.base_dir == "/builds/demo/src"
    assert settings.uri_base_id == "$UNSET_PYSARIF_VAR"


def test_expand_env_walks_nested_values() -> None:
    data = {"a": "$HOME/x", "b": ["${HOME}"], "c": {"d": "$HOME"}, "e": 3}

    assert expand_env(data, {"HOME": "/h"}) == {"a": "/h/x", "b": ["/h"], "c": {"d": "/h"}, "e": 3}


def test_includes_are_merged_before_the_including_file(tmp_path: Path) -> None:
    _write(tmp_path / "base.toml", 'indent = 8\nbase_dir = "/base"\n')
    main = _write(tmp_path / "main.toml", 'include = "base.toml"\nindent = 3\n')

    data = TomlConfigSource(main, env={}).load()

    assert data == {"indent": 3, "base_dir": "/base"}


def test_circular_include_is_rejected(tmp_path: Path) -> None:
    _write(tmp_path / "a.toml", 'include = ["b.toml"]\n')
    _write(tmp_path / "b.toml", 'include = ["a.toml"]\n')

    with pytest.raises(ConfigError, match="Circular include"):
        TomlConfigSource(tmp_path / "a.toml", env={}).load()


def test_unknown_keys_warn_or_fail_in_strict_mode(tmp_path: Path) -> None:
    _write(tmp_path / ".pysarif.toml", "colour = true\n")
    loader = SettingsLoader.for_root(tmp_path)

    result = loader.load_with_trace()
    assert len(result.warnings) == 1
    assert "colour" in result.warnings[0]

    with pytest.raises(ConfigError, match="colour"):
        loader.load_with_trace(strict=True)


def test_invalid_value_is_a_config_error(tmp_path: Path) -> None:
    _write(tmp_path / ".pysarif.toml", 'clang_tidy_notes = "inline"\n')

    with pytest.raises(ConfigError, match="Invalid configuration"):
        SettingsLoader.for_root(tmp_path).load_with_trace()


def test_invalid_toml_is_a_config_error(tmp_path: Path) -> None:
    _write(tmp_path / ".pysarif.toml", "base_dir = \n")

    with pytest.raises(ConfigError, match="not valid TOML"):
        SettingsLoader.for_root(tmp_path).load_with_trace()


def test_missing_explicit_config_file(tmp_path: Path) -> None:
    loader = SettingsLoader.for_root(tmp_path, config_file=tmp_path / "missing.toml")

    with pytest.raises(ConfigError, match="does not exist"):
        loader.load_with_trace()


def test_pyproject_source_reads_tool_table(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", "[tool.pysarif]\ncargo-metadata = true\n")

    assert PyProjectConfigSource(pyproject, env={}).load() == {"cargo_metadata": True}


def test_override_source_drops_unset_values() -> None:
    source = OverrideConfigSource({"base-dir": "/x", "indent": None})

    assert source.load() == {"base_dir": "/x"}
    assert source.describe() == "Command-line overrides"


def test_loader_requires_sources() -> None:
    with pytest.raises(ValueError):
        SettingsLoader(sources=[])


def test_settings_validation() -> None:
    assert ConversionSettings(base_dir="   ").base_dir is None
    assert ConversionSettings(base_dir=Path("/work/src")).base_dir == "/work/src"
    with pytest.raises(ValidationError):
        ConversionSettings(indent=-1)
    with pytest.raises(ValidationError):
        ConversionSettings(unknown=True)  # type: ignore[call-arg]

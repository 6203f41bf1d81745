# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (defaults, TOML, pyproject, overrides)."""

from __future__ import annotations

import os
import re
import tomllib
from abc import abstractmethod
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import Any, Final, Protocol

from .models import ConfigError, ConversionSettings

DEFAULT_INCLUDE_KEY: Final[str] = "include"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "pysarif"

_ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$(\w+)|\$\{([^}]+)\}")


class ConfigSource(Protocol):
    """Provide configuration data loaded from disk or other mediums."""

    name: str

    @abstractmethod
    def load(self) -> Mapping[str, Any]:
        """Return configuration values as a flat mapping."""

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of the source."""


def _expand_env_value(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        return _expand_env_string(value, env)
    if isinstance(value, Mapping):
        return {key: _expand_env_value(entry, env) for key, entry in value.items()}
    if isinstance(value, list):
        return [_expand_env_value(entry, env) for entry in value]
    return value


def _expand_env_string(value: str, env: Mapping[str, str]) -> str:
    def _replace(match: re.Match[str]) -> str:
        key = match.group(1) or match.group(2)
        if key is None:
            return match.group(0)
        return env.get(key, match.group(0))

    return _ENV_VAR_PATTERN.sub(_replace, value)


def expand_env(data: Mapping[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Return ``data`` with ``$VAR`` and ``${VAR}`` references substituted.

    Unknown variables are left untouched.
    """

    return {key: _expand_env_value(value, env) for key, value in data.items()}


def normalise_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``data`` with dashed keys rewritten to their underscore form."""

    return {str(key).replace("-", "_"): value for key, value in data.items()}


class DefaultConfigSource(ConfigSource):
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return ConversionSettings().model_dump(mode="json")

    def describe(self) -> str:
        return "Built-in defaults"


class TomlConfigSource(ConfigSource):
    """Load configuration data from a TOML document with include support."""

    def __init__(
        self,
        path: Path,
        *,
        name: str | None = None,
        include_key: str = DEFAULT_INCLUDE_KEY,
        env: Mapping[str, str] | None = None,
        required: bool = False,
    ) -> None:
        self._root_path = path
        self.name = name or str(path)
        self._include_key = include_key
        self._env = env if env is not None else os.environ
        self._required = required

    def load(self) -> Mapping[str, Any]:
        if self._required and not self._root_path.is_file():
            raise ConfigError(f"Configuration file {self._root_path} does not exist")
        return self._load(self._root_path, ())

    def _load(self, path: Path, stack: tuple[Path, ...]) -> dict[str, Any]:
        if not path.is_file():
            return {}
        if path in stack:
            include_chain = " -> ".join(str(entry) for entry in (*stack, path))
            raise ConfigError(f"Circular include detected: {include_chain}")
        try:
            with path.open("rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Configuration at {path} is not valid TOML: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc
        document: dict[str, Any] = dict(self._select(data))
        includes = document.pop(self._include_key, None)
        merged: dict[str, Any] = {}
        for include_path in self._coerce_includes(includes, path.parent):
            merged.update(self._load(include_path, (*stack, path)))
        merged.update(normalise_keys(document))
        return expand_env(merged, self._env)

    def _select(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        """Return the table holding settings within a parsed document."""

        return data

    def _coerce_includes(self, raw: Any, base_dir: Path) -> Iterable[Path]:
        if raw is None:
            return []
        if isinstance(raw, str):
            return [self._resolve_path(Path(raw), base_dir)]
        if isinstance(raw, list):
            return [self._resolve_path(Path(str(item)), base_dir) for item in raw]
        raise ConfigError(f"Unsupported include declaration: {raw!r}")

    @staticmethod
    def _resolve_path(path: Path, base_dir: Path) -> Path:
        return path if path.is_absolute() else (base_dir / path)

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.pysarif]`` within ``pyproject.toml``."""

    def __init__(self, path: Path, *, env: Mapping[str, str] | None = None) -> None:
        super().__init__(path, name=str(path), env=env)

    def _select(self, data: Mapping[str, Any]) -> Mapping[str, Any]:
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, MutableMapping):
            return {}
        return section

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


class OverrideConfigSource(ConfigSource):
    """Expose explicit key/value overrides, typically from the command line."""

    def __init__(self, values: Mapping[str, Any], *, name: str = "cli") -> None:
        self.name = name
        self._values = {key: value for key, value in normalise_keys(values).items() if value is not None}

    def load(self) -> Mapping[str, Any]:
        return dict(self._values)

    def describe(self) -> str:
        return "Command-line overrides"


__all__ = [
    "PYPROJECT_SECTION_KEY",
    "ConfigSource",
    "DefaultConfigSource",
    "OverrideConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "expand_env",
    "normalise_keys",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the cargo workspace root a clippy run was produced in."""

from __future__ import annotations

import json
import logging
from typing import Final, Protocol

from ..process_utils import SubprocessExecutionError, run_command

LOGGER = logging.getLogger(__name__)

CARGO_METADATA_TIMEOUT: Final[float] = 60.0


class WorkspaceResolver(Protocol):
    """Map a build identifier (a ``Cargo.toml`` path) to a workspace root."""

    def __call__(self, build_identifier: str) -> str | None:
        """Return the absolute workspace root, or ``None`` when unknown."""


class CargoMetadataResolver:
    """Ask ``cargo metadata`` for the ``workspace_root`` of a manifest."""

    def __init__(self, *, cargo: str = "cargo", timeout: float = CARGO_METADATA_TIMEOUT) -> None:
        self._cargo = cargo
        self._timeout = timeout

    def command(self, manifest_path: str) -> list[str]:
        """Return the ``cargo metadata`` invocation for ``manifest_path``."""

        return [
            self._cargo,
            "metadata",
            "--format-version",
            "1",
            "--no-deps",
            "--manifest-path",
            manifest_path,
        ]

    def __call__(self, build_identifier: str) -> str | None:
        """Return the workspace root for ``build_identifier``.

        Any failure is logged at debug level and reported as ``None`` so the
        conversion falls back to the paths clippy printed.
        """

        try:
            completed = run_command(self.command(build_identifier), timeout=self._timeout)
        except (FileNotFoundError, SubprocessExecutionError) as exc:
            LOGGER.debug("cargo metadata unavailable for %s: %s", build_identifier, exc)
            return None
        try:
            payload = json.loads(completed.stdout or "")
        except json.JSONDecodeError as exc:
            LOGGER.debug("cargo metadata returned invalid JSON: %s", exc)
            return None
        root = payload.get("workspace_root") if isinstance(payload, dict) else None
        if not isinstance(root, str) or not root.strip():
            LOGGER.debug("cargo metadata output has no workspace_root")
            return None
        return root


__all__ = ["CargoMetadataResolver", "WorkspaceResolver"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for turning tool-reported paths into SARIF artifact URIs."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import PurePath
from typing import Final
from urllib.parse import quote

_Pathish = str | PathLike[str]
_WINDOWS_DRIVE_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z]:/")


def _to_posix(path: _Pathish) -> str:
    """Return ``path`` with forward slashes and no empty or ``.`` segments."""

    text = path.as_posix() if isinstance(path, PurePath) else str(path)
    text = text.replace("\\", "/")
    if not text:
        return text
    segments = [segment for segment in text.split("/") if segment not in ("", ".")]
    body = "/".join(segments)
    if text.startswith("/"):
        return f"/{body}"
    return body or "."


def is_absolute_path(path: _Pathish) -> bool:
    """Return ``True`` for POSIX absolute paths and Windows drive paths.

    Args:
        path: Path in either native or forward-slash form.

    Returns:
        bool: Whether ``path`` is anchored at a filesystem root.
    """

    text = _to_posix(path)
    return text.startswith("/") or bool(_WINDOWS_DRIVE_RE.match(text))


def normalize_path(path: _Pathish, base_dir: _Pathish | None = None) -> str:
    """Return ``path`` as a forward-slash string relative to ``base_dir``.

    Separators are converted to ``/`` and empty or ``.`` segments are removed.
    Absolute paths located beneath ``base_dir`` are rewritten relative to it;
    every other path passes through. The transform is purely lexical, so
    applying it twice yields the same value as applying it once.

    Args:
        path: Path reported by a tool.
        base_dir: Directory that relative output should be anchored at.

    Returns:
        str: Normalised path.

    Raises:
        ValueError: If ``path`` is ``None`` or empty.
    """

    if path is None:
        raise ValueError("path must not be None")
    text = _to_posix(path)
    if not text:
        raise ValueError("path must not be empty")
    if base_dir is None or not is_absolute_path(text):
        return text
    base = _to_posix(base_dir).rstrip("/")
    if not base:
        if not str(base_dir).strip():
            return text
        base = "/"
    prefix = base if base.endswith("/") else f"{base}/"
    if _WINDOWS_DRIVE_RE.match(text):
        matches = text.casefold().startswith(prefix.casefold())
    else:
        matches = text.startswith(prefix)
    if not matches or len(text) == len(prefix):
        return text
    return text[len(prefix) :]


def base_uri(base_dir: _Pathish) -> str | None:
    """Return a ``file://`` URI with a trailing slash for an absolute ``base_dir``.

    Args:
        base_dir: Directory used as ``originalUriBaseIds`` anchor.

    Returns:
        str | None: URI suitable for a SARIF ``originalUriBaseIds`` entry, or
        ``None`` when ``base_dir`` is relative.
    """

    text = _to_posix(base_dir).rstrip("/")
    if not text:
        return "file:///" if str(base_dir).strip() else None
    if not is_absolute_path(text):
        return None
    if not text.startswith("/"):
        text = f"/{text}"
    return f"file://{quote(text, safe='/:')}/"


__all__ = ("base_uri", "is_absolute_path", "normalize_path")

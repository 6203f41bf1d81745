# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-tool converters.

Converter modules never import one another; :func:`load_converter` imports
only the module of the requested tool.
"""

from __future__ import annotations

from importlib import import_module
from typing import Final

from .base import ConversionReport, Converter, JsonConverter, ResultSpec, RuleSpec

CONVERTER_MODULES: Final[dict[str, tuple[str, str]]] = {
    "clippy": (".clippy", "ClippyConverter"),
    "hadolint": (".hadolint", "HadolintConverter"),
    "shellcheck": (".shellcheck", "ShellcheckConverter"),
    "clang-tidy": (".clang_tidy", "ClangTidyConverter"),
}


def load_converter(tool: str) -> type[Converter[object]]:
    """Return the converter class registered for ``tool``.

    Raises:
        KeyError: If ``tool`` has no converter.
    """

    module_name, class_name = CONVERTER_MODULES[tool]
    module = import_module(module_name, __name__)
    converter: type[Converter[object]] = getattr(module, class_name)
    return converter


__all__ = [
    "CONVERTER_MODULES",
    "ConversionReport",
    "Converter",
    "JsonConverter",
    "ResultSpec",
    "RuleSpec",
    "load_converter",
]

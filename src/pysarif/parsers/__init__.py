# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool-native record models and the clang-tidy text parser.

Each submodule is self-contained so a converter only imports the records of
the tool it handles.
"""

from __future__ import annotations

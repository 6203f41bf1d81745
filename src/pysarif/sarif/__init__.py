# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""SARIF object model, builders and location helpers."""

from __future__ import annotations

from .builders import DEFAULT_URI_BASE_ID, RunBuilder, build_document
from .locations import UriContext, region_from
from .models import (
    SARIF_SCHEMA,
    SARIF_VERSION,
    Artifact,
    ArtifactChange,
    ArtifactContent,
    ArtifactLocation,
    Fix,
    Location,
    Message,
    MultiformatMessageString,
    PhysicalLocation,
    Region,
    Replacement,
    ReportingConfiguration,
    ReportingDescriptor,
    Result,
    Run,
    SarifLog,
    Tool,
    ToolComponent,
)

__all__ = [
    "DEFAULT_URI_BASE_ID",
    "SARIF_SCHEMA",
    "SARIF_VERSION",
    "Artifact",
    "ArtifactChange",
    "ArtifactContent",
    "ArtifactLocation",
    "Fix",
    "Location",
    "Message",
    "MultiformatMessageString",
    "PhysicalLocation",
    "Region",
    "Replacement",
    "ReportingConfiguration",
    "ReportingDescriptor",
    "Result",
    "Run",
    "RunBuilder",
    "SarifLog",
    "Tool",
    "ToolComponent",
    "UriContext",
    "build_document",
    "region_from",
]

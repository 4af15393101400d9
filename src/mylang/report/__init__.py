# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consumers of the token stream and renderers of scan reports."""

from mylang.report.artifact import (
    ARTIFACT_FORMAT_VERSION,
    ArtifactError,
    ScanDocument,
    build_document,
    deserialize,
    serialize,
)
from mylang.report.collector import ScanCollector
from mylang.report.composer import ALL_SECTIONS, ReportSection, format_tokens, render_report
from mylang.report.statistics import Statistics
from mylang.report.symbol_table import IdentifierEntry, IdentifierTable

__all__ = [
    "ALL_SECTIONS",
    "ARTIFACT_FORMAT_VERSION",
    "ArtifactError",
    "IdentifierEntry",
    "IdentifierTable",
    "ReportSection",
    "ScanCollector",
    "ScanDocument",
    "Statistics",
    "build_document",
    "deserialize",
    "format_tokens",
    "render_report",
    "serialize",
]

# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON rendering of a finished scan.

The document is versioned so consumers can detect schema changes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mylang.report.collector import ScanCollector

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"


class ArtifactError(Exception):
    """Raised when a scan report document cannot be decoded."""


class TokenRecord(BaseModel):
    """One emittable token."""

    model_config = ConfigDict(extra="forbid")

    category: str
    lexeme: str
    line: int
    column: int


class DiagnosticRecord(BaseModel):
    """One lexical error."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    kind: str
    line: int
    column: int
    offending_text: str = Field(alias="offending-text")
    reason: str


class IdentifierRecord(BaseModel):
    """One identifier table row."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str
    first_line: int = Field(alias="first-line")
    first_column: int = Field(alias="first-column")
    frequency: int


class StatisticsRecord(BaseModel):
    """Scan counters. ``counts`` only lists categories seen at least once."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    total_tokens: int = Field(alias="total-tokens")
    lines_processed: int = Field(alias="lines-processed")
    comments_removed: int = Field(alias="comments-removed")
    error_count: int = Field(alias="error-count")
    counts: dict[str, int] = Field(default_factory=dict)


class ScanDocument(BaseModel):
    """Top-level JSON document for one scanned source."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    version: str = Field(alias="v", default=ARTIFACT_FORMAT_VERSION)
    source: str | None = None
    tokens: list[TokenRecord] = Field(default_factory=list)
    symbols: list[IdentifierRecord] = Field(default_factory=list)
    statistics: StatisticsRecord
    errors: list[DiagnosticRecord] = Field(default_factory=list)


def build_document(result: ScanCollector, source: str | None = None) -> ScanDocument:
    """Convert a scan result into a :class:`ScanDocument`.

    Args:
        result: The collector returned by :func:`mylang.scanner.lexer.scan`.
        source: Optional label for the scanned input, typically its path.
    """
    stats = result.statistics
    return ScanDocument(
        source=source,
        tokens=[
            TokenRecord(category=tok.category.value, lexeme=tok.lexeme, line=tok.line, column=tok.column)
            for tok in result.tokens
        ],
        symbols=[
            IdentifierRecord(
                name=entry.name,
                first_line=entry.first_line,
                first_column=entry.first_column,
                frequency=entry.frequency,
            )
            for entry in result.symbol_table.entries()
        ],
        statistics=StatisticsRecord(
            total_tokens=stats.total_tokens,
            lines_processed=stats.lines_processed,
            comments_removed=stats.comments_removed,
            error_count=stats.error_count,
            counts={category.value: count for category, count in stats.nonzero_counts().items()},
        ),
        errors=[
            DiagnosticRecord(
                kind=err.kind.value,
                line=err.line,
                column=err.column,
                offending_text=err.offending_text,
                reason=err.reason,
            )
            for err in result.errors
        ],
    )


def serialize(document: ScanDocument, *, indent: int | None = 2) -> str:
    """Serialize a document to JSON using the kebab-case field names."""
    return document.model_dump_json(by_alias=True, indent=indent)


def deserialize(data: str) -> ScanDocument:
    """Decode a JSON document produced by :func:`serialize`.

    Raises:
        ArtifactError: If the JSON is invalid, does not match the schema, or
            carries an unsupported format version.
    """
    try:
        document = ScanDocument.model_validate_json(data)
    except ValidationError as exc:
        raise ArtifactError(f"Invalid scan report document: {exc}") from exc
    if document.version != ARTIFACT_FORMAT_VERSION:
        raise ArtifactError(f"Unsupported artifact format version: {document.version!r}")
    return document

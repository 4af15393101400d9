# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Plain-text rendering of a finished scan."""

import enum
from collections.abc import Iterable

from mylang.report.collector import ScanCollector
from mylang.scanner.tokens import Token

# ###############
# Public Interface
# ###############


class ReportSection(enum.Enum):
    """Sections of a scan report, in rendering order."""

    TOKENS = "tokens"
    STATISTICS = "statistics"
    SYMBOLS = "symbols"
    ERRORS = "errors"


ALL_SECTIONS: tuple[ReportSection, ...] = tuple(ReportSection)


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render the TOKENS section, one emittable token per line."""
    lines = ["TOKENS", "------"]
    lines.extend(str(token) for token in tokens if token.category.emittable)
    return "\n".join(lines) + "\n"


def render_report(result: ScanCollector, sections: Iterable[ReportSection] = ALL_SECTIONS) -> str:
    """Render the requested sections of a scan report.

    Sections always appear in :class:`ReportSection` order, separated by a
    blank line, regardless of the order in which they are requested.

    Args:
        result: The collector returned by :func:`mylang.scanner.lexer.scan`.
        sections: The sections to include.

    Returns:
        The report text.
    """
    wanted = set(sections)
    parts: list[str] = []
    for section in ReportSection:
        if section in wanted:
            parts.append(_RENDERERS[section](result))
    return "\n".join(parts)


# ################
# Implementation
# ################

_RENDERERS = {
    ReportSection.TOKENS: lambda result: format_tokens(result.tokens),
    ReportSection.STATISTICS: lambda result: result.statistics.format_for_report(),
    ReportSection.SYMBOLS: lambda result: result.symbol_table.format_for_report(),
    ReportSection.ERRORS: lambda result: result.errors.format_for_report(),
}

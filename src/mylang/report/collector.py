# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Receiver for scan events.

The scanner hands each completed token, skipped span and diagnostic to a
:class:`ScanCollector`, which routes it to the identifier table, the
statistics and the error reporter. None of these ever look at scanner state.
"""

from mylang.report.statistics import Statistics
from mylang.report.symbol_table import IdentifierTable
from mylang.scanner.errors import ErrorReporter, LexicalError
from mylang.scanner.tokens import Token, TokenCategory

# ###############
# Public Interface
# ###############


class ScanCollector:
    """Accumulated output of one scan.

    Attributes exposed as read-only properties:
        tokens: Emittable tokens in source order, ending with END_OF_INPUT.
        trace: Every consumed span in source order, including whitespace,
            comments and error spans. Joining the lexemes gives back the input.
        symbol_table: The identifier table.
        statistics: The running counters.
        errors: The error reporter.
    """

    def __init__(self) -> None:
        self._tokens: list[Token] = []
        self._trace: list[Token] = []
        self._symbol_table = IdentifierTable()
        self._statistics = Statistics()
        self._errors = ErrorReporter()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def add_token(self, token: Token) -> None:
        """Record an emittable token."""
        if not token.category.emittable:
            raise ValueError(f"Token category {token.category.value} is not emittable")
        self._tokens.append(token)
        self._trace.append(token)
        self._statistics.observe_token(token)
        if token.is_identifier:
            self._symbol_table.observe(token)

    def add_skipped(self, span: Token) -> None:
        """Record a whitespace span that produced no token."""
        self._trace.append(span)
        self._statistics.touch_line(_end_line(span))

    def add_comment(self, span: Token) -> None:
        """Record a removed comment span."""
        self._trace.append(span)
        self._statistics.observe_comment(_end_line(span))

    def add_error(self, error: LexicalError, span: Token | None = None) -> None:
        """Record a diagnostic and, when given, the ERROR span it consumed."""
        self._errors.add(error)
        self._statistics.observe_error(error.line)
        if span is not None:
            if span.category is not TokenCategory.ERROR:
                raise ValueError(f"Error span must have category ERROR, got {span.category.value}")
            self._trace.append(span)
            self._statistics.touch_line(_end_line(span))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def tokens(self) -> tuple[Token, ...]:
        return tuple(self._tokens)

    @property
    def trace(self) -> tuple[Token, ...]:
        return tuple(self._trace)

    @property
    def symbol_table(self) -> IdentifierTable:
        return self._symbol_table

    @property
    def statistics(self) -> Statistics:
        return self._statistics

    @property
    def errors(self) -> ErrorReporter:
        return self._errors


# ################
# Implementation
# ################


def _end_line(span: Token) -> int:
    """Return the line on which the last character of *span* sits."""
    return span.line + span.lexeme.count("\n", 0, max(len(span.lexeme) - 1, 0))

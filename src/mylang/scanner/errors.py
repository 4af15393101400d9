# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical diagnostics and the append-only reporter that collects them.

The scanner never raises on malformed input. Each dead end is recorded here
as a :class:`LexicalError` and scanning resumes at the next character.
"""

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from mylang.scanner.tokens import escape_for_display

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """Categories of lexical errors."""

    INVALID_CHARACTER = "INVALID_CHARACTER"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    MALFORMED_LITERAL = "MALFORMED_LITERAL"
    UNCLOSED_MULTILINE_COMMENT = "UNCLOSED_MULTILINE_COMMENT"


@dataclass(frozen=True)
class LexicalError:
    """A single lexical diagnostic.

    Attributes:
        kind: The error category.
        line: 1-based line of the first offending character.
        column: 1-based column of the first offending character.
        offending_text: The raw source text the error covers.
        reason: Human-readable explanation.
    """

    kind: ErrorKind
    line: int
    column: int
    offending_text: str
    reason: str

    def __str__(self) -> str:
        return (
            f"ERROR [{self.kind.value}] Line {self.line}, Col {self.column} | "
            f'Lexeme="{escape_for_display(self.offending_text)}" | Reason={self.reason}'
        )


class ErrorReporter:
    """Ordered, append-only collection of lexical errors."""

    def __init__(self) -> None:
        self._errors: list[LexicalError] = []

    def report(self, kind: ErrorKind, line: int, column: int, offending_text: str, reason: str) -> LexicalError:
        """Record a new diagnostic and return it."""
        error = LexicalError(kind, line, column, offending_text, reason)
        self._errors.append(error)
        return error

    def add(self, error: LexicalError) -> None:
        """Record an already constructed diagnostic."""
        self._errors.append(error)

    @property
    def errors(self) -> tuple[LexicalError, ...]:
        """Read-only view of all diagnostics in detection order."""
        return tuple(self._errors)

    @property
    def count(self) -> int:
        return len(self._errors)

    @property
    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[LexicalError]:
        return iter(tuple(self._errors))

    def format_for_report(self) -> str:
        """Render the ERRORS section, one diagnostic per line."""
        lines = ["ERRORS", "------"]
        if not self._errors:
            lines.append("No lexical errors.")
        else:
            lines.extend(str(error) for error in self._errors)
        return "\n".join(lines) + "\n"

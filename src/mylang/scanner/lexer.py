# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for MyLang source text.

Converts raw source text into a sequence of tokens in a single left-to-right
pass. Malformed input never stops the scan: each dead end is recorded as a
diagnostic and scanning resumes right after the offending span.
"""

from collections.abc import Callable
from dataclasses import dataclass

from mylang.report.collector import ScanCollector
from mylang.scanner.errors import ErrorKind, LexicalError
from mylang.scanner.tokens import DEFAULT_VOCABULARY, Token, TokenCategory, Vocabulary

# ###############
# Public Interface
# ###############

# Recognisers tried at every scan position, highest priority first. The last
# one matches any character, so every step consumes input.
DISPATCH_ORDER: tuple[str, ...] = (
    "block_comment",
    "line_comment",
    "two_char_operator",
    "lowercase_word",
    "identifier",
    "number",
    "leading_dot",
    "string",
    "char",
    "one_char_operator",
    "punctuator",
    "invalid_character",
)


@dataclass(frozen=True)
class ScanLimits:
    """Length limits enforced by the scanner.

    Attributes:
        max_identifier_length: Maximum identifier length, leading letter included.
        max_decimal_digits: Maximum number of digits after a float's decimal point.
    """

    max_identifier_length: int = 31
    max_decimal_digits: int = 6


def scan(
    source: str,
    *,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    limits: ScanLimits | None = None,
) -> ScanCollector:
    """Scan MyLang source text.

    Args:
        source: The full text of a MyLang source file.
        vocabulary: Keywords and boolean literals recognised by the scanner.
        limits: Identifier and float precision limits. Defaults to :class:`ScanLimits`.

    Returns:
        A :class:`ScanCollector` holding the token stream (ending with a single
        END_OF_INPUT token), the full span trace, the identifier table, the
        statistics and all lexical errors in source order.
    """
    return _Scanner(source, vocabulary, limits or ScanLimits()).run()


def tokenize(
    source: str,
    *,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    limits: ScanLimits | None = None,
) -> list[Token]:
    """Return only the emittable tokens of *source*, ending with END_OF_INPUT.

    Lexical errors are dropped; use :func:`scan` to inspect them.
    """
    return list(scan(source, vocabulary=vocabulary, limits=limits).tokens)


# ################
# Implementation
# ################

_DIGITS = frozenset("0123456789")
_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_IDENTIFIER_BODY = _LOWER | _DIGITS | {"_"}
_WHITESPACE = frozenset(" \t\r\n")
_SIGNS = frozenset("+-")
_EXPONENT_MARKERS = frozenset("eE")
_STRING_ESCAPES = frozenset('"\\ntr')
_CHAR_ESCAPES = frozenset("'\\ntr")

_TWO_CHAR_OPERATORS: dict[str, TokenCategory] = {
    "**": TokenCategory.OP_ARITHMETIC,
    "==": TokenCategory.OP_RELATIONAL,
    "!=": TokenCategory.OP_RELATIONAL,
    "<=": TokenCategory.OP_RELATIONAL,
    ">=": TokenCategory.OP_RELATIONAL,
    "&&": TokenCategory.OP_LOGICAL,
    "||": TokenCategory.OP_LOGICAL,
    "++": TokenCategory.OP_INCDEC,
    "--": TokenCategory.OP_INCDEC,
    "+=": TokenCategory.OP_ASSIGNMENT,
    "-=": TokenCategory.OP_ASSIGNMENT,
    "*=": TokenCategory.OP_ASSIGNMENT,
    "/=": TokenCategory.OP_ASSIGNMENT,
}

_ONE_CHAR_OPERATORS: dict[str, TokenCategory] = {
    "+": TokenCategory.OP_ARITHMETIC,
    "-": TokenCategory.OP_ARITHMETIC,
    "*": TokenCategory.OP_ARITHMETIC,
    "/": TokenCategory.OP_ARITHMETIC,
    "%": TokenCategory.OP_ARITHMETIC,
    "<": TokenCategory.OP_RELATIONAL,
    ">": TokenCategory.OP_RELATIONAL,
    "!": TokenCategory.OP_LOGICAL,
    "=": TokenCategory.OP_ASSIGNMENT,
}

_PUNCTUATORS = frozenset("(){}[],;:")

# A sign directly before a digit belongs to the number only after one of these.
_UNARY_CONTEXT = frozenset(
    {
        TokenCategory.OP_ARITHMETIC,
        TokenCategory.OP_RELATIONAL,
        TokenCategory.OP_LOGICAL,
        TokenCategory.OP_ASSIGNMENT,
        TokenCategory.PUNCTUATOR,
        TokenCategory.KEYWORD,
    }
)

_UNCLOSED_COMMENT_EXCERPT = 20


class _Scanner:
    """Internal scanner state machine.

    Owns the cursor (offset, line, column) and the last emitted token; pushes
    every completed token, skipped span and diagnostic to its collector.
    """

    def __init__(self, source: str, vocabulary: Vocabulary, limits: ScanLimits) -> None:
        self._source = source
        self._vocabulary = vocabulary
        self._limits = limits
        self._pos = 0
        self._line = 1
        self._column = 1
        self._last_token: Token | None = None
        self._collector = ScanCollector()
        self._rules: list[tuple[Callable[[], bool], Callable[[int, int], None]]] = [
            (getattr(self, f"_at_{name}"), getattr(self, f"_scan_{name}")) for name in DISPATCH_ORDER
        ]

    def run(self) -> ScanCollector:
        """Scan the whole source and append the terminal END_OF_INPUT token."""
        while not self._at_end():
            if self._current() in _WHITESPACE:
                self._skip_whitespace()
            else:
                self._dispatch()
        self._collector.add_token(Token(TokenCategory.END_OF_INPUT, "", self._line, self._column))
        return self._collector

    def _dispatch(self) -> None:
        """Hand the current position to the first recogniser that accepts it."""
        line = self._line
        col = self._column
        for matches, scan_rule in self._rules:
            if matches():
                scan_rule(line, col)
                return

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self, offset: int = 1) -> str:
        """Return the character *offset* positions ahead, or '' past the end of input."""
        if self._pos + offset < len(self._source):
            return self._source[self._pos + offset]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _consume_digits(self) -> int:
        """Consume a maximal digit run and return its length."""
        count = 0
        while self._current() in _DIGITS:
            self._advance()
            count += 1
        return count

    # ------------------------------------------------------------------
    # Event helpers
    # ------------------------------------------------------------------

    def _emit(self, category: TokenCategory, start: int, line: int, col: int) -> None:
        token = Token(category, self._source[start : self._pos], line, col)
        self._collector.add_token(token)
        self._last_token = token

    def _fail(self, kind: ErrorKind, start: int, line: int, col: int, reason: str) -> None:
        """Report the span consumed since *start* as a single lexical error."""
        text = self._source[start : self._pos]
        self._collector.add_error(
            LexicalError(kind, line, col, text, reason),
            Token(TokenCategory.ERROR, text, line, col),
        )

    # ------------------------------------------------------------------
    # Whitespace and comments
    # ------------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        start = self._pos
        line = self._line
        col = self._column
        while self._current() in _WHITESPACE:
            self._advance()
        self._collector.add_skipped(Token(TokenCategory.WHITESPACE, self._source[start : self._pos], line, col))

    def _at_block_comment(self) -> bool:
        return self._current() == "#" and self._peek() == "*"

    def _scan_block_comment(self, line: int, col: int) -> None:
        """Consume a nestable '#* ... *#' comment, up to end of input if unclosed."""
        start = self._pos
        self._advance()  # #
        self._advance()  # *
        depth = 1
        while not self._at_end() and depth > 0:
            if self._current() == "#" and self._peek() == "*":
                self._advance()
                self._advance()
                depth += 1
            elif self._current() == "*" and self._peek() == "#":
                self._advance()
                self._advance()
                depth -= 1
            else:
                self._advance()
        self._collector.add_comment(Token(TokenCategory.COMMENT, self._source[start : self._pos], line, col))
        if depth > 0:
            self._collector.add_error(
                LexicalError(
                    ErrorKind.UNCLOSED_MULTILINE_COMMENT,
                    line,
                    col,
                    self._source[start : start + _UNCLOSED_COMMENT_EXCERPT],
                    "Multi-line comment never closed",
                )
            )

    def _at_line_comment(self) -> bool:
        return self._current() == "#" and self._peek() == "#"

    def _scan_line_comment(self, line: int, col: int) -> None:
        """Consume from '##' through end-of-line (exclusive of the newline itself)."""
        start = self._pos
        while not self._at_end() and self._current() != "\n":
            self._advance()
        self._collector.add_comment(Token(TokenCategory.COMMENT, self._source[start : self._pos], line, col))

    # ------------------------------------------------------------------
    # Operators and punctuators
    # ------------------------------------------------------------------

    def _at_two_char_operator(self) -> bool:
        return self._source[self._pos : self._pos + 2] in _TWO_CHAR_OPERATORS

    def _scan_two_char_operator(self, line: int, col: int) -> None:
        start = self._pos
        self._advance()
        self._advance()
        self._emit(_TWO_CHAR_OPERATORS[self._source[start : self._pos]], start, line, col)

    def _at_one_char_operator(self) -> bool:
        return self._current() in _ONE_CHAR_OPERATORS

    def _scan_one_char_operator(self, line: int, col: int) -> None:
        start = self._pos
        category = _ONE_CHAR_OPERATORS[self._advance()]
        self._emit(category, start, line, col)

    def _at_punctuator(self) -> bool:
        return self._current() in _PUNCTUATORS

    def _scan_punctuator(self, line: int, col: int) -> None:
        start = self._pos
        self._advance()
        self._emit(TokenCategory.PUNCTUATOR, start, line, col)

    def _at_invalid_character(self) -> bool:
        return True

    def _scan_invalid_character(self, line: int, col: int) -> None:
        start = self._pos
        self._advance()
        self._fail(ErrorKind.INVALID_CHARACTER, start, line, col, "Unrecognized character")

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------

    def _at_lowercase_word(self) -> bool:
        return self._current() in _LOWER

    def _scan_lowercase_word(self, line: int, col: int) -> None:
        """Scan a lowercase run and classify it as keyword, boolean or error."""
        start = self._pos
        while self._current() in _LOWER:
            self._advance()
        word = self._source[start : self._pos]
        if self._vocabulary.is_keyword(word):
            self._emit(TokenCategory.KEYWORD, start, line, col)
        elif self._vocabulary.is_boolean(word):
            self._emit(TokenCategory.BOOL_LITERAL, start, line, col)
        else:
            self._fail(
                ErrorKind.INVALID_IDENTIFIER,
                start,
                line,
                col,
                "Identifiers must start with uppercase letter (A-Z)",
            )

    def _at_identifier(self) -> bool:
        return self._current() in _UPPER

    def _scan_identifier(self, line: int, col: int) -> None:
        """Scan '[A-Z][a-z0-9_]*', rejecting runs over the length limit as a whole."""
        start = self._pos
        self._advance()
        while self._current() in _IDENTIFIER_BODY:
            self._advance()
        limit = self._limits.max_identifier_length
        if self._pos - start > limit:
            self._fail(
                ErrorKind.INVALID_IDENTIFIER,
                start,
                line,
                col,
                f"Identifier exceeds maximum length of {limit} characters",
            )
            return
        self._emit(TokenCategory.IDENTIFIER, start, line, col)

    # ------------------------------------------------------------------
    # Numeric literals
    # ------------------------------------------------------------------

    def _sign_is_unary(self) -> bool:
        """Return True if a sign at the cursor starts a number rather than an operator."""
        if self._last_token is None:
            return True
        return self._last_token.category in _UNARY_CONTEXT

    def _at_number(self) -> bool:
        if self._current() in _DIGITS:
            return True
        return self._current() in _SIGNS and self._peek() in _DIGITS and self._sign_is_unary()

    def _scan_number(self, line: int, col: int) -> None:
        """Scan an integer or a float literal.

        Integer: ``[+-]?[0-9]+``. Float: ``[+-]?[0-9]+\\.[0-9]{1,6}([eE][+-]?[0-9]+)?``.
        """
        start = self._pos
        if self._current() in _SIGNS:
            self._advance()
        self._consume_digits()

        if self._current() != ".":
            self._emit(TokenCategory.INT_LITERAL, start, line, col)
            return

        if self._peek() not in _DIGITS:
            self._advance()  # the dot belongs to the malformed span
            self._fail(ErrorKind.MALFORMED_LITERAL, start, line, col, "Missing digits after decimal point")
            return

        self._advance()  # .
        decimals = self._consume_digits()
        limit = self._limits.max_decimal_digits
        if decimals > limit:
            self._consume_complete_exponent()
            self._fail(ErrorKind.MALFORMED_LITERAL, start, line, col, f"Too many decimal digits (max {limit})")
            return

        # '1.2.3': the float ends at the first fraction, '.3' is scanned next.
        if self._current() == ".":
            self._emit(TokenCategory.FLOAT_LITERAL, start, line, col)
            return

        if self._current() in _EXPONENT_MARKERS:
            self._advance()
            if self._current() in _SIGNS:
                self._advance()
            if self._consume_digits() == 0:
                self._fail(
                    ErrorKind.MALFORMED_LITERAL,
                    start,
                    line,
                    col,
                    "Float exponent requires at least one digit",
                )
                return

        self._emit(TokenCategory.FLOAT_LITERAL, start, line, col)

    def _consume_complete_exponent(self) -> None:
        """Consume '[eE][+-]?[0-9]+' at the cursor, or nothing if it is incomplete."""
        if self._current() not in _EXPONENT_MARKERS:
            return
        offset = 2 if self._peek() in _SIGNS else 1
        if self._peek(offset) not in _DIGITS:
            return
        for _ in range(offset):
            self._advance()
        self._consume_digits()

    def _at_leading_dot(self) -> bool:
        return self._current() == "." and self._peek() in _DIGITS

    def _scan_leading_dot(self, line: int, col: int) -> None:
        """Report '.14' style floats that lack an integer part."""
        start = self._pos
        self._advance()  # .
        self._consume_digits()
        self._fail(ErrorKind.MALFORMED_LITERAL, start, line, col, "Missing digits before decimal point")

    # ------------------------------------------------------------------
    # String and character literals
    # ------------------------------------------------------------------

    def _at_string(self) -> bool:
        return self._current() == '"'

    def _scan_string(self, line: int, col: int) -> None:
        """Scan a double-quoted string literal, keeping escapes verbatim in the lexeme.

        A bad escape marks the literal malformed but scanning continues to the
        closing quote, so one literal yields at most one diagnostic.
        """
        start = self._pos
        self._advance()  # opening "
        bad_escape = False
        while not self._at_end():
            ch = self._current()
            if ch == '"':
                self._advance()  # closing "
                if bad_escape:
                    self._fail(
                        ErrorKind.MALFORMED_LITERAL,
                        start,
                        line,
                        col,
                        "Invalid escape sequence in string literal",
                    )
                else:
                    self._emit(TokenCategory.STRING_LITERAL, start, line, col)
                return
            if ch == "\n":
                self._fail(ErrorKind.MALFORMED_LITERAL, start, line, col, "Unterminated string literal")
                return
            self._advance()
            if ch == "\\":
                esc = self._current()
                if esc == "":
                    break
                if esc == "\n":
                    self._fail(ErrorKind.MALFORMED_LITERAL, start, line, col, "Unterminated string literal")
                    return
                if esc not in _STRING_ESCAPES:
                    bad_escape = True
                self._advance()
        self._fail(
            ErrorKind.MALFORMED_LITERAL,
            start,
            line,
            col,
            "Unterminated string literal at end of input",
        )

    def _at_char(self) -> bool:
        return self._current() == "'"

    def _scan_char(self, line: int, col: int) -> None:
        """Scan a single-quoted character literal holding one character or one escape."""
        start = self._pos
        self._advance()  # opening '

        if self._current() in ("", "\n"):
            self._fail(ErrorKind.MALFORMED_LITERAL, start, line, col, "Unterminated character literal")
            return

        if self._current() == "'":
            self._advance()
            self._fail(ErrorKind.MALFORMED_LITERAL, start, line, col, "Empty character literal")
            return

        reason: str | None = None
        if self._advance() == "\\":
            if self._current() in ("", "\n"):
                self._fail(ErrorKind.MALFORMED_LITERAL, start, line, col, "Unterminated character literal")
                return
            if self._advance() not in _CHAR_ESCAPES:
                reason = "Invalid escape sequence in character literal"

        # Extra body characters are consumed up to the closing quote on this line.
        while not self._at_end() and self._current() not in ("'", "\n"):
            self._advance()
            if reason is None:
                reason = "Character literal contains more than one character"

        if self._current() != "'":
            self._fail(ErrorKind.MALFORMED_LITERAL, start, line, col, "Unterminated character literal")
            return

        self._advance()  # closing '
        if reason is not None:
            self._fail(ErrorKind.MALFORMED_LITERAL, start, line, col, reason)
        else:
            self._emit(TokenCategory.CHAR_LITERAL, start, line, col)

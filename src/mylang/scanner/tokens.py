# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model, category taxonomy and fixed vocabularies of MyLang."""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenCategory(enum.Enum):
    """All token categories known to the MyLang scanner.

    Each member carries an ``emittable`` flag. Non-emittable categories are
    tracked by the scanner but never appear in the displayed token stream.
    """

    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"

    # Literals
    INT_LITERAL = "INT_LITERAL"
    FLOAT_LITERAL = "FLOAT_LITERAL"
    STRING_LITERAL = "STRING_LITERAL"
    CHAR_LITERAL = "CHAR_LITERAL"
    BOOL_LITERAL = "BOOL_LITERAL"

    # Operators, split by family
    OP_ARITHMETIC = "OP_ARITHMETIC"  # + - * / % **
    OP_RELATIONAL = "OP_RELATIONAL"  # == != <= >= < >
    OP_LOGICAL = "OP_LOGICAL"  # && || !
    OP_ASSIGNMENT = "OP_ASSIGNMENT"  # = += -= *= /=
    OP_INCDEC = "OP_INCDEC"  # ++ --

    PUNCTUATOR = "PUNCTUATOR"  # ( ) { } [ ] , ; :

    # Consumed but never shown
    COMMENT = "COMMENT"
    WHITESPACE = "WHITESPACE"

    END_OF_INPUT = "END_OF_INPUT"
    ERROR = "ERROR"

    @property
    def emittable(self) -> bool:
        """Return True if tokens of this category belong to the visible token stream."""
        return self not in _NON_EMITTABLE


@dataclass(frozen=True)
class Vocabulary:
    """The reserved words recognised on the lowercase path of the scanner.

    Attributes:
        keywords: Case-sensitive keyword lexemes.
        booleans: Case-sensitive boolean literal lexemes.
    """

    keywords: frozenset[str]
    booleans: frozenset[str]

    def is_keyword(self, word: str) -> bool:
        return word in self.keywords

    def is_boolean(self, word: str) -> bool:
        return word in self.booleans


KEYWORDS: frozenset[str] = frozenset(
    {
        "start",
        "finish",
        "loop",
        "condition",
        "declare",
        "output",
        "input",
        "function",
        "return",
        "break",
        "continue",
        "else",
    }
)

BOOLEAN_LITERALS: frozenset[str] = frozenset({"true", "false"})

DEFAULT_VOCABULARY = Vocabulary(keywords=KEYWORDS, booleans=BOOLEAN_LITERALS)


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        category: The kind of token.
        lexeme: The exact source text of the token, quotes and escapes included.
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
    """

    category: TokenCategory
    lexeme: str
    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.column < 1:
            raise ValueError(f"column must be >= 1, got {self.column}")

    @property
    def is_identifier(self) -> bool:
        return self.category is TokenCategory.IDENTIFIER

    def display_lexeme(self) -> str:
        """Return the lexeme with quotes and control characters escaped."""
        return escape_for_display(self.lexeme, quotes=True)

    def __str__(self) -> str:
        return f'<{self.category.value}, "{self.display_lexeme()}", Line: {self.line}, Col: {self.column}>'


def escape_for_display(text: str, *, quotes: bool = False) -> str:
    """Escape backslashes and control characters so *text* prints on one line.

    Args:
        text: Raw source text.
        quotes: Also escape double quotes (used for token rendering).
    """
    text = text.replace("\\", "\\\\")
    if quotes:
        text = text.replace('"', '\\"')
    return text.replace("\n", "\\n").replace("\t", "\\t").replace("\r", "\\r")


# ################
# Implementation
# ################

_NON_EMITTABLE = frozenset({TokenCategory.COMMENT, TokenCategory.WHITESPACE, TokenCategory.ERROR})

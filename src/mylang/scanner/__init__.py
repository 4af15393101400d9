# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model, diagnostics and the scanning engine for MyLang.

The engine itself lives in :mod:`mylang.scanner.lexer`.
"""

from mylang.scanner.errors import ErrorKind, ErrorReporter, LexicalError
from mylang.scanner.tokens import (
    BOOLEAN_LITERALS,
    DEFAULT_VOCABULARY,
    KEYWORDS,
    Token,
    TokenCategory,
    Vocabulary,
)

__all__ = [
    "BOOLEAN_LITERALS",
    "DEFAULT_VOCABULARY",
    "ErrorKind",
    "ErrorReporter",
    "KEYWORDS",
    "LexicalError",
    "Token",
    "TokenCategory",
    "Vocabulary",
]

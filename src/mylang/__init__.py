# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""MyLang lexical analyzer."""

from mylang.scanner.lexer import DISPATCH_ORDER, ScanLimits, scan, tokenize

__all__ = [
    "DISPATCH_ORDER",
    "ScanLimits",
    "scan",
    "tokenize",
]

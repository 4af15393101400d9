# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the plain-text report composer."""

from mylang.report.composer import ReportSection, format_tokens, render_report
from mylang.scanner.lexer import scan
from mylang.scanner.tokens import Token, TokenCategory


def test_format_tokens_skips_hidden_categories() -> None:
    tokens = [
        Token(TokenCategory.KEYWORD, "start", 1, 1),
        Token(TokenCategory.WHITESPACE, " ", 1, 6),
        Token(TokenCategory.END_OF_INPUT, "", 1, 7),
    ]
    assert format_tokens(tokens) == (
        'TOKENS\n------\n<KEYWORD, "start", Line: 1, Col: 1>\n<END_OF_INPUT, "", Line: 1, Col: 7>\n'
    )


def test_full_report() -> None:
    report = render_report(scan("declare X = 'a';\nx\n"))
    assert report == (
        "TOKENS\n"
        "------\n"
        '<KEYWORD, "declare", Line: 1, Col: 1>\n'
        '<IDENTIFIER, "X", Line: 1, Col: 9>\n'
        '<OP_ASSIGNMENT, "=", Line: 1, Col: 11>\n'
        "<CHAR_LITERAL, \"'a'\", Line: 1, Col: 13>\n"
        '<PUNCTUATOR, ";", Line: 1, Col: 16>\n'
        '<END_OF_INPUT, "", Line: 3, Col: 1>\n'
        "\n"
        "STATISTICS\n"
        "----------\n"
        "Total tokens:     6\n"
        "Lines processed:  3\n"
        "Comments removed: 0\n"
        "\n"
        "Token counts by type:\n"
        "  KEYWORD           : 1\n"
        "  IDENTIFIER        : 1\n"
        "  CHAR_LITERAL      : 1\n"
        "  OP_ASSIGNMENT     : 1\n"
        "  PUNCTUATOR        : 1\n"
        "\n"
        "SYMBOL TABLE (Identifiers)\n"
        "Name | First(Line,Col) | Frequency\n"
        "-----------------------------------\n"
        "X | (1,9) | 1\n"
        "\n"
        "ERRORS\n"
        "------\n"
        'ERROR [INVALID_IDENTIFIER] Line 2, Col 1 | Lexeme="x" | '
        "Reason=Identifiers must start with uppercase letter (A-Z)\n"
    )


def test_sections_follow_fixed_order() -> None:
    result = scan("X")
    report = render_report(result, [ReportSection.ERRORS, ReportSection.TOKENS])
    assert report.index("TOKENS") < report.index("ERRORS")
    assert "STATISTICS" not in report
    assert "SYMBOL TABLE" not in report


def test_empty_section_selection() -> None:
    assert render_report(scan("X"), []) == ""


def test_report_for_malformed_input_still_has_all_sections() -> None:
    report = render_report(scan('@@ "open'))
    for header in ("TOKENS", "STATISTICS", "SYMBOL TABLE", "ERRORS"):
        assert header in report
    assert "No lexical errors." not in report

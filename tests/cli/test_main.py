# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the MyLang CLI entry point."""

import json
import sys
from pathlib import Path

import pytest

from mylang.cli.main import main
from mylang.config import CONFIG_FILE_NAME, load_config

# ###############
# Helpers
# ###############


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    """Run the CLI with *argv* and return its exit code."""
    monkeypatch.setattr(sys, "argv", ["mylang", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    code = exc_info.value.code
    return 0 if code is None else int(code)


def _write_source(tmp_path: Path, content: str, name: str = "prog.lang") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# General
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- init tests --------


def test_init_writes_default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "init", str(tmp_path)) == 0
    config = load_config(tmp_path / CONFIG_FILE_NAME)
    assert config.scanner.max_identifier_length == 31


def test_init_default_directory_uses_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert _run(monkeypatch, "init") == 0
    assert (tmp_path / CONFIG_FILE_NAME).exists()


def test_init_fails_if_config_exists(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / CONFIG_FILE_NAME).write_text("", encoding="utf-8")
    assert _run(monkeypatch, "init", str(tmp_path)) == 1


def test_init_fails_if_directory_does_not_exist(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "init", str(tmp_path / "nonexistent")) == 1


# -------- scan tests --------


def test_scan_prints_full_report(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write_source(tmp_path, "start\nX = -5;\nfinish\n")
    assert _run(monkeypatch, "scan", str(source)) == 0
    out = capsys.readouterr().out
    assert '<INT_LITERAL, "-5", Line: 2, Col: 5>' in out
    assert "X | (2,1) | 1" in out
    assert "No lexical errors." in out


def test_scan_succeeds_with_lexical_errors(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write_source(tmp_path, "X = .14 @\n")
    assert _run(monkeypatch, "scan", str(source)) == 0
    out = capsys.readouterr().out
    assert "ERROR [MALFORMED_LITERAL] Line 1, Col 5" in out
    assert "ERROR [INVALID_CHARACTER] Line 1, Col 9" in out


def test_scan_json_format(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write_source(tmp_path, "declare X;\n")
    assert _run(monkeypatch, "scan", str(source), "--format", "json") == 0
    data = json.loads(capsys.readouterr().out)
    assert data["source"] == str(source)
    assert [tok["lexeme"] for tok in data["tokens"]] == ["declare", "X", ";", ""]


def test_scan_uses_config_next_to_source(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / CONFIG_FILE_NAME).write_text(
        "scanner:\n  max-identifier-length: 3\nreport:\n  sections: [errors]\n",
        encoding="utf-8",
    )
    source = _write_source(tmp_path, "Abcd\n")
    assert _run(monkeypatch, "scan", str(source)) == 0
    out = capsys.readouterr().out
    assert "TOKENS" not in out
    assert "Identifier exceeds maximum length of 3 characters" in out


def test_scan_explicit_config(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config = tmp_path / "custom.yaml"
    config.write_text("report:\n  format: json\n", encoding="utf-8")
    source = _write_source(tmp_path, "X\n")
    assert _run(monkeypatch, "scan", str(source), "--config", str(config)) == 0
    assert json.loads(capsys.readouterr().out)["v"] == "1"


def test_scan_format_flag_overrides_config(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / CONFIG_FILE_NAME).write_text("report:\n  format: json\n", encoding="utf-8")
    source = _write_source(tmp_path, "X\n")
    assert _run(monkeypatch, "scan", str(source), "--format", "text") == 0
    assert capsys.readouterr().out.startswith("TOKENS\n")


def test_scan_invalid_config(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / CONFIG_FILE_NAME).write_text("scanner: 5\n", encoding="utf-8")
    source = _write_source(tmp_path, "X\n")
    assert _run(monkeypatch, "scan", str(source)) == 1
    assert "Error:" in capsys.readouterr().err


def test_scan_missing_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(monkeypatch, "scan", str(tmp_path / "missing.lang")) == 1
    assert "does not exist" in capsys.readouterr().err


def test_scan_reports_undecodable_bytes_as_invalid_characters(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "bad.lang"
    source.write_bytes(b"start X \xff finish\n")
    assert _run(monkeypatch, "scan", str(source)) == 0
    out = capsys.readouterr().out
    assert "TOKENS" in out
    assert '<KEYWORD, "finish", Line: 1, Col: 11>' in out
    invalid = [line for line in out.splitlines() if line.startswith("ERROR [INVALID_CHARACTER]")]
    assert invalid == ['ERROR [INVALID_CHARACTER] Line 1, Col 9 | Lexeme="\ufffd" | Reason=Unrecognized character']


def test_scan_keeps_crlf_line_endings(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = tmp_path / "crlf.lang"
    source.write_bytes(b"start\r\nfinish\r\n")
    assert _run(monkeypatch, "scan", str(source), "--format", "json") == 0
    data = json.loads(capsys.readouterr().out)
    assert [(tok["lexeme"], tok["line"], tok["column"]) for tok in data["tokens"]] == [
        ("start", 1, 1),
        ("finish", 2, 1),
        ("", 3, 1),
    ]


# -------- check tests --------


def test_check_clean_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write_source(tmp_path, "start\nfinish\n")
    assert _run(monkeypatch, "check", str(source)) == 0
    assert "No lexical errors." in capsys.readouterr().out


def test_check_reports_errors(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    source = _write_source(tmp_path, "start\n#* open\n")
    assert _run(monkeypatch, "check", str(source)) == 1
    err = capsys.readouterr().err
    assert "UNCLOSED_MULTILINE_COMMENT" in err
    assert "1 lexical error(s)" in err


def test_check_sample_program(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    sample = Path(__file__).parent.parent / "data" / "counter.lang"
    assert _run(monkeypatch, "check", str(sample)) == 0
    assert "No lexical errors." in capsys.readouterr().out


def test_scan_sample_program_statistics(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    sample = Path(__file__).parent.parent / "data" / "counter.lang"
    assert _run(monkeypatch, "scan", str(sample), "--format", "json") == 0
    stats = json.loads(capsys.readouterr().out)["statistics"]
    assert (stats["total-tokens"], stats["lines-processed"], stats["comments-removed"]) == (25, 9, 1)
    assert "END_OF_INPUT" not in stats["counts"]

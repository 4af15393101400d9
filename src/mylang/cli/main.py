# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the MyLang command-line interface."""

import argparse
import sys
from pathlib import Path

from mylang.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    MyLangConfig,
    ReportFormat,
    default_config,
    load_config,
    save_config,
)
from mylang.report.artifact import build_document, serialize
from mylang.report.composer import ReportSection, render_report
from mylang.scanner.lexer import scan

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the MyLang CLI."""
    parser = argparse.ArgumentParser(
        prog="mylang",
        description="MyLang lexical analyzer",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a default configuration file",
        description=f"Create a default {CONFIG_FILE_NAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the configuration to (default: current directory)",
    )

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan a source file and print the full report",
        description="Print tokens, statistics, the identifier table and lexical errors.",
    )
    scan_parser.add_argument("file", help="MyLang source file to scan")
    scan_parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in ReportFormat],
        default=None,
        help="Report format (default: from configuration, else text)",
    )
    _add_config_argument(scan_parser)

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Report lexical errors only",
        description="Scan a source file and exit with code 1 if it has lexical errors.",
    )
    check_parser.add_argument("file", help="MyLang source file to check")
    _add_config_argument(check_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_config_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} next to the source file, if present)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "scan":
        return _cmd_scan(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    try:
        save_config(default_config(), config_file)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Wrote default configuration to '{config_file}'.")
    return 0


def _cmd_scan(args: argparse.Namespace) -> int:
    """Handle the scan subcommand."""
    source_path = Path(args.file)
    config = _load_config_for(source_path, args.config)
    if config is None:
        return 1
    source = _read_source(source_path)
    if source is None:
        return 1

    result = scan(source, limits=config.scanner.to_limits())
    report_format = ReportFormat(args.format) if args.format else config.report.format
    if report_format is ReportFormat.JSON:
        print(serialize(build_document(result, source=str(source_path))))
    else:
        print(render_report(result, config.report.sections), end="")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    source_path = Path(args.file)
    config = _load_config_for(source_path, args.config)
    if config is None:
        return 1
    source = _read_source(source_path)
    if source is None:
        return 1

    result = scan(source, limits=config.scanner.to_limits())
    if not result.errors.has_errors:
        print("No lexical errors.")
        return 0

    print(render_report(result, [ReportSection.ERRORS]), end="", file=sys.stderr)
    print(f"{source_path}: {result.errors.count} lexical error(s).", file=sys.stderr)
    return 1


def _load_config_for(source_path: Path, explicit: str | None) -> MyLangConfig | None:
    """Load the explicit config, or the one beside the source file, or defaults.

    Prints the problem and returns None when a configuration cannot be loaded.
    """
    if explicit is not None:
        config_path = Path(explicit)
    else:
        config_path = source_path.parent / CONFIG_FILE_NAME
        if not config_path.exists():
            return default_config()
    try:
        return load_config(config_path)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _read_source(path: Path) -> str | None:
    """Read a source file once, before scanning. Prints the problem and returns None on failure.

    Undecodable bytes become U+FFFD and are reported by the scanner as invalid
    characters. Line endings are kept as they are in the file.
    """
    try:
        return path.read_bytes().decode("utf-8", errors="replace")
    except FileNotFoundError:
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
    except OSError as exc:
        print(f"Error: cannot read file '{path}': {exc}", file=sys.stderr)
    return None

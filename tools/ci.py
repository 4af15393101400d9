#!/usr/bin/env python3
# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, a CLI check of the sample program, and build."""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=mylang", "--cov-report=term-missing"]),
    ("Sample check", ["uv", "run", "mylang", "check", "tests/data/counter.lang"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps (all by default) and print a summary.

    Step names given on the command line are matched case-insensitively
    against the step labels, e.g. ``tools/ci.py lint tests``.
    """
    selected = _select_steps(sys.argv[1:] if argv is None else argv)
    if not selected:
        print(chalk.red("No matching CI steps."), file=sys.stderr)
        return 2

    results: list[tuple[str, bool, float]] = []
    for name, cmd in selected:
        _print_banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _print_banner("  Summary")
    for name, passed, elapsed in results:
        status = chalk.green("PASS") if passed else chalk.red("FAIL")
        print(f"  {status}  {name} ({elapsed:.1f}s)")
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _select_steps(names: list[str]) -> list[tuple[str, list[str]]]:
    if not names:
        return list(STEPS)
    wanted = {name.lower() for name in names}
    return [step for step in STEPS if any(w in step[0].lower() for w in wanted)]


def _print_banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(title))
    print(sep)


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())

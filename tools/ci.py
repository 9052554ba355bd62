#!/usr/bin/env python3
# Copyright 2026 Schemascope Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the CI checks locally: format, lint, type check, tests, CLI smoke run and build."""

import argparse
import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

SAMPLES = "examples"

STEPS: list[tuple[str, list[str]]] = [
    ("format", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("types", ["uv", "run", "ty", "check", "src/"]),
    ("tests", ["uv", "run", "pytest", "--cov=schemascope", "--cov-report=term-missing"]),
    ("smoke", ["uv", "run", "schemascope", "fields", f"{SAMPLES}/todo.yaml", "todo"]),
    ("build", ["uv", "build"]),
]


def main() -> int:
    """Run the selected CI steps and print a pass/fail summary."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--skip",
        action="append",
        default=[],
        choices=[name for name, _ in STEPS],
        help="Step to skip; may be repeated",
    )
    args = parser.parse_args()

    results: list[tuple[str, bool, float]] = []
    for name, cmd in STEPS:
        if name in args.skip:
            continue
        _banner(f"{name}: {' '.join(cmd[2:])}")
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("Summary")
    failed = [name for name, passed, _ in results if not passed]
    for name, passed, elapsed in results:
        paint = chalk.green if passed else chalk.red
        print(paint(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))

    if failed:
        print(chalk.red(f"\n{len(failed)} of {len(results)} step(s) failed: {', '.join(failed)}"))
        return 1
    print(chalk.green(f"\nAll {len(results)} step(s) passed"))
    return 0


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    rule = chalk.blue("=" * 60)
    print(f"\n{rule}\n{chalk.blue(title)}\n{rule}")


def _repo_root() -> pathlib.Path:
    return pathlib.Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Validate every expectations file (``*.yml``/``*.yaml``) under a directory."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_EXCLUDES = {".git", ".venv", "venv", "build", "dist", "__pycache__", ".github"}


def iter_yaml_files(root: Path, excludes: set[str]) -> Iterable[Path]:
    """Yield YAML files under *root* while skipping excluded directories."""
    for pattern in ("*.yml", "*.yaml"):
        for path in root.rglob(pattern):
            if any(part in excludes for part in path.relative_to(root).parts):
                continue
            if path.is_file():
                yield path


def main() -> int:
    parser = argparse.ArgumentParser(description="Validate expectations files in a directory tree.")
    parser.add_argument(
        "--root",
        type=Path,
        default=PROJECT_ROOT,
        help="Root directory to scan for expectations files.",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=list(DEFAULT_EXCLUDES),
        help="Directories to exclude from the search (can be specified multiple times).",
    )
    args = parser.parse_args()

    src_dir = PROJECT_ROOT / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from expected_logs.config import load_expectations
    from expected_logs.errors import ExpectationConfigError

    root = args.root.resolve()
    yaml_files = sorted(set(iter_yaml_files(root, set(args.exclude))))
    if not yaml_files:
        print("No expectations files found.")
        return 0

    failures: list[Path] = []
    for yaml_file in yaml_files:
        relative_path = yaml_file.relative_to(root)
        try:
            config = load_expectations(yaml_file)
        except ExpectationConfigError as exc:
            print(f"ERROR: {relative_path}")
            print(exc.reason)
            failures.append(yaml_file)
            continue
        print(f"OK: {relative_path} ({len(config.patterns)} pattern(s), level {config.level})")

    if failures:
        print(f"Validation failed for {len(failures)} file(s).")
        return 1

    print("All expectations files validated successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

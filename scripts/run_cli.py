#!/usr/bin/env python3
"""Launcher for the expected-logs Typer CLI.

Adds the local ``src`` directory to ``sys.path`` so the validate and replay
commands can be used from a fresh checkout without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """Invoke the CLI with ``argv`` (defaults to the process arguments)."""
    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from expected_logs.cli import app

    app(prog_name="expected-logs", args=argv)


if __name__ == "__main__":
    main()

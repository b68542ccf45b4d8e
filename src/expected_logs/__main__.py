from __future__ import annotations

import sys
from pathlib import Path


def _ensure_package_on_path() -> None:
    """Insert the ``src`` directory into ``sys.path`` when run as a script.

    Running ``python src/expected_logs/__main__.py`` puts this file's own
    directory first on ``sys.path``, where ``expected_logs`` cannot be found
    with absolute imports. Adding the parent directory keeps the package
    importable both installed and from a checkout.
    """

    package_dir = Path(__file__).resolve().parent
    src_root = str(package_dir.parent)
    if src_root not in sys.path:
        sys.path.insert(0, src_root)


def _load_app():
    _ensure_package_on_path()
    from expected_logs.cli import app as cli_app

    return cli_app


app = _load_app()


def main() -> None:
    """Entrypoint for running the CLI application."""

    app(prog_name="expected-logs")


if __name__ == "__main__":
    main()

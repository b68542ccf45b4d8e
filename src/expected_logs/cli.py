"""Console entrypoints for checking log files against expectations files."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.table import Table

from expected_logs.config import ExpectationConfig, load_expectations
from expected_logs.errors import ExpectationConfigError, InterceptorError, UnknownCountError
from expected_logs.interceptor import LogInterceptor
from expected_logs.logging_utils import DEFAULT_LOGGER, LoggingManager
from expected_logs.types import COUNT_LABELS, CountKind


def render_patterns(config: ExpectationConfig) -> Table:
    """Build a table listing the patterns of an expectations file."""
    table = Table("#", "Pattern", title=f"{config.source} ({config.level})")
    for index, pattern in enumerate(config.patterns, start=1):
        table.add_row(str(index), pattern.pattern)
    return table


def render_counts(interceptor: LogInterceptor) -> Table:
    """Build a table of the interceptor's counters and their default thresholds."""
    counts = interceptor.counts
    table = Table("Counter", "Observed", "Default threshold", title="Replay summary")
    for kind, label in COUNT_LABELS.items():
        table.add_row(label, str(counts.value(kind)), str(counts.default_threshold(kind)))
    return table


def replay_lines(
    config: ExpectationConfig,
    lines: list[str],
    logger: LoggingManager = DEFAULT_LOGGER,
) -> LogInterceptor:
    """Send each line through ``config.level`` of a private logger under interception."""
    target = logging.Logger("expected_logs.replay")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("UNEXPECTED %(levelname)s %(message)s"))
    target.addHandler(handler)

    interceptor = LogInterceptor.from_config(config, target=target, logger=logger)
    emit = getattr(target, config.level)
    try:
        for line in lines:
            emit(line)
    finally:
        interceptor.restore()
    return interceptor


class ExpectedLogsCLI:
    """Object-oriented wrapper for the Typer command-line interface."""

    def __init__(self, logger: LoggingManager = DEFAULT_LOGGER) -> None:
        self.logger = logger
        self.app = typer.Typer(help="Check log output against expected message patterns.")
        self.app.command("validate")(self._validate)
        self.app.command("replay")(self._replay)

    def _load(self, expectations: str) -> ExpectationConfig:
        try:
            return load_expectations(expectations)
        except ExpectationConfigError as exc:
            self.logger.debug("Rejected expectations file: %s", exc)
            typer.echo(f"Invalid expectations file: {exc}", err=True)
            raise typer.Exit(code=2) from exc

    def _validate(
        self,
        expectations: str = typer.Argument(..., help="Path to a YAML expectations file."),
    ) -> None:
        """Compile every pattern of an expectations file and list them."""

        config = self._load(expectations)
        if not callable(getattr(logging.Logger, config.level, None)):
            typer.echo(f"Level '{config.level}' is not a logging.Logger operation.", err=True)
            raise typer.Exit(code=2)

        console = Console(force_terminal=False)
        console.print(render_patterns(config))
        typer.echo(f"{len(config.patterns)} pattern(s) OK for level '{config.level}'.")

    def _replay(
        self,
        expectations: str = typer.Argument(..., help="Path to a YAML expectations file."),
        log_file: str = typer.Argument(..., help="Log file whose lines are replayed, one message per line."),
        key: str = typer.Option(
            "",
            "--key",
            "-k",
            help="Counter to check: errors, handled, matches, unhandled (default: all).",
        ),
        threshold: int | None = typer.Option(
            None,
            "--threshold",
            "-t",
            min=0,
            help="Exact count required instead of the default threshold.",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            help="Enable verbose debug logging.",
        ),
    ) -> None:
        """Replay a log file through an interceptor and check the counters."""

        self.logger.setup(verbose)
        config = self._load(expectations)

        try:
            with open(log_file, encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle if line.strip()]
        except OSError as exc:
            typer.echo(f"Failed to read {log_file}: {exc}", err=True)
            raise typer.Exit(code=2) from exc

        try:
            kind = CountKind.from_key(key)
            interceptor = replay_lines(config, lines, logger=self.logger)
        except (InterceptorError, UnknownCountError) as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=2) from exc

        console = Console(force_terminal=False)
        console.print(render_counts(interceptor))
        for text in interceptor.unhandled_messages:
            typer.echo(f"[UNHANDLED] {text}")

        if interceptor.check(kind, threshold):
            typer.echo(f"Expectations met for {len(lines)} line(s).")
            raise typer.Exit(code=0)

        typer.echo(f"Expectations not met for {len(lines)} line(s).", err=True)
        raise typer.Exit(code=1)

    def run(self) -> None:
        """Invoke the Typer application."""
        self.app()


cli = ExpectedLogsCLI()
app = cli.app


if __name__ == "__main__":
    cli.run()

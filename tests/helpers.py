"""Reusable test utilities and recording stubs for the test suite."""


class RecordingLogger:
    """In-memory stand-in for ``LoggingManager``."""

    def __init__(self):
        self.messages: list[str] = []
        self.setup_calls: list[bool] = []

    def setup(self, verbose: bool, log_file: str | None = None) -> None:
        self.setup_calls.append(verbose)

    def log(self, msg: str, *args: object) -> None:
        self.messages.append(msg % args if args else msg)

    def debug(self, msg: str, *args: object) -> None:
        self.messages.append(f"DEBUG:{msg % args if args else msg}")

    def warning(self, msg: str, *args: object) -> None:  # pragma: no cover - simple passthrough
        self.messages.append(f"WARNING:{msg % args if args else msg}")


class RecordingChannel:
    """Logging object whose output operations record what reaches them."""

    def __init__(self):
        self.output: list[tuple[str, str, dict]] = []

    def error(self, msg, *args, **kwargs) -> None:
        self.output.append(("error", msg % args if args else msg, kwargs))

    def warning(self, msg, *args, **kwargs) -> None:
        self.output.append(("warning", msg % args if args else msg, kwargs))

"""Run status: error/debug reporting and overall success flag.

One Status per run, passed explicitly to every component that can fail.
No global state.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text
from rich.traceback import Traceback


class Status:
    """Accumulates errors and debug messages of a run.

    Errors are printed immediately and flip the failed flag permanently.
    Debug messages are printed only when debug is enabled.
    Messages use %-style formatting: status.error("bad %s", value).
    """

    def __init__(
        self,
        debug: bool = False,
        *,
        error_console: Console | None = None,
        debug_console: Console | None = None,
    ) -> None:
        """Initialize status.

        Args:
            debug: Print debug messages
            error_console: Destination for errors (default: stderr)
            debug_console: Destination for debug messages (default: stderr)
        """
        self._debug = debug
        self._error_console = error_console or Console(stderr=True, highlight=False)
        self._debug_console = debug_console or Console(stderr=True, highlight=False)
        self._errors: list[str] = []

    @property
    def debug_enabled(self) -> bool:
        """Whether debug messages are printed."""
        return self._debug

    @property
    def ok(self) -> bool:
        """True if no error was reported."""
        return not self._errors

    @property
    def errors(self) -> tuple[str, ...]:
        """All reported error messages, in order."""
        return tuple(self._errors)

    def debug(self, message: str, *args: object) -> None:
        """Print debug message if debug is enabled."""
        if not self._debug:
            return
        self._debug_console.print(Text(_format(message, args), style="dim"), soft_wrap=True)

    def error(self, message: str | BaseException, *args: object) -> None:
        """Report error and mark the run as failed.

        Args:
            message: Format string, or exception to report
            args: Format arguments (ignored for exceptions)
        """
        if isinstance(message, BaseException):
            text = f"{type(message).__name__}: {message}"
        else:
            text = _format(message, args)
        self._errors.append(text)

        self._error_console.print(Text.assemble(("Error: ", "bold red"), text), soft_wrap=True)
        if self._debug and isinstance(message, BaseException) and message.__traceback__:
            self._error_console.print(
                Traceback.from_exception(type(message), message, message.__traceback__)
            )


def _format(message: str, args: tuple[object, ...]) -> str:
    """Apply %-formatting only when arguments are given."""
    return message % args if args else message

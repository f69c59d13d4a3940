"""Tests for application/status.py."""

from io import StringIO

from rich.console import Console

from class2greylist.application.status import Status
from tests.factories import make_status


class TestStatusErrors:
    def test_ok_initially(self) -> None:
        status, _ = make_status()
        assert status.ok is True
        assert status.errors == ()

    def test_error_marks_failed(self) -> None:
        status, output = make_status()

        status.error("Not a valid integer: %s from argument value '%s'", "x", "x:foo.txt")

        assert status.ok is False
        assert status.errors == ("Not a valid integer: x from argument value 'x:foo.txt'",)
        assert "Error: Not a valid integer: x" in output.getvalue()

    def test_failed_flag_is_persistent(self) -> None:
        status, _ = make_status()
        status.error("first")
        status.debug("later debug")
        assert status.ok is False

    def test_error_from_exception(self) -> None:
        status, output = make_status()

        status.error(ValueError("boom"))

        assert status.errors == ("ValueError: boom",)
        assert "Error: ValueError: boom" in output.getvalue()

    def test_message_without_args_not_formatted(self) -> None:
        status, _ = make_status()
        status.error("100% broken")
        assert status.errors == ("100% broken",)

    def test_long_message_not_wrapped(self) -> None:
        status, output = make_status()
        signature = "La/" + "b" * 300 + ";->run()V"

        status.error("bad %s", signature)

        assert signature in output.getvalue()


class TestStatusDebug:
    def test_debug_hidden_by_default(self) -> None:
        status, output = make_status()
        status.debug("Processing jar file %s", "a.jar")
        assert output.getvalue() == ""
        assert status.ok is True

    def test_debug_printed_when_enabled(self) -> None:
        status, output = make_status(debug=True)
        status.debug("Processing jar file %s", "a.jar")
        assert "Processing jar file a.jar" in output.getvalue()
        assert status.debug_enabled is True

    def test_separate_streams(self) -> None:
        errors = StringIO()
        debug = StringIO()
        status = Status(
            True,
            error_console=Console(file=errors, color_system=None),
            debug_console=Console(file=debug, color_system=None),
        )

        status.debug("dbg")
        status.error("err")

        assert "dbg" in debug.getvalue()
        assert "dbg" not in errors.getvalue()
        assert "Error: err" in errors.getvalue()
        assert "err" not in debug.getvalue()

    def test_exception_traceback_in_debug_mode(self) -> None:
        status, output = make_status(debug=True)
        try:
            raise RuntimeError("with traceback")
        except RuntimeError as e:
            status.error(e)

        assert "Error: RuntimeError: with traceback" in output.getvalue()
        assert "Traceback" in output.getvalue()

"""Tests for the Rich Console factory and the console error callback."""

from io import StringIO

import pytest

from promptloop.domain.reasons import FailedValidation, WrongType
from promptloop.output.console import (
    PL_THEME,
    console_error_response,
    create_console,
    style_for_reason,
)


class TestCreateConsole:
    def test_defaults_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        captured = capsys.readouterr()
        assert captured.err == "hello\n"
        assert captured.out == ""

    def test_explicit_file(self) -> None:
        buf = StringIO()
        console = create_console(file=buf, no_color=True)
        console.print("[bold red]hello[/bold red]")
        assert buf.getvalue() == "hello\n"

    def test_custom_width(self) -> None:
        assert create_console(file=StringIO(), width=80).width == 80


class TestStyleForReason:
    def test_known(self) -> None:
        assert style_for_reason(WrongType()) == "pl.warning"
        assert style_for_reason(FailedValidation("M")) == "pl.error"


class TestConsoleErrorResponse:
    def test_plain_text_when_not_a_terminal(self) -> None:
        buf = StringIO()
        respond = console_error_response(create_console(file=buf))
        respond("abc", WrongType())
        respond("-5", FailedValidation("must be positive"))
        respond("-5", FailedValidation(""))
        assert buf.getvalue() == (
            "Invalid input\nInvalid input: must be positive\nInvalid input\n"
        )

    def test_message_with_brackets_is_not_markup(self) -> None:
        buf = StringIO()
        respond = console_error_response(create_console(file=buf))
        respond("x", FailedValidation("must match [a-z]+"))
        assert buf.getvalue() == "Invalid input: must match [a-z]+\n"


class TestTheme:
    def test_theme_has_expected_styles(self) -> None:
        for name in ("pl.ok", "pl.error", "pl.warning", "pl.value"):
            assert name in PL_THEME.styles, f"Missing theme style: {name}"

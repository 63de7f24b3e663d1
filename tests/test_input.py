"""Tests for the read_* convenience functions."""

from __future__ import annotations

import enum

import pytest

from promptloop.domain.validation import greater_than, not_empty, within
from promptloop.errors import EndOfInput, UnsupportedTypeError
from promptloop.infrastructure.console import ScriptedLineSource
from promptloop.input import read_bool, read_float, read_int, read_line, read_object
from tests.conftest import RecordingErrorResponse


class Size(enum.Enum):
    SMALL = "s"
    LARGE = "l"


class TestReadLine:
    def test_returns_text_verbatim(self) -> None:
        assert read_line(source=ScriptedLineSource(["  spaced  "])) == "  spaced  "

    def test_validation(self, recorder: RecordingErrorResponse) -> None:
        source = ScriptedLineSource(["", "Ada"])
        name = read_line("Name:", validation=[not_empty()], error_response=recorder, source=source)
        assert name == "Ada"
        assert recorder.kinds == ["failed_validation"]

    def test_secure(self) -> None:
        source = ScriptedLineSource(["pw"])
        assert read_line("Password", secure=True, source=source) == "pw"
        assert source.reads == ["hidden"]


class TestReadInt:
    def test_age_example(
        self, recorder: RecordingErrorResponse, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = ScriptedLineSource(["abc", "-5", "30"])
        age = read_int(
            "Age",
            validation=[greater_than(0, message="must be positive")],
            error_response=recorder,
            source=source,
        )
        assert age == 30
        assert recorder.kinds == ["wrong_type", "failed_validation"]
        assert capsys.readouterr().out == "Age Age Age "


class TestReadFloat:
    def test_range(self, recorder: RecordingErrorResponse) -> None:
        source = ScriptedLineSource(["1.5", "0.25"])
        value = read_float(validation=[within(0.0, 1.0)], error_response=recorder, source=source)
        assert value == 0.25
        assert recorder.calls[0][0] == "1.5"


class TestReadBool:
    def test_yes(self) -> None:
        assert read_bool("Continue?", source=ScriptedLineSource(["YES"])) is True

    def test_no(self) -> None:
        assert read_bool(source=ScriptedLineSource(["f"])) is False

    def test_unrecognized_retries(self, recorder: RecordingErrorResponse) -> None:
        source = ScriptedLineSource(["maybe", "y"])
        assert read_bool(error_response=recorder, source=source) is True
        assert recorder.kinds == ["wrong_type"]


class TestReadObject:
    def test_enum(self) -> None:
        assert read_object(Size, "Size", source=ScriptedLineSource(["l"])) is Size.LARGE

    def test_unsupported_type_raises_before_reading(self) -> None:
        source = ScriptedLineSource(["x"])
        with pytest.raises(UnsupportedTypeError):
            read_object(set, source=source)
        assert source.remaining == 1

    def test_end_of_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(EndOfInput) as exc_info:
            read_int("Age", source=ScriptedLineSource([]))
        assert exc_info.value.code == 1
        assert capsys.readouterr().err == ""

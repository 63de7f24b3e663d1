"""Shared pytest fixtures and test helpers for promptloop tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest
from click.testing import CliRunner

from promptloop.domain.reasons import FailedValidation, WrongType
from promptloop.infrastructure.console import ScriptedLineSource


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def scripted() -> Callable[..., ScriptedLineSource]:
    """Factory for canned input: ``scripted("abc", "42")``."""

    def make(*lines: str) -> ScriptedLineSource:
        return ScriptedLineSource(lines)

    return make


class RecordingErrorResponse:
    """Error callback that records every ``(raw, reason)`` it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, WrongType | FailedValidation]] = []

    def __call__(self, raw: str, reason: WrongType | FailedValidation) -> None:
        self.calls.append((raw, reason))

    @property
    def kinds(self) -> list[str]:
        return [reason.kind for _, reason in self.calls]


@pytest.fixture
def recorder() -> RecordingErrorResponse:
    return RecordingErrorResponse()


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo handler/level changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pl = logging.getLogger("promptloop")
    pl_level = pl.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pl.setLevel(pl_level)

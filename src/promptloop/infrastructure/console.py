"""Console line sources and prompt rendering.

The line source is the only place promptloop touches stdin.  Readers
receive one as a dependency, so tests swap in a :class:`ScriptedLineSource`
instead of patching process-wide state.

Both read methods block until a full line arrives and return ``None``
once the stream is exhausted.
"""

from __future__ import annotations

import getpass
import sys
from collections.abc import Iterable
from typing import Protocol, TextIO

import click


class LineSource(Protocol):
    """Where raw input lines come from."""

    def read_line(self) -> str | None: ...

    def read_hidden(self) -> str | None: ...


class StdinLineSource:
    """Read from the process console.

    Plain lines come from :func:`input`; hidden lines from
    :func:`getpass.getpass`, which reads from the controlling terminal
    with echo disabled.  When stdin is not a terminal there is no echo to
    suppress, so hidden reads fall back to plain ones.
    """

    def read_line(self) -> str | None:
        try:
            return input()
        except EOFError:
            return None

    def read_hidden(self) -> str | None:
        if not sys.stdin.isatty():
            return self.read_line()
        try:
            return getpass.getpass("")
        except EOFError:
            return None


class ScriptedLineSource:
    """Replay a fixed sequence of lines, then report end-of-input.

    Hidden and plain reads draw from the same queue.  ``reads`` records
    which mode each consumed line was read in.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines = list(lines)
        self.reads: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def _next(self, mode: str) -> str | None:
        if not self._lines:
            return None
        self.reads.append(mode)
        return self._lines.pop(0)

    def read_line(self) -> str | None:
        return self._next("plain")

    def read_hidden(self) -> str | None:
        return self._next("hidden")


def render_prompt(prompt: str | None) -> str | None:
    """Return *prompt* with exactly one separator before the cursor.

    A prompt already ending in a space or newline is returned unchanged;
    otherwise a single space is appended.  ``None`` stays ``None``.
    """
    if prompt is None:
        return None
    if prompt.endswith((" ", "\n")):
        return prompt
    return prompt + " "


def write_prompt(prompt: str | None, file: TextIO | None = None, *, err: bool = False) -> None:
    """Print the rendered prompt without a newline.

    The prompt goes to stdout unless *err* is set (or *file* is given), so
    callers that print their answer on stdout can keep the prompt off it.

    ``click.echo`` flushes after every write, so the prompt is visible
    before the blocking read starts.
    """
    rendered = render_prompt(prompt)
    if rendered is None:
        return
    click.echo(rendered, file=file, nl=False, err=err)

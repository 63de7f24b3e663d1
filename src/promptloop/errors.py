"""Exception hierarchy for promptloop.

Recoverable input problems (wrong type, failed validation) never raise;
they are reported through the reader's error callback and the loop retries.
Only configuration mistakes and end-of-input escape the reader.
"""

from __future__ import annotations


class PromptLoopError(Exception):
    """Base class for promptloop configuration errors."""


class UnsupportedTypeError(PromptLoopError, TypeError):
    """No converter is known for the requested target type."""

    def __init__(self, target: object) -> None:
        name = getattr(target, "__name__", repr(target))
        super().__init__(f"Cannot read values of type {name!r} from the console")
        self.target = target


class EndOfInput(SystemExit):
    """The input stream is exhausted; no further input can be requested.

    Subclasses ``SystemExit`` with status 1, so an uncaught instance ends
    the process exactly like ``sys.exit(1)``.  Embedding applications that
    want to decide for themselves can catch it explicitly.
    """

    def __init__(self) -> None:
        super().__init__(1)

"""promptloop: prompt, read, convert, and validate console input."""

from __future__ import annotations

__version__ = "0.1.0"

from promptloop.domain.reasons import FailedValidation, InvalidInputReason, WrongType
from promptloop.domain.validation import ValidationResult, Validator
from promptloop.errors import EndOfInput, PromptLoopError, UnsupportedTypeError
from promptloop.infrastructure.console import ScriptedLineSource, StdinLineSource
from promptloop.input import read_bool, read_float, read_int, read_line, read_object
from promptloop.services.reader import InputReader, PromptSpec

__all__ = [
    "EndOfInput",
    "FailedValidation",
    "InputReader",
    "InvalidInputReason",
    "PromptLoopError",
    "PromptSpec",
    "ScriptedLineSource",
    "StdinLineSource",
    "UnsupportedTypeError",
    "ValidationResult",
    "Validator",
    "WrongType",
    "__version__",
    "read_bool",
    "read_float",
    "read_int",
    "read_line",
    "read_object",
]

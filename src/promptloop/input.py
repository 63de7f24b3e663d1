"""Convenience entry points for reading typed console input.

Each function builds a :class:`~promptloop.services.reader.PromptSpec`
and runs an :class:`~promptloop.services.reader.InputReader` for one
target type.  They block until valid input arrives; on end-of-input they
raise :class:`~promptloop.errors.EndOfInput` (exit status 1).

Example::

    age = read_int("Age", validation=[greater_than(0, message="must be positive")])
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from promptloop.domain.validation import Validator
from promptloop.infrastructure.console import LineSource
from promptloop.services.reader import ErrorResponse, InputReader, PromptSpec

T = TypeVar("T")


def read_object(
    target: type[T],
    prompt: str | None = None,
    *,
    secure: bool = False,
    validation: Sequence[Validator[Any]] = (),
    error_response: ErrorResponse | None = None,
    source: LineSource | None = None,
) -> T:
    """Read a value of any convertible *target* type.

    Raises:
        UnsupportedTypeError: if *target* has no converter.
    """
    spec = PromptSpec(
        prompt=prompt,
        secure=secure,
        validation=tuple(validation),
        error_response=error_response,
    )
    return InputReader.for_type(target, spec, source=source).read()


def read_line(
    prompt: str | None = None,
    *,
    secure: bool = False,
    validation: Sequence[Validator[Any]] = (),
    error_response: ErrorResponse | None = None,
    source: LineSource | None = None,
) -> str:
    """Read a line of text."""
    return read_object(
        str,
        prompt,
        secure=secure,
        validation=validation,
        error_response=error_response,
        source=source,
    )


def read_int(
    prompt: str | None = None,
    *,
    secure: bool = False,
    validation: Sequence[Validator[Any]] = (),
    error_response: ErrorResponse | None = None,
    source: LineSource | None = None,
) -> int:
    """Read an integer."""
    return read_object(
        int,
        prompt,
        secure=secure,
        validation=validation,
        error_response=error_response,
        source=source,
    )


def read_float(
    prompt: str | None = None,
    *,
    secure: bool = False,
    validation: Sequence[Validator[Any]] = (),
    error_response: ErrorResponse | None = None,
    source: LineSource | None = None,
) -> float:
    """Read a floating-point number."""
    return read_object(
        float,
        prompt,
        secure=secure,
        validation=validation,
        error_response=error_response,
        source=source,
    )


def read_bool(
    prompt: str | None = None,
    *,
    secure: bool = False,
    validation: Sequence[Validator[Any]] = (),
    error_response: ErrorResponse | None = None,
    source: LineSource | None = None,
) -> bool:
    """Read a yes/no answer.

    ``y``, ``yes``, ``t``, ``true`` are truthy and ``n``, ``no``, ``f``,
    ``false`` are falsy (case-insensitive).  Anything else is re-asked.
    """
    return read_object(
        bool,
        prompt,
        secure=secure,
        validation=validation,
        error_response=error_response,
        source=source,
    )

"""Validators: named predicates over converted values.

A validator answers one question about a value and, when the answer is
no, carries the message shown to the user.  Validators are evaluated in
the order given and evaluation stops at the first failure.

The factory functions below build the common rules.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ValidationResult(BaseModel):
    """Outcome of one validator against one value."""

    model_config = {"frozen": True}

    ok: bool
    message: str = ""

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, message: str = "") -> ValidationResult:
        return cls(ok=False, message=message)


class Validator(BaseModel, Generic[T]):
    """A named predicate with the message reported when it fails.

    Attributes:
        name: Short identifier for logs (e.g. ``"greater_than"``).
        message: Shown to the user when the predicate rejects a value.
        predicate: Returns True when the value is acceptable.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    message: str = ""
    predicate: Callable[[Any], bool]

    def validate(self, value: T) -> ValidationResult:
        if self.predicate(value):
            return ValidationResult.success()
        return ValidationResult.failure(self.message)

    def __call__(self, value: T) -> ValidationResult:
        return self.validate(value)


def custom(
    message: str, predicate: Callable[[Any], bool], *, name: str = "custom"
) -> Validator[Any]:
    """Wrap an arbitrary predicate."""
    return Validator(name=name, message=message, predicate=predicate)


def _render(values: tuple[Any, ...]) -> str:
    return ", ".join(str(v) for v in values)


def allowing(*values: Any, message: str | None = None) -> Validator[Any]:
    """Accept only the listed values."""
    allowed = tuple(values)
    return Validator(
        name="allowing",
        message=message if message is not None else f"must be one of: {_render(allowed)}",
        predicate=lambda value: value in allowed,
    )


def rejecting(*values: Any, message: str | None = None) -> Validator[Any]:
    """Reject the listed values."""
    rejected = tuple(values)
    return Validator(
        name="rejecting",
        message=message if message is not None else f"must not be one of: {_render(rejected)}",
        predicate=lambda value: value not in rejected,
    )


def greater_than(bound: Any, *, message: str | None = None) -> Validator[Any]:
    return Validator(
        name="greater_than",
        message=message if message is not None else f"must be greater than {bound}",
        predicate=lambda value: value > bound,
    )


def less_than(bound: Any, *, message: str | None = None) -> Validator[Any]:
    return Validator(
        name="less_than",
        message=message if message is not None else f"must be less than {bound}",
        predicate=lambda value: value < bound,
    )


def within(low: Any, high: Any, *, message: str | None = None) -> Validator[Any]:
    """Accept values in the inclusive range ``[low, high]``."""
    return Validator(
        name="within",
        message=message if message is not None else f"must be between {low} and {high}",
        predicate=lambda value: low <= value <= high,
    )


def contains(substring: str, *, message: str | None = None) -> Validator[str]:
    return Validator(
        name="contains",
        message=message if message is not None else f"must contain '{substring}'",
        predicate=lambda value: substring in value,
    )


def not_empty(*, message: str | None = None) -> Validator[str]:
    """Reject empty or whitespace-only text."""
    return Validator(
        name="not_empty",
        message=message if message is not None else "must not be empty",
        predicate=lambda value: bool(value.strip()),
    )


def matches(pattern: str | re.Pattern[str], *, message: str | None = None) -> Validator[str]:
    """Require the whole value to match *pattern*."""
    compiled = re.compile(pattern)
    return Validator(
        name="matches",
        message=message if message is not None else f"must match {compiled.pattern}",
        predicate=lambda value: compiled.fullmatch(value) is not None,
    )

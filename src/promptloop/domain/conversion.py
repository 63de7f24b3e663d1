"""Conversion of raw console text into typed values.

A converter takes the raw line (without its trailing newline) and returns
either a value of the target type or ``None``.  Conversion is atomic:
there is no partially converted result.

Built-in converters cover ``str``, ``int``, ``float``, and ``bool``.
Enum subclasses and any class exposing a ``convert_from_string``
classmethod are also convertible.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from promptloop.errors import UnsupportedTypeError

T = TypeVar("T")

TRUTHY: frozenset[str] = frozenset({"y", "yes", "t", "true"})
FALSY: frozenset[str] = frozenset({"n", "no", "f", "false"})


@runtime_checkable
class ConvertibleFromString(Protocol):
    """A type that knows how to parse itself from console text."""

    @classmethod
    def convert_from_string(cls, raw: str) -> Any: ...


def convert_str(raw: str) -> str:
    """Identity conversion; a line of text is always valid text."""
    return raw


def _plain_number(raw: str) -> bool:
    """True unless *raw* has digit separators or non-ASCII digits, which int() accepts."""
    return raw.isascii() and "_" not in raw


def convert_int(raw: str) -> int | None:
    if not _plain_number(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def convert_float(raw: str) -> float | None:
    if not _plain_number(raw):
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def convert_bool(raw: str) -> bool | None:
    """Parse yes/no style answers, case-insensitively.

    ``y``, ``yes``, ``t``, ``true`` are truthy; ``n``, ``no``, ``f``,
    ``false`` are falsy.  Anything else is not a boolean.
    """
    token = raw.strip().lower()
    if token in TRUTHY:
        return True
    if token in FALSY:
        return False
    return None


def _enum_converter(enum_cls: type[enum.Enum]) -> Callable[[str], enum.Enum | None]:
    def convert(raw: str) -> enum.Enum | None:
        text = raw.strip()
        for member in enum_cls:
            if str(member.value) == text:
                return member
        lowered = text.lower()
        for name, member in enum_cls.__members__.items():
            if name.lower() == lowered:
                return member
        return None

    return convert


_BUILTIN_CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: convert_str,
    int: convert_int,
    float: convert_float,
    bool: convert_bool,
}


def converter_for(target: type[T]) -> Callable[[str], T | None]:
    """Return the converter for *target*.

    Raises:
        UnsupportedTypeError: if *target* has no known conversion.
    """
    builtin = _BUILTIN_CONVERTERS.get(target)
    if builtin is not None:
        return builtin
    if isinstance(target, type) and issubclass(target, enum.Enum):
        return _enum_converter(target)  # type: ignore[return-value]
    if isinstance(target, type) and isinstance(target, ConvertibleFromString):
        return target.convert_from_string
    raise UnsupportedTypeError(target)

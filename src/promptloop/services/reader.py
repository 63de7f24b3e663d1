"""InputReader: the prompt, read, convert, validate loop.

INVARIANT: ``InputReader.read()`` has exactly one successful exit: a value
that converted cleanly and passed every validator.  Wrong types and failed
validations are reported through the error callback and the loop asks
again.  End-of-input raises :class:`~promptloop.errors.EndOfInput`, which
exits the process with status 1 unless the caller catches it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

import click
from pydantic import BaseModel, ConfigDict, Field

from promptloop.config.logging import reader_context
from promptloop.domain.conversion import converter_for
from promptloop.domain.reasons import FailedValidation, WrongType, describe
from promptloop.domain.validation import Validator
from promptloop.errors import EndOfInput
from promptloop.infrastructure.console import LineSource, StdinLineSource, write_prompt

T = TypeVar("T")

ErrorResponse = Callable[[str, WrongType | FailedValidation], None]

logger = logging.getLogger(__name__)


def default_error_response(raw: str, reason: WrongType | FailedValidation) -> None:
    """Write ``Invalid input`` (plus the validator message, if any) to stderr."""
    click.echo(describe(reason), err=True)


class PromptSpec(BaseModel):
    """What to ask and how to judge the answer.

    Attributes:
        prompt: Text printed before reading, or None for no prompt.
        secure: Read without echoing typed characters.
        prompt_err: Print the prompt on stderr instead of stdout.
        validation: Validators run in order against the converted value.
        error_response: Called with the raw text and the rejection reason.
            None selects :func:`default_error_response`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    prompt: str | None = None
    secure: bool = False
    prompt_err: bool = False
    validation: tuple[Validator, ...] = Field(default_factory=tuple)
    error_response: ErrorResponse | None = None


class InputReader(Generic[T]):
    """Read one valid value of type ``T`` from a line source.

    Args:
        converter: Parses raw text into ``T`` or returns None.
        spec: Prompt, echo mode, validators, and error callback.
        source: Line source; defaults to the process console.
    """

    def __init__(
        self,
        converter: Callable[[str], T | None],
        spec: PromptSpec | None = None,
        *,
        source: LineSource | None = None,
    ) -> None:
        self.converter = converter
        self.spec = spec if spec is not None else PromptSpec()
        self.source: LineSource = source or StdinLineSource()
        self.error_response: ErrorResponse = self.spec.error_response or default_error_response

    @classmethod
    def for_type(
        cls,
        target: type[T],
        spec: PromptSpec | None = None,
        *,
        source: LineSource | None = None,
    ) -> InputReader[T]:
        """Build a reader using the registered converter for *target*."""
        return cls(converter_for(target), spec, source=source)

    def read(self) -> T:
        with reader_context(prompt=self.spec.prompt, secure=self.spec.secure):
            return self._loop()

    def _loop(self) -> T:
        attempt = 0
        while True:
            attempt += 1
            write_prompt(self.spec.prompt, err=self.spec.prompt_err)

            raw = self.source.read_hidden() if self.spec.secure else self.source.read_line()
            if raw is None:
                logger.debug("Input exhausted on attempt %d", attempt)
                raise EndOfInput()

            converted = self.converter(raw)
            if converted is None:
                self._reject(raw, WrongType(), attempt)
                continue

            failure = run_validators(self.spec.validation, converted)
            if failure is not None:
                self._reject(raw, failure, attempt)
                continue

            logger.debug("Input accepted on attempt %d", attempt)
            return converted

    def _reject(self, raw: str, reason: WrongType | FailedValidation, attempt: int) -> None:
        logger.debug("Input rejected on attempt %d: %s", attempt, reason.kind)
        self.error_response(raw, reason)


def run_validators(validators: Sequence[Validator[Any]], value: Any) -> FailedValidation | None:
    """Evaluate *validators* in order; return the first failure, or None."""
    for validator in validators:
        result = validator.validate(value)
        if not result.ok:
            return FailedValidation(result.message, validator=validator.name)
    return None

"""Why a line of input was rejected.

Two reasons exist: the raw text could not be converted to the target
type, or the converted value failed a validator.  They are frozen
pydantic models discriminated by ``kind`` so they serialize cleanly in
structured logs and JSON output.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class WrongType(BaseModel):
    """The raw text could not be converted to the target type."""

    model_config = {"frozen": True}

    kind: Literal["wrong_type"] = "wrong_type"


class FailedValidation(BaseModel):
    """The converted value was rejected by a validator."""

    model_config = {"frozen": True}

    kind: Literal["failed_validation"] = "failed_validation"
    message: str = ""
    validator: str = ""

    def __init__(self, message: str = "", **data: object) -> None:
        super().__init__(message=message, **data)


InvalidInputReason = Annotated[WrongType | FailedValidation, Field(discriminator="kind")]


def describe(reason: WrongType | FailedValidation) -> str:
    """Return the user-facing error line for *reason*.

    ``"Invalid input"``, followed by ``": <message>"`` when a validator
    supplied a non-empty message.
    """
    line = "Invalid input"
    if isinstance(reason, FailedValidation) and reason.message:
        line += f": {reason.message}"
    return line

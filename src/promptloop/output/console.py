"""Rich Console factory and theme for promptloop's CLI.

Rejection messages go to stderr through a themed Console.  Rich drops
color codes when stderr is not a terminal, so piped and captured output
carries exactly the plain ``Invalid input`` text.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from promptloop.domain.reasons import FailedValidation, WrongType, describe
from promptloop.services.reader import ErrorResponse

PL_THEME = Theme(
    {
        "pl.ok": "bold green",
        "pl.error": "bold red",
        "pl.warning": "bold yellow",
        "pl.value": "bold",
    }
)

_REASON_STYLES: dict[str, str] = {
    "wrong_type": "pl.warning",
    "failed_validation": "pl.error",
}


def create_console(
    *, file: TextIO | None = None, no_color: bool = False, width: int | None = None
) -> Console:
    """Create a stderr Console (or one writing to *file*).

    Args:
        file: Explicit output stream; None means the current ``sys.stderr``.
        no_color: Disable ANSI escape codes.
        width: Override terminal width.
    """
    return Console(
        file=file,
        stderr=file is None,
        theme=PL_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width,
    )


def style_for_reason(reason: WrongType | FailedValidation) -> str:
    """Return the theme style used to print *reason*."""
    return _REASON_STYLES.get(reason.kind, "")


def console_error_response(console: Console) -> ErrorResponse:
    """Build an error callback that prints rejections through *console*."""

    def respond(raw: str, reason: WrongType | FailedValidation) -> None:
        console.print(Text(describe(reason), style=style_for_reason(reason)))

    return respond

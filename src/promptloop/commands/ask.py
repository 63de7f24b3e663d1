"""Command: ask the user for one typed, validated value."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import click

from promptloop.commands._base import PromptCommand
from promptloop.domain import validation as rules
from promptloop.domain.conversion import converter_for

if TYPE_CHECKING:
    from promptloop.commands._context import AppContext
    from promptloop.domain.validation import Validator

_ASK_EXAMPLES = """\
  promptloop ask --prompt "Name:" --not-empty
  promptloop ask --prompt Age --type int --min 1 --max 130
  promptloop ask --prompt "Continue?" --type bool
  promptloop ask --prompt Password --secret --pattern '.{8,}'
  promptloop --json ask --prompt Color --choice red --choice green"""

_TYPES: dict[str, type] = {
    "line": str,
    "int": int,
    "float": float,
    "bool": bool,
}


def _convert_option(name: str, raw: str, target: type) -> Any:
    value = converter_for(target)(raw)
    if value is None:
        raise click.BadParameter(f"{raw!r} is not a valid {target.__name__}", param_hint=name)
    return value


def build_validators(
    target: type,
    *,
    not_empty: bool = False,
    pattern: str | None = None,
    minimum: str | None = None,
    maximum: str | None = None,
    choices: tuple[str, ...] = (),
    rejects: tuple[str, ...] = (),
) -> list[Validator[Any]]:
    """Translate ``ask`` options into an ordered validator list.

    Raises:
        click.UsageError: for options that do not apply to *target*.
        click.BadParameter: for option values that do not convert to *target*,
            or a --pattern that is not a valid regular expression.
    """
    validators: list[Validator[Any]] = []
    if not_empty or pattern is not None:
        if target is not str:
            raise click.UsageError("--not-empty and --pattern only apply to --type line.")
        if not_empty:
            validators.append(rules.not_empty())
        if pattern is not None:
            try:
                validators.append(rules.matches(pattern))
            except re.error as exc:
                raise click.BadParameter(
                    f"{pattern!r} is not a valid regular expression: {exc}",
                    param_hint="--pattern",
                ) from exc
    if minimum is not None or maximum is not None:
        if target not in (int, float):
            raise click.UsageError("--min and --max only apply to --type int or float.")
        if minimum is not None:
            low = _convert_option("--min", minimum, target)
            validators.append(
                rules.custom(f"must be at least {low}", lambda v: v >= low, name="minimum")
            )
        if maximum is not None:
            high = _convert_option("--max", maximum, target)
            validators.append(
                rules.custom(f"must be at most {high}", lambda v: v <= high, name="maximum")
            )
    if choices:
        validators.append(
            rules.allowing(*(_convert_option("--choice", c, target) for c in choices))
        )
    if rejects:
        validators.append(
            rules.rejecting(*(_convert_option("--reject", r, target) for r in rejects))
        )
    return validators


@click.command("ask", cls=PromptCommand, examples=_ASK_EXAMPLES)
@click.option("-p", "--prompt", default=None, help="Prompt text shown before reading.")
@click.option(
    "--type",
    "answer_type",
    type=click.Choice(list(_TYPES), case_sensitive=False),
    default=None,
    help="Type of the answer (default from config, else line).",
)
@click.option("--secret/--no-secret", default=None, help="Hide typed characters.")
@click.option("--not-empty", is_flag=True, help="Reject blank answers (line only).")
@click.option("--pattern", default=None, help="Regex the whole answer must match (line only).")
@click.option("--min", "minimum", default=None, help="Smallest accepted number.")
@click.option("--max", "maximum", default=None, help="Largest accepted number.")
@click.option("--choice", "choices", multiple=True, help="Accepted value (repeatable).")
@click.option("--reject", "rejects", multiple=True, help="Rejected value (repeatable).")
@click.pass_obj
def ask(
    app: AppContext,
    prompt: str | None,
    answer_type: str | None,
    secret: bool | None,
    not_empty: bool,
    pattern: str | None,
    minimum: str | None,
    maximum: str | None,
    choices: tuple[str, ...],
    rejects: tuple[str, ...],
) -> None:
    """Prompt until a valid answer is entered, then print it."""
    type_name = (answer_type or app.settings.ask.type).lower()
    target = _TYPES[type_name]
    if secret is None:
        secret = app.settings.ask.secret

    validators = build_validators(
        target,
        not_empty=not_empty,
        pattern=pattern,
        minimum=minimum,
        maximum=maximum,
        choices=choices,
        rejects=rejects,
    )

    from promptloop.errors import EndOfInput
    from promptloop.output.console import console_error_response, create_console
    from promptloop.services.reader import InputReader, PromptSpec
    from promptloop.services.result import CommandError, CommandResult

    if app.settings.quiet:
        error_response = _silent
    else:
        error_response = console_error_response(create_console())

    spec = PromptSpec(
        prompt=prompt,
        secure=secret,
        prompt_err=True,
        validation=tuple(validators),
        error_response=error_response,
    )
    try:
        value = InputReader.for_type(target, spec).read()
    except EndOfInput:
        app.emit(
            CommandResult(
                ok=False,
                op="ask",
                error=CommandError(code="end_of_input", message="input stream closed"),
            )
        )
        return

    app.emit(CommandResult(ok=True, op="ask", data={"type": type_name, "value": value}))


def _silent(raw: str, reason: object) -> None:
    """Error callback for ``--quiet``: reject without printing."""

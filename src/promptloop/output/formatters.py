"""Plain/JSON formatting of CommandResult.

Human output is just the answer value, so ``$(promptloop ask ...)``
captures it directly.  ``--json`` dumps the whole result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from promptloop.services.result import CommandResult


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_result(result: CommandResult, *, json_output: bool = False) -> str:
    """Format a CommandResult for display.

    Args:
        result: The result to format.
        json_output: If True, return JSON; otherwise the bare value.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        return _format_value(result.data.get("value", ""))
    error_msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op}: {error_msg}"

"""Subcommand modules for promptloop.

register_commands() imports lazily so ``promptloop --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the root CLI group."""
    from promptloop.commands.ask import ask

    cli.add_command(ask)

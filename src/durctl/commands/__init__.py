"""Subcommand modules for durctl.

register_commands() imports lazily so ``durctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from durctl.commands.add import add
    from durctl.commands.parse import parse

    cli.add_command(add)
    cli.add_command(parse)

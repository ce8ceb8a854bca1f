"""Command: show how a duration string normalizes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from durctl.commands._base import DurCommand

if TYPE_CHECKING:
    from durctl.commands._context import AppContext


@click.command(
    cls=DurCommand,
    examples="""\
  durctl parse "twenty one minutes"
  durctl parse "1.5 hours"
  durctl parse 5:30:15
  durctl --json parse "one hundred twenty days\"""",
)
@click.argument("duration")
@click.pass_obj
def parse(app: AppContext, duration: str) -> None:
    """Parse DURATION into days, hours, minutes, seconds and milliseconds."""
    from durctl.services.duration import DurationService

    app.emit(DurationService(app.settings.engine).parse(duration))

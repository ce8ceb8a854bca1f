"""Command: add a duration to a start time in a shop timezone."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from durctl.commands._base import DurCommand

if TYPE_CHECKING:
    from durctl.commands._context import AppContext


@click.command(
    cls=DurCommand,
    examples="""\
  durctl add 7d
  durctl add "3 days, 2 hours and 15 minutes" --tz America/Chicago
  durctl add "1 day" --start "2025-03-09 00:00" --tz America/Chicago
  durctl add 5:30 --start 2025-03-01T10:00:00Z
  durctl add P7D --start 1741500000000 --tz Asia/Tokyo
  durctl --json add "five and a half minutes\"""",
)
@click.argument("duration")
@click.option(
    "-s",
    "--start",
    default=None,
    help="Start time: ISO with Z/offset, local wall clock, or epoch ms. Default: now.",
)
@click.option("--tz", "timezone", default=None, help="IANA timezone (default from config).")
@click.option(
    "--calendar",
    type=click.Choice(["auto", "zoneinfo", "naive"]),
    default=None,
    help="Calendar backend (default from config).",
)
@click.pass_obj
def add(
    app: AppContext,
    duration: str,
    start: str | None,
    timezone: str | None,
    calendar: str | None,
) -> None:
    """Add DURATION to a start time and print the UTC end instant."""
    from durctl.domain.starts import coerce_epoch_digits
    from durctl.services.duration import DurationService

    svc = DurationService(app.settings.engine)
    app.emit(
        svc.add(
            duration,
            start=coerce_epoch_digits(start),
            timezone=timezone,
            calendar=calendar,
        )
    )

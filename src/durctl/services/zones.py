"""Zone resolver: start value + timezone → ZonedMoment.

The same offset-less string ``"2025-03-01T10:00"`` names a different
instant in every zone; strings with ``Z`` or an offset, aware datetimes,
and epoch milliseconds name one instant whatever the zone.
"""

from __future__ import annotations

from datetime import tzinfo

from durctl.domain.starts import AbsoluteStart, WallClockStart, classify_start
from durctl.infrastructure.calendar import CalendarBackend, ZonedMoment, select_calendar


def resolve_in_zone(
    start: object,
    zone: tzinfo | None,
    zone_name: str,
    calendar: CalendarBackend,
) -> ZonedMoment:
    """Resolve *start* against an already-loaded zone."""
    shape = classify_start(start)
    if shape is None:
        return calendar.now(zone, zone_name)
    if isinstance(shape, AbsoluteStart):
        return calendar.at_instant(shape.instant, zone, zone_name)
    if isinstance(shape, WallClockStart):
        return calendar.at_wall_clock(shape.wall, zone, zone_name)
    msg = f"Unhandled start shape: {shape!r}"
    raise TypeError(msg)


def resolve_start(
    start: object,
    timezone: str,
    calendar: CalendarBackend | None = None,
) -> ZonedMoment:
    """Resolve *start* in *timezone*.

    The timezone is validated before the start value is looked at.

    Raises:
        InvalidTimeZone: *timezone* is not an IANA zone.
        UnsupportedStartValue: *start* has no recognized shape.
        InvalidStartDate: *start* is date-like but not a real instant.
    """
    backend = calendar if calendar is not None else select_calendar()
    zone = backend.load_zone(timezone)
    return resolve_in_zone(start, zone, timezone, backend)

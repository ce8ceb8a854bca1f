"""The duration engine: parse, resolve the start, add, serialize.

Usage::

    add = create_adder("America/Chicago")
    ends_at = add("7d")                          # from now
    ends_at = add("2 days", "2025-03-08 00:00")  # Chicago wall clock
    ends_at = add("1:30", 1741500000000)         # epoch milliseconds

The adder captures only immutable state (zone name, loaded zone, calendar
backend) and is safe to share between callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, tzinfo

from durctl.domain.duration import DurationBag
from durctl.domain.instants import format_utc_iso
from durctl.domain.parser import parse_duration
from durctl.infrastructure.calendar import (
    CalendarBackend,
    CalendarMode,
    ZonedMoment,
    select_calendar,
)
from durctl.services.telemetry import trace_span
from durctl.services.zones import resolve_in_zone

StartValue = datetime | int | float | str | None


@dataclass(frozen=True)
class Addition:
    """Every intermediate of one addition, for callers that want more than the string."""

    duration: DurationBag
    start: ZonedMoment
    end: datetime

    @property
    def ends_at(self) -> str:
        return format_utc_iso(self.end)


class DurationAdder:
    """Adds duration text to a start, in one fixed timezone."""

    def __init__(self, timezone: str, calendar: CalendarBackend) -> None:
        self._calendar = calendar
        self._zone: tzinfo | None = calendar.load_zone(timezone)
        self._timezone = timezone

    @property
    def timezone(self) -> str:
        return self._timezone

    @property
    def calendar(self) -> CalendarBackend:
        return self._calendar

    def compute(self, duration: str, start: StartValue = None) -> Addition:
        """Parse *duration*, resolve *start*, and add them."""
        with trace_span("parse") as span:
            bag = parse_duration(duration)
            if span:
                span.annotate("duration", bag.to_iso())
        with trace_span("resolve_start"):
            moment = resolve_in_zone(start, self._zone, self._timezone, self._calendar)
        with trace_span("add") as span:
            end = self._calendar.add(moment, bag)
            if span:
                span.annotate("calendar", self._calendar.name)
        return Addition(duration=bag, start=moment, end=end)

    def __call__(self, duration: str, start: StartValue = None) -> str:
        return self.compute(duration, start).ends_at

    def __repr__(self) -> str:
        return f"DurationAdder(timezone={self._timezone!r}, calendar={self._calendar.name!r})"


def create_adder(
    timezone: str,
    *,
    calendar: CalendarBackend | CalendarMode | str | None = None,
) -> DurationAdder:
    """Build an adder bound to *timezone*.

    *calendar* is a backend instance, or a :class:`CalendarMode` to pass to
    :func:`select_calendar` (default ``auto``).

    Raises:
        InvalidTimeZone: Immediately, before any duration is parsed.
        CalendarUnavailable: ``zoneinfo`` mode without a timezone database.
    """
    if calendar is None or isinstance(calendar, str):
        backend = select_calendar(calendar or CalendarMode.AUTO)
    else:
        backend = calendar
    return DurationAdder(timezone, backend)


def add_duration_utc(
    duration: str,
    start: StartValue = None,
    timezone: str = "UTC",
    *,
    calendar: CalendarBackend | CalendarMode | str | None = None,
) -> str:
    """One-shot: add *duration* to *start* in *timezone*, return UTC ISO text."""
    return create_adder(timezone, calendar=calendar)(duration, start)

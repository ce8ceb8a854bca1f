"""Calendar arithmetic backends.

Two implementations of :class:`CalendarBackend`, picked once by
:func:`select_calendar` and injected into the adder:

- :class:`ZoneInfoCalendar`: DST-aware, backed by the IANA database
  (stdlib ``zoneinfo``, data from the system or the ``tzdata`` package).
  Days are added on the wall clock, the rest as exact elapsed time.
- :class:`NaiveCalendar`: degraded fallback. Every day is 24 hours and
  wall-clock starts are read in the host's local zone. Only used when no
  timezone database exists (or when forced), and always announced with a
  warning.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo
from enum import StrEnum
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from durctl.domain.duration import DurationBag
from durctl.domain.errors import (
    CalendarUnavailable,
    DurationOutOfRange,
    InvalidStartDate,
    InvalidTimeZone,
)

logger = logging.getLogger(__name__)

# Zone loaded to check whether a real database is installed; it carries DST rules.
PROBE_ZONE = "America/Chicago"

IANA_NAME_RE = re.compile(r"^[A-Za-z0-9_+\-]+(?:/[A-Za-z0-9_+\-]+)*$")


class CalendarMode(StrEnum):
    """Backend selection policy."""

    AUTO = "auto"
    ZONEINFO = "zoneinfo"
    NAIVE = "naive"


@dataclass(frozen=True)
class ZonedMoment:
    """An aware point in time, expressed in the zone it was resolved for."""

    value: datetime
    zone: str

    @property
    def instant(self) -> datetime:
        return self.value.astimezone(UTC)


class CalendarBackend(Protocol):
    """Zone loading, start resolution, and duration addition."""

    name: str
    dst_aware: bool

    def load_zone(self, name: str) -> tzinfo | None: ...

    def now(self, zone: tzinfo | None, name: str) -> ZonedMoment: ...

    def at_instant(self, instant: datetime, zone: tzinfo | None, name: str) -> ZonedMoment: ...

    def at_wall_clock(self, wall: datetime, zone: tzinfo | None, name: str) -> ZonedMoment: ...

    def add(self, moment: ZonedMoment, bag: DurationBag) -> datetime: ...


def _check_zone_name(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidTimeZone(name)
    return name.strip()


def _load_zoneinfo(name: object) -> ZoneInfo:
    key = _check_zone_name(name)
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidTimeZone(name) from exc


class ZoneInfoCalendar:
    """DST-aware arithmetic on IANA zones."""

    name = "zoneinfo"
    dst_aware = True

    def load_zone(self, name: str) -> tzinfo:
        return _load_zoneinfo(name)

    def now(self, zone: tzinfo | None, name: str) -> ZonedMoment:
        return ZonedMoment(datetime.now(zone), name)

    def at_instant(self, instant: datetime, zone: tzinfo | None, name: str) -> ZonedMoment:
        try:
            return ZonedMoment(instant.astimezone(zone), name)
        except OverflowError as exc:
            raise InvalidStartDate(instant, "outside the datetime range") from exc

    def at_wall_clock(self, wall: datetime, zone: tzinfo | None, name: str) -> ZonedMoment:
        """Read *wall* in *zone*.

        fold=0 picks the earlier instant for a repeated hour and pushes a
        skipped (spring-forward) time forward by the length of the gap.
        """
        local = wall.replace(tzinfo=zone, fold=0)
        try:
            resolved = local.astimezone(UTC).astimezone(zone)
        except OverflowError as exc:
            raise InvalidStartDate(wall, "outside the datetime range") from exc
        return ZonedMoment(resolved, name)

    def add(self, moment: ZonedMoment, bag: DurationBag) -> datetime:
        """Add days on the wall clock, then the time part as elapsed time."""
        value = moment.value
        try:
            if bag.days:
                wall = value.replace(tzinfo=None) + timedelta(days=bag.days)
                value = wall.replace(tzinfo=value.tzinfo, fold=0)
            return value.astimezone(UTC) + bag.time_part()
        except OverflowError as exc:
            msg = f"Adding {bag.to_iso()} to {moment.value.isoformat()} leaves the datetime range"
            raise DurationOutOfRange(msg, start=moment.value.isoformat(), duration=bag.to_iso()) from exc


class NaiveCalendar:
    """Fixed 24-hour days in the host's local zone. Not DST-aware."""

    name = "naive"
    dst_aware = False

    def load_zone(self, name: str) -> None:
        """Validate *name*; the zone itself is never used for arithmetic.

        With a timezone database installed the name must be a real zone.
        Without one only its shape can be checked.
        """
        if tz_database_available():
            _load_zoneinfo(name)
            return None
        key = _check_zone_name(name)
        if not IANA_NAME_RE.match(key):
            raise InvalidTimeZone(name)
        return None

    def now(self, zone: tzinfo | None, name: str) -> ZonedMoment:
        return ZonedMoment(datetime.now().astimezone(), name)

    def at_instant(self, instant: datetime, zone: tzinfo | None, name: str) -> ZonedMoment:
        try:
            return ZonedMoment(instant.astimezone(), name)
        except (OverflowError, OSError) as exc:
            raise InvalidStartDate(instant, "outside the host clock range") from exc

    def at_wall_clock(self, wall: datetime, zone: tzinfo | None, name: str) -> ZonedMoment:
        try:
            return ZonedMoment(wall.astimezone(), name)
        except (OverflowError, OSError) as exc:
            raise InvalidStartDate(wall, "outside the host clock range") from exc

    def add(self, moment: ZonedMoment, bag: DurationBag) -> datetime:
        try:
            return moment.value.astimezone(UTC) + bag.to_timedelta()
        except OverflowError as exc:
            msg = f"Adding {bag.to_iso()} to {moment.value.isoformat()} leaves the datetime range"
            raise DurationOutOfRange(msg, start=moment.value.isoformat(), duration=bag.to_iso()) from exc


def tz_database_available() -> bool:
    """Return True if IANA zone data can be loaded."""
    try:
        ZoneInfo(PROBE_ZONE)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


def select_calendar(mode: CalendarMode | str = CalendarMode.AUTO) -> CalendarBackend:
    """Pick the calendar backend for *mode*.

    - ``auto``: zoneinfo if a database is installed, else naive with a warning.
    - ``zoneinfo``: zoneinfo or :class:`CalendarUnavailable`.
    - ``naive``: naive, with a warning.
    """
    mode = CalendarMode(mode)
    if mode is CalendarMode.NAIVE:
        logger.warning(
            "Naive calendar forced: days are fixed 24h and local start times "
            "are read in the host zone, not the target timezone"
        )
        return NaiveCalendar()

    if tz_database_available():
        logger.debug("Calendar backend: zoneinfo")
        return ZoneInfoCalendar()

    if mode is CalendarMode.ZONEINFO:
        msg = "No IANA timezone database found; install the 'tzdata' package for DST-safe arithmetic"
        raise CalendarUnavailable(msg)

    logger.warning(
        "No IANA timezone database found; falling back to naive arithmetic "
        "(24h days, host-local parsing). Install 'tzdata' for DST-safe results"
    )
    return NaiveCalendar()

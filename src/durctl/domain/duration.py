"""DurationBag and the carry normalizer.

INVARIANT: A DurationBag is always normalized:
``0 <= milliseconds < 1000``, ``0 <= seconds < 60``, ``0 <= minutes < 60``,
``0 <= hours < 24``, ``days >= 0``. The field constraints reject anything
else, so the only way to build one from raw counts is :func:`normalize`.
"""

from __future__ import annotations

import math
from datetime import timedelta
from fractions import Fraction

from pydantic import BaseModel, Field

from durctl.domain.units import MILLISECONDS_PER, SPLIT_CHAIN, Unit


class DurationBag(BaseModel):
    """Normalized duration, split into calendar days and exact time units."""

    model_config = {"frozen": True}

    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0, lt=24)
    minutes: int = Field(default=0, ge=0, lt=60)
    seconds: int = Field(default=0, ge=0, lt=60)
    milliseconds: int = Field(default=0, ge=0, lt=1000)

    @property
    def is_zero(self) -> bool:
        return self.total_milliseconds() == 0

    def total_milliseconds(self) -> int:
        """Length in milliseconds, counting every day as 24 hours."""
        return sum(getattr(self, unit.value) * MILLISECONDS_PER[unit] for unit in Unit)

    def time_part(self) -> timedelta:
        """The exact (non-calendar) portion: hours through milliseconds."""
        return timedelta(
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            milliseconds=self.milliseconds,
        )

    def to_timedelta(self) -> timedelta:
        """Fixed-length equivalent (24-hour days). Not DST-aware."""
        return timedelta(days=self.days) + self.time_part()

    def to_iso(self) -> str:
        """Render as an ISO-8601 duration, e.g. ``P1DT2H30M`` or ``PT0S``."""
        date_part = f"{self.days}D" if self.days else ""
        time_part = ""
        if self.hours:
            time_part += f"{self.hours}H"
        if self.minutes:
            time_part += f"{self.minutes}M"
        if self.seconds or self.milliseconds:
            if self.milliseconds:
                time_part += f"{self.seconds}.{self.milliseconds:03d}S"
            else:
                time_part += f"{self.seconds}S"
        if not date_part and not time_part:
            return "PT0S"
        return f"P{date_part}" + (f"T{time_part}" if time_part else "")


class DurationAccumulator:
    """Mutable per-unit counters filled while scanning unit phrases.

    Counters may exceed their base (``seconds=125``) until :func:`normalize`
    carries them upward.
    """

    def __init__(self) -> None:
        self.counts: dict[Unit, int] = dict.fromkeys(Unit, 0)

    def add(self, unit: Unit, value: Fraction | int) -> None:
        """Add *value* of *unit*: whole part here, fraction to the next smaller unit.

        A fraction that is still fractional in the smaller unit keeps
        cascading down; milliseconds are rounded half-up.
        """
        remaining = Fraction(value)
        while True:
            if unit is Unit.MILLISECONDS:
                self.counts[unit] += math.floor(remaining + Fraction(1, 2))
                return
            whole = math.floor(remaining)
            self.counts[unit] += whole
            fraction = remaining - whole
            if not fraction:
                return
            unit, base = SPLIT_CHAIN[unit]
            remaining = fraction * base


def normalize(acc: DurationAccumulator) -> DurationBag:
    """Carry overflow bottom-up, once per step: ms→s→min→h→days."""
    counts = acc.counts
    carry, milliseconds = divmod(counts[Unit.MILLISECONDS], 1000)
    carry, seconds = divmod(counts[Unit.SECONDS] + carry, 60)
    carry, minutes = divmod(counts[Unit.MINUTES] + carry, 60)
    carry, hours = divmod(counts[Unit.HOURS] + carry, 24)
    days = counts[Unit.DAYS] + carry
    return DurationBag(
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        milliseconds=milliseconds,
    )


def bag_from_parts(
    *,
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int | Fraction = 0,
    milliseconds: int = 0,
) -> DurationBag:
    """Build a normalized bag from raw, possibly overflowing, counts."""
    acc = DurationAccumulator()
    acc.add(Unit.DAYS, days)
    acc.add(Unit.HOURS, hours)
    acc.add(Unit.MINUTES, minutes)
    acc.add(Unit.SECONDS, seconds)
    acc.add(Unit.MILLISECONDS, milliseconds)
    return normalize(acc)

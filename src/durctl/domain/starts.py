"""Start value classification.

A start is either absent, an absolute instant, or a local wall-clock time
that only becomes an instant once a timezone is applied. This module sorts
raw inputs into those shapes without touching any timezone database:

- :class:`AbsoluteStart`: aware datetime (UTC-normalized) fixed in time.
- :class:`WallClockStart`: naive datetime to be read in the target zone.

Zone resolution itself lives in :mod:`durctl.services.zones`.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from durctl.domain.errors import InvalidStartDate, UnsupportedStartValue

PARENTHETICAL_RE = re.compile(r"\([^)]*\)")

_DATE = r"\d{4}-\d{2}-\d{2}"
_TIME = r"\d{2}:\d{2}(?::\d{2}(?:[.,]\d+)?)?"

ABSOLUTE_RE = re.compile(
    rf"^(?P<stamp>{_DATE}[T ]{_TIME})(?P<offset>[zZ]|[+-]\d{{2}}:?\d{{2}})(?:\[[^\]]+\])?$"
)
WALL_CLOCK_RE = re.compile(rf"^{_DATE}(?:[T ]{_TIME})?$")

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


@dataclass(frozen=True)
class AbsoluteStart:
    """A start fixed in absolute time; the target zone only changes its display."""

    instant: datetime


@dataclass(frozen=True)
class WallClockStart:
    """A start given as wall-clock time, meaningful only within a zone."""

    wall: datetime


Start = AbsoluteStart | WallClockStart


def normalize_start_text(text: str) -> str:
    """Trim, drop ``(...)`` asides, and collapse whitespace."""
    return " ".join(PARENTHETICAL_RE.sub(" ", text).split())


def _from_iso(text: str, original: object) -> datetime:
    try:
        return datetime.fromisoformat(text.replace(" ", "T", 1).replace(",", "."))
    except ValueError as exc:
        raise InvalidStartDate(original, str(exc)) from exc


def parse_start_string(text: str) -> Start:
    """Classify a start string as absolute (has offset) or wall-clock.

    Examples:
        >>> parse_start_string("2025-03-01T10:00Z")
        AbsoluteStart(instant=datetime.datetime(2025, 3, 1, 10, 0, tzinfo=datetime.timezone.utc))
        >>> parse_start_string("2025-03-01 10:00")
        WallClockStart(wall=datetime.datetime(2025, 3, 1, 10, 0))

    Raises:
        UnsupportedStartValue: Text is neither shape.
        InvalidStartDate: Right shape, impossible date (``2025-02-30``).
    """
    cleaned = normalize_start_text(text)

    match = ABSOLUTE_RE.match(cleaned)
    if match:
        offset = match.group("offset")
        if offset in ("z", "Z"):
            offset = "+00:00"
        elif ":" not in offset:
            offset = f"{offset[:3]}:{offset[3:]}"
        parsed = _from_iso(match.group("stamp") + offset, text)
        try:
            return AbsoluteStart(parsed.astimezone(UTC))
        except OverflowError as exc:
            raise InvalidStartDate(text, "outside the datetime range") from exc

    if WALL_CLOCK_RE.match(cleaned):
        return WallClockStart(_from_iso(cleaned, text))

    raise UnsupportedStartValue(text)


def coerce_epoch_digits(value: object) -> object:
    """Turn a bare digit string (``"1741500000000"``) into epoch milliseconds.

    Command-line and config values arrive as text; anything else passes
    through unchanged.
    """
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return value


def epoch_millis_to_instant(value: int | float) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime.

    Raises:
        InvalidStartDate: NaN, infinite, or outside the datetime range.
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidStartDate(value, "epoch milliseconds must be finite")
    try:
        return _EPOCH + timedelta(milliseconds=value)
    except OverflowError as exc:
        raise InvalidStartDate(value, "epoch milliseconds out of range") from exc


def classify_start(value: object) -> Start | None:
    """Sort a raw start value into its shape. ``None`` means "now".

    Aware datetimes and epoch milliseconds are absolute; naive datetimes
    are wall-clock, like offset-less strings.

    Raises:
        UnsupportedStartValue: Any other type (``bool``, ``date``, ...).
        InvalidStartDate: A date-like value that is not a real instant.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            return WallClockStart(value.replace(tzinfo=None))
        try:
            return AbsoluteStart(value.astimezone(UTC))
        except OverflowError as exc:
            raise InvalidStartDate(value, "outside the datetime range") from exc
    if isinstance(value, bool) or isinstance(value, date):
        raise UnsupportedStartValue(value)
    if isinstance(value, (int, float)):
        return AbsoluteStart(epoch_millis_to_instant(value))
    if isinstance(value, str):
        return parse_start_string(value)
    raise UnsupportedStartValue(value)

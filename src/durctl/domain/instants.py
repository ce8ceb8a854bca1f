"""ISO-8601 UTC serialization of instants."""

from __future__ import annotations

from datetime import UTC, datetime


def format_utc_iso(instant: datetime) -> str:
    """Render an aware datetime as ISO-8601 UTC with a ``Z`` suffix.

    Sub-second digits appear only when non-zero: three for whole
    milliseconds, six otherwise. The result round-trips through
    :meth:`datetime.fromisoformat`.

    Examples:
        >>> format_utc_iso(datetime(2025, 3, 10, 5, 0, tzinfo=UTC))
        '2025-03-10T05:00:00Z'
        >>> format_utc_iso(datetime(2025, 3, 10, 5, 0, 0, 250000, tzinfo=UTC))
        '2025-03-10T05:00:00.250Z'
    """
    if instant.tzinfo is None:
        msg = "Cannot serialize a naive datetime as a UTC instant"
        raise ValueError(msg)
    utc = instant.astimezone(UTC)
    text = (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
    )
    if utc.microsecond:
        if utc.microsecond % 1000 == 0:
            text += f".{utc.microsecond // 1000:03d}"
        else:
            text += f".{utc.microsecond:06d}"
    return f"{text}Z"

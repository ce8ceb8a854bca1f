"""Typed exceptions raised by the duration engine.

Every failure is synchronous and caller-facing. Each exception carries a
stable ``code`` (used as :class:`~durctl.services.result.ServiceError` code)
and a ``detail`` dict with the offending input.

Usage:
    try:
        ends_at = add("elephant minutes")
    except DurationError as exc:
        report(exc.code, str(exc), exc.detail)
"""

from __future__ import annotations

from typing import Any


class DurationError(ValueError):
    """Base exception for all duration engine errors."""

    code = "DURATION_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.detail: dict[str, Any] = detail


class InvalidTimeZone(DurationError):
    """Timezone identifier is not a recognized IANA zone."""

    code = "INVALID_TIMEZONE"

    def __init__(self, timezone: object) -> None:
        super().__init__(f"Unknown IANA timezone: {timezone!r}", timezone=str(timezone))
        self.timezone = timezone


class DurationUnparsable(DurationError):
    """Duration text matched none of the supported grammars."""

    code = "DURATION_UNPARSABLE"

    def __init__(self, text: str, reason: str | None = None) -> None:
        message = f"Could not parse duration: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, text=text)
        self.text = text


class UnrecognizedNumberWord(DurationError):
    """A number phrase contains a token that is not a number word."""

    code = "UNRECOGNIZED_NUMBER_WORD"

    def __init__(self, word: str) -> None:
        super().__init__(f"Unrecognized number word: {word!r}", word=word)
        self.word = word


class InvalidColonForm(DurationError):
    """``H:MM[:SS]`` duration with minutes or seconds out of range."""

    code = "INVALID_COLON_FORM"

    def __init__(self, text: str) -> None:
        super().__init__(f"Minutes/seconds must be < 60 in hh:mm[:ss], got {text!r}", text=text)
        self.text = text


class UnsupportedStartValue(DurationError):
    """Start value is not absent, an instant, nor a local wall-clock string."""

    code = "UNSUPPORTED_START_VALUE"

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Unsupported start value: {value!r}",
            value=repr(value),
            value_type=type(value).__name__,
        )
        self.value = value


class InvalidStartDate(DurationError):
    """Start value looks like a date but is not a real point in time."""

    code = "INVALID_START_DATE"

    def __init__(self, value: object, reason: str | None = None) -> None:
        message = f"Invalid start date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, value=repr(value))
        self.value = value


class DurationOutOfRange(DurationError):
    """Start plus duration falls outside the representable datetime range."""

    code = "DURATION_OUT_OF_RANGE"


class CalendarUnavailable(DurationError):
    """A DST-aware calendar was required but no timezone database is installed."""

    code = "CALENDAR_UNAVAILABLE"

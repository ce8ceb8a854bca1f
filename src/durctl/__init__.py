"""durctl: natural-language durations added in a shop's timezone."""

from __future__ import annotations

__version__ = "0.3.0"

from durctl.domain.duration import DurationBag
from durctl.domain.errors import (
    CalendarUnavailable,
    DurationError,
    DurationOutOfRange,
    DurationUnparsable,
    InvalidColonForm,
    InvalidStartDate,
    InvalidTimeZone,
    UnrecognizedNumberWord,
    UnsupportedStartValue,
)
from durctl.domain.parser import parse_duration
from durctl.services.engine import add_duration_utc, create_adder

__all__ = [
    "CalendarUnavailable",
    "DurationBag",
    "DurationError",
    "DurationOutOfRange",
    "DurationUnparsable",
    "InvalidColonForm",
    "InvalidStartDate",
    "InvalidTimeZone",
    "UnrecognizedNumberWord",
    "UnsupportedStartValue",
    "__version__",
    "add_duration_utc",
    "create_adder",
    "parse_duration",
]

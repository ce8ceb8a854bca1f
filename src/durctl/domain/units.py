"""Duration units, their synonyms, and the fractional split chain."""

from __future__ import annotations

from enum import StrEnum


class Unit(StrEnum):
    """Canonical duration units, largest first. Values match DurationBag fields."""

    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


UNIT_SYNONYMS: dict[str, Unit] = {
    "day": Unit.DAYS,
    "days": Unit.DAYS,
    "d": Unit.DAYS,
    "hour": Unit.HOURS,
    "hours": Unit.HOURS,
    "h": Unit.HOURS,
    "hr": Unit.HOURS,
    "hrs": Unit.HOURS,
    "minute": Unit.MINUTES,
    "minutes": Unit.MINUTES,
    "m": Unit.MINUTES,
    "min": Unit.MINUTES,
    "mins": Unit.MINUTES,
    "second": Unit.SECONDS,
    "seconds": Unit.SECONDS,
    "s": Unit.SECONDS,
    "sec": Unit.SECONDS,
    "secs": Unit.SECONDS,
    "millisecond": Unit.MILLISECONDS,
    "milliseconds": Unit.MILLISECONDS,
    "ms": Unit.MILLISECONDS,
    "msec": Unit.MILLISECONDS,
    "msecs": Unit.MILLISECONDS,
}

# Words that stand for a whole number of a canonical unit.
UNIT_MULTIPLES: dict[str, tuple[Unit, int]] = {
    "week": (Unit.DAYS, 7),
    "weeks": (Unit.DAYS, 7),
    "wk": (Unit.DAYS, 7),
    "wks": (Unit.DAYS, 7),
    "w": (Unit.DAYS, 7),
}

# (next smaller unit, how many of it make one of this unit)
SPLIT_CHAIN: dict[Unit, tuple[Unit, int]] = {
    Unit.DAYS: (Unit.HOURS, 24),
    Unit.HOURS: (Unit.MINUTES, 60),
    Unit.MINUTES: (Unit.SECONDS, 60),
    Unit.SECONDS: (Unit.MILLISECONDS, 1000),
}

MILLISECONDS_PER: dict[Unit, int] = {
    Unit.DAYS: 86_400_000,
    Unit.HOURS: 3_600_000,
    Unit.MINUTES: 60_000,
    Unit.SECONDS: 1_000,
    Unit.MILLISECONDS: 1,
}


def is_unit_word(word: str) -> bool:
    """Return True if *word* is a unit synonym or multiple (case-insensitive)."""
    key = word.lower()
    return key in UNIT_SYNONYMS or key in UNIT_MULTIPLES


def unit_synonym_to_canonical_unit(word: str) -> Unit:
    """Map a unit synonym (``"hrs"``, ``"Minutes"``, ``"d"``) to its Unit.

    Multiples such as ``"weeks"`` are not synonyms; see :func:`resolve_unit_word`.

    Examples:
        >>> unit_synonym_to_canonical_unit("hrs")
        <Unit.HOURS: 'hours'>
        >>> unit_synonym_to_canonical_unit("D")
        <Unit.DAYS: 'days'>

    Raises:
        KeyError: If *word* is not a unit synonym.
    """
    try:
        return UNIT_SYNONYMS[word.lower()]
    except KeyError:
        msg = f"Not a duration unit: {word!r}"
        raise KeyError(msg) from None


def resolve_unit_word(word: str) -> tuple[Unit, int]:
    """Map any unit word to ``(unit, count)``: ``"hrs"`` is one hour, ``"weeks"`` seven days.

    Raises:
        KeyError: If *word* is not a unit word.
    """
    multiple = UNIT_MULTIPLES.get(word.lower())
    if multiple is not None:
        return multiple
    return unit_synonym_to_canonical_unit(word), 1

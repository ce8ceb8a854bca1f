"""Free-form duration text → DurationBag.

Grammars, tried in order on the cleaned text (lower-cased, parentheticals
removed, whitespace collapsed):

1. Colon form ``H:MM`` / ``H:MM:SS``: hours:minutes[:seconds].
2. ISO form ``P7D`` (and the ``P[nW][nD][T[nH][nM][nS]]`` subset).
3. Repeated ``<value phrase> <unit word>``: ``"3 days, 2 hours and
   15 minutes"``, ``"five and a half minutes"``, ``"7d"``.

Examples:
    >>> parse_duration("1.5 hours")
    DurationBag(days=0, hours=1, minutes=30, seconds=0, milliseconds=0)
    >>> parse_duration("5:30").to_iso()
    'PT5H30M'
"""

from __future__ import annotations

import logging
import re
from fractions import Fraction

from durctl.domain.duration import DurationAccumulator, DurationBag, bag_from_parts, normalize
from durctl.domain.errors import DurationUnparsable, InvalidColonForm
from durctl.domain.numbers import FRACTION_WORDS, parse_value
from durctl.domain.units import Unit, is_unit_word, resolve_unit_word

logger = logging.getLogger(__name__)

PARENTHETICAL_RE = re.compile(r"\([^)]*\)")
COLON_RE = re.compile(r"^(\d+):(\d{1,2})(?::(\d{1,2}))?$")
ISO_RE = re.compile(
    r"^p(?:(\d+)w)?(?:(\d+)d)?(?:t(?:(\d+)h)?(?:(\d+)m)?(?:(\d+(?:\.\d+)?)s)?)?$"
)

# Numerals, or runs of letters. Splits "7d" / "1.5hrs" into value + unit and
# drops punctuation such as commas.
TOKEN_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+|[^\W\d_]+")

# A minus sign in front of a numeral: "-5 minutes", "- 1.5h".
NEGATIVE_RE = re.compile(r"-\s*\.?\d")

CONNECTORS = frozenset({"and"})
_TRAILING_FRACTION_RE = re.compile(r"^an?\s+(half|quarter)$")


def clean_duration_text(text: str) -> str:
    """Lower-case, drop ``(...)`` asides, and collapse whitespace."""
    cleaned = PARENTHETICAL_RE.sub(" ", text.lower())
    return " ".join(cleaned.split())


def _strip_connectors(tokens: list[str]) -> list[str]:
    start = 0
    while start < len(tokens) and tokens[start] in CONNECTORS:
        start += 1
    return tokens[start:]


def _parse_colon(match: re.Match[str], text: str) -> DurationBag:
    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = int(match.group(3)) if match.group(3) is not None else 0
    if minutes >= 60 or seconds >= 60:
        raise InvalidColonForm(text)
    return bag_from_parts(hours=hours, minutes=minutes, seconds=seconds)


def _parse_iso(match: re.Match[str]) -> DurationBag | None:
    weeks, days, hours, minutes, seconds = match.groups()
    if all(group is None for group in (weeks, days, hours, minutes, seconds)):
        return None
    return bag_from_parts(
        days=7 * int(weeks or 0) + int(days or 0),
        hours=int(hours or 0),
        minutes=int(minutes or 0),
        seconds=Fraction(seconds or 0),
    )


def _parse_unit_phrases(cleaned: str, original: str) -> DurationBag:
    acc = DurationAccumulator()
    pending: list[str] = []
    last_unit: Unit | None = None
    last_count = 1

    for token in TOKEN_RE.findall(cleaned):
        if not is_unit_word(token):
            pending.append(token)
            continue
        value_tokens = _strip_connectors(pending)
        if not value_tokens:
            raise DurationUnparsable(original, f"no value before {token!r}")
        last_unit, last_count = resolve_unit_word(token)
        acc.add(last_unit, parse_value(" ".join(value_tokens)) * last_count)
        pending = []

    if last_unit is None:
        raise DurationUnparsable(original)

    leftover = " ".join(_strip_connectors(pending))
    if leftover:
        # "an hour and a half": the fraction belongs to the last unit.
        match = _TRAILING_FRACTION_RE.match(leftover)
        if match:
            acc.add(last_unit, FRACTION_WORDS[match.group(1)] * last_count)
        else:
            logger.debug("Ignoring trailing duration text %r in %r", leftover, original)

    return normalize(acc)


def parse_duration(text: str) -> DurationBag:
    """Parse a human-readable duration into a normalized DurationBag.

    Raises:
        TypeError: If *text* is not a string.
        DurationUnparsable: Empty input, a negative value, or no grammar matched.
        InvalidColonForm: ``H:MM[:SS]`` with minutes/seconds >= 60.
        UnrecognizedNumberWord: Unknown word in a value phrase.
    """
    if not isinstance(text, str):
        msg = f"Duration must be a string, got {type(text).__name__}"
        raise TypeError(msg)

    cleaned = clean_duration_text(text)
    if not cleaned:
        raise DurationUnparsable(text, "empty duration")
    if NEGATIVE_RE.search(cleaned):
        raise DurationUnparsable(text, "negative durations are not supported")

    match = COLON_RE.match(cleaned)
    if match:
        bag = _parse_colon(match, text)
    else:
        iso = ISO_RE.match(cleaned)
        bag = _parse_iso(iso) if iso else None
        if bag is None:
            bag = _parse_unit_phrases(cleaned, text)

    logger.debug("Parsed duration %r as %s", text, bag.to_iso())
    return bag

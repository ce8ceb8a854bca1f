"""Number words and value phrases.

A value phrase is the text in front of a unit word: ``"4.5"``,
``"twenty one"``, ``"five and a half"``, ``"a quarter"``. Values are
returned as exact :class:`~fractions.Fraction` so that fractional splits
across units never accumulate float error.
"""

from __future__ import annotations

import re
from fractions import Fraction

from durctl.domain.errors import DurationUnparsable, UnrecognizedNumberWord

SMALL_NUMBERS: dict[str, int] = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

TENS: dict[str, int] = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

FILLER_WORDS = frozenset({"and", "a", "an"})
ARTICLES = frozenset({"a", "an"})

FRACTION_WORDS: dict[str, Fraction] = {
    "half": Fraction(1, 2),
    "quarter": Fraction(1, 4),
}

NUMERAL_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")
_AND_FRACTION_RE = re.compile(r"^(.+?)\s+and\s+an?\s+(half|quarter)$")
_BARE_FRACTION_RE = re.compile(r"^(?:an?\s+)?(half|quarter)(?:\s+(?:of\s+)?an?)?$")


def _tokens(words: str) -> list[str]:
    return re.sub(r"-+", " ", words).lower().split()


def words_to_number(words: str) -> int:
    """Convert English number words to an integer.

    ``hundred`` multiplies the current group (1 if empty); ``thousand``
    multiplies the current group and flushes it into the running total.
    The fillers ``and``/``a``/``an`` are skipped.

    Examples:
        >>> words_to_number("twenty one")
        21
        >>> words_to_number("one hundred and twenty")
        120
        >>> words_to_number("two thousand five hundred")
        2500

    Raises:
        UnrecognizedNumberWord: On any other token.
    """
    total = 0
    current = 0
    for token in _tokens(words):
        if token in FILLER_WORDS:
            continue
        if token in SMALL_NUMBERS:
            current += SMALL_NUMBERS[token]
        elif token in TENS:
            current += TENS[token]
        elif token == "hundred":
            current = (current or 1) * 100
        elif token == "thousand":
            total += (current or 1) * 1000
            current = 0
        else:
            raise UnrecognizedNumberWord(token)
    return total + current


def _base_value(text: str) -> Fraction:
    if NUMERAL_RE.fullmatch(text):
        return Fraction(text)
    return Fraction(words_to_number(text))


def parse_value(phrase: str) -> Fraction:
    """Resolve a value phrase to an exact non-negative number.

    Examples:
        >>> parse_value("4.5")
        Fraction(9, 2)
        >>> parse_value("five and a half")
        Fraction(11, 2)
        >>> parse_value("a quarter")
        Fraction(1, 4)
        >>> parse_value("an")
        Fraction(1, 1)
    """
    text = " ".join(_tokens(phrase))
    if not text:
        raise DurationUnparsable(phrase, "missing value before unit")

    if NUMERAL_RE.fullmatch(text):
        return Fraction(text)

    match = _AND_FRACTION_RE.match(text)
    if match:
        return _base_value(match.group(1)) + FRACTION_WORDS[match.group(2)]

    match = _BARE_FRACTION_RE.match(text)
    if match:
        return FRACTION_WORDS[match.group(1)]

    # "a day", "an hour"
    if all(token in ARTICLES for token in text.split()):
        return Fraction(1)

    return Fraction(words_to_number(text))

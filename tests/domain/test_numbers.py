"""Tests for number words and value phrases."""

from fractions import Fraction

import pytest

from durctl.domain.errors import DurationUnparsable, UnrecognizedNumberWord
from durctl.domain.numbers import parse_value, words_to_number


class TestWordsToNumber:
    @pytest.mark.parametrize(
        "words,expected",
        [
            ("zero", 0),
            ("one", 1),
            ("nineteen", 19),
            ("twenty", 20),
            ("twenty one", 21),
            ("twenty-one", 21),
            ("ninety nine", 99),
            ("hundred", 100),
            ("a hundred", 100),
            ("one hundred", 100),
            ("one hundred twenty", 120),
            ("three hundred and five", 305),
            ("two thousand", 2000),
            ("thousand", 1000),
            ("one hundred thousand", 100_000),
            ("two thousand five hundred", 2500),
            ("twelve thousand three hundred forty five", 12_345),
            ("Twenty One", 21),
        ],
    )
    def test_values(self, words: str, expected: int) -> None:
        assert words_to_number(words) == expected

    def test_fillers_only_is_zero(self) -> None:
        assert words_to_number("and a") == 0

    def test_unrecognized_word(self) -> None:
        with pytest.raises(UnrecognizedNumberWord) as exc_info:
            words_to_number("elephant")
        assert exc_info.value.word == "elephant"
        assert exc_info.value.code == "UNRECOGNIZED_NUMBER_WORD"

    def test_digits_are_not_number_words(self) -> None:
        with pytest.raises(UnrecognizedNumberWord):
            words_to_number("twenty 5")


class TestParseValue:
    @pytest.mark.parametrize(
        "phrase,expected",
        [
            ("4", Fraction(4)),
            ("4.5", Fraction(9, 2)),
            (".5", Fraction(1, 2)),
            ("0.25", Fraction(1, 4)),
            ("five", Fraction(5)),
            ("half", Fraction(1, 2)),
            ("a half", Fraction(1, 2)),
            ("quarter", Fraction(1, 4)),
            ("a quarter", Fraction(1, 4)),
            ("half an", Fraction(1, 2)),
            ("half a", Fraction(1, 2)),
            ("five and a half", Fraction(11, 2)),
            ("ten and a quarter", Fraction(41, 4)),
            ("twenty one and a half", Fraction(43, 2)),
            ("4 and a half", Fraction(9, 2)),
            ("a", Fraction(1)),
            ("an", Fraction(1)),
        ],
    )
    def test_values(self, phrase: str, expected: Fraction) -> None:
        assert parse_value(phrase) == expected

    def test_values_are_exact(self) -> None:
        assert isinstance(parse_value("0.1"), Fraction)
        assert parse_value("0.1") * 3 == Fraction(3, 10)

    def test_empty_phrase(self) -> None:
        with pytest.raises(DurationUnparsable):
            parse_value("   ")

    def test_unknown_word_in_half_phrase(self) -> None:
        with pytest.raises(UnrecognizedNumberWord) as exc_info:
            parse_value("lots and a half")
        assert exc_info.value.word == "lots"

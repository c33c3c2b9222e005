"""Тесты для HashDigest: последняя цифра и сумма цифр хэша.

Coverage:
- trailing_digit: поиск последней цифры, fallback '0'
- digit_sum: сумма цифр, инвариантность к перестановке
- Некорректный вход (None / "" / не строка)
"""

import random

import pytest

from mag_rewards.core.errors import InvalidInputError
from mag_rewards.core.math.hash_digest import DEFAULT_DIGIT, digit_sum, trailing_digit


LONG_HASH = "dbd27b5f3b26b698dc447386820d28ef194953958fd5544fb4219442047d335f"


class TestTrailingDigit:
    """Тесты trailing_digit."""

    @pytest.mark.parametrize(
        "tx_hash, expected",
        [
            (LONG_HASH, "5"),
            ("abc123def456789", "9"),
            ("abc123def45678a", "8"),
            ("1234567890", "0"),
            ("7", "7"),
        ],
    )
    def test_last_digit_found(self, tx_hash, expected):
        assert trailing_digit(tx_hash) == expected

    def test_no_digits_falls_back_to_zero(self):
        """Хэш без цифр — валидный вход, результат '0'."""
        assert trailing_digit("abcdef") == "0"
        assert DEFAULT_DIGIT == "0"

    def test_only_ascii_digits_count(self):
        """Не-ASCII цифры игнорируются."""
        assert trailing_digit("ab3c٥") == "3"

    @pytest.mark.parametrize("bad", [None, ""])
    def test_missing_hash_rejected(self, bad):
        with pytest.raises(InvalidInputError):
            trailing_digit(bad)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidInputError):
            trailing_digit(12345)


class TestDigitSum:
    """Тесты digit_sum."""

    @pytest.mark.parametrize(
        "tx_hash, expected",
        [
            ("12345", 15),
            ("123456789", 45),
            ("123abc456def", 21),
            ("abcdef", 0),
            ("0000", 0),
            ("9f9f9", 27),
        ],
    )
    def test_sum(self, tx_hash, expected):
        assert digit_sum(tx_hash) == expected

    def test_invariant_under_reordering(self):
        """Перестановка символов не меняет сумму."""
        chars = list(LONG_HASH)
        rng = random.Random(42)
        for _ in range(10):
            rng.shuffle(chars)
            assert digit_sum("".join(chars)) == digit_sum(LONG_HASH)

    def test_non_digits_contribute_zero(self):
        assert digit_sum("a1b2c3") == digit_sum("123")

    @pytest.mark.parametrize("bad", [None, ""])
    def test_missing_hash_rejected(self, bad):
        with pytest.raises(InvalidInputError):
            digit_sum(bad)

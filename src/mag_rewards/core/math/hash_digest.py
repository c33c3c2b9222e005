"""
HashDigest — числовые сигналы из хэша транзакции

Из непрозрачного hex/alphanumeric хэша извлекаются:
- trailing digit: последняя десятичная цифра при сканировании слева направо
- digit sum: сумма всех десятичных цифр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. None / "" → InvalidInputError
2. Хэш без цифр — валидный вход: trailing digit = '0', digit sum = 0
3. Цифрами считаются только ASCII '0'..'9'
"""

from typing import Final

from mag_rewards.core.errors import InvalidInputError


# Цифра по умолчанию, если в хэше нет ни одной цифры
DEFAULT_DIGIT: Final[str] = "0"

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


def _validate_hash(tx_hash: str) -> None:
    if not isinstance(tx_hash, str):
        raise InvalidInputError(f"Transaction hash must be a string, got {type(tx_hash).__name__}")
    if not tx_hash:
        raise InvalidInputError("Transaction hash cannot be empty")


def trailing_digit(tx_hash: str) -> str:
    """
    Последняя десятичная цифра хэша.

    Args:
        tx_hash: Хэш транзакции

    Returns:
        Цифра '0'..'9'; DEFAULT_DIGIT если цифр нет

    Raises:
        InvalidInputError: Если хэш None или пустой

    Examples:
        >>> trailing_digit("abc123def45678a")
        '8'
        >>> trailing_digit("abcdef")
        '0'
    """
    _validate_hash(tx_hash)

    for char in reversed(tx_hash):
        if char in _DIGITS:
            return char

    return DEFAULT_DIGIT


def digit_sum(tx_hash: str) -> int:
    """
    Сумма всех десятичных цифр хэша.

    Нецифровые символы дают 0. Инвариантна к перестановке символов.

    Raises:
        InvalidInputError: Если хэш None или пустой

    Examples:
        >>> digit_sum("123abc456def")
        21
    """
    _validate_hash(tx_hash)

    return sum(int(char) for char in tx_hash if char in _DIGITS)

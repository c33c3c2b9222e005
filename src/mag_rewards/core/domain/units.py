"""
Units — Централизованный модуль конверсии единиц токена

Все суммы в движке — целые неотрицательные числа в nano-единицах
(1 token = 10^9 nano). Float в расчётах розыгрыша ЗАПРЕЩЁН.

Единственный допустимый способ преобразований между:
- человекочитаемой суммой ("1.5", "0.1")
- nano-единицами (int)
"""

from decimal import Decimal, InvalidOperation
from typing import Final

from mag_rewards.core.errors import InvalidInputError


# =============================================================================
# КОНСТАНТЫ
# =============================================================================
# Количество nano-единиц в одном токене
NANO_PER_TOKEN: Final[int] = 1_000_000_000

# Максимальное число знаков после запятой
NANO_DECIMALS: Final[int] = 9


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def to_nano(amount: str | int | Decimal) -> int:
    """
    Конверсия: токены → nano-единицы.

    Float намеренно не принимается: строка или Decimal сохраняют точность.

    Args:
        amount: Сумма в токенах (например, "1.5" или 2)

    Returns:
        Сумма в nano-единицах (int)

    Raises:
        InvalidInputError: Если сумма отрицательная, не число,
            или точнее 9 знаков после запятой

    Examples:
        >>> to_nano("0.1")
        100000000
        >>> to_nano(2)
        2000000000
    """
    if isinstance(amount, (bool, float)):
        raise InvalidInputError(f"Amount must be str, int or Decimal, got {type(amount).__name__}")

    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInputError(f"Amount is not a number: {amount!r}")

    if not value.is_finite():
        raise InvalidInputError(f"Amount must be finite: {amount!r}")

    if value < 0:
        raise InvalidInputError(f"Amount cannot be negative: {amount!r}")

    nano = value * NANO_PER_TOKEN
    if nano != nano.to_integral_value():
        raise InvalidInputError(
            f"Amount {amount!r} has more than {NANO_DECIMALS} decimal places"
        )

    return int(nano)


def from_nano(nano: int) -> Decimal:
    """
    Конверсия: nano-единицы → токены (Decimal, без потери точности).

    Args:
        nano: Сумма в nano-единицах

    Returns:
        Сумма в токенах
    """
    validate_amount(nano)
    return Decimal(nano) / NANO_PER_TOKEN


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_amount(amount: int, name: str = "amount") -> None:
    """
    Проверка, что сумма — целое неотрицательное число nano-единиц.

    Raises:
        InvalidInputError: Если сумма не int или отрицательная
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise InvalidInputError(f"{name} must be an integer number of nano units, got {amount!r}")

    if amount < 0:
        raise InvalidInputError(f"{name} cannot be negative: {amount}")


def validate_address(address: str, name: str = "address") -> None:
    """
    Проверка адреса участника (непустая строка).

    Raises:
        InvalidInputError: Если адрес пустой или не строка
    """
    if not isinstance(address, str) or not address.strip():
        raise InvalidInputError(f"{name} must be a non-empty string, got {address!r}")

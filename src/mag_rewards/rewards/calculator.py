"""
RewardCalculator — награда hash-lottery и rank для розыгрыша окна

Награда определяется последней цифрой хэша по фиксированной таблице:

    digit:  1    2    3    4    5    6    7     8     9     0
    token:  0.1  0.2  0.4  0.8  1.6  3.2  6.4  12.8  25.6  51.2

Цифры 1..9 — удвоение от 0.1. Цифра 0 — НЕ ноль, а следующее удвоение
(51.2 = 25.6 * 2): 0 трактуется как максимум таблицы.

Таблица задана литералами, а не формулой. Литералы соответствуют
reward_unit = 0.1; при другом reward_unit каждый слот масштабируется
пропорционально (RewardTable.for_unit).
"""

from dataclasses import dataclass
from typing import Final

from mag_rewards.core.config import EngineConfig
from mag_rewards.core.errors import InvalidInputError
from mag_rewards.core.math.hash_digest import digit_sum, trailing_digit


# =============================================================================
# REWARD TABLE (nano-единицы, индекс = цифра)
# =============================================================================

REWARD_TABLE_NANO: Final[tuple[int, ...]] = (
    51_200_000_000,  # 0 → 51.2 (особый случай: следующее удвоение после 9)
    100_000_000,  # 1 → 0.1
    200_000_000,  # 2 → 0.2
    400_000_000,  # 3 → 0.4
    800_000_000,  # 4 → 0.8
    1_600_000_000,  # 5 → 1.6
    3_200_000_000,  # 6 → 3.2
    6_400_000_000,  # 7 → 6.4
    12_800_000_000,  # 8 → 12.8
    25_600_000_000,  # 9 → 25.6
)


@dataclass(frozen=True)
class RewardTable:
    """Фиксированная таблица digit → награда (10 слотов)."""

    amounts: tuple[int, ...] = REWARD_TABLE_NANO

    def __post_init__(self) -> None:
        if len(self.amounts) != 10:
            raise InvalidInputError(f"Reward table must have 10 slots, got {len(self.amounts)}")
        if any(isinstance(a, bool) or not isinstance(a, int) or a < 0 for a in self.amounts):
            raise InvalidInputError("Reward table amounts must be non-negative integers")

    @classmethod
    def for_unit(cls, reward_unit: int) -> "RewardTable":
        """Таблица, в которой цифре 1 соответствует reward_unit."""
        base = REWARD_TABLE_NANO[1]
        return cls(tuple(amount // base * reward_unit for amount in REWARD_TABLE_NANO))

    def lookup(self, digit: str) -> int:
        """
        Награда по цифре.

        Raises:
            InvalidInputError: Если digit не одна цифра '0'..'9'
        """
        if not isinstance(digit, str) or len(digit) != 1 or digit not in "0123456789":
            raise InvalidInputError(f"Digit must be a single character '0'..'9', got {digit!r}")
        return self.amounts[int(digit)]


class RewardCalculator:
    """Расчёт награды hash-lottery и rank для розыгрыша окна.

    Stateless, детерминирован.
    """

    def __init__(self, table: RewardTable | None = None, config: EngineConfig | None = None):
        """
        Args:
            table: Явная таблица наград (приоритетнее config)
            config: Конфигурация; таблица строится от config.reward_unit
        """
        if table is None:
            table = RewardTable.for_unit((config or EngineConfig()).reward_unit)
        self.table = table

    def reward_for(self, tx_hash: str) -> int:
        """
        Награда за транзакцию по последней цифре хэша.

        Args:
            tx_hash: Хэш транзакции

        Returns:
            Награда в nano-единицах

        Raises:
            InvalidInputError: Если хэш None или пустой
        """
        return self.table.lookup(trailing_digit(tx_hash))

    def lottery_rank(self, tx_hash: str) -> int:
        """Номер участника розыгрыша окна: сумма цифр хэша (больше — лучше)."""
        return digit_sum(tx_hash)

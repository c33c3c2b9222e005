"""
EngineConfig — конфигурация движка наград

Процессные неизменяемые константы: размеры ставок, длительность окна
розыгрыша, время удержания LP, порог и сумма auto-buy, комиссия протокола.
Загружается один раз при старте и никогда не изменяется (frozen=True).

Время — в миллисекундах, суммы — в nano-единицах (см. core.domain.units).
"""

from dataclasses import dataclass
from typing import Final, Optional

from mag_rewards.core.domain.units import to_nano, validate_address, validate_amount
from mag_rewards.core.errors import InvalidInputError


# =============================================================================
# ВРЕМЕННЫЕ ЕДИНИЦЫ
# =============================================================================
# Базовый интервал расписания (1 минута)
INTERVAL_UNIT_MS: Final[int] = 60_000

# Окно розыгрыша: 24 интервала
WINDOW_DURATION_UNITS: Final[int] = 24

# Удержание LP до возврата: 3 интервала
LIQUIDITY_HOLD_UNITS: Final[int] = 3


# =============================================================================
# АДРЕСА ПРОГРАММЫ
# =============================================================================
CONTRACT_ADDRESS: Final[str] = "EQDdDkojazcx_uPxj6_M4TIad-TB3vvTxRwUz4s_4W9H0AmP"
MAG_ADDRESS: Final[str] = "EQArReyjdldNhNl-81YrIJ2_bhuZrJSjXNBn5bzt4O46Zc29"
LP_ADDRESS: Final[str] = "EQAx8hzs2ZJHE4Cf1y7zFOqVFei92SpbCJQGZjoTYXAxHE0t"
SWAP_ROUTER_ADDRESS: Final[str] = "EQB3ncyBUTjZUA5EnFKR5_EnOMI9V1tTEAAPaiU71gc4TiUt"


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация движка.

    Defaults:
    - interval_unit_ms: 1 минута
    - window_duration_ms: 24 интервала, liquidity_hold_ms: 3 интервала
      (явное значение переопределяет вывод из interval_unit_ms)
    - reward_unit: 0.1 token, награда за цифру 1; таблица RewardTable
      масштабируется от него
    - ton_lottery_ticket: 0.1 TON
    - lottery_entry_stake: 10 MAG
    - liquidity_stake_amount: 1 LP
    - auto_buy_threshold: 2 TON, auto_buy_amount: 1.5 TON
    - fee_retention_pct: 10% удерживается с призового фонда
    """

    interval_unit_ms: int = INTERVAL_UNIT_MS
    # None → выводится из interval_unit_ms (24 и 3 интервала)
    window_duration_ms: Optional[int] = None
    liquidity_hold_ms: Optional[int] = None

    reward_unit: int = to_nano("0.1")
    ton_lottery_ticket: int = to_nano("0.1")
    lottery_entry_stake: int = to_nano(10)
    liquidity_stake_amount: int = to_nano(1)
    auto_buy_threshold: int = to_nano(2)
    auto_buy_amount: int = to_nano("1.5")
    fee_retention_pct: int = 10

    contract_address: str = CONTRACT_ADDRESS
    mag_address: str = MAG_ADDRESS
    lp_address: str = LP_ADDRESS
    swap_router_address: str = SWAP_ROUTER_ADDRESS

    def __post_init__(self) -> None:
        unit = self.interval_unit_ms
        if isinstance(unit, bool) or not isinstance(unit, int) or unit <= 0:
            raise InvalidInputError(f"interval_unit_ms must be a positive integer, got {unit!r}")
        if self.window_duration_ms is None:
            object.__setattr__(self, "window_duration_ms", WINDOW_DURATION_UNITS * unit)
        if self.liquidity_hold_ms is None:
            object.__setattr__(self, "liquidity_hold_ms", LIQUIDITY_HOLD_UNITS * unit)

        for name in ("window_duration_ms", "liquidity_hold_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidInputError(f"{name} must be a positive integer, got {value!r}")

        for name in (
            "reward_unit",
            "ton_lottery_ticket",
            "lottery_entry_stake",
            "liquidity_stake_amount",
            "auto_buy_threshold",
            "auto_buy_amount",
        ):
            validate_amount(getattr(self, name), name)

        if (
            isinstance(self.fee_retention_pct, bool)
            or not isinstance(self.fee_retention_pct, int)
            or not 0 <= self.fee_retention_pct <= 100
        ):
            raise InvalidInputError(
                f"fee_retention_pct must be in [0, 100], got {self.fee_retention_pct}"
            )

        for name in ("contract_address", "mag_address", "lp_address", "swap_router_address"):
            validate_address(getattr(self, name), name)

    @property
    def payout_pct(self) -> int:
        """Доля призового фонда, идущая победителям (%)."""
        return 100 - self.fee_retention_pct

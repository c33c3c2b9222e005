"""
LotteryEntry — Запись участника розыгрыша окна
SettlementResult — Результат розыгрыша окна

LotteryEntry: immutable Pydantic модель, принадлежит исключительно LotteryWindow.
SettlementResult: immutable результат розыгрыша, передаётся в CommandFactory.
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field


class LotteryEntry(BaseModel):
    """
    Участие в розыгрыше.

    rank — сумма цифр хэша транзакции; больший rank побеждает.
    """

    participant: str = Field(..., min_length=1, description="Адрес участника")
    rank: int = Field(..., ge=0, description="Номер участника (сумма цифр хэша)")
    arrived_at_ms: int = Field(..., ge=0, description="Время поступления (UTC, миллисекунды)")

    model_config = {"frozen": True}

    def age_ms(self, now_ms: int) -> int:
        """Возраст записи относительно now_ms."""
        return now_ms - self.arrived_at_ms

    def is_valid_at(self, now_ms: int, window_duration_ms: int) -> bool:
        """
        Запись участвует в розыгрыше, пока now - arrived_at <= window_duration.

        Граница включительная.
        """
        return self.age_ms(now_ms) <= window_duration_ms


@dataclass(frozen=True)
class SettlementResult:
    """Результат розыгрыша окна."""

    winners: tuple[str, ...]
    per_winner_amount: int
    total_prize: int
    distributable: int

    # Удержание и потери округления
    fee_retained: int
    remainder: int

    # Диагностика
    winning_rank: int | None
    valid_entry_count: int
    expired_entry_count: int
    settled_at_ms: int

    @property
    def is_empty(self) -> bool:
        """True если в окне не было валидных записей."""
        return not self.winners

    @property
    def total_paid(self) -> int:
        return self.per_winner_amount * len(self.winners)

    @classmethod
    def empty(cls, now_ms: int, expired_entry_count: int = 0) -> "SettlementResult":
        return cls(
            winners=(),
            per_winner_amount=0,
            total_prize=0,
            distributable=0,
            fee_retained=0,
            remainder=0,
            winning_rank=None,
            valid_entry_count=0,
            expired_entry_count=expired_entry_count,
            settled_at_ms=now_ms,
        )

"""
StakeRecord — Запись LP-депозита

Immutable Pydantic модель. Одна живая запись на адрес (upsert в StakeLedger).
"""

from pydantic import BaseModel, Field


class StakeRecord(BaseModel):
    """Депозит ликвидности с фиксированным временем возврата."""

    address: str = Field(..., min_length=1, description="Адрес депозитора")
    amount: int = Field(..., ge=0, description="Сумма депозита в nano-единицах")
    release_at_ms: int = Field(..., ge=0, description="Время возврата (UTC, миллисекунды)")

    model_config = {"frozen": True}

    def is_due(self, now_ms: int) -> bool:
        """True если возврат уже можно исполнять (release_at <= now)."""
        return self.release_at_ms <= now_ms

"""
TransactionRecord — Модель входящей транзакции

Immutable Pydantic модель, представляющая уже распарсенную транзакцию.
Создаётся вызывающей стороной (клиент блокчейна), движком никогда не создаётся.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from mag_rewards.core.errors import InvalidInputError


# =============================================================================
# ENUMS
# =============================================================================


class TransactionKind(str, Enum):
    """Тип транзакции с точки зрения программы наград"""

    HASH_LOTTERY = "hash_lottery"  # 0.1 TON → награда по последней цифре хэша
    WINDOW_LOTTERY = "window_lottery"  # 10 MAG → участие в розыгрыше окна
    LIQUIDITY_STAKE = "liquidity_stake"  # 1 LP → возврат через hold
    UNKNOWN = "unknown"


# =============================================================================
# TRANSACTION MODEL
# =============================================================================


class TransactionRecord(BaseModel):
    """
    Входящая транзакция.

    asset = None означает нативную монету, иначе — адрес jetton master.
Суммы и время — только целые int (строки и float отклоняются).
    """

    hash: str = Field(..., min_length=1, description="Хэш транзакции (hex/alphanumeric)")
    sender: str = Field(..., min_length=1, description="Адрес отправителя")
    value: int = Field(..., ge=0, strict=True, description="Сумма в nano-единицах")
    timestamp_ms: int = Field(
        ..., ge=0, strict=True, description="Время транзакции (UTC, миллисекунды)"
    )
    asset: str | None = Field(None, min_length=1, description="Адрес jetton master или None")

    model_config = {"frozen": True}

    @property
    def is_native(self) -> bool:
        """True для перевода нативной монеты."""
        return self.asset is None

    @classmethod
    def parse(cls, data: dict[str, Any]) -> "TransactionRecord":
        """
        Создание из сырого dict с конверсией ошибок валидации.

        Raises:
            InvalidInputError: Если обязательные поля отсутствуют или некорректны
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid transaction data: {e}") from e

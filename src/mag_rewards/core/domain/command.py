"""
Command — Команда на перевод

Immutable Pydantic модель единой формы {type, to, amount, timing}.
Движок только формирует команды; исполняет их внешний коллаборатор.
"""

from enum import Enum
from typing import Any, Final, Literal

from pydantic import BaseModel, Field


# Маркер немедленного исполнения
IMMEDIATE: Final[str] = "immediate"


# =============================================================================
# ENUMS
# =============================================================================


class CommandType(str, Enum):
    """Тип команды"""

    TOKEN_TRANSFER = "TOKEN_TRANSFER"  # Выплата награды в MAG
    LIQUIDITY_RETURN = "LIQUIDITY_RETURN"  # Возврат LP после удержания
    AUTO_BUY = "AUTO_BUY"  # Покупка MAG при превышении порога баланса


# =============================================================================
# COMMAND MODEL
# =============================================================================


class Command(BaseModel):
    """
    Команда на перевод.

    timing — либо момент исполнения (UTC, миллисекунды), либо "immediate".
    Value object: без идентичности, без мутаций (frozen=True).
    """

    type: CommandType = Field(..., description="Тип команды")
    to: str = Field(..., min_length=1, description="Адрес получателя")
    amount: int = Field(..., ge=0, description="Сумма в nano-единицах")
    timing: int | Literal["immediate"] = Field(
        IMMEDIATE, description="Время исполнения (UTC ms) или 'immediate'"
    )

    model_config = {"frozen": True}

    @property
    def is_immediate(self) -> bool:
        return self.timing == IMMEDIATE

    def is_due(self, now_ms: int) -> bool:
        """
        Проверка, пора ли исполнять команду.

        Args:
            now_ms: Текущее время (UTC, миллисекунды)

        Returns:
            True для immediate или если timing <= now_ms
        """
        return self.is_immediate or self.timing <= now_ms

    def to_contract(self) -> dict[str, Any]:
        """JSON-совместимое представление (см. contracts/schema/command.json)."""
        return self.model_dump(mode="json")

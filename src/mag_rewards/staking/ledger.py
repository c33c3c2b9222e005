"""
StakeLedger — учёт LP-депозитов с отложенным возвратом

- record_deposit: upsert {amount, release_at = now + liquidity_hold}
  Повторный депозит с того же адреса ПЕРЕЗАПИСЫВАЕТ ожидающий возврат
  (не суммируется).
- pending_releases: снапшот всех записей (включая ещё не наступившие)
- due_releases: снапшот записей с release_at <= now
- acknowledge: удаление записи после исполнения возврата

Снапшоты — неизменяемые tuple: последующие изменения ledger не влияют
на уже выданный снапшот, снапшот можно итерировать повторно.
Хранилище in-memory, персистентность вне области движка.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from mag_rewards.core.config import EngineConfig
from mag_rewards.core.domain.stake import StakeRecord
from mag_rewards.core.domain.units import validate_amount
from mag_rewards.core.errors import InvalidInputError

logger = logging.getLogger(__name__)


class StakeLedger:
    """Реестр LP-депозитов: не более одной живой записи на адрес."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self._records: dict[str, StakeRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, address: object) -> bool:
        return address in self._records

    def record_deposit(self, address: str, amount: int, now_ms: int) -> StakeRecord:
        """
        Запись депозита (upsert).

        Args:
            address: Адрес депозитора
            amount: Сумма в nano-единицах
            now_ms: Время депозита (UTC, миллисекунды)

        Returns:
            Сохранённая запись с release_at_ms = now_ms + liquidity_hold_ms

        Raises:
            InvalidInputError: Если адрес пустой или сумма некорректна
        """
        validate_amount(amount)
        try:
            record = StakeRecord(
                address=address,
                amount=amount,
                release_at_ms=now_ms + self.config.liquidity_hold_ms,
            )
        except (TypeError, ValidationError) as e:
            raise InvalidInputError(f"Invalid stake deposit: {e}") from e

        previous = self._records.get(address)
        self._records[address] = record

        if previous is not None:
            logger.info(
                "Stake deposit overwrote pending release: address=%s amount=%d release_at=%d (was %d)",
                address, amount, record.release_at_ms, previous.release_at_ms,
            )
        else:
            logger.info(
                "Stake deposit recorded: address=%s amount=%d release_at=%d",
                address, amount, record.release_at_ms,
            )
        return record

    def pending_releases(self) -> tuple[StakeRecord, ...]:
        """Снапшот всех записей (порядок не гарантируется)."""
        return tuple(self._records.values())

    def due_releases(self, now_ms: int) -> tuple[StakeRecord, ...]:
        """Снапшот записей, готовых к возврату (release_at <= now)."""
        return tuple(r for r in self._records.values() if r.is_due(now_ms))

    def get(self, address: str) -> Optional[StakeRecord]:
        return self._records.get(address)

    def acknowledge(self, address: str) -> Optional[StakeRecord]:
        """
        Удаление записи после исполнения возврата внешним коллаборатором.

        Returns:
            Удалённая запись или None, если адреса нет в реестре
        """
        record = self._records.pop(address, None)
        if record is not None:
            logger.info("Stake release acknowledged: address=%s amount=%d", address, record.amount)
        return record

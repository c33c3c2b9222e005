"""
LotteryWindow — окно розыгрыша MAG

Участники присылают lottery_entry_stake (10 MAG); номер участника — сумма
цифр хэша транзакции. Раз в window_duration окно разыгрывается:

1. Валидные записи: now - arrived_at <= window_duration (граница включительна).
   Устаревшие записи отсекаются лениво, только в момент розыгрыша.
2. Нет валидных записей → пустой результат, окно НЕ очищается.
3. total_prize = entry_stake * valid_count
   distributable = total_prize * (100 - fee_retention_pct) // 100
4. Победители — ВСЕ записи с максимальным rank (ничья делит приз).
5. per_winner = distributable // len(winners); остаток не выплачивается и
   не возвращается (принятая потеря округления, фиксируется в remainder).
6. Окно очищается целиком (валидные и устаревшие записи вместе).

Одна запись на участника: повторное участие перезаписывает предыдущее (upsert).
Комиссия удерживается и при единственном участнике.
"""

import logging

from pydantic import ValidationError

from mag_rewards.core.config import EngineConfig
from mag_rewards.core.domain.lottery import LotteryEntry, SettlementResult
from mag_rewards.core.errors import InvalidInputError

logger = logging.getLogger(__name__)


class LotteryWindow:
    """In-memory окно записей розыгрыша.

    Не потокобезопасно: все вызовы выполняются в одном event loop.
    """

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self._entries: dict[str, LotteryEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, participant: object) -> bool:
        return participant in self._entries

    def entries(self) -> tuple[LotteryEntry, ...]:
        """Снапшот текущих записей в порядке поступления."""
        return tuple(self._entries.values())

    def record(self, participant: str, rank: int, now_ms: int) -> LotteryEntry:
        """
        Upsert записи участника.

        Повторная запись от того же участника заменяет предыдущую и переносит
        участника в конец порядка поступления.

        Args:
            participant: Адрес участника
            rank: Номер (сумма цифр хэша), >= 0
            now_ms: Время поступления (UTC, миллисекунды)

        Returns:
            Сохранённая запись

        Raises:
            InvalidInputError: Если адрес пустой или rank отрицательный
        """
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise InvalidInputError(f"rank must be an integer, got {rank!r}")
        try:
            entry = LotteryEntry(participant=participant, rank=rank, arrived_at_ms=now_ms)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid lottery entry: {e}") from e

        replaced = self._entries.pop(participant, None)
        self._entries[participant] = entry

        if replaced is not None:
            logger.debug(
                "Lottery entry replaced: participant=%s rank %d -> %d",
                participant, replaced.rank, rank,
            )
        else:
            logger.debug("Lottery entry recorded: participant=%s rank=%d", participant, rank)

        return entry

    def settle(self, now_ms: int) -> SettlementResult:
        """
        Розыгрыш окна.

        Args:
            now_ms: Текущее время (UTC, миллисекунды)

        Returns:
            SettlementResult; пустой (is_empty) если валидных записей нет
        """
        window_ms = self.config.window_duration_ms
        valid = [e for e in self._entries.values() if e.is_valid_at(now_ms, window_ms)]
        expired_count = len(self._entries) - len(valid)

        if not valid:
            # Окно не очищается: устаревшие записи уйдут при следующем розыгрыше
            return SettlementResult.empty(now_ms, expired_entry_count=expired_count)

        total_prize = self.config.lottery_entry_stake * len(valid)
        distributable = total_prize * self.config.payout_pct // 100

        winning_rank = max(e.rank for e in valid)
        winners = tuple(e.participant for e in valid if e.rank == winning_rank)

        per_winner = distributable // len(winners)
        remainder = distributable - per_winner * len(winners)

        # Окно осушается до того, как результат уходит на выплату
        self._entries.clear()

        result = SettlementResult(
            winners=winners,
            per_winner_amount=per_winner,
            total_prize=total_prize,
            distributable=distributable,
            fee_retained=total_prize - distributable,
            remainder=remainder,
            winning_rank=winning_rank,
            valid_entry_count=len(valid),
            expired_entry_count=expired_count,
            settled_at_ms=now_ms,
        )

        logger.info(
            "Lottery settled: entries=%d expired=%d rank=%d winners=%d per_winner=%d remainder=%d",
            len(valid), expired_count, winning_rank, len(winners), per_winner, remainder,
        )
        return result

"""
CommandFactory — сборка команд единой формы {type, to, amount, timing}

Чистые функции сборки: не обращается ни к исполнителю переводов, ни к
StakeLedger. Только оборачивает уже посчитанные значения в Command.

Возврат LP: timing = deposit_time + liquidity_hold (3 интервала).
"""

from typing import Any

from pydantic import ValidationError

from mag_rewards.core.config import EngineConfig
from mag_rewards.core.domain.command import IMMEDIATE, Command, CommandType
from mag_rewards.core.domain.lottery import SettlementResult
from mag_rewards.core.domain.stake import StakeRecord
from mag_rewards.core.domain.transaction import TransactionRecord
from mag_rewards.core.errors import InvalidInputError


def _as_record(tx: TransactionRecord | dict[str, Any] | None, what: str) -> TransactionRecord:
    if tx is None:
        raise InvalidInputError(f"Invalid {what}: transaction is missing")
    if isinstance(tx, TransactionRecord):
        return tx
    return TransactionRecord.parse(tx)


def _build(command_type: CommandType, to: str, amount: int, timing: int | str) -> Command:
    try:
        return Command(type=command_type, to=to, amount=amount, timing=timing)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid {command_type.value} command: {e}") from e


class CommandFactory:
    """Фабрика команд."""

    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()

    def token_reward(self, tx: TransactionRecord | dict[str, Any], amount: int) -> Command:
        """
        Немедленная выплата награды hash-lottery отправителю транзакции.

        Raises:
            InvalidInputError: Если транзакция отсутствует или без hash/sender/timestamp
        """
        tx = _as_record(tx, "transaction data")
        return _build(CommandType.TOKEN_TRANSFER, tx.sender, amount, IMMEDIATE)

    def liquidity_return(self, tx: TransactionRecord | dict[str, Any]) -> Command:
        """
        Отложенный возврат LP: timing = tx.timestamp + liquidity_hold.

        Raises:
            InvalidInputError: Если транзакция отсутствует или без hash/sender/timestamp
        """
        tx = _as_record(tx, "LP stake data")
        return _build(
            CommandType.LIQUIDITY_RETURN,
            tx.sender,
            self.config.liquidity_stake_amount,
            tx.timestamp_ms + self.config.liquidity_hold_ms,
        )

    def release(self, record: StakeRecord) -> Command:
        """Возврат LP по записи StakeLedger."""
        return _build(
            CommandType.LIQUIDITY_RETURN, record.address, record.amount, record.release_at_ms
        )

    def lottery_payouts(self, result: SettlementResult) -> tuple[Command, ...]:
        """
        Команды выплаты победителям розыгрыша окна.

        Returns:
            По одной немедленной команде на победителя; () для пустого результата
        """
        return tuple(
            _build(CommandType.TOKEN_TRANSFER, winner, result.per_winner_amount, IMMEDIATE)
            for winner in result.winners
        )

    def auto_buy(self, amount: int) -> Command:
        """Немедленная покупка MAG через swap router."""
        return _build(CommandType.AUTO_BUY, self.config.swap_router_address, amount, IMMEDIATE)

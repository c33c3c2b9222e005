"""TransactionProcessor — связка компонентов движка с внешним клиентом блокчейна.

Поток:
- событие с хэшем транзакции → get_transaction → classify → команда
- событие проверки баланса → get_balance → ThresholdMonitor

Классификация:
- нативная монета, value == ton_lottery_ticket   → HASH_LOTTERY (награда сразу)
- asset == lp_address, value == liquidity_stake  → LIQUIDITY_STAKE (депозит + возврат)
- asset == mag_address, value == entry_stake     → WINDOW_LOTTERY (запись в окно)
- иначе                                          → UNKNOWN (без команды)

Процессор НЕ исполняет команды и не ретраит сетевые вызовы:
NetworkError от клиента пробрасывается без изменений.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from mag_rewards.commands.factory import CommandFactory
from mag_rewards.commands.threshold_monitor import ThresholdMonitor
from mag_rewards.core.config import EngineConfig
from mag_rewards.core.domain.command import Command
from mag_rewards.core.domain.transaction import TransactionKind, TransactionRecord
from mag_rewards.lottery.window import LotteryWindow
from mag_rewards.rewards.calculator import RewardCalculator
from mag_rewards.staking.ledger import StakeLedger

logger = logging.getLogger(__name__)


class ChainClient(Protocol):
    """Внешний клиент блокчейна. Оба метода могут поднять NetworkError."""

    async def get_transaction(self, tx_hash: str) -> TransactionRecord:
        ...

    async def get_balance(self, address: str) -> int:
        ...


@dataclass(frozen=True)
class ProcessingOutcome:
    """Результат обработки транзакции."""

    kind: TransactionKind
    command: Optional[Command]
    tx_hash: str


class TransactionProcessor:
    """Обработка входящих транзакций и проверок баланса."""

    def __init__(
        self,
        client: ChainClient,
        config: Optional[EngineConfig] = None,
        calculator: Optional[RewardCalculator] = None,
        window: Optional[LotteryWindow] = None,
        ledger: Optional[StakeLedger] = None,
        factory: Optional[CommandFactory] = None,
        monitor: Optional[ThresholdMonitor] = None,
    ):
        self.client = client
        self.config = config or EngineConfig()
        self.calculator = calculator or RewardCalculator(config=self.config)
        self.window = window or LotteryWindow(self.config)
        self.ledger = ledger or StakeLedger(self.config)
        self.factory = factory or CommandFactory(self.config)
        self.monitor = monitor or ThresholdMonitor(self.config, self.factory)

    def classify(self, tx: TransactionRecord) -> TransactionKind:
        if tx.is_native:
            if tx.value == self.config.ton_lottery_ticket:
                return TransactionKind.HASH_LOTTERY
            return TransactionKind.UNKNOWN

        if tx.asset == self.config.lp_address and tx.value == self.config.liquidity_stake_amount:
            return TransactionKind.LIQUIDITY_STAKE

        if tx.asset == self.config.mag_address and tx.value == self.config.lottery_entry_stake:
            return TransactionKind.WINDOW_LOTTERY

        return TransactionKind.UNKNOWN

    def process_record(self, tx: TransactionRecord) -> ProcessingOutcome:
        """
        Обработка уже полученной транзакции.

        Returns:
            ProcessingOutcome; command = None для WINDOW_LOTTERY и UNKNOWN

        Raises:
            InvalidInputError: Если хэш транзакции некорректен
        """
        kind = self.classify(tx)
        command: Optional[Command] = None

        if kind == TransactionKind.HASH_LOTTERY:
            command = self.factory.token_reward(tx, self.calculator.reward_for(tx.hash))
        elif kind == TransactionKind.LIQUIDITY_STAKE:
            self.ledger.record_deposit(tx.sender, tx.value, tx.timestamp_ms)
            command = self.factory.liquidity_return(tx)
        elif kind == TransactionKind.WINDOW_LOTTERY:
            self.window.record(tx.sender, self.calculator.lottery_rank(tx.hash), tx.timestamp_ms)

        logger.debug(
            "Transaction processed: hash=%s kind=%s command=%s",
            tx.hash, kind.value, command.type.value if command else None,
        )
        return ProcessingOutcome(kind=kind, command=command, tx_hash=tx.hash)

    async def process_transaction(self, tx_hash: str) -> ProcessingOutcome:
        """
        Получение транзакции у клиента и её обработка.

        Raises:
            NetworkError: от клиента, без изменений
        """
        tx = await self.client.get_transaction(tx_hash)
        return self.process_record(tx)

    async def check_balance(self, address: Optional[str] = None) -> Optional[Command]:
        """
        Проверка баланса контракта на порог auto-buy.

        Args:
            address: Адрес (default: config.contract_address)

        Raises:
            NetworkError: от клиента, без изменений
        """
        balance = await self.client.get_balance(address or self.config.contract_address)
        return self.monitor.evaluate_balance(balance)

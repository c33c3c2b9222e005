"""Тесты для CommandFactory и ThresholdMonitor.

Coverage:
- Команда награды hash-lottery (immediate)
- Команда возврата LP (timing = timestamp + 3 интервала)
- Команды выплат розыгрыша
- Auto-buy: включительный порог
"""

import pytest
from pydantic import ValidationError

from mag_rewards.commands.factory import CommandFactory
from mag_rewards.commands.threshold_monitor import ThresholdMonitor
from mag_rewards.core.config import EngineConfig
from mag_rewards.core.domain.command import IMMEDIATE, CommandType
from mag_rewards.core.domain.lottery import SettlementResult
from mag_rewards.core.domain.stake import StakeRecord
from mag_rewards.core.domain.transaction import TransactionRecord
from mag_rewards.core.domain.units import to_nano
from mag_rewards.core.errors import InvalidInputError
from mag_rewards.rewards.calculator import RewardCalculator


SENDER = "UQBurs_9BdBtUyEZT12mh-M4-wXYzb"
TX_HASH = "dbd27b5f3b26b698dc447386820d28ef194953958fd5544fb4219442047d335f"


@pytest.fixture
def factory():
    return CommandFactory()


@pytest.fixture
def tx():
    return TransactionRecord(
        hash=TX_HASH, sender=SENDER, value=to_nano("0.1"), timestamp_ms=1_700_000_000_000
    )


class TestCommandFactory:
    """Тесты CommandFactory."""

    def test_token_reward(self, factory, tx):
        amount = RewardCalculator().reward_for(tx.hash)
        command = factory.token_reward(tx, amount)

        assert command.type == CommandType.TOKEN_TRANSFER
        assert command.to == SENDER
        assert command.amount == to_nano("1.6")  # последняя цифра 5
        assert command.timing == IMMEDIATE

    def test_token_reward_from_dict(self, factory):
        command = factory.token_reward(
            {"hash": "abc1", "sender": SENDER, "value": 1, "timestamp_ms": 0}, 5
        )
        assert command.to == SENDER

    @pytest.mark.parametrize(
        "data",
        [
            None,
            {"sender": SENDER, "value": 1, "timestamp_ms": 0},
            {"hash": "abc", "value": 1, "timestamp_ms": 0},
            {"hash": "", "sender": SENDER, "value": 1, "timestamp_ms": 0},
        ],
    )
    def test_token_reward_invalid_tx(self, factory, data):
        with pytest.raises(InvalidInputError):
            factory.token_reward(data, 1)

    def test_liquidity_return(self, factory, tx):
        command = factory.liquidity_return(tx)

        assert command.type == CommandType.LIQUIDITY_RETURN
        assert command.to == SENDER
        assert command.amount == to_nano(1)
        assert command.timing == tx.timestamp_ms + 3 * 60_000

    def test_liquidity_return_missing_timestamp(self, factory):
        with pytest.raises(InvalidInputError):
            factory.liquidity_return({"hash": "abc123", "sender": SENDER, "value": 1})

    def test_release_from_stake_record(self, factory):
        record = StakeRecord(address="addr1", amount=7, release_at_ms=500)
        command = factory.release(record)

        assert command.type == CommandType.LIQUIDITY_RETURN
        assert command.amount == 7
        assert command.timing == 500
        assert command.is_due(500)
        assert not command.is_due(499)

    def test_lottery_payouts(self, factory):
        result = SettlementResult(
            winners=("addr1", "addr2"),
            per_winner_amount=13,
            total_prize=30,
            distributable=27,
            fee_retained=3,
            remainder=1,
            winning_rank=100,
            valid_entry_count=3,
            expired_entry_count=0,
            settled_at_ms=0,
        )

        commands = factory.lottery_payouts(result)

        assert [c.to for c in commands] == ["addr1", "addr2"]
        assert all(c.amount == 13 for c in commands)
        assert all(c.type == CommandType.TOKEN_TRANSFER for c in commands)
        assert all(c.is_immediate for c in commands)

    def test_lottery_payouts_empty(self, factory):
        assert factory.lottery_payouts(SettlementResult.empty(0)) == ()

    def test_commands_are_immutable(self, factory, tx):
        command = factory.token_reward(tx, 1)
        with pytest.raises(ValidationError):
            command.amount = 2


class TestThresholdMonitor:
    """Тесты ThresholdMonitor."""

    @pytest.fixture
    def monitor(self):
        return ThresholdMonitor()

    def test_above_threshold_triggers(self, monitor):
        command = monitor.evaluate_balance(to_nano("2.5"))

        assert command is not None
        assert command.type == CommandType.AUTO_BUY
        assert command.amount == to_nano("1.5")
        assert command.to == EngineConfig().swap_router_address
        assert command.is_immediate

    def test_threshold_is_inclusive(self, monitor):
        assert monitor.evaluate_balance(to_nano(2)) is not None

    def test_below_threshold(self, monitor):
        assert monitor.evaluate_balance(to_nano(2) - 1) is None
        assert monitor.evaluate_balance(0) is None

    def test_idempotent(self, monitor):
        assert monitor.evaluate_balance(to_nano(3)) == monitor.evaluate_balance(to_nano(3))

    def test_negative_balance_rejected(self, monitor):
        with pytest.raises(InvalidInputError):
            monitor.evaluate_balance(-1)

    def test_custom_threshold(self):
        monitor = ThresholdMonitor(EngineConfig(auto_buy_threshold=100, auto_buy_amount=40))
        command = monitor.evaluate_balance(100)
        assert command.amount == 40

"""
ThresholdMonitor — auto-buy при превышении порога баланса

Stateless: balance >= auto_buy_threshold (включительно) → команда AUTO_BUY на
фиксированную сумму auto_buy_amount, иначе ничего.
"""

import logging

from mag_rewards.commands.factory import CommandFactory
from mag_rewards.core.config import EngineConfig
from mag_rewards.core.domain.command import Command
from mag_rewards.core.domain.units import validate_amount

logger = logging.getLogger(__name__)


class ThresholdMonitor:
    """Сравнение наблюдаемого баланса с порогом auto-buy."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        factory: CommandFactory | None = None,
    ):
        self.config = config or EngineConfig()
        self.factory = factory or CommandFactory(self.config)

    def evaluate_balance(self, balance: int) -> Command | None:
        """
        Оценка баланса контракта.

        Args:
            balance: Баланс в nano-единицах

        Returns:
            Command(AUTO_BUY) если balance >= threshold, иначе None

        Raises:
            InvalidInputError: Если баланс не целый или отрицательный
        """
        validate_amount(balance, "balance")

        if balance < self.config.auto_buy_threshold:
            return None

        logger.info(
            "Auto-buy triggered: balance=%d threshold=%d amount=%d",
            balance, self.config.auto_buy_threshold, self.config.auto_buy_amount,
        )
        return self.factory.auto_buy(self.config.auto_buy_amount)

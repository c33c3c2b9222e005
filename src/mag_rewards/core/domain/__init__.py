"""
Domain models and value objects.

Contains fundamental domain entities like TransactionRecord, Command,
LotteryEntry, StakeRecord and nano-unit converters.
"""

from mag_rewards.core.domain.command import IMMEDIATE, Command, CommandType
from mag_rewards.core.domain.lottery import LotteryEntry, SettlementResult
from mag_rewards.core.domain.stake import StakeRecord
from mag_rewards.core.domain.transaction import TransactionKind, TransactionRecord
from mag_rewards.core.domain.units import (
    NANO_DECIMALS,
    NANO_PER_TOKEN,
    from_nano,
    to_nano,
    validate_address,
    validate_amount,
)

__all__ = [
    # Units module
    "NANO_PER_TOKEN",
    "NANO_DECIMALS",
    "to_nano",
    "from_nano",
    "validate_amount",
    "validate_address",
    # Transaction model
    "TransactionRecord",
    "TransactionKind",
    # Command model
    "Command",
    "CommandType",
    "IMMEDIATE",
    # Lottery / stake models
    "LotteryEntry",
    "SettlementResult",
    "StakeRecord",
]

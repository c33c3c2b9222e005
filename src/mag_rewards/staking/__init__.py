"""Staking — LP-депозиты с фиксированным временем возврата."""

from .ledger import StakeLedger

__all__ = [
    "StakeLedger",
]

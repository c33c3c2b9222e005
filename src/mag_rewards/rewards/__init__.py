"""Rewards — расчёт награды hash-lottery по фиксированной таблице."""

from .calculator import REWARD_TABLE_NANO, RewardCalculator, RewardTable

__all__ = [
    "REWARD_TABLE_NANO",
    "RewardCalculator",
    "RewardTable",
]

"""
Core math modules для MAG Rewards

Детерминированные примитивы без побочных эффектов.
"""

# Hash digest
from mag_rewards.core.math.hash_digest import (
    DEFAULT_DIGIT,
    digit_sum,
    trailing_digit,
)

__all__ = [
    "DEFAULT_DIGIT",
    "digit_sum",
    "trailing_digit",
]

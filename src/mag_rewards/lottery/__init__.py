"""Lottery — розыгрыш MAG по окну времени.

- LotteryWindow: накопление записей участников, ленивое отсечение устаревших
- SettlementScheduler: периодический розыгрыш с lifecycle start/stop
"""

from .scheduler import SchedulerState, SettlementScheduler, system_clock_ms
from .window import LotteryWindow

__all__ = [
    "LotteryWindow",
    "SchedulerState",
    "SettlementScheduler",
    "system_clock_ms",
]

"""Commands — сборка команд на перевод и auto-buy монитор."""

from .factory import CommandFactory
from .threshold_monitor import ThresholdMonitor

__all__ = [
    "CommandFactory",
    "ThresholdMonitor",
]

"""
Contract Validation Module

Модуль для валидации JSON контрактов команд, передаваемых исполнителю.
"""

from .validators import (
    CommandValidator,
    ContractValidator,
    SchemaLoader,
    validate_command,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CommandValidator",
    # Functions
    "validate_command",
]

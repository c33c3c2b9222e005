"""
Tests for JSON Schema Contract Validators

Тестирование валидатора command контракта:
- Валидность самой схемы
- Команды, собранные CommandFactory, проходят контракт
- Детекция нарушений required / type / enum / minimum
"""

import pytest
from jsonschema import Draft202012Validator, ValidationError

from mag_rewards.commands.factory import CommandFactory
from mag_rewards.commands.threshold_monitor import ThresholdMonitor
from mag_rewards.core.contracts import CommandValidator, SchemaLoader, validate_command
from mag_rewards.core.domain import StakeRecord, TransactionRecord, to_nano


@pytest.fixture
def valid_command():
    return {
        "type": "TOKEN_TRANSFER",
        "to": "UQBurs_9BdBtUyEZT12mh-M4-wXYzb",
        "amount": 25_600_000_000,
        "timing": "immediate",
    }


class TestSchema:
    """Тесты самой схемы."""

    def test_schema_is_valid(self):
        schema = SchemaLoader().load_schema("command")
        Draft202012Validator.check_schema(schema)

    def test_schema_is_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("command") is loader.load_schema("command")

    def test_unknown_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("missing")


class TestCommandContract:
    """Тесты command контракта."""

    def test_valid_dict(self, valid_command):
        validate_command(valid_command)

    def test_scheduled_timing(self, valid_command):
        valid_command["timing"] = 1_700_000_180_000
        validate_command(valid_command)

    def test_factory_commands_conform(self):
        factory = CommandFactory()
        tx = TransactionRecord(hash="abc9", sender="addr", value=1, timestamp_ms=1_000)

        validate_command(factory.token_reward(tx, to_nano("25.6")))
        validate_command(factory.liquidity_return(tx))
        validate_command(factory.release(StakeRecord(address="a", amount=1, release_at_ms=5)))
        validate_command(ThresholdMonitor().evaluate_balance(to_nano(5)))

    @pytest.mark.parametrize("field", ["type", "to", "amount", "timing"])
    def test_missing_required_field(self, valid_command, field):
        del valid_command[field]
        with pytest.raises(ValidationError):
            validate_command(valid_command)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("type", "MAG_TRANSFER"),
            ("to", ""),
            ("amount", -1),
            ("amount", "100"),
            ("amount", 1.5),
            ("timing", "later"),
            ("timing", -5),
        ],
    )
    def test_invalid_values(self, valid_command, field, value):
        valid_command[field] = value
        assert not CommandValidator().is_valid(valid_command)

    def test_additional_properties_rejected(self, valid_command):
        valid_command["payload"] = "MAG Reward"
        errors = list(CommandValidator().iter_errors(valid_command))
        assert len(errors) == 1

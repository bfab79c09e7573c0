"""Tests for configuration range and character-set checks."""
from __future__ import annotations

import pytest

from brevid.checks.ranges import (
    RangeViolation,
    validate_character_set,
    validate_config,
    validate_field,
    validate_range,
)
from brevid.domain.models import GeneratorConfig
from brevid.utils.constants import MAX_HEX_INT_WIDTH
from brevid.utils.errors import InvalidConfigurationError

NOW = 1711929600


def test_validate_range_accepts_bounds() -> None:
    validate_range(3, 3, 255)
    validate_range(255, 3, 255)


def test_validate_range_below_minimum() -> None:
    with pytest.raises(RangeViolation, match="^must be at least 3$"):
        validate_range(2, 3, 255)


def test_validate_range_above_maximum() -> None:
    with pytest.raises(RangeViolation, match="^cannot be greater than 255$"):
        validate_range(256, 3, 255)


@pytest.mark.parametrize("value", [True, 1.5, "7", None])
def test_validate_range_requires_integer(value: object) -> None:
    with pytest.raises(RangeViolation, match="must be an integer"):
        validate_range(value, 0, 10)


@pytest.mark.parametrize(
    "chars, message",
    [
        ("ab", "Character set length must be at least 3"),
        ("abcé", "Character set cannot contain multibyte characters"),
        ("ab\ud800", "Character set cannot contain multibyte characters"),
        ("abcabc", "Character set must contain unique characters"),
        (["a", "b", "c"], "Character set must be a string"),
    ],
)
def test_validate_character_set_failures(chars: object, message: str) -> None:
    with pytest.raises(RangeViolation, match=message):
        validate_character_set(chars)


def test_validate_field_prefixes_field_name() -> None:
    with pytest.raises(InvalidConfigurationError) as excinfo:
        validate_field("minLength", validate_range, 0, 3, 255)

    assert str(excinfo.value) == "Invalid minLength: must be at least 3"
    assert excinfo.value.field == "minLength"
    assert excinfo.value.reason == "must be at least 3"
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"start_timestamp": -1}, "Invalid startTimestamp: must be at least 0"),
        ({"start_timestamp": 2713203137}, f"Invalid startTimestamp: cannot be greater than {NOW}"),
        ({"min_length": 2}, "Invalid minLength: must be at least 3"),
        ({"min_length": 256}, "Invalid minLength: cannot be greater than 255"),
        ({"time_magnitude": 0}, "Invalid timeMagnitude: must be at least 1"),
        ({"time_magnitude": 10}, "Invalid timeMagnitude: cannot be greater than 5"),
        ({"host_magnitude": 0}, "Invalid hostMagnitude: must be at least 1"),
        (
            {"host_magnitude": MAX_HEX_INT_WIDTH + 1},
            f"Invalid hostMagnitude: cannot be greater than {MAX_HEX_INT_WIDTH}",
        ),
        ({"rand_magnitude": 0}, "Invalid randMagnitude: must be at least 1"),
        ({"rand_magnitude": 100}, "Invalid randMagnitude: cannot be greater than 10"),
        ({"character_set": "a"}, "Invalid characterSet: Character set length must be at least 3"),
    ],
)
def test_validate_config_reports_field_and_bound(overrides: dict, message: str) -> None:
    with pytest.raises(InvalidConfigurationError) as excinfo:
        validate_config(GeneratorConfig(**overrides), now=NOW)

    assert str(excinfo.value) == message


def test_validate_config_reports_first_violation() -> None:
    config = GeneratorConfig(time_magnitude=0, min_length=0)

    with pytest.raises(InvalidConfigurationError, match="timeMagnitude"):
        validate_config(config, now=NOW)


def test_validate_config_accepts_defaults() -> None:
    validate_config(GeneratorConfig(), now=NOW)

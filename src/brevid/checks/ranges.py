"""Range and character-set validation for generator configuration."""
from __future__ import annotations

from typing import Callable

from ..domain.models import GeneratorConfig
from ..utils.constants import (
    CHARACTER_SET_MIN_LENGTH,
    FIELD_KEYS,
    HOST_MAGNITUDE_LOWER_LIMIT,
    HOST_MAGNITUDE_UPPER_LIMIT,
    MIN_LENGTH_LOWER_LIMIT,
    MIN_LENGTH_UPPER_LIMIT,
    RAND_MAGNITUDE_LOWER_LIMIT,
    RAND_MAGNITUDE_UPPER_LIMIT,
    START_TIMESTAMP_LOWER_LIMIT,
    TIME_MAGNITUDE_LOWER_LIMIT,
    TIME_MAGNITUDE_UPPER_LIMIT,
)
from ..utils.errors import InvalidConfigurationError


class RangeViolation(ValueError):
    """A single value failed a bound or charset check."""


def validate_range(value: object, minimum: int, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeViolation("must be an integer")
    if value < minimum:
        raise RangeViolation(f"must be at least {minimum}")
    if value > maximum:
        raise RangeViolation(f"cannot be greater than {maximum}")


def validate_character_set(chars: object) -> None:
    if not isinstance(chars, str):
        raise RangeViolation("Character set must be a string")
    if len(chars) < CHARACTER_SET_MIN_LENGTH:
        raise RangeViolation(f"Character set length must be at least {CHARACTER_SET_MIN_LENGTH}")
    if any(ord(c) > 127 for c in chars):
        raise RangeViolation("Character set cannot contain multibyte characters")
    if len(set(chars)) != len(chars):
        raise RangeViolation("Character set must contain unique characters")


def validate_field(field: str, check: Callable[..., None], *args: object) -> None:
    """Run *check* and re-raise its failure tagged with the public *field* key."""
    try:
        check(*args)
    except RangeViolation as exc:
        raise InvalidConfigurationError(field, str(exc)) from exc


def validate_config(config: GeneratorConfig, now: int) -> None:
    """Check every field of *config*; the first violation aborts.

    ``now`` is the upper bound for ``start_timestamp`` in whole seconds.
    """
    validate_field(
        FIELD_KEYS["time_magnitude"],
        validate_range,
        config.time_magnitude,
        TIME_MAGNITUDE_LOWER_LIMIT,
        TIME_MAGNITUDE_UPPER_LIMIT,
    )
    validate_field(
        FIELD_KEYS["start_timestamp"],
        validate_range,
        config.start_timestamp,
        START_TIMESTAMP_LOWER_LIMIT,
        now,
    )
    validate_field(
        FIELD_KEYS["min_length"],
        validate_range,
        config.min_length,
        MIN_LENGTH_LOWER_LIMIT,
        MIN_LENGTH_UPPER_LIMIT,
    )
    validate_field(
        FIELD_KEYS["host_magnitude"],
        validate_range,
        config.host_magnitude,
        HOST_MAGNITUDE_LOWER_LIMIT,
        HOST_MAGNITUDE_UPPER_LIMIT,
    )
    validate_field(
        FIELD_KEYS["rand_magnitude"],
        validate_range,
        config.rand_magnitude,
        RAND_MAGNITUDE_LOWER_LIMIT,
        RAND_MAGNITUDE_UPPER_LIMIT,
    )
    validate_field(FIELD_KEYS["character_set"], validate_character_set, config.character_set)


__all__ = [
    "RangeViolation",
    "validate_range",
    "validate_character_set",
    "validate_field",
    "validate_config",
]

"""Domain models for generator configuration and its derived state."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict

from ..utils.constants import (
    DEFAULT_CHARACTER_SET,
    DEFAULT_HOST_MAGNITUDE,
    DEFAULT_MIN_LENGTH,
    DEFAULT_RAND_MAGNITUDE,
    DEFAULT_START_TIMESTAMP,
    DEFAULT_TIME_MAGNITUDE,
    FIELD_KEYS,
)


@dataclass(frozen=True)
class GeneratorConfig:
    """User-facing knobs of an ID generator.

    Instances are plain values; range checks happen when a generator is
    built from them, see :func:`brevid.checks.ranges.validate_config`.
    """

    start_timestamp: int = DEFAULT_START_TIMESTAMP
    min_length: int = DEFAULT_MIN_LENGTH
    time_magnitude: int = DEFAULT_TIME_MAGNITUDE
    host_magnitude: int = DEFAULT_HOST_MAGNITUDE
    rand_magnitude: int = DEFAULT_RAND_MAGNITUDE
    character_set: str = field(default=DEFAULT_CHARACTER_SET)

    @property
    def time_exponent(self) -> int:
        return 10 ** (self.time_magnitude - 1)

    @property
    def start_time_baseline(self) -> int:
        return self.start_timestamp * self.time_exponent

    @property
    def rand_max(self) -> int:
        return 10**self.rand_magnitude - 1

    def to_mapping(self) -> Dict[str, Any]:
        """Return the configuration keyed by its public (JSON) names."""
        return {FIELD_KEYS[name]: value for name, value in asdict(self).items()}


@dataclass(frozen=True)
class GeneratorState:
    """Values computed once when a generator is built and never refreshed."""

    time_exponent: int
    start_time_baseline: int
    rand_max: int
    hashed_hostname: int
    pid: int


__all__ = ["GeneratorConfig", "GeneratorState"]

"""Short, largely collision-resistant string identifiers."""
from __future__ import annotations

from .builder.fingerprint import hash_to_fixed_digits
from .domain.models import GeneratorConfig, GeneratorState
from .generator import BrevId
from .utils.constants import DEFAULT_CHARACTER_SET, MAX_HEX_INT_WIDTH
from .utils.environment import FixedEnvironment, SystemEnvironment
from .utils.errors import (
    BrevIdError,
    EnvironmentUnavailableError,
    InvalidConfigurationError,
)

__all__ = [
    "BrevId",
    "GeneratorConfig",
    "GeneratorState",
    "FixedEnvironment",
    "SystemEnvironment",
    "hash_to_fixed_digits",
    "DEFAULT_CHARACTER_SET",
    "MAX_HEX_INT_WIDTH",
    "BrevIdError",
    "EnvironmentUnavailableError",
    "InvalidConfigurationError",
]

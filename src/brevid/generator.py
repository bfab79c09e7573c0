"""Short, time-ordered ID generation."""
from __future__ import annotations

import dataclasses
import math
import threading
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Protocol, Sequence

from sqids import Sqids

from .builder.fingerprint import hash_to_fixed_digits
from .checks.ranges import validate_config
from .domain.models import GeneratorConfig, GeneratorState
from .parser.config_loader import load_config, load_config_mapping
from .utils.constants import CONFIG_SCHEMA_PATH
from .utils.environment import (
    Clock,
    EnvironmentIdentity,
    RandomSource,
    SystemEnvironment,
    default_random_source,
    system_clock,
)
from .utils.logging import get_logger

LOG = get_logger()


class Encoder(Protocol):
    def encode(self, numbers: List[int]) -> str: ...


EncoderFactory = Callable[[str, int], Encoder]
Fingerprint = Callable[[str, int], int]


def sqids_encoder(alphabet: str, min_length: int) -> Encoder:
    return Sqids(alphabet=alphabet, min_length=min_length)


def _round_half_away(value: float) -> int:
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


class BrevId:
    """Generate compact IDs from time, host fingerprint, pid and a random draw.

    The configuration is validated as a whole before anything else happens;
    on failure :class:`~brevid.utils.errors.InvalidConfigurationError` is
    raised and no generator exists. The host fingerprint and pid are read
    once here and reused by every :meth:`generate` call.

    Keyword overrides use the attribute names of :class:`GeneratorConfig`
    and are applied on top of *config* (or the defaults)::

        BrevId(min_length=8, rand_magnitude=3).generate()
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        *,
        environment: Optional[EnvironmentIdentity] = None,
        clock: Optional[Clock] = None,
        rng: Optional[RandomSource] = None,
        encoder_factory: Optional[EncoderFactory] = None,
        fingerprint: Fingerprint = hash_to_fixed_digits,
        **overrides: Any,
    ) -> None:
        config = config if config is not None else GeneratorConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)

        self._clock: Clock = clock if clock is not None else system_clock
        validate_config(config, now=int(self._clock()))

        environment = environment if environment is not None else SystemEnvironment()
        hostname = environment.hostname()
        pid = environment.current_process_id()

        self._config = config
        self._state = GeneratorState(
            time_exponent=config.time_exponent,
            start_time_baseline=config.start_time_baseline,
            rand_max=config.rand_max,
            hashed_hostname=fingerprint(hostname, config.host_magnitude),
            pid=pid,
        )
        factory = encoder_factory if encoder_factory is not None else sqids_encoder
        self._encoder = factory(config.character_set, config.min_length)
        self._rng: RandomSource = rng if rng is not None else default_random_source()
        self._rng_lock = threading.Lock()

        LOG.debug("generator config: %s", self._config.to_mapping())
        LOG.debug(
            "generator ready: time_exponent=%d baseline=%d rand_max=%d host=%d pid=%d",
            self._state.time_exponent,
            self._state.start_time_baseline,
            self._state.rand_max,
            self._state.hashed_hostname,
            self._state.pid,
        )

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        schema_path: Path = CONFIG_SCHEMA_PATH,
        **collaborators: Any,
    ) -> "BrevId":
        """Build a generator from camelCase configuration keys."""
        return cls(load_config_mapping(data, schema_path), **collaborators)

    @classmethod
    def from_file(
        cls,
        config_path: Path,
        *,
        schema_path: Path = CONFIG_SCHEMA_PATH,
        **collaborators: Any,
    ) -> "BrevId":
        """Build a generator from a JSON configuration file."""
        return cls(load_config(config_path, schema_path), **collaborators)

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def state(self) -> GeneratorState:
        return self._state

    def components(self) -> Sequence[int]:
        """Return a fresh ``[time, host, pid, random]`` tuple without encoding it."""
        state = self._state
        time_value = _round_half_away(self._clock() * state.time_exponent) - state.start_time_baseline
        with self._rng_lock:
            random_value = self._rng.randint(0, state.rand_max)
        return [time_value, state.hashed_hostname, state.pid, random_value]

    def generate(self) -> str:
        return self._encoder.encode(list(self.components()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"


__all__ = ["BrevId", "Encoder", "EncoderFactory", "Fingerprint", "sqids_encoder"]

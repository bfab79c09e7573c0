"""Providers for the host identity, wall clock and random draws."""
from __future__ import annotations

import os
import random
import socket
import time
from dataclasses import dataclass
from typing import Callable, Protocol

from .errors import EnvironmentUnavailableError

Clock = Callable[[], float]


class EnvironmentIdentity(Protocol):
    def hostname(self) -> str: ...

    def current_process_id(self) -> int: ...


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class SystemEnvironment:
    """Reads the hostname and pid from the operating system."""

    def hostname(self) -> str:
        try:
            name = socket.gethostname()
        except OSError as exc:
            raise EnvironmentUnavailableError("Unable to determine hostname") from exc
        if not name:
            raise EnvironmentUnavailableError("Unable to determine hostname")
        return name

    def current_process_id(self) -> int:
        try:
            return os.getpid()
        except OSError as exc:  # pragma: no cover - getpid does not fail on supported platforms
            raise EnvironmentUnavailableError("Unable to determine process ID") from exc


@dataclass(frozen=True)
class FixedEnvironment:
    """Environment identity with pinned values, for reproducible output."""

    host: str = "localhost"
    pid: int = 1

    def hostname(self) -> str:
        return self.host

    def current_process_id(self) -> int:
        return self.pid


def system_clock() -> float:
    return time.time()


def default_random_source() -> RandomSource:
    return random.Random()


__all__ = [
    "Clock",
    "EnvironmentIdentity",
    "RandomSource",
    "SystemEnvironment",
    "FixedEnvironment",
    "system_clock",
    "default_random_source",
]

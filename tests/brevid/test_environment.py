"""Tests for host identity and clock providers."""
from __future__ import annotations

import os
import random
import socket

import pytest

from brevid.utils import environment
from brevid.utils.environment import FixedEnvironment, SystemEnvironment
from brevid.utils.errors import EnvironmentUnavailableError


def test_system_environment_reads_operating_system() -> None:
    env = SystemEnvironment()

    assert env.hostname() == socket.gethostname()
    assert env.current_process_id() == os.getpid()


def test_hostname_failure_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom() -> str:
        raise OSError("no name")

    monkeypatch.setattr(environment.socket, "gethostname", boom)

    with pytest.raises(EnvironmentUnavailableError, match="Unable to determine hostname") as excinfo:
        SystemEnvironment().hostname()
    assert isinstance(excinfo.value.__cause__, OSError)


def test_empty_hostname_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(environment.socket, "gethostname", lambda: "")

    with pytest.raises(EnvironmentUnavailableError, match="Unable to determine hostname"):
        SystemEnvironment().hostname()


def test_fixed_environment_returns_pinned_values() -> None:
    env = FixedEnvironment(host="ci-runner", pid=4321)

    assert env.hostname() == "ci-runner"
    assert env.current_process_id() == 4321


def test_default_random_source_is_independent() -> None:
    first = environment.default_random_source()
    second = environment.default_random_source()

    assert isinstance(first, random.Random)
    assert first is not second


def test_system_clock_has_subsecond_precision() -> None:
    assert isinstance(environment.system_clock(), float)

"""Shared fixtures for the Guardian test suite."""

from __future__ import annotations

import pytest

from shared.config import GuardianConfig
from guardian.core.engine import GuardianEngine
from guardian.data.reference import BUNDLED_REFERENCE_SET
from guardian.data.wordlist import BUNDLED_WORDLIST
from guardian.generators.random_source import SecureRandom


class SequenceRandom(SecureRandom):
    """Deterministic stand-in that replays scripted draws, clamped to range."""

    def __init__(self, draws: list[int]) -> None:
        self._draws = list(draws)
        self.calls: list[tuple[int, int]] = []

    def uniform_int(self, min_value: int, max_value: int) -> int:
        if min_value > max_value:
            raise ValueError(f"Empty range [{min_value}, {max_value}]")
        self.calls.append((min_value, max_value))
        value = self._draws.pop(0) if self._draws else min_value
        return max(min_value, min(max_value, value))


@pytest.fixture
def quiet_config() -> GuardianConfig:
    config = GuardianConfig()
    config.global_settings.log_level = "WARNING"
    return config


@pytest.fixture
def engine(quiet_config: GuardianConfig) -> GuardianEngine:
    return GuardianEngine(quiet_config)


@pytest.fixture
def wordlist():
    return BUNDLED_WORDLIST


@pytest.fixture
def reference_set():
    return BUNDLED_REFERENCE_SET

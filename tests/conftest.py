"""Shared test fixtures."""

from __future__ import annotations

import random

import pytest

from wheelspin.config import Settings, StorageSettings, WheelSettings
from wheelspin.core.events import EventBus
from wheelspin.storage import StateStore
from wheelspin.text import FixedWidthMeasurer
from wheelspin.wheel import WheelStore


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def measure() -> FixedWidthMeasurer:
    # 26px font -> 15.6px per character
    return FixedWidthMeasurer(0.6)


@pytest.fixture
def wheel_settings() -> WheelSettings:
    return WheelSettings()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def store(rng) -> WheelStore:
    return WheelStore(name="styles", rng=rng)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        seed=42,
        storage=StorageSettings(state_file=tmp_path / "state.json"),
    )


@pytest.fixture
def state_store(tmp_path) -> StateStore:
    return StateStore(tmp_path / "state.json")

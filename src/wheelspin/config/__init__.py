"""Configuration for wheelspin."""

from wheelspin.config.settings import (
    Settings,
    SimulatorSettings,
    StorageSettings,
    WheelSettings,
    get_settings,
)

__all__ = ["Settings", "SimulatorSettings", "StorageSettings", "WheelSettings", "get_settings"]

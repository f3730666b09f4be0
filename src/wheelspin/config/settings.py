"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support,
e.g. ``WHEELSPIN_DEBUG=1`` or ``WHEELSPIN_WHEEL__RADIUS=300``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WheelSettings(BaseSettings):
    """Wheel drawing and label layout."""

    # Canvas (wheel fills it edge to edge)
    size: int = 800
    radius: float = 400.0

    # Labels
    base_font_px: int = 26
    label_radius_ratio: float = Field(default=0.6, gt=0.0, le=1.0)
    label_margin_px: float = 22.0
    line_height_ratio: float = 1.15
    max_lines: int = Field(default=3, ge=1)
    font_family: str = "Outfit, sans-serif"

    # Colors
    contrast_target: float = Field(default=0.25, ge=0.0, le=1.0)
    palette: Literal["classic", "fun"] = "classic"
    stroke_color: str = "#ffffff"
    label_color: str = "#ffffff"

    @property
    def center(self) -> tuple[float, float]:
        return (self.size / 2, self.size / 2)


class SimulatorSettings(BaseSettings):
    """Desktop front-end window."""

    window_width: int = 1280
    window_height: int = 720
    fullscreen: bool = False
    fps: int = 60
    wheel_pixels: int = 400  # on-screen wheel diameter
    log_file: Path | None = Field(default_factory=lambda: Path.cwd() / "simulator.log")


class StorageSettings(BaseSettings):
    """State file location."""

    state_file: Path = Field(default_factory=lambda: Path.cwd() / "wheelspin_state.json")
    enabled: bool = True


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="WHEELSPIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    seed: int | None = None  # fixed RNG seed for reproducible spins

    # Wheels shown side by side, with the placeholder text of their entry line
    wheels: dict[str, str] = Field(
        default_factory=lambda: {"styles": "Add style", "games": "Add game"}
    )

    wheel: WheelSettings = Field(default_factory=WheelSettings)
    simulator: SimulatorSettings = Field(default_factory=SimulatorSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

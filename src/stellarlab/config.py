"""Runtime settings: scene constants, slider ranges and environment overrides."""

import logging
import math
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigError(ValueError):
    """Invalid setting or out-of-range input at the app boundary."""


@dataclass(frozen=True)
class SceneConfig:
    """Fixed geometry of the parallax illustration."""

    width: float = 800.0
    height: float = 500.0
    orbit_radius: float = 100.0
    squash: float = 0.3  # Vertical flattening of the orbit (fake perspective)
    sun_height_ratio: float = 0.8  # Sun sits low to leave sky above it
    sun_radius: float = 20.0
    star_offset: float = 150.0  # Target star distance above the sun (px)
    projection_scale: float = 2.5  # planet→star extrapolation factor
    max_parallax_arcsec: float = 0.76  # Proxima Centauri
    min_parallax_arcsec: float = 0.01  # Below this the distance is reported as far
    far_distance_pc: float = 100.0
    background_count: int = 50

    @property
    def sun_x(self) -> float:
        return self.width / 2

    @property
    def sun_y(self) -> float:
        return self.height * self.sun_height_ratio


@dataclass(frozen=True)
class SliderRange:
    """Bounds, step and default for one slider."""

    min_value: float
    max_value: float
    step: float
    default: float

    def contains(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value


@dataclass(frozen=True)
class Settings:
    scene: SceneConfig = field(default_factory=SceneConfig)
    luminosity: SliderRange = SliderRange(0.01, 100.0, 0.01, 1.0)
    temperature: SliderRange = SliderRange(2000.0, 12000.0, 100.0, 5800.0)
    lang: str = "en"
    log_level: str = "WARNING"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be positive, got {value}")
    return value


def validate_range(name: str, slider: SliderRange) -> SliderRange:
    """Reject empty ranges and defaults that fall outside their bounds."""
    if slider.min_value >= slider.max_value:
        raise ConfigError(f"{name}: min {slider.min_value} >= max {slider.max_value}")
    if slider.step <= 0:
        raise ConfigError(f"{name}: step must be positive")
    if not slider.contains(slider.default):
        raise ConfigError(f"{name}: default {slider.default} outside range")
    return slider


def _canvas_dimension(
    name: str, label: str, override: float | None, default: float
) -> float:
    if override is None:
        return _env_float(name, default)
    if not math.isfinite(override) or override <= 0:
        raise ConfigError(f"surface {label} must be positive, got {override}")
    return override


def load_settings(width: float | None = None, height: float | None = None) -> Settings:
    """Build Settings from defaults plus STELLARLAB_* environment variables.

    A .env file in the working directory is honoured. The canvas size is
    read once here; the app never re-queries it. An explicit width or
    height replaces the environment value, which is then not parsed.

    Raises:
        ConfigError: On a non-numeric or non-positive canvas dimension.
    """
    load_dotenv()
    scene = SceneConfig(
        width=_canvas_dimension("STELLARLAB_CANVAS_WIDTH", "width", width, SceneConfig.width),
        height=_canvas_dimension("STELLARLAB_CANVAS_HEIGHT", "height", height, SceneConfig.height),
    )
    settings = Settings(
        scene=scene,
        lang=os.environ.get("STELLARLAB_LANG", "en").strip().lower() or "en",
        log_level=os.environ.get("STELLARLAB_LOG_LEVEL", "WARNING").strip().upper(),
    )
    validate_range("luminosity", settings.luminosity)
    validate_range("temperature", settings.temperature)
    return settings


def configure_logging(level: str = "WARNING") -> None:
    """Install the root handler once. Unknown level names fall back to WARNING."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=_LOG_FORMAT)

"""Data model definitions. Boundary types between the compute and render layers."""

import math
from dataclasses import dataclass


@dataclass
class OrbitState:
    """Mutable per-scene state. Only pointer events write to it."""

    angle: float = 0.0  # Radians around the sun, unbounded (wraps via cos/sin)
    dragging: bool = False


@dataclass(frozen=True)
class Point:
    """A position on the drawing surface (pixels, y grows downward)."""

    x: float
    y: float


@dataclass(frozen=True)
class SceneGeometry:
    """Everything a renderer needs to draw one parallax frame."""

    width: float  # Surface width (px)
    height: float  # Surface height (px)
    sun: Point
    sun_radius: float
    orbit_rx: float  # Ellipse semi-axis along x (= orbit radius)
    orbit_ry: float  # Ellipse semi-axis along y (squashed for perspective)
    planet: Point
    star: Point  # Target star, fixed relative to the sun
    line_of_sight: tuple[float, float]  # planet → star vector
    apparent: Point  # Extrapolated "shifted" position on the background
    background: tuple[Point, ...]  # Fixed field stars, identical every frame


@dataclass(frozen=True)
class ParallaxReading:
    """Displayed parallax angle and distance estimate."""

    angle_arcsec: float  # >= 0
    distance_parsecs: float  # > 0; sentinel value when the angle is ~0

    def formatted_angle(self) -> str:
        return f'{self.angle_arcsec:.3f}"'

    def formatted_distance(self) -> str:
        return f"{self.distance_parsecs:.2f} pc"


@dataclass(frozen=True)
class StarParams:
    """Slider input for the star-size model."""

    luminosity: float  # Relative to the Sun
    temperature: float  # Kelvin


@dataclass(frozen=True)
class ColorBand:
    """Radial-gradient stops and glow colour for a temperature range."""

    start: str
    end: str
    glow: str


@dataclass(frozen=True)
class StarAppearance:
    """Derived display values for a star. Fully recomputed per input."""

    params: StarParams
    radius: float  # Unclamped radius relative to the Sun
    px_size: float  # Clamped on-screen diameter (px)
    colors: ColorBand
    glow_radius: float  # Blur radius of the glow (px)

    def labels(self) -> tuple[str, str, str]:
        """Return (luminosity, temperature, radius) display strings."""
        return (
            f"{_plain(self.params.luminosity)}x Sun",
            f"{_plain(self.params.temperature)} K",
            f"{self.radius:.2f} x Sun",
        )


def _plain(value: float) -> str:
    # Slider values print like the raw number: 5800.0 -> "5800", 0.5 -> "0.5"
    if not math.isfinite(value):
        return str(float(value))
    return str(int(value)) if value == int(value) else repr(float(value))

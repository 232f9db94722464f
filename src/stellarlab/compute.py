"""Computation layer for parallax geometry and the star-size model.

Every function here is pure: same input, same output, no state. Renderers
and the interactive layer call into this module; it never calls back out.
"""

import math

from stellarlab.config import SceneConfig
from stellarlab.models import (
    ColorBand,
    ParallaxReading,
    Point,
    SceneGeometry,
    StarAppearance,
    StarParams,
)

SUN_TEMPERATURE_K = 5800.0
PX_PER_SOLAR_RADIUS = 100.0
MIN_STAR_PX = 5.0
MAX_STAR_PX = 300.0

# (upper bound exclusive, colours); the last band has no upper bound
_COLOR_BANDS: tuple[tuple[float, ColorBand], ...] = (
    (4000.0, ColorBand(start="#ff8844", end="#cc2200", glow="#ff2200")),
    (6000.0, ColorBand(start="#ffdd44", end="#cc9900", glow="#ffaa00")),
    (8000.0, ColorBand(start="#ffffff", end="#cccccc", glow="#ccccff")),
    (math.inf, ColorBand(start="#aaddff", end="#4488ff", glow="#0088ff")),
)


# --- Parallax scene ---


def to_surface(
    client_x: float, client_y: float, rect_left: float, rect_top: float
) -> Point:
    """Translate viewport pointer coordinates into surface-local coordinates."""
    return Point(client_x - rect_left, client_y - rect_top)


def pointer_angle(pointer: Point, config: SceneConfig) -> float:
    """Direction from the sun to the pointer, in radians.

    Distance from the sun is irrelevant: a click anywhere sets the angle.
    """
    return math.atan2(pointer.y - config.sun_y, pointer.x - config.sun_x)


def background_stars(config: SceneConfig) -> tuple[Point, ...]:
    """Fixed field stars in the upper half of the surface.

    Positions come from sin/cos of the index, not from an RNG, so every
    redraw places them identically.
    """
    stars = []
    for i in range(config.background_count):
        x = math.fmod(math.sin(i) * 10000, config.width)
        y = math.fmod(math.cos(i) * 10000, config.height / 2)
        stars.append(Point(abs(x), abs(y)))
    return tuple(stars)


def planet_position(angle: float, config: SceneConfig) -> Point:
    """Point on the squashed orbit ellipse for the given angle."""
    return Point(
        config.sun_x + math.cos(angle) * config.orbit_radius,
        config.sun_y + math.sin(angle) * config.orbit_radius * config.squash,
    )


def build_scene(angle: float, config: SceneConfig) -> SceneGeometry:
    """Derive the full projected scene for one frame.

    Args:
        angle: Orbital angle in radians.
        config: Fixed scene constants.

    Returns:
        SceneGeometry with sun, orbit, planet, target star, line of sight,
        apparent position and background stars.
    """
    sun = Point(config.sun_x, config.sun_y)
    planet = planet_position(angle, config)
    star = Point(sun.x, sun.y - config.star_offset)

    vec_x = star.x - planet.x
    vec_y = star.y - planet.y
    # Visual metaphor for the shift against the background, not a physical projection
    apparent = Point(
        planet.x + vec_x * config.projection_scale,
        planet.y + vec_y * config.projection_scale,
    )

    return SceneGeometry(
        width=config.width,
        height=config.height,
        sun=sun,
        sun_radius=config.sun_radius,
        orbit_rx=config.orbit_radius,
        orbit_ry=config.orbit_radius * config.squash,
        planet=planet,
        star=star,
        line_of_sight=(vec_x, vec_y),
        apparent=apparent,
        background=background_stars(config),
    )


def parallax_reading(angle: float, config: SceneConfig) -> ParallaxReading:
    """Parallax angle from the planet's horizontal offset, and d = 1/p.

    Below the minimum measurable angle the far sentinel distance is
    reported instead of dividing by a near-zero value.
    """
    earth_x = math.cos(angle) * config.orbit_radius
    angle_arcsec = abs((earth_x / config.orbit_radius) * config.max_parallax_arcsec)
    if angle_arcsec > config.min_parallax_arcsec:
        distance = 1 / angle_arcsec
    else:
        distance = config.far_distance_pc
    return ParallaxReading(angle_arcsec=angle_arcsec, distance_parsecs=distance)


# --- Star size model ---


def stellar_radius(luminosity: float, temperature: float) -> float:
    """Radius relative to the Sun from L ∝ R²T⁴, i.e. R = √L / (T/T☉)².

    Raises:
        ValueError: If luminosity is negative or temperature is not positive.
    """
    if luminosity < 0:
        raise ValueError(f"luminosity must be non-negative, got {luminosity}")
    if temperature <= 0:
        raise ValueError(f"temperature must be positive, got {temperature}")
    t_rel = temperature / SUN_TEMPERATURE_K
    return math.sqrt(luminosity) / (t_rel * t_rel)


def display_size(radius: float) -> float:
    """On-screen diameter in px, clamped for legibility."""
    return max(MIN_STAR_PX, min(PX_PER_SOLAR_RADIUS * radius, MAX_STAR_PX))


def color_band(temperature: float) -> ColorBand:
    """Gradient and glow colours. Each band includes its lower bound."""
    for upper, band in _COLOR_BANDS:
        if temperature < upper:
            return band
    return _COLOR_BANDS[-1][1]


def star_appearance(params: StarParams) -> StarAppearance:
    """Compute every display value for a star in one pass."""
    radius = stellar_radius(params.luminosity, params.temperature)
    px_size = display_size(radius)
    return StarAppearance(
        params=params,
        radius=radius,
        px_size=px_size,
        colors=color_band(params.temperature),
        glow_radius=px_size / 2,
    )

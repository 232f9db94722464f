"""CLI entry point for parallax / star-size snapshots.

    uv run stellarlab-snapshot --angle-deg 30 --luminosity 4 --temperature 9000
"""

import argparse
import logging
import math
from pathlib import Path

from stellarlab.config import (
    ConfigError,
    Settings,
    SliderRange,
    configure_logging,
    load_settings,
)
from stellarlab.models import Point
from stellarlab.scene import ParallaxScene, StarSizeModel

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parallax and star-size snapshot")
    parser.add_argument("--angle-deg", type=float, default=0.0, help="Orbital angle in degrees")
    parser.add_argument(
        "--luminosity",
        type=float,
        default=settings.luminosity.default,
        help="Luminosity relative to the Sun",
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=settings.temperature.default,
        help="Surface temperature in K",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=None,
        help=f"Surface width in px (default: STELLARLAB_CANVAS_WIDTH or {settings.scene.width:g})",
    )
    parser.add_argument(
        "--height",
        type=float,
        default=None,
        help=f"Surface height in px (default: STELLARLAB_CANVAS_HEIGHT or {settings.scene.height:g})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="PNG path. Defaults to results/parallax__<angle>.png",
    )
    parser.add_argument(
        "--print-only",
        action="store_true",
        help="Print readings without rendering a PNG",
    )
    return parser


def _check_range(name: str, value: float, slider: SliderRange) -> None:
    if not slider.contains(value):
        raise ConfigError(
            f"{name} {value} outside [{slider.min_value}, {slider.max_value}]"
        )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser(Settings())
    args = parser.parse_args(argv)

    try:
        settings = load_settings(width=args.width, height=args.height)
        _check_range("luminosity", args.luminosity, settings.luminosity)
        _check_range("temperature", args.temperature, settings.temperature)
        if not math.isfinite(args.angle_deg):
            raise ConfigError(f"angle must be finite, got {args.angle_deg}")
    except ConfigError as e:
        parser.error(str(e))
    configure_logging(settings.log_level)

    config = settings.scene
    scene = ParallaxScene(config)
    # Aim with a synthetic press one orbit radius out along the requested angle
    theta = math.radians(args.angle_deg)
    scene.pointer_down(
        Point(
            config.sun_x + math.cos(theta) * config.orbit_radius,
            config.sun_y + math.sin(theta) * config.orbit_radius,
        )
    )
    scene.pointer_up()
    geometry, reading = scene.frame()
    appearance = StarSizeModel().update(args.luminosity, args.temperature)

    lum, temp, radius = appearance.labels()
    print(f"Parallax angle: {reading.formatted_angle()}")
    print(f"Distance: {reading.formatted_distance()}")
    print(f"Star: {lum}, {temp} -> {radius} ({appearance.px_size:g} px)")

    if args.print_only:
        return 0

    # Deferred so --print-only never needs a plotting backend
    import matplotlib

    matplotlib.use("Agg")
    from stellarlab.renderers.static import save_static_scene

    path = save_static_scene(geometry, reading, appearance, output_path=args.output)
    logger.info("Saved snapshot to %s", path)
    print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Ellipse

from stellarlab.models import ParallaxReading, SceneGeometry, StarAppearance

_ROOT = Path(__file__).parent.parent.parent.parent
_BG = "#050a1a"
_DPI = 100


def _glow_disc(ax: Axes, x: float, y: float, radius: float, color: str) -> None:
    for scale, alpha in ((2.0, 0.12), (1.5, 0.25)):
        ax.add_patch(Circle((x, y), radius * scale, color=color, alpha=alpha, lw=0))
    ax.add_patch(Circle((x, y), radius, color=color, lw=0, zorder=3))


def draw_scene(ax: Axes, geometry: SceneGeometry, reading: ParallaxReading | None = None) -> None:
    """Draw one parallax frame onto ax in surface-pixel coordinates."""
    ax.set_facecolor(_BG)

    bx = np.array([p.x for p in geometry.background])
    by = np.array([p.y for p in geometry.background])
    ax.scatter(bx, by, s=1, color="white", marker="s", linewidths=0, zorder=1)

    _glow_disc(ax, geometry.sun.x, geometry.sun.y, geometry.sun_radius, "#FFD700")

    ax.add_patch(
        Ellipse(
            (geometry.sun.x, geometry.sun.y),
            2 * geometry.orbit_rx,
            2 * geometry.orbit_ry,
            fill=False,
            edgecolor="white",
            alpha=0.2,
            lw=1,
        )
    )

    ax.add_patch(Circle((geometry.planet.x, geometry.planet.y), 8, color="#00F3FF", lw=0, zorder=4))
    _glow_disc(ax, geometry.star.x, geometry.star.y, 5, "#FF4444")

    ax.plot(
        [geometry.planet.x, geometry.star.x],
        [geometry.planet.y, geometry.star.y],
        color="#00F3FF",
        alpha=0.5,
        linewidth=1,
        linestyle=(0, (5, 5)),
        zorder=2,
    )

    ax.add_patch(Circle((geometry.apparent.x, geometry.apparent.y), 4, color="white", alpha=0.8, lw=0))
    ax.text(
        geometry.apparent.x + 10,
        geometry.apparent.y,
        "Apparent Position",
        color="#AAAAAA",
        fontsize=7,
        va="center",
    )

    if reading is not None:
        ax.text(
            10,
            20,
            f"{reading.formatted_angle()}   {reading.formatted_distance()}",
            color="#AAAAAA",
            fontsize=9,
        )

    ax.set_xlim(0, geometry.width)
    # Surface y grows downward
    ax.set_ylim(geometry.height, 0)
    ax.set_aspect("equal")
    ax.axis("off")


def draw_star(ax: Axes, appearance: StarAppearance) -> None:
    """Draw the star at its clamped display size with a soft glow."""
    ax.set_facecolor(_BG)
    stage = 400.0
    r = appearance.px_size / 2
    c = appearance.colors
    ax.add_patch(Circle((0, 0), r + appearance.glow_radius, color=c.glow, alpha=0.15, lw=0))
    ax.add_patch(Circle((0, 0), r, color=c.end, lw=0))
    # Offset highlight stands in for the 30%/30% radial gradient
    ax.add_patch(Circle((-r * 0.2, r * 0.2), r * 0.6, color=c.start, alpha=0.8, lw=0))
    lum, temp, radius = appearance.labels()
    ax.text(0, -stage / 2 + 15, f"{lum}   {temp}   R = {radius}", color="#d0d8e8", ha="center", fontsize=9)
    ax.set_xlim(-stage / 2, stage / 2)
    ax.set_ylim(-stage / 2, stage / 2)
    ax.set_aspect("equal")
    ax.axis("off")


def render_static_scene(
    geometry: SceneGeometry,
    reading: ParallaxReading | None = None,
    appearance: StarAppearance | None = None,
) -> Figure:
    """Render a parallax frame, optionally beside a star-size panel.

    Args:
        geometry: Fully computed scene.
        reading: Optional parallax reading for the caption.
        appearance: Optional star appearance; adds a second panel.

    Returns:
        matplotlib Figure object.
    """
    width_in = geometry.width / _DPI
    height_in = geometry.height / _DPI
    if appearance is None:
        fig, ax = plt.subplots(figsize=(width_in, height_in), dpi=_DPI)
        draw_scene(ax, geometry, reading)
    else:
        fig, (ax, ax_star) = plt.subplots(
            1,
            2,
            figsize=(width_in + height_in, height_in),
            dpi=_DPI,
            gridspec_kw={"width_ratios": [geometry.width, geometry.height]},
        )
        draw_scene(ax, geometry, reading)
        draw_star(ax_star, appearance)
    fig.patch.set_facecolor(_BG)
    fig.subplots_adjust(left=0, right=1, top=1, bottom=0, wspace=0)
    return fig


def save_static_scene(
    geometry: SceneGeometry,
    reading: ParallaxReading | None = None,
    appearance: StarAppearance | None = None,
    output_path: Path | None = None,
) -> Path:
    """Save the rendered frame as a PNG file.

    Args:
        geometry: Fully computed scene.
        reading: Optional parallax reading.
        appearance: Optional star appearance.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        angle_part = f"{reading.angle_arcsec:.3f}".replace(".", "_") if reading else "scene"
        output_path = _ROOT / "results" / f"parallax__{angle_part}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_scene(geometry, reading, appearance)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path

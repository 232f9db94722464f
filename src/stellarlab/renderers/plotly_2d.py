"""Plotly 2D parallax scene renderer.

Data coordinates are surface pixels (y grows downward, so the y-axis is
reversed). With zero margins and a figure the size of the surface, one
data unit is one screen pixel.

Streamlit has no drag events, so the figure carries an invisible grid of
pointer targets; a click on any of them reports surface coordinates back
through the selection event.
"""

import numpy as np
import plotly.graph_objects as go

from stellarlab.models import ParallaxReading, Point, SceneGeometry

_BG = "#050a1a"
_SUN_COLOR = "#FFD700"
_PLANET_COLOR = "#00F3FF"
_STAR_COLOR = "#FF4444"
_SIGHT_COLOR = "rgba(0, 243, 255, 0.5)"
_ORBIT_COLOR = "rgba(255, 255, 255, 0.2)"
_APPARENT_COLOR = "rgba(255, 255, 255, 0.8)"
_LABEL_COLOR = "#AAAAAA"

POINTER_TRACE = "pointer"
_POINTER_STEP = 10  # px between pointer targets


def _glow(x: float, y: float, radius: float, color: str, name: str) -> list[go.Scatter]:
    """A solid disc with two fading halos behind it."""
    traces = [
        go.Scatter(
            x=[x],
            y=[y],
            mode="markers",
            marker=dict(size=2 * radius * scale, color=color, opacity=opacity, line=dict(width=0)),
            hoverinfo="skip",
            name=f"{name}_glow",
        )
        for scale, opacity in ((2.0, 0.12), (1.5, 0.25))
    ]
    traces.append(
        go.Scatter(
            x=[x],
            y=[y],
            mode="markers",
            marker=dict(size=2 * radius, color=color, line=dict(width=0)),
            hoverinfo="skip",
            name=name,
        )
    )
    return traces


def pointer_grid(
    width: float, height: float, anchor: Point, step: int = _POINTER_STEP
) -> go.Scatter:
    """Transparent click targets covering the whole surface.

    Targets sit half a step off the anchor on both axes, so none of them
    coincides with it and every click has a defined direction from it.
    """
    x0 = (anchor.x + step / 2) % step
    y0 = (anchor.y + step / 2) % step
    xs, ys = np.meshgrid(
        np.arange(x0, width, step, dtype=float),
        np.arange(y0, height, step, dtype=float),
    )
    return go.Scatter(
        x=xs.ravel(),
        y=ys.ravel(),
        mode="markers",
        marker=dict(size=step, color="rgba(0,0,0,0)"),
        # "none" keeps click events while hiding the hover label
        hoverinfo="none",
        name=POINTER_TRACE,
    )


def render_parallax_figure(
    geometry: SceneGeometry,
    reading: ParallaxReading | None = None,
    apparent_label: str = "Apparent Position",
    interactive: bool = True,
) -> go.Figure:
    """Render one parallax frame as a Plotly figure.

    Args:
        geometry: Fully computed scene.
        reading: Optional parallax reading, shown as a corner annotation.
        apparent_label: Text placed next to the apparent position.
        interactive: Add the invisible pointer grid for click input.

    Returns:
        Plotly Figure object.
    """
    bg = geometry.background
    background_trace = go.Scatter(
        x=[p.x for p in bg],
        y=[p.y for p in bg],
        mode="markers",
        marker=dict(size=2, color="#FFFFFF", symbol="square", line=dict(width=0)),
        hoverinfo="skip",
        name="background",
    )

    t = np.linspace(0, 2 * np.pi, 181)
    orbit_trace = go.Scatter(
        x=geometry.sun.x + geometry.orbit_rx * np.cos(t),
        y=geometry.sun.y + geometry.orbit_ry * np.sin(t),
        mode="lines",
        line=dict(color=_ORBIT_COLOR, width=1),
        hoverinfo="skip",
        name="orbit",
    )

    sight_trace = go.Scatter(
        x=[geometry.planet.x, geometry.star.x],
        y=[geometry.planet.y, geometry.star.y],
        mode="lines",
        line=dict(color=_SIGHT_COLOR, width=1, dash="dash"),
        hoverinfo="skip",
        name="line_of_sight",
    )

    planet_trace = go.Scatter(
        x=[geometry.planet.x],
        y=[geometry.planet.y],
        mode="markers",
        marker=dict(size=16, color=_PLANET_COLOR, line=dict(width=0)),
        hoverinfo="skip",
        name="planet",
    )

    apparent_trace = go.Scatter(
        x=[geometry.apparent.x],
        y=[geometry.apparent.y],
        mode="markers+text",
        marker=dict(size=8, color=_APPARENT_COLOR, line=dict(width=0)),
        text=[apparent_label],
        textposition="middle right",
        textfont=dict(color=_LABEL_COLOR, size=10, family="Arial"),
        hoverinfo="skip",
        name="apparent",
    )

    data: list[go.Scatter] = [background_trace]
    data += _glow(geometry.sun.x, geometry.sun.y, geometry.sun_radius, _SUN_COLOR, "sun")
    data.append(orbit_trace)
    data.append(planet_trace)
    data += _glow(geometry.star.x, geometry.star.y, 5, _STAR_COLOR, "star")
    data += [sight_trace, apparent_trace]
    if interactive:
        data.append(pointer_grid(geometry.width, geometry.height, geometry.sun))

    fig = go.Figure(data=data)

    annotations = []
    if reading is not None:
        annotations.append(
            dict(
                x=0.01,
                y=0.99,
                xref="paper",
                yref="paper",
                xanchor="left",
                yanchor="top",
                showarrow=False,
                text=f"{reading.formatted_angle()}  ·  {reading.formatted_distance()}",
                font=dict(color=_LABEL_COLOR, size=12),
            )
        )

    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=int(geometry.width),
        height=int(geometry.height),
        dragmode=False,
        clickmode="event+select",
        annotations=annotations,
        xaxis=dict(
            visible=False,
            range=[0.0, geometry.width],
            autorange=False,
            fixedrange=True,
        ),
        # Surface y grows downward
        yaxis=dict(
            visible=False,
            range=[geometry.height, 0.0],
            autorange=False,
            fixedrange=True,
        ),
    )

    fig._config = {"displayModeBar": False}  # type: ignore[attr-defined]

    return fig

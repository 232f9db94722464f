"""Interactive layer: pointer state machine and slider-driven star model.

Each component owns its own state and pushes a full frame to a sink
callback whenever an input event warrants a redraw. No module globals.
"""

import logging
from collections.abc import Callable

from stellarlab.compute import (
    build_scene,
    parallax_reading,
    pointer_angle,
    star_appearance,
)
from stellarlab.config import SceneConfig
from stellarlab.models import (
    OrbitState,
    ParallaxReading,
    Point,
    SceneGeometry,
    StarAppearance,
    StarParams,
)

logger = logging.getLogger(__name__)

SceneSink = Callable[[SceneGeometry, ParallaxReading], None]
StarSink = Callable[[StarAppearance], None]


class ParallaxScene:
    """Orbit angle driven by pointer drag.

    States: Idle (dragging=False) and Dragging (dragging=True).
    Each handler returns True when it produced a frame.
    """

    def __init__(
        self, config: SceneConfig | None = None, sink: SceneSink | None = None
    ) -> None:
        self.config = config or SceneConfig()
        self.state = OrbitState()
        self._sink = sink

    @property
    def angle(self) -> float:
        return self.state.angle

    @property
    def dragging(self) -> bool:
        return self.state.dragging

    def pointer_down(self, pointer: Point) -> bool:
        if self.state.dragging:
            # A second press without a release just re-aims
            return self.pointer_move(pointer)
        self.state.dragging = True
        logger.debug("Idle -> Dragging at (%.1f, %.1f)", pointer.x, pointer.y)
        self._aim(pointer)
        return True

    def pointer_move(self, pointer: Point) -> bool:
        if not self.state.dragging:
            return False
        self._aim(pointer)
        return True

    def pointer_up(self) -> bool:
        """Release may happen anywhere, on or off the surface. Never renders."""
        if self.state.dragging:
            logger.debug("Dragging -> Idle")
        self.state.dragging = False
        return False

    def frame(self) -> tuple[SceneGeometry, ParallaxReading]:
        """Recompute the scene and reading from the current angle."""
        return (
            build_scene(self.state.angle, self.config),
            parallax_reading(self.state.angle, self.config),
        )

    def render(self) -> tuple[SceneGeometry, ParallaxReading]:
        geometry, reading = self.frame()
        if self._sink is not None:
            self._sink(geometry, reading)
        return geometry, reading

    def _aim(self, pointer: Point) -> None:
        self.state.angle = pointer_angle(pointer, self.config)
        logger.debug("angle=%.4f rad", self.state.angle)
        self.render()


class StarSizeModel:
    """Stateless: every slider change recomputes and emits one appearance."""

    def __init__(self, sink: StarSink | None = None) -> None:
        self._sink = sink

    def update(self, luminosity: float, temperature: float) -> StarAppearance:
        appearance = star_appearance(
            StarParams(luminosity=float(luminosity), temperature=float(temperature))
        )
        logger.debug(
            "L=%s T=%s -> R=%.3f px=%.1f",
            luminosity,
            temperature,
            appearance.radius,
            appearance.px_size,
        )
        if self._sink is not None:
            self._sink(appearance)
        return appearance

"""ParallaxScene state machine and StarSizeModel sink behaviour."""

import math

import pytest

from stellarlab.models import Point
from stellarlab.scene import ParallaxScene, StarSizeModel


class FrameRecorder:
    def __init__(self):
        self.frames = []

    def __call__(self, *frame):
        self.frames.append(frame)


@pytest.fixture
def recorder():
    return FrameRecorder()


@pytest.fixture
def scene(config, recorder):
    return ParallaxScene(config, sink=recorder)


class TestParallaxScene:
    def test_initial_state(self, scene, recorder):
        assert scene.angle == 0.0
        assert not scene.dragging
        assert recorder.frames == []

    def test_press_starts_drag_and_renders(self, scene, recorder, config):
        rendered = scene.pointer_down(Point(config.sun_x, config.sun_y + 50))
        assert rendered
        assert scene.dragging
        assert scene.angle == pytest.approx(math.pi / 2)
        assert len(recorder.frames) == 1
        geometry, reading = recorder.frames[0]
        assert geometry.planet.x == pytest.approx(config.sun_x)
        assert reading.distance_parsecs == 100

    def test_move_while_dragging_rerenders(self, scene, recorder, config):
        scene.pointer_down(Point(config.sun_x + 10, config.sun_y))
        assert scene.pointer_move(Point(config.sun_x - 10, config.sun_y))
        assert scene.dragging
        assert scene.angle == pytest.approx(math.pi)
        assert len(recorder.frames) == 2

    def test_move_while_idle_is_ignored(self, scene, recorder, config):
        assert not scene.pointer_move(Point(config.sun_x, config.sun_y - 40))
        assert scene.angle == 0.0
        assert recorder.frames == []

    def test_release_ends_drag_without_render(self, scene, recorder, config):
        scene.pointer_down(Point(config.sun_x, config.sun_y - 40))
        angle = scene.angle
        assert not scene.pointer_up()
        assert not scene.dragging
        assert scene.angle == angle
        assert len(recorder.frames) == 1

    def test_moves_after_release_are_ignored(self, scene, recorder, config):
        scene.pointer_down(Point(config.sun_x + 10, config.sun_y))
        scene.pointer_up()
        scene.pointer_move(Point(config.sun_x, config.sun_y + 10))
        assert scene.angle == 0.0
        assert len(recorder.frames) == 1

    def test_release_off_surface_still_ends_drag(self, scene, config):
        scene.pointer_down(Point(config.sun_x + 10, config.sun_y))
        scene.pointer_move(Point(-500, 4000))
        scene.pointer_up()
        assert not scene.dragging

    def test_release_when_idle_is_harmless(self, scene, recorder):
        assert not scene.pointer_up()
        assert not scene.dragging
        assert recorder.frames == []

    def test_instances_are_independent(self, config):
        a = ParallaxScene(config)
        b = ParallaxScene(config)
        a.pointer_down(Point(config.sun_x, config.sun_y + 10))
        assert a.dragging and not b.dragging
        assert b.angle == 0.0

    def test_frame_without_sink(self, config):
        geometry, reading = ParallaxScene(config).frame()
        assert geometry.planet.x == pytest.approx(config.sun_x + 100)
        assert reading.angle_arcsec == pytest.approx(0.76)


class TestStarSizeModel:
    def test_update_emits_one_complete_appearance(self):
        seen = []
        model = StarSizeModel(sink=seen.append)
        appearance = model.update(1, 5800)
        assert seen == [appearance]
        assert appearance.radius == pytest.approx(1.0)
        assert appearance.labels() == ("1x Sun", "5800 K", "1.00 x Sun")

    def test_every_update_recomputes(self):
        seen = []
        model = StarSizeModel(sink=seen.append)
        model.update(1, 5800)
        model.update(4, 11600)
        assert len(seen) == 2
        assert seen[1].radius == pytest.approx(0.5)
        assert seen[1].colors.glow == "#0088ff"

"""Plotly, HTML and matplotlib renderers."""

import math

import matplotlib.pyplot as plt
import pytest

from stellarlab.compute import build_scene, parallax_reading, star_appearance
from stellarlab.models import StarParams
from stellarlab.renderers.html_star import render_star_html, star_style
from stellarlab.renderers.plotly_2d import POINTER_TRACE, render_parallax_figure
from stellarlab.renderers.static import render_static_scene, save_static_scene


def _traces(fig):
    return {trace.name: trace for trace in fig.data}


class TestPlotly:
    def test_contains_scene_elements(self, config):
        geometry = build_scene(0.0, config)
        fig = render_parallax_figure(geometry, parallax_reading(0.0, config))
        traces = _traces(fig)
        for name in ("background", "sun", "orbit", "planet", "star", "line_of_sight", "apparent", POINTER_TRACE):
            assert name in traces
        assert traces["planet"].x[0] == pytest.approx(geometry.planet.x)
        assert traces["line_of_sight"].line.dash == "dash"
        assert traces["apparent"].text[0] == "Apparent Position"
        assert len(traces["background"].x) == 50

    def test_y_axis_is_reversed_surface(self, config):
        fig = render_parallax_figure(build_scene(0.0, config))
        assert tuple(fig.layout.yaxis.range) == (config.height, 0.0)
        assert tuple(fig.layout.xaxis.range) == (0.0, config.width)
        assert fig.layout.width == 800 and fig.layout.height == 500

    def test_pointer_grid_covers_surface(self, config):
        traces = _traces(render_parallax_figure(build_scene(0.0, config)))
        grid = traces[POINTER_TRACE]
        assert 0 <= min(grid.x) <= 10 and config.width - 10 <= max(grid.x) <= config.width
        assert 0 <= min(grid.y) <= 10 and config.height - 10 <= max(grid.y) <= config.height

    def test_pointer_grid_never_lands_on_sun(self, config):
        geometry = build_scene(0.0, config)
        grid = _traces(render_parallax_figure(geometry))[POINTER_TRACE]
        sun = geometry.sun
        assert all(x != sun.x for x in grid.x)
        assert all(y != sun.y for y in grid.y)
        # The four targets around the sun aim diagonally, not at angle 0
        nearest = sorted(zip(grid.x, grid.y), key=lambda p: math.hypot(p[0] - sun.x, p[1] - sun.y))[:4]
        angles = sorted(math.degrees(math.atan2(y - sun.y, x - sun.x)) for x, y in nearest)
        assert angles == pytest.approx([-135, -45, 45, 135])

    def test_static_figure_has_no_pointer_grid(self, config):
        traces = _traces(render_parallax_figure(build_scene(0.0, config), interactive=False))
        assert POINTER_TRACE not in traces

    def test_reading_annotation(self, config):
        fig = render_parallax_figure(build_scene(0.0, config), parallax_reading(0.0, config))
        assert '0.760"' in fig.layout.annotations[0].text
        assert "1.32 pc" in fig.layout.annotations[0].text

    def test_label_is_translatable(self, config):
        fig = render_parallax_figure(build_scene(1.0, config), apparent_label="겉보기 위치")
        assert _traces(fig)["apparent"].text[0] == "겉보기 위치"


class TestHtmlStar:
    def test_style_for_reference_star(self):
        style = star_style(star_appearance(StarParams(1, 5800)))
        assert style == {
            "width": "100px",
            "height": "100px",
            "background": "radial-gradient(circle at 30% 30%, #ffdd44, #cc9900)",
            "box-shadow": "0 0 50px #ffaa00",
        }

    def test_style_for_clamped_hot_star(self):
        style = star_style(star_appearance(StarParams(0.01, 12000)))
        assert style["width"] == "5px"
        assert style["box-shadow"] == "0 0 2.5px #0088ff"

    def test_html_carries_all_outputs(self):
        page = render_star_html(star_appearance(StarParams(1, 5800)))
        assert 'id="star-visual"' in page
        assert "width: 100px; height: 100px" in page
        assert "1x Sun" in page
        assert "5800 K" in page
        assert "1.00 x Sun" in page

    def test_html_captions_follow_language(self):
        page = render_star_html(star_appearance(StarParams(1, 5800)), lang="ko")
        assert "반지름" in page


class TestStatic:
    def test_render_scene_only(self, config):
        fig = render_static_scene(build_scene(math.pi / 3, config), parallax_reading(math.pi / 3, config))
        assert len(fig.axes) == 1
        ax = fig.axes[0]
        assert ax.get_ylim() == (config.height, 0)
        assert any(text.get_text() == "Apparent Position" for text in ax.texts)
        plt.close(fig)

    def test_render_with_star_panel(self, config):
        fig = render_static_scene(
            build_scene(0.0, config),
            parallax_reading(0.0, config),
            star_appearance(StarParams(4, 9000)),
        )
        assert len(fig.axes) == 2
        plt.close(fig)

    def test_save_png(self, config, tmp_path):
        out = tmp_path / "snap" / "scene.png"
        path = save_static_scene(build_scene(0.0, config), parallax_reading(0.0, config), output_path=out)
        assert path == out
        assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

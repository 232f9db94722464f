"""StellarLab — Streamlit app for parallax geometry and star sizes."""

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from stellarlab.config import ConfigError, configure_logging, load_settings  # noqa: E402
from stellarlab.i18n import t  # noqa: E402
from stellarlab.models import Point  # noqa: E402
from stellarlab.renderers.html_star import render_star_html  # noqa: E402
from stellarlab.renderers.plotly_2d import render_parallax_figure  # noqa: E402
from stellarlab.scene import ParallaxScene, StarSizeModel  # noqa: E402

try:
    settings = load_settings()
except ConfigError as e:
    st.error(t("error_config", "en").format(error=e))
    st.stop()

configure_logging(settings.log_level)

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# Until the JS call returns, the configured default language is used.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", settings.lang)

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="wide",
)

# --- Session state initialization ---
# One ParallaxScene per browser session; sessions never share orbit state.
if "scene" not in st.session_state:
    st.session_state.scene = ParallaxScene(settings.scene)
if "pointer_seq" not in st.session_state:
    st.session_state.pointer_seq = 0

st.markdown(
    """
    <style>
    /* Hide streamlit_js_eval invisible iframe */
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #050a1a !important;
    }
    [data-testid="stHeader"] { background: transparent !important; }
    [data-testid="stMetricValue"] { color: #00F3FF !important; }
    label, [data-testid="stWidgetLabel"] p { color: #aaaaaa !important; }
    </style>
    """,
    unsafe_allow_html=True,
)

st.title(t("page_title", _lang))

tab_parallax, tab_size = st.tabs([t("tab_parallax", _lang), t("tab_size", _lang)])

# --- Parallax scene ---
with tab_parallax:
    st.markdown(t("parallax_intro", _lang))
    scene: ParallaxScene = st.session_state.scene
    geometry, reading = scene.frame()

    col_chart, col_data = st.columns([4, 1])
    with col_chart:
        fig = render_parallax_figure(
            geometry, apparent_label=t("apparent_position", _lang)
        )
        # Key changes after each click so the previous selection is not replayed.
        event = st.plotly_chart(
            fig,
            use_container_width=False,
            on_select="rerun",
            selection_mode="points",
            key=f"parallax_{st.session_state.pointer_seq}",
            config={"displayModeBar": False},
        )
    with col_data:
        st.metric(t("metric_angle", _lang), reading.formatted_angle())
        st.metric(t("metric_distance", _lang), reading.formatted_distance())

    points = event.selection.points if event else []
    if points:
        # A click is a press and release at the same surface coordinate.
        clicked = points[0]
        scene.pointer_down(Point(float(clicked["x"]), float(clicked["y"])))
        scene.pointer_up()
        st.session_state.pointer_seq += 1
        st.rerun()

# --- Star size model ---
with tab_size:
    st.markdown(t("size_intro", _lang))
    lum_range = settings.luminosity
    temp_range = settings.temperature

    col_sliders, col_star = st.columns([1, 2])
    with col_sliders:
        luminosity = st.slider(
            t("slider_luminosity", _lang),
            min_value=lum_range.min_value,
            max_value=lum_range.max_value,
            value=lum_range.default,
            step=lum_range.step,
        )
        temperature = st.slider(
            t("slider_temperature", _lang),
            min_value=temp_range.min_value,
            max_value=temp_range.max_value,
            value=temp_range.default,
            step=temp_range.step,
        )
        st.caption(t("size_caption", _lang))

    appearance = StarSizeModel().update(luminosity, temperature)
    with col_star:
        components.html(render_star_html(appearance, lang=_lang), height=460, scrolling=False)

"""HTML renderer for the star-size model.

The star is a plain <div>; its size, gradient and glow are all inline CSS
so the whole visual state lives in one style attribute. Output is a
self-contained page for st.components.v1.html().
"""

from __future__ import annotations

import html

from stellarlab.i18n import t
from stellarlab.models import StarAppearance

_BG = "#050a1a"
_TEXT = "#d0d8e8"
_MUTED = "#7f8aa3"


def _px(value: float) -> str:
    return f"{value:g}px"


def star_style(appearance: StarAppearance) -> dict[str, str]:
    """CSS properties for the star element, derived in one step."""
    c = appearance.colors
    return {
        "width": _px(appearance.px_size),
        "height": _px(appearance.px_size),
        "background": f"radial-gradient(circle at 30% 30%, {c.start}, {c.end})",
        "box-shadow": f"0 0 {_px(appearance.glow_radius)} {c.glow}",
    }


def style_attribute(style: dict[str, str]) -> str:
    return "; ".join(f"{k}: {v}" for k, v in style.items())


def render_star_html(appearance: StarAppearance, lang: str = "en", height: int = 380) -> str:
    """Return an HTML page with the styled star and its three labels.

    The stage is sized to hold the largest clamped star plus its glow, so
    the layout never shifts as the sliders move.

    Args:
        appearance: Fully computed star appearance.
        lang: Language code ('ko' or 'en') for captions.
        height: Stage height in CSS pixels.

    Returns:
        HTML string suitable for st.components.v1.html().
    """
    lum_label, temp_label, radius_label = (html.escape(s) for s in appearance.labels())
    star_css = style_attribute(star_style(appearance))

    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
* {{ margin: 0; padding: 0; box-sizing: border-box; }}
html, body {{
    background: {_BG};
    color: {_TEXT};
    font-family: 'Apple SD Gothic Neo', 'Malgun Gothic', sans-serif;
}}
#stage {{
    height: {height}px;
    display: flex;
    align-items: center;
    justify-content: center;
}}
#star-visual {{
    border-radius: 50%;
}}
#readout {{
    display: flex;
    justify-content: space-around;
    padding: 0.6rem 0;
    font-size: 0.95rem;
}}
#readout span.caption {{
    color: {_MUTED};
    margin-right: 0.4rem;
}}
</style>
</head>
<body>
<div id="stage"><div id="star-visual" style="{star_css}"></div></div>
<div id="readout">
  <div><span class="caption">{t("label_luminosity", lang)}</span><span id="lum-val">{lum_label}</span></div>
  <div><span class="caption">{t("label_temperature", lang)}</span><span id="temp-val">{temp_label}</span></div>
  <div><span class="caption">{t("label_radius", lang)}</span><span id="calc-radius">{radius_label}</span></div>
</div>
</body>
</html>"""

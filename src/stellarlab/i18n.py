"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "별빛 실험실",
        "en": "StellarLab",
    },
    "tab_parallax": {
        "ko": "연주시차",
        "en": "Parallax",
    },
    "tab_size": {
        "ko": "별의 크기",
        "en": "Star Size",
    },
    "parallax_intro": {
        "ko": "화면을 클릭해 행성을 공전 궤도 위로 옮겨 보세요. 시선 방향이 바뀌면 배경에 투영된 별의 위치도 이동합니다.",
        "en": "Click anywhere on the scene to move the planet along its orbit. As the line of sight swings, the star's projected position shifts against the background.",
    },
    "metric_angle": {
        "ko": "연주시차",
        "en": "Parallax angle",
    },
    "metric_distance": {
        "ko": "추정 거리",
        "en": "Estimated distance",
    },
    "apparent_position": {
        "ko": "겉보기 위치",
        "en": "Apparent Position",
    },
    "size_intro": {
        "ko": "광도와 표면 온도를 조절하면 슈테판-볼츠만 법칙(L ∝ R²T⁴)에 따라 별의 반지름과 색이 바뀝니다.",
        "en": "Adjust luminosity and surface temperature. The Stefan–Boltzmann law (L ∝ R²T⁴) sets the star's radius and colour.",
    },
    "slider_luminosity": {
        "ko": "광도 (태양 = 1)",
        "en": "Luminosity (Sun = 1)",
    },
    "slider_temperature": {
        "ko": "표면 온도 (K)",
        "en": "Surface temperature (K)",
    },
    "label_luminosity": {
        "ko": "광도",
        "en": "Luminosity",
    },
    "label_temperature": {
        "ko": "온도",
        "en": "Temperature",
    },
    "label_radius": {
        "ko": "반지름",
        "en": "Radius",
    },
    "size_caption": {
        "ko": "화면 크기는 5–300 px로 제한되며, 계산된 반지름은 그대로 표시됩니다.",
        "en": "On-screen size is clamped to 5–300 px; the computed radius is shown unclamped.",
    },
    "error_config": {
        "ko": "설정 오류: {error}",
        "en": "Configuration error: {error}",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key

import matplotlib
import pytest

from stellarlab.config import SceneConfig

matplotlib.use("Agg")


@pytest.fixture
def config() -> SceneConfig:
    return SceneConfig(width=800, height=500)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "STELLARLAB_CANVAS_WIDTH",
        "STELLARLAB_CANVAS_HEIGHT",
        "STELLARLAB_LANG",
        "STELLARLAB_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's local .env out of the tests
    monkeypatch.setattr("stellarlab.config.load_dotenv", lambda *a, **k: False)

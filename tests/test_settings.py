import pytest

from stockfit.config.settings import get_logging_config, get_settings


@pytest.fixture
def fresh_settings():
    # get_settings() is lru_cached; clear around tests that change env.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_packaged_defaults_load():
    settings = get_settings()
    assert settings.app.name == "StockFit"
    assert settings.catalog.demo_path is None
    assert settings.scoring.default_weights.total == 100


def test_logging_config_has_root_handler():
    config = get_logging_config()
    assert config["version"] == 1
    assert "console" in config["root"]["handlers"]


def test_env_overrides_log_level_and_demo_path(monkeypatch, fresh_settings):
    monkeypatch.setenv("STOCKFIT_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("STOCKFIT_DEMO_PATH", "fixtures/demo.json")

    settings = get_settings()

    assert settings.app.log_level == "DEBUG"
    assert settings.catalog.demo_path == "fixtures/demo.json"


def test_external_config_file_replaces_defaults(monkeypatch, tmp_path, fresh_settings):
    path = tmp_path / "stockfit.yaml"
    path.write_text(
        "scoring:\n  default_weights:\n    esg_score: 50\n    beta: 50\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("STOCKFIT_CONFIG_PATH", str(path))

    weights = get_settings().scoring.default_weights

    assert weights.esg_score == 50
    assert weights.beta == 50
    assert weights.pe == 0
    assert weights.total == 100


def test_invalid_yaml_root_is_rejected(monkeypatch, tmp_path, fresh_settings):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("STOCKFIT_CONFIG_PATH", str(path))

    with pytest.raises(ValueError, match="expected a mapping"):
        get_settings()

from lexilens.adapters import config_env
from lexilens.core.config_model import AppConfig


def test_load_app_config_reads_env_config(monkeypatch, tmp_path):
    monkeypatch.setattr(config_env.env_config, "SETTINGS_PATH", tmp_path / "s.json")
    monkeypatch.setattr(config_env.env_config, "SCROLL_MULTIPLIER", 3.0)

    app_config = config_env.load_app_config()

    assert isinstance(app_config, AppConfig)
    assert app_config.settings_path == tmp_path / "s.json"
    assert app_config.scroll_multiplier == 3.0

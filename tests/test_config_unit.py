import pytest

import config


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "checklist.yaml"
    monkeypatch.setenv("CHECKLIST_CONFIG", str(path))
    return path


def test_defaults_without_file(config_file):
    settings = config.load_settings()
    assert settings == config.DEFAULTS
    assert settings is not config.DEFAULTS


def test_env_var_selects_path(config_file):
    assert config.config_path() == config_file


def test_default_path_without_env(monkeypatch):
    monkeypatch.delenv("CHECKLIST_CONFIG", raising=False)
    assert config.config_path() == config.USER_CONFIG_PATH


def test_file_values_are_applied(config_file):
    config_file.write_text("tick_rate: 4\ntheme: dark-contrast\nlog_level: debug\nunknown: 1\n", encoding="utf-8")
    settings = config.load_settings()
    assert settings["tick_rate"] == 4.0
    assert settings["theme"] == "dark-contrast"
    assert settings["log_level"] == "DEBUG"
    assert "unknown" not in settings


def test_overrides_win_but_none_is_ignored(config_file):
    config_file.write_text("frame_rate: 10\n", encoding="utf-8")
    settings = config.load_settings({"frame_rate": 60, "theme": None})
    assert settings["frame_rate"] == 60.0
    assert settings["theme"] == config.DEFAULTS["theme"]


@pytest.mark.parametrize("content", ["tick_rate: [oops", "- a list\n- not a mapping\n", "tick_rate: -1\nframe_rate: zero\n"])
def test_bad_config_falls_back_to_defaults(config_file, content):
    config_file.write_text(content, encoding="utf-8")
    settings = config.load_settings()
    assert settings["tick_rate"] == config.DEFAULTS["tick_rate"]
    assert settings["frame_rate"] == config.DEFAULTS["frame_rate"]


def test_unknown_log_level_falls_back(config_file):
    config_file.write_text("log_level: chatty\n", encoding="utf-8")
    assert config.load_settings()["log_level"] == "INFO"

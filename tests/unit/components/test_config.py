"""
Unit tests for configuration loading: defaults, TOML file, env overrides.
"""

import logging

import pytest
from pagetree import config as config_module
from pagetree.config import Config, get_config_path, load_config


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    for key in ("PAGETREE_SEED_SAMPLE", "PAGETREE_SELECT_ON_INSERT", "PAGETREE_OUTLINE_CONTENT_CHARS",
                "PAGETREE_OUTLINE_ID_CHARS", "PAGETREE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    path = tmp_path / "pagetree" / "config.toml"
    path.parent.mkdir()
    return path


class TestDefaults:
    def test_defaults(self, config_home):
        cfg = load_config()
        assert cfg == Config()
        assert cfg.session.seed_sample is False
        assert cfg.session.select_on_insert is True
        assert cfg.outline.content_chars == 40
        assert cfg.logging.level == "WARNING"

    def test_path_respects_xdg(self, config_home):
        assert get_config_path() == config_home


class TestTomlFile:
    def test_file_values_applied(self, config_home):
        config_home.write_text(
            "[session]\nseed_sample = true\n\n[outline]\nid_chars = 0\n\n[logging]\nlevel = 'debug'\n"
        )
        cfg = load_config()
        assert cfg.session.seed_sample is True
        assert cfg.outline.id_chars == 0
        assert cfg.logging.level == "DEBUG"

    def test_malformed_file_falls_back(self, config_home, caplog):
        config_home.write_text("[session\nseed_sample = ")
        with caplog.at_level(logging.WARNING, logger="pagetree.config"):
            cfg = load_config()
        assert cfg == Config()
        assert "Ignoring config file" in caplog.text

    def test_bad_value_falls_back(self, config_home):
        config_home.write_text("[outline]\ncontent_chars = 'lots'\n")
        assert load_config() == Config()


class TestEnvOverrides:
    def test_env_overrides_file(self, config_home, monkeypatch):
        config_home.write_text("[outline]\ncontent_chars = 10\n")
        monkeypatch.setenv("PAGETREE_OUTLINE_CONTENT_CHARS", "25")
        assert load_config().outline.content_chars == 25

    def test_bool_env(self, config_home, monkeypatch):
        monkeypatch.setenv("PAGETREE_SEED_SAMPLE", "yes")
        monkeypatch.setenv("PAGETREE_SELECT_ON_INSERT", "0")
        cfg = load_config()
        assert cfg.session.seed_sample is True
        assert cfg.session.select_on_insert is False

    def test_bad_int_env_ignored(self, config_home, monkeypatch):
        monkeypatch.setenv("PAGETREE_OUTLINE_ID_CHARS", "many")
        assert load_config().outline.id_chars == 8

    def test_level_env_uppercased(self, config_home, monkeypatch):
        monkeypatch.setenv("PAGETREE_LOG_LEVEL", "info")
        assert load_config().logging.level == "INFO"


class TestCachedConfig:
    def test_get_config_is_cached_until_reset(self, config_home):
        config_module.reset_config()
        first = config_module.get_config()
        assert config_module.get_config() is first
        config_module.reset_config()
        assert config_module.get_config() is not first
        config_module.reset_config()

"""Tests for configuration loading and validation."""

from __future__ import annotations

import pytest

from thecamp.utils.config import (
    ClientSettings,
    ConfigError,
    load_client_settings,
    load_config_from_module,
)


@pytest.fixture
def config_module(tmp_path, monkeypatch):
    """Write a throwaway config module and make it importable."""

    def _write(name: str, source: str) -> str:
        (tmp_path / f"{name}.py").write_text(source)
        return name

    monkeypatch.syspath_prepend(str(tmp_path))
    return _write


class TestLoadConfigFromModule:
    def test_loads_named_attribute(self, config_module):
        name = config_module("cfg_named", "SETTINGS = {'timeout': 3}\n")

        assert load_config_from_module(name, "SETTINGS") == {"timeout": 3}

    def test_missing_module_returns_default(self):
        assert load_config_from_module("no.such.module", default={"x": 1}) == {"x": 1}

    def test_missing_attribute_returns_default(self, config_module):
        name = config_module("cfg_missing_attr", "OTHER = 1\n")

        assert load_config_from_module(name) is None


class TestClientSettings:
    def test_defaults(self):
        settings = ClientSettings()

        assert settings.host == "https://www.thecamp.or.kr"
        assert settings.timeout == 30.0
        assert settings.page_size == 30
        assert "Mozilla" in settings.user_agent

    def test_from_dict_coerces_env_strings(self):
        settings = ClientSettings.from_dict({"timeout": "12.5", "page_size": "50"})

        assert settings.timeout == 12.5
        assert settings.page_size == 50

    def test_unknown_keys_are_ignored(self, caplog):
        settings = ClientSettings.from_dict({"colour": "blue"})

        assert settings == ClientSettings()
        assert "colour" in caplog.text

    @pytest.mark.parametrize(
        "config,message",
        [
            ({"timeout": "soon"}, "numeric"),
            ({"timeout": 0}, "Timeout"),
            ({"page_size": 0}, "Page size"),
            ({"host": "ftp://camp"}, "http"),
            ({"user_agent": ""}, "User agent"),
        ],
    )
    def test_invalid_values_raise(self, config, message):
        with pytest.raises(ConfigError, match=message):
            ClientSettings.from_dict(config)


class TestLoadClientSettings:
    def test_merges_over_defaults(self, config_module):
        name = config_module("cfg_merge", "CONFIGURATION = {'page_size': 10}\n")

        settings = load_client_settings(name)

        assert settings.page_size == 10
        assert settings.host == "https://www.thecamp.or.kr"

    def test_missing_module_uses_defaults(self):
        assert load_client_settings("no.such.module") == ClientSettings()

    def test_non_dict_configuration_raises(self, config_module):
        name = config_module("cfg_list", "CONFIGURATION = [1, 2]\n")

        with pytest.raises(ConfigError, match="must be a dict"):
            load_client_settings(name)

    def test_repo_config_honours_env(self, clean_env, monkeypatch):
        import importlib
        import sys

        monkeypatch.setenv("THECAMP_PAGE_SIZE", "45")
        monkeypatch.setenv("THECAMP_TIMEOUT", "9")
        sys.modules.pop("configs.thecamp", None)
        try:
            settings = load_client_settings("configs.thecamp")
        finally:
            sys.modules.pop("configs.thecamp", None)
            importlib.invalidate_caches()

        assert settings.page_size == 45
        assert settings.timeout == 9.0

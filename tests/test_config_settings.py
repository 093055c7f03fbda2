"""Tests for chticket.config.settings."""

import json

import pytest

import chticket.config.settings as settings
from chticket.errors import ChticketError, NotConfiguredError


class TestLoadConfig:
    def test_defaults_only(self, mocker, monkeypatch, reset_config_cache):
        monkeypatch.delenv("CHTICKET_DEBUG", raising=False)
        defaults = {"api_url": "https://api", "debug": False}
        mocker.patch.object(settings, "_load_defaults", return_value=defaults)
        mocker.patch("chticket.config.settings._read_overrides", return_value=None)
        assert settings.load_config() == defaults

    def test_bundled_defaults_present(self, mocker, monkeypatch, reset_config_cache):
        monkeypatch.delenv("CHTICKET_DEBUG", raising=False)
        mocker.patch("chticket.config.settings._read_overrides", return_value=None)
        result = settings.load_config()
        assert result["branch_verb"] == "git checkout -b"
        assert result["api_url"].startswith("https://")
        assert result["debug"] is False
        assert result["sprint_label_prefix"] == ""

    def test_project_beats_global(self, mocker, monkeypatch, reset_config_cache):
        monkeypatch.delenv("CHTICKET_DEBUG", raising=False)
        mocker.patch.object(
            settings, "_load_defaults", return_value={"branch_verb": "a", "timeout": 30}
        )
        mocker.patch(
            "chticket.config.settings._read_overrides",
            side_effect=[{"branch_verb": "b"}, {"branch_verb": "c"}],
        )
        result = settings.load_config()
        assert result["branch_verb"] == "c"
        assert result["timeout"] == 30
        assert len(settings.get_config_loaded_sources()) == 3

    def test_debug_env_var(self, mocker, monkeypatch, reset_config_cache):
        monkeypatch.setenv("CHTICKET_DEBUG", "1")
        mocker.patch.object(settings, "_load_defaults", return_value={"debug": False})
        mocker.patch("chticket.config.settings._read_overrides", return_value=None)
        assert settings.load_config()["debug"] is True

    def test_debug_env_var_false(self, mocker, monkeypatch, reset_config_cache):
        monkeypatch.setenv("CHTICKET_DEBUG", "0")
        mocker.patch.object(settings, "_load_defaults", return_value={"debug": False})
        mocker.patch("chticket.config.settings._read_overrides", return_value=None)
        assert settings.load_config()["debug"] is False


    def test_unknown_key_rejected(self, mocker, monkeypatch, reset_config_cache):
        monkeypatch.delenv("CHTICKET_DEBUG", raising=False)
        mocker.patch.object(settings, "_load_defaults", return_value={"branch_verb": "a"})
        mocker.patch(
            "chticket.config.settings._read_overrides",
            side_effect=[{"branch_verbs": "b"}, None],
        )
        with pytest.raises(ChticketError, match="Unknown setting 'branch_verbs'"):
            settings.load_config()

    def test_wrong_kind_rejected(self, mocker, monkeypatch, reset_config_cache):
        monkeypatch.delenv("CHTICKET_DEBUG", raising=False)
        mocker.patch.object(settings, "_load_defaults", return_value={"timeout": 30})
        mocker.patch(
            "chticket.config.settings._read_overrides",
            side_effect=[None, {"timeout": "slow"}],
        )
        with pytest.raises(ChticketError, match="'timeout' .* must be of type int"):
            settings.load_config()


class TestApplyOverrides:
    def test_numbers_interchangeable(self):
        assert settings._apply_overrides({"timeout": 30}, {"timeout": 2.5}, "x") == {
            "timeout": 2.5
        }

    def test_bool_is_not_a_number(self):
        with pytest.raises(ChticketError):
            settings._apply_overrides({"timeout": 30}, {"timeout": True}, "x")
        with pytest.raises(ChticketError):
            settings._apply_overrides({"debug": False}, {"debug": 1}, "x")

    def test_empty_string_allowed(self):
        result = settings._apply_overrides(
            {"sprint_label_prefix": "sprint"}, {"sprint_label_prefix": ""}, "x"
        )
        assert result == {"sprint_label_prefix": ""}

    def test_base_not_mutated(self):
        base = {"branch_verb": "a"}
        settings._apply_overrides(base, {"branch_verb": "b"}, "x")
        assert base == {"branch_verb": "a"}


class TestReadOverrides:
    def test_mapping(self, tmp_path):
        f = tmp_path / "config.yaml"
        f.write_text("app_url: https://app\nsprint_label_prefix: ''\n")
        assert settings._read_overrides(f) == {"app_url": "https://app", "sprint_label_prefix": ""}

    def test_missing_or_empty(self, tmp_path):
        assert settings._read_overrides(tmp_path / "nope.yaml") is None
        empty = tmp_path / "empty.yaml"
        empty.write_text("")
        assert settings._read_overrides(empty) is None

    def test_non_mapping_rejected(self, tmp_path):
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ChticketError, match="mapping"):
            settings._read_overrides(f)


class TestGetConfig:
    def test_caches_on_first_call(self, mocker, reset_config_cache):
        load_mock = mocker.patch.object(settings, "_load_defaults", return_value={"a": 1})
        mocker.patch("chticket.config.settings._read_overrides", return_value=None)
        settings.get_config()
        settings.get_config()
        assert load_mock.call_count == 1

    def test_reload_forces_reload(self, mocker, reset_config_cache):
        load_mock = mocker.patch.object(settings, "_load_defaults", return_value={"a": 1})
        mocker.patch("chticket.config.settings._read_overrides", return_value=None)
        settings.get_config()
        settings.reload_config()
        assert load_mock.call_count == 2


class TestLoadConfiguration:
    @pytest.fixture(autouse=True)
    def _settings(self, mocker, sample_settings):
        mocker.patch("chticket.config.settings.get_config", return_value=sample_settings)

    def test_loaded(self, token_file):
        token_file.write_text(json.dumps({"token": "abc", "default_project_id": 12}))
        configuration = settings.load_configuration()
        assert configuration.loaded is True
        assert configuration.token == "abc"
        assert configuration.default_project_id == 12
        assert configuration.settings["branch_verb"] == "git checkout -b"

    def test_no_file(self, token_file):
        configuration = settings.load_configuration()
        assert configuration.loaded is False
        assert "No Clubhouse API token" in configuration.error_msg

    def test_env_token_without_project(self, token_file, monkeypatch):
        monkeypatch.setenv("CLUBHOUSE_API_TOKEN", "env-token")
        configuration = settings.load_configuration()
        assert configuration.loaded is False
        assert configuration.token == "env-token"
        assert "default project" in configuration.error_msg

    def test_env_token_overrides_file(self, token_file, monkeypatch):
        token_file.write_text(json.dumps({"token": "file", "default_project_id": "7"}))
        monkeypatch.setenv("CLUBHOUSE_API_TOKEN", "env-token")
        configuration = settings.load_configuration()
        assert configuration.token == "env-token"
        assert configuration.default_project_id == 7

    def test_invalid_project_id(self, token_file):
        token_file.write_text(json.dumps({"token": "abc", "default_project_id": "web"}))
        configuration = settings.load_configuration()
        assert configuration.loaded is False
        assert "Invalid default project" in configuration.error_msg


class TestRequireConfiguration:
    def test_raises_when_not_loaded(self, mocker, token_file, sample_settings):
        mocker.patch("chticket.config.settings.get_config", return_value=sample_settings)
        with pytest.raises(NotConfiguredError, match="No Clubhouse API token"):
            settings.require_configuration()

    def test_returns_loaded(self, mocker, token_file, sample_settings):
        mocker.patch("chticket.config.settings.get_config", return_value=sample_settings)
        token_file.write_text(json.dumps({"token": "abc", "default_project_id": 1}))
        assert settings.require_configuration().loaded is True

"""Tests for configuration loading and binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from flycors.core.config import Config, config_properties
from flycors.kernel.exceptions import ConfigurationException


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"flycors": {"cors": {"allowed_origins": "http://a.com", "max_age": 300}}})
        assert config.get("flycors.cors.allowed_origins") == "http://a.com"
        assert config.get("flycors.cors.max_age") == 300

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_through_scalar_returns_default(self):
        config = Config({"flycors": {"cors": "disabled"}})
        assert config.get("flycors.cors.max_age", 1) == 1

    def test_false_values_are_returned(self):
        config = Config({"flycors": {"cors": {"allow_credentials": False}}})
        assert config.get("flycors.cors.allow_credentials", True) is False

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "flycors.yaml"
        config_file.write_text("flycors:\n  cors:\n    allowed_origins: http://a.com\n")
        config = Config.from_file(config_file)
        assert config.get("flycors.cors.allowed_origins") == "http://a.com"
        assert config.loaded_sources == [str(config_file)]

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "flycors.toml"
        config_file.write_text('[flycors.cors]\nallowed_methods = "GET,POST"\nmax_age = 60\n')
        config = Config.from_file(config_file)
        assert config.get("flycors.cors.allowed_methods") == "GET,POST"
        assert config.get("flycors.cors.max_age") == 60

    def test_missing_file_gives_empty_config(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_malformed_yaml_raises(self, tmp_path: Path):
        config_file = tmp_path / "flycors.yaml"
        config_file.write_text("flycors: [unclosed\n")
        with pytest.raises(ConfigurationException) as exc_info:
            Config.from_file(config_file)
        assert exc_info.value.code == "CONFIG_PARSE"

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("FLYCORS_CORS_ALLOWED_ORIGINS", "http://env.example")
        config = Config({"flycors": {"cors": {"allowed_origins": "http://file.example"}}})
        assert config.get("flycors.cors.allowed_origins") == "http://env.example"

    def test_get_section(self):
        config = Config({"flycors": {"cors": {"max_age": 10}}})
        assert config.get_section("flycors.cors") == {"max_age": 10}
        assert config.get_section("flycors.missing") == {}


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="myapp.cache")
        @dataclass
        class CacheConfig:
            ttl: int = 5
            enabled: bool = False

        config = Config({"myapp": {"cache": {"ttl": 20, "enabled": True}}})
        cache = config.bind(CacheConfig)
        assert cache.ttl == 20
        assert cache.enabled is True

    def test_bind_uses_defaults(self):
        @config_properties(prefix="myapp.cache")
        @dataclass
        class CacheConfig:
            ttl: int = 5

        assert Config({}).bind(CacheConfig).ttl == 5

    def test_bind_coerces_env_strings(self, monkeypatch):
        @config_properties(prefix="myapp.cache")
        @dataclass
        class CacheConfig:
            ttl: int = 5
            ratio: float = 0.5
            enabled: bool = False

        monkeypatch.setenv("FLYCORS_MYAPP_CACHE_TTL", "42")
        monkeypatch.setenv("FLYCORS_MYAPP_CACHE_RATIO", "0.25")
        monkeypatch.setenv("FLYCORS_MYAPP_CACHE_ENABLED", "yes")
        cache = Config({}).bind(CacheConfig)
        assert cache.ttl == 42
        assert cache.ratio == 0.25
        assert cache.enabled is True

    def test_bind_undecorated_class_raises(self):
        @dataclass
        class Plain:
            value: int = 1

        with pytest.raises(ConfigurationException):
            Config({}).bind(Plain)


class TestProfileConfigMerging:
    def test_merge_profile_config(self, tmp_path):
        base = tmp_path / "flycors.yaml"
        base.write_text("flycors:\n  cors:\n    max_age: 60\n    allowed_methods: GET\n")

        profile = tmp_path / "flycors-dev.yaml"
        profile.write_text("flycors:\n  cors:\n    max_age: 0\n    allow_credentials: true\n")

        config = Config.from_file(base, active_profiles=["dev"])
        assert config.get("flycors.cors.max_age") == 0
        assert config.get("flycors.cors.allowed_methods") == "GET"
        assert config.get("flycors.cors.allow_credentials") is True
        assert len(config.loaded_sources) == 2

    def test_later_profile_wins(self, tmp_path):
        base = tmp_path / "flycors.yaml"
        base.write_text("flycors:\n  cors:\n    allowed_origins: http://base\n")
        (tmp_path / "flycors-dev.yaml").write_text("flycors:\n  cors:\n    allowed_origins: http://dev\n")
        (tmp_path / "flycors-local.yaml").write_text("flycors:\n  cors:\n    allowed_origins: http://local\n")

        config = Config.from_file(base, active_profiles=["dev", "local"])
        assert config.get("flycors.cors.allowed_origins") == "http://local"

    def test_missing_profile_file_is_skipped(self, tmp_path):
        base = tmp_path / "flycors.yaml"
        base.write_text("app:\n  name: test\n")

        config = Config.from_file(base, active_profiles=["nonexistent"])
        assert config.get("app.name") == "test"

    def test_env_vars_still_win(self, tmp_path, monkeypatch):
        base = tmp_path / "flycors.yaml"
        base.write_text("app:\n  name: base\n")
        (tmp_path / "flycors-dev.yaml").write_text("app:\n  name: dev\n")

        monkeypatch.setenv("FLYCORS_APP_NAME", "env-wins")
        config = Config.from_file(base, active_profiles=["dev"])
        assert config.get("app.name") == "env-wins"
